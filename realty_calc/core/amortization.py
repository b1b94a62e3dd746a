"""대출 상환 스케줄 계산

원리금균등, 원금균등, 만기일시 세 가지 상환 방식을 지원합니다.
모든 회차 금액은 원 단위 정수이며, 마지막 회차가 남은 잔액을 모두 상환합니다.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from .enums import RepaymentMethod
from .numeric import Number, ONE, ZERO, round_to_won, to_decimal


@dataclass(frozen=True)
class RepaymentPeriod:
    """상환 회차

    Attributes:
        period: 회차 (1부터)
        principal: 상환 원금
        interest: 이자
        payment: 납입액 (원금 + 이자)
        remaining_balance: 상환 후 잔액
    """
    period: int
    principal: int
    interest: int
    payment: int
    remaining_balance: int


def annuity_payment(principal: Number, monthly_rate: Number, months: int) -> Decimal:
    """원리금균등 월 납입액

    payment = P × r × (1+r)^n / ((1+r)^n − 1), 금리가 0이면 P / n

    Args:
        principal: 대출 원금
        monthly_rate: 월이율 (소수)
        months: 상환 개월 수

    Returns:
        반올림 전 월 납입액
    """
    if months <= 0:
        raise ValueError("상환 개월 수는 1 이상이어야 합니다.")
    amount = to_decimal(principal)
    rate = to_decimal(monthly_rate)
    if rate == ZERO:
        return amount / months
    growth = (ONE + rate) ** months
    return amount * rate * growth / (growth - ONE)


def first_payment_factor(method: RepaymentMethod, monthly_rate: Number, months: int) -> Decimal:
    """원금 1원당 첫 회차 납입액

    세 방식 모두 첫 회차 납입액은 원금에 비례합니다.
    """
    rate = to_decimal(monthly_rate)
    if method == RepaymentMethod.EQUAL_PRINCIPAL_INTEREST:
        return annuity_payment(ONE, rate, months)
    if method == RepaymentMethod.EQUAL_PRINCIPAL:
        return ONE / months + rate
    return rate


def first_payment(principal: Number, monthly_rate: Number, months: int,
                  method: RepaymentMethod = RepaymentMethod.EQUAL_PRINCIPAL_INTEREST) -> Decimal:
    """상환 방식별 첫 회차 납입액 (반올림 전)"""
    return to_decimal(principal) * first_payment_factor(method, monthly_rate, months)


def max_principal_for_payment(
    monthly_payment: Number,
    monthly_rate: Number,
    months: int,
    method: RepaymentMethod = RepaymentMethod.EQUAL_PRINCIPAL_INTEREST
) -> Optional[Decimal]:
    """월 납입 한도로 빌릴 수 있는 최대 원금 (역산)

    Args:
        monthly_payment: 월 납입 한도
        monthly_rate: 월이율 (소수)
        months: 상환 개월 수
        method: 상환 방식

    Returns:
        최대 원금 (납입액이 원금에 의존하지 않아 한도가 없으면 None)
    """
    factor = first_payment_factor(method, monthly_rate, months)
    if factor <= ZERO:
        return None
    return max(ZERO, to_decimal(monthly_payment)) / factor


def build_schedule(
    principal: int,
    monthly_rate: Number,
    months: int,
    method: RepaymentMethod
) -> Tuple[RepaymentPeriod, ...]:
    """상환 스케줄 생성

    Args:
        principal: 대출 원금 (원)
        monthly_rate: 월이율 (소수)
        months: 상환 개월 수
        method: 상환 방식

    Returns:
        회차별 상환 내역 (원금 합계 == principal, 마지막 잔액 == 0)
    """
    if months <= 0:
        raise ValueError("상환 개월 수는 1 이상이어야 합니다.")
    rate = to_decimal(monthly_rate)

    if method == RepaymentMethod.EQUAL_PRINCIPAL_INTEREST:
        return _equal_payment_schedule(principal, rate, months)
    if method == RepaymentMethod.EQUAL_PRINCIPAL:
        return _equal_principal_schedule(principal, rate, months)
    return _bullet_schedule(principal, rate, months)


def _equal_payment_schedule(principal: int, rate: Decimal, months: int) -> Tuple[RepaymentPeriod, ...]:
    payment = round_to_won(annuity_payment(principal, rate, months))
    schedule: List[RepaymentPeriod] = []
    remaining = principal

    for period in range(1, months + 1):
        interest = round_to_won(remaining * rate)
        if period == months:
            paid_principal = remaining
        else:
            paid_principal = min(max(payment - interest, 0), remaining)
        remaining -= paid_principal
        schedule.append(RepaymentPeriod(
            period=period,
            principal=paid_principal,
            interest=interest,
            payment=paid_principal + interest,
            remaining_balance=remaining,
        ))

    return tuple(schedule)


def _equal_principal_schedule(principal: int, rate: Decimal, months: int) -> Tuple[RepaymentPeriod, ...]:
    monthly_principal = round_to_won(Decimal(principal) / months)
    schedule: List[RepaymentPeriod] = []
    remaining = principal

    for period in range(1, months + 1):
        interest = round_to_won(remaining * rate)
        paid_principal = remaining if period == months else min(monthly_principal, remaining)
        remaining -= paid_principal
        schedule.append(RepaymentPeriod(
            period=period,
            principal=paid_principal,
            interest=interest,
            payment=paid_principal + interest,
            remaining_balance=remaining,
        ))

    return tuple(schedule)


def _bullet_schedule(principal: int, rate: Decimal, months: int) -> Tuple[RepaymentPeriod, ...]:
    interest = round_to_won(principal * rate)
    schedule: List[RepaymentPeriod] = []

    for period in range(1, months + 1):
        paid_principal = principal if period == months else 0
        schedule.append(RepaymentPeriod(
            period=period,
            principal=paid_principal,
            interest=interest,
            payment=paid_principal + interest,
            remaining_balance=0 if period == months else principal,
        ))

    return tuple(schedule)
