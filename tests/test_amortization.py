"""상환 스케줄 테스트 (원리금균등, 원금균등, 만기일시)"""

import pytest
from decimal import Decimal

from realty_calc.core import (
    annuity_payment,
    build_schedule,
    first_payment,
    max_principal_for_payment,
    monthly_rate_from_annual,
)
from realty_calc.core.enums import RepaymentMethod


ALL_METHODS = list(RepaymentMethod)


class TestAmortizationConservation:
    """원금 보존 테스트"""

    @pytest.mark.parametrize("method", ALL_METHODS)
    @pytest.mark.parametrize("principal, annual_rate, months", [
        (300_000_000, 4, 360),
        (100_000_000, Decimal('3.75'), 120),
        (12_345_679, Decimal('7.1'), 37),
        (1_000_000, 0, 12),
        (999, 12, 7),
        (50_000_000, 5, 1),
    ])
    def test_principal_sum_and_final_balance(self, method, principal, annual_rate, months):
        """원금 합계 == 대출금, 마지막 잔액 == 0"""
        schedule = build_schedule(principal, monthly_rate_from_annual(annual_rate), months, method)

        assert len(schedule) == months
        assert sum(period.principal for period in schedule) == principal
        assert schedule[-1].remaining_balance == 0
        assert all(period.payment == period.principal + period.interest for period in schedule)

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_balances_non_increasing(self, method):
        """잔액은 회차마다 줄어들거나 같음"""
        schedule = build_schedule(200_000_000, monthly_rate_from_annual(5), 240, method)
        balances = [period.remaining_balance for period in schedule]

        assert balances == sorted(balances, reverse=True)
        assert all(balance >= 0 for balance in balances)


class TestZeroRate:
    """금리 0% 경계 테스트"""

    @pytest.mark.parametrize("method", [
        RepaymentMethod.EQUAL_PRINCIPAL_INTEREST,
        RepaymentMethod.EQUAL_PRINCIPAL,
    ])
    def test_payment_equals_principal_over_term(self, method):
        """납입액 = 원금 / 기간, 이자 없음"""
        schedule = build_schedule(12_000_000, Decimal('0'), 12, method)

        assert all(period.interest == 0 for period in schedule)
        assert all(period.payment == 1_000_000 for period in schedule)

    def test_annuity_payment_zero_rate(self):
        assert annuity_payment(1_200_000, 0, 12) == Decimal('100000')


class TestSchedules:
    """상환 방식별 특성 테스트"""

    def test_equal_payment_is_level(self):
        """원리금균등: 마지막 회차를 제외하면 납입액 일정"""
        schedule = build_schedule(300_000_000, monthly_rate_from_annual(4), 360,
                                  RepaymentMethod.EQUAL_PRINCIPAL_INTEREST)
        payments = {period.payment for period in schedule[:-1]}

        assert len(payments) == 1
        assert abs(schedule[-1].payment - schedule[0].payment) < 1_000

    def test_equal_principal_payment_decreases(self):
        """원금균등: 이자가 줄어 납입액 감소"""
        schedule = build_schedule(120_000_000, monthly_rate_from_annual(6), 120,
                                  RepaymentMethod.EQUAL_PRINCIPAL)

        # 첫 회차: 원금 100만원 + 이자 60만원
        assert schedule[0].principal == 1_000_000
        assert schedule[0].interest == 600_000
        assert schedule[-1].payment < schedule[0].payment

    def test_bullet(self):
        """만기일시: 이자만 내다가 마지막 회차에 원금 전액"""
        schedule = build_schedule(100_000_000, monthly_rate_from_annual(6), 12, RepaymentMethod.BULLET)

        assert all(period.interest == 500_000 for period in schedule)
        assert all(period.principal == 0 for period in schedule[:-1])
        assert schedule[-1].principal == 100_000_000
        assert schedule[0].remaining_balance == 100_000_000

    def test_invalid_term(self):
        with pytest.raises(ValueError):
            build_schedule(1_000_000, Decimal('0.01'), 0, RepaymentMethod.BULLET)


class TestReverseAnnuity:
    """월 납입 한도 역산 테스트"""

    @pytest.mark.parametrize("method", [
        RepaymentMethod.EQUAL_PRINCIPAL_INTEREST,
        RepaymentMethod.EQUAL_PRINCIPAL,
        RepaymentMethod.BULLET,
    ])
    def test_inverse_of_first_payment(self, method):
        """역산한 원금의 첫 회차 납입액 == 한도"""
        rate = monthly_rate_from_annual(4)
        principal = max_principal_for_payment(1_500_000, rate, 360, method)

        assert abs(first_payment(principal, rate, 360, method) - Decimal('1500000')) < Decimal('0.0001')

    def test_bullet_zero_rate_is_unbounded(self):
        """만기일시 + 금리 0%: 월 납입액이 원금과 무관하여 한도 없음"""
        assert max_principal_for_payment(1_000_000, 0, 12, RepaymentMethod.BULLET) is None

    def test_negative_payment_gives_zero(self):
        assert max_principal_for_payment(-10, monthly_rate_from_annual(4), 12) == Decimal('0')
