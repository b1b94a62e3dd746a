"""대출 상환 계산기

상환 스케줄 계산과 LTV·스트레스 DSR 기준 대출한도 계산을 제공합니다.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Tuple

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    RepaymentPeriod,
    ResultRecord,
    as_percent,
    build_schedule,
    get_rule_engine,
    max_principal_for_payment,
    monthly_rate_from_annual,
    parse_input,
    round_to_won,
    traced,
)
from ...core.enums import (
    CapitalRegion,
    CapitalRegionField,
    FinancialTier,
    FinancialTierField,
    RepaymentMethodField,
)
from ...core.numeric import HUNDRED, MONTHS_PER_YEAR, ZERO


class LoanRepaymentInput(CalculatorInput):
    """대출 상환 입력"""

    loan_amount: int = Field(..., gt=0, description="대출금")
    annual_rate: Decimal = Field(..., ge=0, description="금리")
    loan_term_years: int = Field(..., gt=0, le=50, description="대출기간")
    repayment_method: RepaymentMethodField = Field(..., description="상환방식")


@dataclass(frozen=True)
class LoanRepaymentResult(ResultRecord):
    """대출 상환 결과

    Attributes:
        monthly_payment: 첫 회차 납입액
        total_payment: 총 납입액
        total_interest: 총 이자
        schedule: 회차별 상환 내역
    """
    monthly_payment: int
    total_payment: int
    total_interest: int
    schedule: Tuple[RepaymentPeriod, ...]


@traced
def calculate_loan_repayment(data: InputData) -> LoanRepaymentResult:
    """상환 방식별 월 납입액과 상환 스케줄 계산

    Args:
        data: LoanRepaymentInput 또는 같은 필드의 딕셔너리

    Returns:
        상환 계산 결과 (원금 합계는 대출금과 정확히 일치)
    """
    params = parse_input(LoanRepaymentInput, data)
    months = params.loan_term_years * 12
    monthly_rate = monthly_rate_from_annual(params.annual_rate)

    schedule = build_schedule(params.loan_amount, monthly_rate, months, params.repayment_method)
    total_payment = sum(period.payment for period in schedule)

    return LoanRepaymentResult(
        monthly_payment=schedule[0].payment,
        total_payment=total_payment,
        total_interest=total_payment - params.loan_amount,
        schedule=schedule,
    )


class BuyerCategory(str, Enum):
    """구입 유형"""
    FIRST_TIME = "생애최초"
    GENERAL = "일반"


class LoanLimitInput(CalculatorInput):
    """대출한도 입력"""

    property_value: Decimal = Field(..., gt=0, description="주택가격")
    annual_income: Decimal = Field(..., gt=0, description="연소득")
    other_debt_payment: Decimal = Field(Decimal("0"), ge=0, description="기타부채 연간 원리금")
    region: CapitalRegionField = Field(..., description="지역")
    is_first_time_buyer: bool = Field(..., description="생애최초 구입 여부")
    financial_institution: FinancialTierField = Field(..., description="금융권")
    loan_term_years: int = Field(..., gt=0, le=50, description="대출기간")
    annual_rate: Decimal = Field(..., ge=0, description="금리")


@dataclass(frozen=True)
class LoanLimitResult(ResultRecord):
    """대출한도 결과 (비율은 %)"""
    max_loan_by_ltv: int
    max_loan_by_dsr: int
    max_loan: int
    ltv_limit: float
    dsr_limit: float
    stress_rate: float


@traced
def calculate_loan_limit(data: InputData) -> LoanLimitResult:
    """LTV 한도와 스트레스 DSR 한도 중 작은 금액을 대출한도로 계산

    DSR 한도는 (연소득 × DSR 비율 − 기타부채 원리금) 범위에서 갚을 수 있는
    원리금균등 대출원금을 가산금리를 더한 금리로 역산합니다.
    """
    params = parse_input(LoanLimitInput, data)
    rules = get_rule_engine()
    tier: FinancialTier = params.financial_institution
    region: CapitalRegion = params.region

    buyer = BuyerCategory.FIRST_TIME if params.is_first_time_buyer else BuyerCategory.GENERAL
    ltv_limit = rules.rate_matrix('loan_limit.ltv_rates', FinancialTier, BuyerCategory, CapitalRegion).lookup(
        tier, buyer, region
    )
    dsr_limit = rules.constant(f'loan_limit.dsr_limits.{tier.value}')
    stress_rate = rules.constant(f'loan_limit.stress_rates.{region.value}')

    max_loan_by_ltv = round_to_won(params.property_value * ltv_limit)

    monthly_rate = (params.annual_rate / HUNDRED + stress_rate) / MONTHS_PER_YEAR
    max_monthly_payment = (params.annual_income * dsr_limit - params.other_debt_payment) / MONTHS_PER_YEAR
    principal = max_principal_for_payment(max_monthly_payment, monthly_rate, params.loan_term_years * 12)
    max_loan_by_dsr = max(0, round_to_won(principal if principal is not None else ZERO))

    return LoanLimitResult(
        max_loan_by_ltv=max_loan_by_ltv,
        max_loan_by_dsr=max_loan_by_dsr,
        max_loan=min(max_loan_by_ltv, max_loan_by_dsr),
        ltv_limit=as_percent(ltv_limit),
        dsr_limit=as_percent(dsr_limit),
        stress_rate=as_percent(stress_rate),
    )
