"""최대 대출가능액 계산기 (LTV·DSR 중 작은 금액)"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    as_percent,
    get_rule_engine,
    max_principal_for_payment,
    monthly_rate_from_annual,
    parse_input,
    round_to_won,
    traced,
)
from ...core.enums import BorrowerType, LtvRegion
from ...core.numeric import MONTHS_PER_YEAR
from .ltv import ltv_ratio


class MaxLoanInput(CalculatorInput):
    """최대 대출가능액 입력"""

    property_price: Decimal = Field(..., gt=0, description="주택가격")
    annual_income: Decimal = Field(..., gt=0, description="연소득")
    borrower_type: BorrowerType = Field(..., description="차주 유형")
    region: LtvRegion = Field(..., description="지역")
    interest_rate: Decimal = Field(..., gt=0, le=30, description="대출금리")
    loan_term_years: int = Field(..., gt=0, le=50, description="대출기간")
    stress_rate: Decimal = Field(Decimal("0"), ge=0, description="스트레스 금리")


@dataclass(frozen=True)
class MaxLoanResult(ResultRecord):
    """최대 대출가능액 결과

    Attributes:
        ltv_limit: LTV 기준 한도
        ltv_rate: LTV 비율 (%)
        dsr_limit: DSR 기준 한도
        dsr_rate: DSR 비율 (%)
        max_loan_amount: 최종 한도
    """
    ltv_limit: int
    ltv_rate: float
    dsr_limit: int
    dsr_rate: float
    max_loan_amount: int


@traced
def calculate_max_loan(data: InputData) -> MaxLoanResult:
    """LTV 한도와 DSR 한도를 각각 구해 작은 금액을 최대 대출가능액으로 계산

    DSR 한도는 연소득 × DSR 비율을 12로 나눈 월 상환액으로 원리금균등 원금을 역산합니다.
    """
    params = parse_input(MaxLoanInput, data)
    rules = get_rule_engine()

    ltv = ltv_ratio(params.borrower_type, params.region)
    ltv_limit = round_to_won(params.property_price * ltv)

    dsr = rules.constant('max_loan.dsr_rate')
    monthly_rate = monthly_rate_from_annual(params.interest_rate + params.stress_rate)
    principal = max_principal_for_payment(
        params.annual_income * dsr / MONTHS_PER_YEAR, monthly_rate, params.loan_term_years * 12
    )
    dsr_limit = round_to_won(principal)

    return MaxLoanResult(
        ltv_limit=ltv_limit,
        ltv_rate=as_percent(ltv),
        dsr_limit=dsr_limit,
        dsr_rate=as_percent(dsr),
        max_loan_amount=min(ltv_limit, dsr_limit),
    )
