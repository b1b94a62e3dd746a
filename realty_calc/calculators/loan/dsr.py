"""DSR (총부채원리금상환비율) 계산기

스트레스 금리를 더한 금리로 신규 대출 상환액을 계산하고,
기타부채는 남은 기간 동안의 원리금 전체를 합산합니다.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    annuity_payment,
    first_payment,
    get_rule_engine,
    monthly_rate_from_annual,
    parse_input,
    percent_of,
    round_to,
    round_to_won,
    traced,
)
from ...core.enums import RepaymentMethod, RepaymentMethodField
from ...core.numeric import HUNDRED, MONTHS_PER_YEAR
from .dti import income_based_max_loan


class DsrInput(CalculatorInput):
    """DSR 입력"""

    annual_income: Decimal = Field(..., gt=0, description="연소득")
    loan_amount: Decimal = Field(..., ge=0, description="대출금액")
    loan_term_months: int = Field(..., gt=0, le=600, description="대출기간")
    loan_rate: Decimal = Field(..., ge=0, description="대출이율")
    stress_rate: Decimal = Field(Decimal("0"), ge=0, description="스트레스 금리")
    repayment_method: RepaymentMethodField = Field(
        RepaymentMethod.EQUAL_PRINCIPAL_INTEREST, description="상환방식"
    )
    other_debt_amount: Decimal = Field(Decimal("0"), ge=0, description="기타부채금액")
    other_debt_rate: Decimal = Field(Decimal("0"), ge=0, description="기타부채이율")
    other_debt_term_months: Optional[int] = Field(None, gt=0, le=600, description="기타부채 잔여기간")
    dsr_limit: Optional[Decimal] = Field(None, gt=0, le=100, description="DSR 한도")


@dataclass(frozen=True)
class DsrResult(ResultRecord):
    dsr_rate: float
    annual_total_repay: int
    loan_annual_repay: int
    other_debt_annual_repay: int
    monthly_repay: int
    applied_rate: float
    dsr_limit: float
    is_within_limit: bool
    max_loan_amount: Optional[int]


@traced
def calculate_dsr(data: InputData) -> DsrResult:
    """DSR 계산

    Args:
        data: DsrInput 또는 같은 필드의 딕셔너리

    Returns:
        DSR 계산 결과 (applied_rate는 스트레스 금리를 더한 연이율 %)
    """
    params = parse_input(DsrInput, data)
    rules = get_rule_engine()
    limit = params.dsr_limit if params.dsr_limit is not None else rules.constant('dsr.default_limit')
    other_term = params.other_debt_term_months
    if other_term is None:
        other_term = int(rules.constant('dsr.default_other_debt_term_months'))

    applied_rate = params.loan_rate + params.stress_rate
    monthly_rate = monthly_rate_from_annual(applied_rate)
    loan_monthly = first_payment(params.loan_amount, monthly_rate, params.loan_term_months, params.repayment_method)
    monthly_repay = round_to_won(loan_monthly)
    loan_annual_repay = round_to_won(loan_monthly * MONTHS_PER_YEAR)

    other_monthly = annuity_payment(
        params.other_debt_amount, monthly_rate_from_annual(params.other_debt_rate), other_term
    )
    other_debt_annual_repay = round_to_won(other_monthly * MONTHS_PER_YEAR)
    annual_total_repay = loan_annual_repay + other_debt_annual_repay

    dsr_rate = percent_of(annual_total_repay, params.annual_income)
    allowed = params.annual_income * limit / HUNDRED - other_debt_annual_repay

    return DsrResult(
        dsr_rate=dsr_rate,
        annual_total_repay=annual_total_repay,
        loan_annual_repay=loan_annual_repay,
        other_debt_annual_repay=other_debt_annual_repay,
        monthly_repay=monthly_repay,
        applied_rate=round_to(applied_rate, 3),
        dsr_limit=round_to(limit, 2),
        is_within_limit=dsr_rate <= float(limit),
        max_loan_amount=income_based_max_loan(
            allowed, monthly_rate, params.loan_term_months, params.repayment_method
        ),
    )
