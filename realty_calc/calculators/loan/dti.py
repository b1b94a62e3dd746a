"""DTI (총부채상환비율) 계산기

DTI는 신규 대출의 원리금과 기타부채의 이자만 합산합니다.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    first_payment,
    get_rule_engine,
    max_principal_for_payment,
    monthly_rate_from_annual,
    parse_input,
    percent_of,
    round_to,
    round_to_won,
    traced,
)
from ...core.enums import RepaymentMethod, RepaymentMethodField
from ...core.numeric import HUNDRED, MONTHS_PER_YEAR, ZERO


class DtiInput(CalculatorInput):
    """DTI 입력"""

    annual_income: Decimal = Field(..., gt=0, description="연소득")
    loan_amount: Decimal = Field(..., ge=0, description="대출금액")
    loan_term_months: int = Field(..., gt=0, le=600, description="대출기간")
    loan_rate: Decimal = Field(..., ge=0, description="대출이율")
    repayment_method: RepaymentMethodField = Field(
        RepaymentMethod.EQUAL_PRINCIPAL_INTEREST, description="상환방식"
    )
    other_debt_amount: Decimal = Field(Decimal("0"), ge=0, description="기타부채금액")
    other_debt_rate: Decimal = Field(Decimal("0"), ge=0, description="기타부채이율")
    dti_limit: Optional[Decimal] = Field(None, gt=0, le=100, description="DTI 한도")


@dataclass(frozen=True)
class DtiResult(ResultRecord):
    """DTI 계산 결과

    Attributes:
        dti_rate: DTI (%)
        annual_total_repay: 연간 원리금 상환액 합계
        loan_annual_repay: 신규 대출 연간 원리금
        other_debt_annual_interest: 기타부채 연간 이자
        monthly_repay: 신규 대출 월 상환액 (첫 회차)
        dti_limit: 적용 한도 (%)
        is_within_limit: 한도 이내 여부
        max_loan_amount: 한도까지 빌릴 수 있는 금액 (상환액이 원금과 무관하면 None)
    """
    dti_rate: float
    annual_total_repay: int
    loan_annual_repay: int
    other_debt_annual_interest: int
    monthly_repay: int
    dti_limit: float
    is_within_limit: bool
    max_loan_amount: Optional[int]


def income_based_max_loan(
    allowed_annual_repay: Decimal,
    monthly_rate: Decimal,
    months: int,
    method: RepaymentMethod
) -> Optional[int]:
    """연간 상환 허용액으로 빌릴 수 있는 최대 원금 (원 단위, 한도 없음은 None)"""
    if allowed_annual_repay <= ZERO:
        return 0
    principal = max_principal_for_payment(allowed_annual_repay / MONTHS_PER_YEAR, monthly_rate, months, method)
    if principal is None:
        return None
    return round_to_won(principal)


@traced
def calculate_dti(data: InputData) -> DtiResult:
    """DTI 계산

    Args:
        data: DtiInput 또는 같은 필드의 딕셔너리

    Returns:
        DTI 계산 결과
    """
    params = parse_input(DtiInput, data)
    rules = get_rule_engine()
    limit = params.dti_limit if params.dti_limit is not None else rules.constant('dti.default_limit')

    monthly_rate = monthly_rate_from_annual(params.loan_rate)
    loan_monthly = first_payment(params.loan_amount, monthly_rate, params.loan_term_months, params.repayment_method)
    monthly_repay = round_to_won(loan_monthly)
    loan_annual_repay = round_to_won(loan_monthly * MONTHS_PER_YEAR)
    other_debt_annual_interest = round_to_won(params.other_debt_amount * params.other_debt_rate / HUNDRED)
    annual_total_repay = loan_annual_repay + other_debt_annual_interest

    dti_rate = percent_of(annual_total_repay, params.annual_income)
    allowed = params.annual_income * limit / HUNDRED - other_debt_annual_interest

    return DtiResult(
        dti_rate=dti_rate,
        annual_total_repay=annual_total_repay,
        loan_annual_repay=loan_annual_repay,
        other_debt_annual_interest=other_debt_annual_interest,
        monthly_repay=monthly_repay,
        dti_limit=round_to(limit, 2),
        is_within_limit=dti_rate <= float(limit),
        max_loan_amount=income_based_max_loan(
            allowed, monthly_rate, params.loan_term_months, params.repayment_method
        ),
    )
