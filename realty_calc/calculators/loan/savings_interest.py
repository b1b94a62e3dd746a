"""예적금 이자 계산기 (단리·월복리, 이자소득세)"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    get_rule_engine,
    parse_input,
    round_to_won,
    traced,
)
from ...core.numeric import HUNDRED, MONTHS_PER_YEAR, ONE


class InterestType(str, Enum):
    SIMPLE = "simple"
    COMPOUND = "compound"


class SavingsTaxType(str, Enum):
    """이자 과세 유형"""
    GENERAL = "general"            # 일반과세 15.4%
    PREFERENTIAL = "preferential"  # 세금우대 9.5%
    TAX_FREE = "tax-free"          # 비과세


class SavingsInterestInput(CalculatorInput):
    """예적금 이자 입력"""

    principal: Decimal = Field(..., gt=0, description="원금")
    annual_rate: Decimal = Field(..., ge=0, description="연이율")
    months: int = Field(..., gt=0, description="기간")
    interest_type: InterestType = Field(..., description="이자 계산 방식")
    tax_type: SavingsTaxType = Field(..., description="과세 유형")


@dataclass(frozen=True)
class SavingsInterestResult(ResultRecord):
    interest_before_tax: int
    interest_tax: int
    interest_after_tax: int
    total_after_tax: int


@traced
def calculate_savings_interest(data: InputData) -> SavingsInterestResult:
    """세전·세후 이자 계산

    단리: 원금 × 연이율 × 개월/12
    월복리: 원금 × (1 + 연이율/12)^개월 − 원금
    """
    params = parse_input(SavingsInterestInput, data)
    rate = params.annual_rate / HUNDRED

    if params.interest_type == InterestType.SIMPLE:
        interest = params.principal * rate * params.months / MONTHS_PER_YEAR
    else:
        interest = params.principal * (ONE + rate / MONTHS_PER_YEAR) ** params.months - params.principal

    tax_rate = get_rule_engine().constant(f'savings_interest.tax_rates.{params.tax_type.value}')
    tax = interest * tax_rate
    after_tax = interest - tax

    return SavingsInterestResult(
        interest_before_tax=round_to_won(interest),
        interest_tax=round_to_won(tax),
        interest_after_tax=round_to_won(after_tax),
        total_after_tax=round_to_won(params.principal + after_tax),
    )
