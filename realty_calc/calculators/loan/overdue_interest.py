"""연체이자 계산기"""

from dataclasses import dataclass
from decimal import Decimal

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
from ...core.numeric import HUNDRED


class OverdueInterestInput(CalculatorInput):
    """연체이자 입력"""

    overdue_amount: Decimal = Field(..., gt=0, description="연체금액")
    annual_rate: Decimal = Field(..., ge=0, description="연체이율")
    days: int = Field(..., ge=0, description="연체일수")


@dataclass(frozen=True)
class OverdueInterestResult(ResultRecord):
    overdue_interest: int
    total_amount: int


@traced
def calculate_overdue_interest(data: InputData) -> OverdueInterestResult:
    """연체이자 = 연체금액 × 연이율 × 연체일수 / 365"""
    params = parse_input(OverdueInterestInput, data)
    days_per_year = get_rule_engine().constant('overdue_interest.days_per_year')

    interest = params.overdue_amount * params.annual_rate / HUNDRED * params.days / days_per_year

    return OverdueInterestResult(
        overdue_interest=round_to_won(interest),
        total_amount=round_to_won(params.overdue_amount + interest),
    )
