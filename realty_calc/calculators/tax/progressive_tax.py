"""누진세율 구간별 세액 분해 계산기"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    as_percent,
    get_rule_engine,
    parse_input,
    percent_of,
    round_to_won,
    traced,
)


class ProgressiveTaxInput(CalculatorInput):
    """누진세 입력"""

    taxable_income: Decimal = Field(..., ge=0, description="과세표준")


@dataclass(frozen=True)
class BracketBreakdown:
    """구간별 세액"""
    bracket: str
    taxable_amount: int
    rate: float
    tax_amount: int


@dataclass(frozen=True)
class ProgressiveTaxResult(ResultRecord):
    """누진세 계산 결과"""
    brackets: Tuple[BracketBreakdown, ...]
    total_tax: int
    effective_rate: float


@traced
def calculate_progressive_tax(data: InputData) -> ProgressiveTaxResult:
    """과세표준을 기본세율 구간별로 나누어 세액 계산

    구간별 세액을 원 단위로 반올림한 뒤 합산합니다.
    """
    params = parse_input(ProgressiveTaxInput, data)
    table = get_rule_engine().bracket_table('income_tax_brackets')

    breakdown = tuple(
        BracketBreakdown(
            bracket=share.bracket.label,
            taxable_amount=round_to_won(share.taxable_amount),
            rate=as_percent(share.bracket.rate),
            tax_amount=round_to_won(share.tax_amount),
        )
        for share in table.marginal_shares(params.taxable_income)
    )
    total_tax = sum(item.tax_amount for item in breakdown)

    return ProgressiveTaxResult(
        brackets=breakdown,
        total_tax=total_tax,
        effective_rate=percent_of(total_tax, params.taxable_income),
    )
