"""인지세 계산기 (부동산 매매계약서)"""

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


class StampTaxInput(CalculatorInput):
    transaction_amount: Decimal = Field(..., ge=0, description="거래금액")


@dataclass(frozen=True)
class StampTaxResult(ResultRecord):
    stamp_tax: int


@traced
def calculate_stamp_tax(data: InputData) -> StampTaxResult:
    """거래금액 구간별 정액 인지세"""
    params = parse_input(StampTaxInput, data)
    entry = get_rule_engine().step_table('stamp_tax').find(params.transaction_amount)
    return StampTaxResult(stamp_tax=round_to_won(entry.value))
