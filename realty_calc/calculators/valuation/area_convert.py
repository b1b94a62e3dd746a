"""면적 단위 환산 계산기 (평·㎡·ft²·에이커)"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pydantic import Field

from ...core import CalculatorInput, InputData, ResultRecord, get_rule_engine, parse_input, round_to, traced


class AreaUnit(str, Enum):
    PYEONG = "pyeong"
    SQM = "sqm"
    SQFT = "sqft"
    ACRE = "acre"


class AreaConvertInput(CalculatorInput):
    value: Decimal = Field(..., gt=0, description="면적")
    from_unit: AreaUnit = Field(..., description="단위")


@dataclass(frozen=True)
class AreaConvertResult(ResultRecord):
    pyeong: float
    sqm: float
    sqft: float
    acre: float


def sqm_per_unit(unit: AreaUnit) -> Decimal:
    """단위 1당 ㎡"""
    return get_rule_engine().constant(f'area_units.{unit.value}')


@traced
def calculate_area_convert(data: InputData) -> AreaConvertResult:
    """입력 면적을 ㎡로 바꾼 뒤 각 단위로 환산 (에이커는 소수 넷째 자리)"""
    params = parse_input(AreaConvertInput, data)
    sqm = params.value * sqm_per_unit(params.from_unit)

    return AreaConvertResult(
        pyeong=round_to(sqm / sqm_per_unit(AreaUnit.PYEONG), 2),
        sqm=round_to(sqm, 2),
        sqft=round_to(sqm / sqm_per_unit(AreaUnit.SQFT), 2),
        acre=round_to(sqm / sqm_per_unit(AreaUnit.ACRE), 4),
    )
