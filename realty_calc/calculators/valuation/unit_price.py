"""평당·㎡당 단가 계산기"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from pydantic import Field

from ...core import CalculatorInput, InputData, ResultRecord, parse_input, round_to, round_to_won, traced
from .area_convert import AreaUnit, sqm_per_unit


class UnitPriceInput(CalculatorInput):
    total_price: Decimal = Field(..., gt=0, description="총 금액")
    area: Decimal = Field(..., gt=0, description="면적")
    unit: Literal["sqm", "pyeong"] = Field(..., description="면적 단위")


@dataclass(frozen=True)
class UnitPriceResult(ResultRecord):
    price_per_pyeong: int
    price_per_sqm: int
    area_sqm: float
    area_pyeong: float


@traced
def calculate_unit_price(data: InputData) -> UnitPriceResult:
    params = parse_input(UnitPriceInput, data)
    pyeong_sqm = sqm_per_unit(AreaUnit.PYEONG)

    if params.unit == "sqm":
        area_sqm = params.area
        area_pyeong = params.area / pyeong_sqm
    else:
        area_sqm = params.area * pyeong_sqm
        area_pyeong = params.area

    return UnitPriceResult(
        price_per_pyeong=round_to_won(params.total_price / area_pyeong),
        price_per_sqm=round_to_won(params.total_price / area_sqm),
        area_sqm=round_to(area_sqm, 2),
        area_pyeong=round_to(area_pyeong, 2),
    )
