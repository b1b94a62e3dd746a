"""건물 시가표준액 계산기"""

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


class BuildingPriceInput(CalculatorInput):
    """건물 시가표준액 입력"""

    area: Decimal = Field(..., gt=0, description="면적")
    construction_price_per_sqm: Decimal = Field(..., gt=0, description="건물신축가격기준액")
    structure_index: Decimal = Field(..., gt=0, description="구조지수")
    use_index: Decimal = Field(..., gt=0, description="용도지수")
    location_index: Decimal = Field(..., gt=0, description="위치지수")
    age_rate: Decimal = Field(..., ge=0, le=100, description="경과연수별잔가율")


@dataclass(frozen=True)
class BuildingPriceResult(ResultRecord):
    standard_price: int
    price_per_sqm: int
    price_per_pyeong: int


@traced
def calculate_building_price(data: InputData) -> BuildingPriceResult:
    """㎡당 가격 = 신축가격기준액 × 구조지수 × 용도지수 × 위치지수 × 잔가율

    시가표준액은 원 단위로 반올림한 ㎡당 가격에 면적을 곱합니다.
    """
    params = parse_input(BuildingPriceInput, data)
    price_per_sqm = round_to_won(
        params.construction_price_per_sqm
        * params.structure_index
        * params.use_index
        * params.location_index
        * params.age_rate / HUNDRED
    )

    return BuildingPriceResult(
        standard_price=round_to_won(params.area * price_per_sqm),
        price_per_sqm=price_per_sqm,
        price_per_pyeong=round_to_won(price_per_sqm / get_rule_engine().constant('sqm_to_pyeong')),
    )
