"""대지지분 계산기"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import (
    BusinessRuleError,
    CalculatorInput,
    InputData,
    ResultRecord,
    parse_input,
    percent_of,
    round_to,
    traced,
)
from .area_convert import AreaUnit, sqm_per_unit


class LandShareInput(CalculatorInput):
    total_land_area: Decimal = Field(..., gt=0, description="대지면적")
    total_building_area: Decimal = Field(..., gt=0, description="전체연면적")
    unit_area: Decimal = Field(..., gt=0, description="전용면적")


@dataclass(frozen=True)
class LandShareResult(ResultRecord):
    land_share_sqm: float
    land_share_pyeong: float
    share_ratio: float


@traced
def calculate_land_share(data: InputData) -> LandShareResult:
    """대지지분 = 대지면적 × 전용면적 / 전체연면적

    Raises:
        BusinessRuleError: 전용면적이 전체연면적보다 큰 경우
    """
    params = parse_input(LandShareInput, data)
    if params.unit_area > params.total_building_area:
        raise BusinessRuleError("전용면적은 전체연면적보다 클 수 없습니다.")

    share_sqm = params.total_land_area * params.unit_area / params.total_building_area

    return LandShareResult(
        land_share_sqm=round_to(share_sqm, 2),
        land_share_pyeong=round_to(share_sqm / sqm_per_unit(AreaUnit.PYEONG), 2),
        share_ratio=percent_of(params.unit_area, params.total_building_area),
    )
