"""건폐율·용적률 계산기"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    get_rule_engine,
    parse_input,
    percent_of,
    round_to,
    traced,
)


class BuildingRatioInput(CalculatorInput):
    land_area: Decimal = Field(..., gt=0, description="대지면적")
    building_area: Decimal = Field(..., gt=0, description="건축면적")
    total_floor_area: Decimal = Field(..., gt=0, description="연면적")
    floors: int = Field(..., gt=0, description="층수")


@dataclass(frozen=True)
class BuildingRatioResult(ResultRecord):
    """건폐율·용적률 결과 (면적은 ㎡와 평)"""
    building_coverage_ratio: float
    floor_area_ratio: float
    avg_floor_area: float
    building_area_sqm: float
    building_area_pyeong: float
    total_floor_area_sqm: float
    total_floor_area_pyeong: float
    land_area_sqm: float
    land_area_pyeong: float


@traced
def calculate_building_ratio(data: InputData) -> BuildingRatioResult:
    params = parse_input(BuildingRatioInput, data)
    to_pyeong = get_rule_engine().constant('sqm_to_pyeong')

    return BuildingRatioResult(
        building_coverage_ratio=percent_of(params.building_area, params.land_area),
        floor_area_ratio=percent_of(params.total_floor_area, params.land_area),
        avg_floor_area=round_to(params.total_floor_area / params.floors, 2),
        building_area_sqm=float(params.building_area),
        building_area_pyeong=round_to(params.building_area * to_pyeong, 2),
        total_floor_area_sqm=float(params.total_floor_area),
        total_floor_area_pyeong=round_to(params.total_floor_area * to_pyeong, 2),
        land_area_sqm=float(params.land_area),
        land_area_pyeong=round_to(params.land_area * to_pyeong, 2),
    )
