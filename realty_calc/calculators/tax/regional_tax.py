"""지역자원시설세(소방분) 계산기"""

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


class BuildingType(str, Enum):
    HOUSING = "주택"
    OTHER = "그외"


class RegionalTaxInput(CalculatorInput):
    """지역자원시설세 입력"""

    building_value: Decimal = Field(..., gt=0, description="건물 시가표준액")
    building_type: BuildingType = Field(..., description="건물 유형")
    is_single_household: bool = Field(..., description="1세대 여부")
    is_fire_risk: bool = Field(..., description="화재위험 건축물 여부")
    is_large_fire_risk: bool = Field(..., description="대형 화재위험 건축물 여부")


@dataclass(frozen=True)
class RegionalTaxResult(ResultRecord):
    """지역자원시설세 계산 결과"""
    taxable_base: int
    base_tax: int
    additional_tax: int
    total_tax: int
    multiplier: int


@traced
def calculate_regional_tax(data: InputData) -> RegionalTaxResult:
    """소방분 지역자원시설세 계산

    1세대 주택은 과세표준을 0으로 봅니다.
    화재위험 건축물은 2배, 대형 화재위험 건축물은 3배를 적용합니다.
    """
    params = parse_input(RegionalTaxInput, data)
    rules = get_rule_engine()

    if params.building_type == BuildingType.HOUSING and params.is_single_household:
        taxable_base = 0
    else:
        taxable_base = round_to_won(params.building_value)

    base_tax = round_to_won(rules.stepped_schedule('regional_tax.fire_safety_schedule').amount(taxable_base))

    multiplier = 1
    if params.is_large_fire_risk:
        multiplier = round_to_won(rules.constant('regional_tax.large_fire_risk_multiplier'))
    elif params.is_fire_risk:
        multiplier = round_to_won(rules.constant('regional_tax.fire_risk_multiplier'))
    additional_tax = base_tax * (multiplier - 1)

    return RegionalTaxResult(
        taxable_base=taxable_base,
        base_tax=base_tax,
        additional_tax=additional_tax,
        total_tax=base_tax + additional_tax,
        multiplier=multiplier,
    )
