"""재산세 계산기 (주택)"""

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
    round_to_won,
    traced,
)


class PropertyTaxInput(CalculatorInput):
    """재산세 입력"""

    assessed_value: Decimal = Field(..., gt=0, description="공시가격")
    is_urban_area: bool = Field(..., description="도시지역 여부")


@dataclass(frozen=True)
class PropertyTaxResult(ResultRecord):
    """재산세 계산 결과"""
    tax_base: int
    property_tax: int
    city_planning_tax: int
    local_education_tax: int
    total_tax: int
    effective_rate: float


@traced
def calculate_property_tax(data: InputData) -> PropertyTaxResult:
    """재산세 계산

    과세표준 = 공시가격 × 공정시장가액비율(60%).
    도시지역분은 과세표준의 0.14%, 지방교육세는 재산세의 20%입니다.

    Args:
        data: PropertyTaxInput 또는 같은 필드의 딕셔너리

    Returns:
        재산세 계산 결과
    """
    params = parse_input(PropertyTaxInput, data)
    rules = get_rule_engine()

    tax_base = round_to_won(params.assessed_value * rules.constant('property_tax.fair_market_ratio'))
    property_tax = round_to_won(rules.bracket_table('property_tax.brackets').tax(tax_base))

    city_planning_tax = 0
    if params.is_urban_area:
        city_planning_tax = round_to_won(tax_base * rules.constant('property_tax.city_planning_tax_rate'))

    local_education_tax = round_to_won(property_tax * rules.constant('property_tax.local_education_tax_rate'))
    total_tax = property_tax + city_planning_tax + local_education_tax

    return PropertyTaxResult(
        tax_base=tax_base,
        property_tax=property_tax,
        city_planning_tax=city_planning_tax,
        local_education_tax=local_education_tax,
        total_tax=total_tax,
        effective_rate=percent_of(total_tax, params.assessed_value),
    )
