"""보유세 계산기 (재산세 + 종합부동산세)

공시가격은 만원 단위로 입력받습니다.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

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
from ...core.numeric import ZERO


class HoldingTaxInput(CalculatorInput):
    """보유세 입력"""

    public_price: Decimal = Field(..., gt=0, description="공시가격(만원)")
    is_single_household: bool = Field(..., description="1세대 여부")
    housing_count: Literal[1, 2, 3] = Field(..., description="주택 수")


@dataclass(frozen=True)
class HoldingTaxResult(ResultRecord):
    """보유세 계산 결과 (원 단위)"""
    property_tax: int
    urban_tax: int
    education_tax: int
    comprehensive_tax: int
    rural_tax: int
    total_holding_tax: int
    tax_base: int
    comprehensive_tax_base: int


@traced
def calculate_holding_tax(data: InputData) -> HoldingTaxResult:
    """재산세와 종합부동산세를 합산한 연간 보유세 계산

    Args:
        data: HoldingTaxInput 또는 같은 필드의 딕셔너리 (공시가격은 만원)

    Returns:
        보유세 계산 결과
    """
    params = parse_input(HoldingTaxInput, data)
    rules = get_rule_engine()

    price_won = params.public_price * rules.constant('holding_tax.price_unit')
    fair_market_ratio = rules.constant('property_tax.fair_market_ratio')

    # 재산세
    tax_base = round_to_won(price_won * fair_market_ratio)
    if params.is_single_household:
        property_brackets = rules.bracket_table('property_tax.single_household_brackets')
    else:
        property_brackets = rules.bracket_table('property_tax.brackets')
    property_tax = round_to_won(property_brackets.tax(tax_base))
    urban_tax = round_to_won(property_tax * rules.constant('holding_tax.urban_tax_rate'))
    education_tax = round_to_won(property_tax * rules.constant('holding_tax.education_tax_rate'))

    # 종합부동산세
    if params.is_single_household and params.housing_count == 1:
        deduction = rules.constant('comprehensive_tax.single_home_deduction')
    else:
        deduction = rules.constant('comprehensive_tax.general_deduction')
    comprehensive_tax_base = round_to_won(max(ZERO, (price_won - deduction) * fair_market_ratio))

    if params.housing_count >= rules.constant('holding_tax.multi_home_threshold'):
        comprehensive_brackets = rules.bracket_table('comprehensive_tax.multi_home_brackets')
    else:
        comprehensive_brackets = rules.bracket_table('comprehensive_tax.brackets')
    comprehensive_tax = round_to_won(comprehensive_brackets.tax(comprehensive_tax_base))
    rural_tax = round_to_won(comprehensive_tax * rules.constant('holding_tax.rural_tax_rate'))

    return HoldingTaxResult(
        property_tax=property_tax,
        urban_tax=urban_tax,
        education_tax=education_tax,
        comprehensive_tax=comprehensive_tax,
        rural_tax=rural_tax,
        total_holding_tax=property_tax + urban_tax + education_tax + comprehensive_tax + rural_tax,
        tax_base=tax_base,
        comprehensive_tax_base=comprehensive_tax_base,
    )
