"""건물분 부가가치세 계산기"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from pydantic import Field

from ...core import (
    BusinessRuleError,
    CalculatorInput,
    InputData,
    ResultRecord,
    get_rule_engine,
    parse_input,
    percent_of,
    round_to_won,
    traced,
)


class BuildingVatInput(CalculatorInput):
    """건물분 부가세 입력"""

    total_price: Decimal = Field(..., gt=0, description="거래총액")
    land_price: Decimal = Field(..., ge=0, description="토지가")
    building_price: Optional[Decimal] = Field(None, ge=0, description="건물가")


@dataclass(frozen=True)
class BuildingVatResult(ResultRecord):
    building_price: int
    land_price: int
    building_ratio: float
    vat: int
    total_with_vat: int


@traced
def calculate_building_vat(data: InputData) -> BuildingVatResult:
    """건물가에 대한 부가가치세 계산

    건물가를 입력하지 않으면 거래총액에서 토지가를 뺀 금액을 건물가로 봅니다.

    Raises:
        InputValidationError: 입력값 검증 실패
        BusinessRuleError: 건물가가 음수가 되거나 토지가+건물가가 거래총액의 1.5배를 넘는 경우
    """
    params = parse_input(BuildingVatInput, data)
    rules = get_rule_engine()

    if params.building_price is not None and params.building_price > 0:
        building_price = round_to_won(params.building_price)
    else:
        building_price = round_to_won(params.total_price - params.land_price)

    if building_price < 0:
        raise BusinessRuleError("건물가는 0 이상이어야 합니다.")
    if params.land_price + building_price > params.total_price * rules.constant('building_vat.max_total_ratio'):
        raise BusinessRuleError("토지가와 건물가의 합이 거래총액을 크게 초과합니다.")

    vat = round_to_won(building_price * rules.constant('building_vat.vat_rate'))

    return BuildingVatResult(
        building_price=building_price,
        land_price=round_to_won(params.land_price),
        building_ratio=percent_of(building_price, params.total_price),
        vat=vat,
        total_with_vat=round_to_won(params.total_price + vat),
    )
