"""국민주택채권 매입비용 계산기"""

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
    round_to,
    round_to_won,
    traced,
)


class BondRegion(str, Enum):
    SEOUL = "서울"
    METROPOLITAN_CITY = "광역시"
    CITY = "시지역"
    OTHER = "기타"


class AreaSize(str, Enum):
    """전용면적 구분"""
    SMALL = "60㎡이하"
    MEDIUM = "60~85㎡"
    LARGE = "85㎡초과"


class HousingBondInput(CalculatorInput):
    sale_price: Decimal = Field(..., gt=0, description="매매가격")
    region: BondRegion = Field(..., description="지역")
    area_size: AreaSize = Field(..., description="전용면적")


@dataclass(frozen=True)
class HousingBondResult(ResultRecord):
    """국민주택채권 결과

    Attributes:
        bond_purchase_amount: 채권 매입액
        discount_cost: 즉시 매도 시 할인비용
        actual_burden: 실부담액
        purchase_rate: 매입률 (‰, 천분율)
    """
    bond_purchase_amount: int
    discount_cost: int
    actual_burden: int
    purchase_rate: float


@traced
def calculate_housing_bond(data: InputData) -> HousingBondResult:
    params = parse_input(HousingBondInput, data)
    rules = get_rule_engine()

    rate = rules.rate_matrix('housing_bond.purchase_rates', BondRegion, AreaSize).lookup(
        params.region, params.area_size
    )
    bond_purchase_amount = round_to_won(params.sale_price * rate)
    discount_cost = round_to_won(bond_purchase_amount * rules.constant('housing_bond.discount_rate'))

    return HousingBondResult(
        bond_purchase_amount=bond_purchase_amount,
        discount_cost=discount_cost,
        actual_burden=bond_purchase_amount - discount_cost,
        purchase_rate=round_to(rate * 1000, 1),
    )
