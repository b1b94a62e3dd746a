"""등기비용 계산기 (취득세 + 국민주택채권 + 법무사 보수)"""

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


class RegistrationPropertyType(str, Enum):
    HOUSING = "주택"
    OFFICETEL = "오피스텔"
    OTHER_BUILDING = "기타건물"
    LAND = "토지"


class RegistrationRegion(str, Enum):
    SEOUL = "서울"
    CAPITAL_AREA = "수도권"
    METROPOLITAN = "광역시"
    OTHER = "기타지역"


class HousingCountCategory(str, Enum):
    ONE = "1주택"
    TWO = "2주택"
    THREE_OR_MORE = "3주택이상"


class RegistrationCostInput(CalculatorInput):
    """등기비용 입력"""

    property_price: Decimal = Field(..., gt=0, description="매매가")
    property_type: RegistrationPropertyType = Field(..., description="부동산 유형")
    region: RegistrationRegion = Field(..., description="지역")
    area: Decimal = Field(..., gt=0, description="전용면적")
    housing_count: HousingCountCategory = Field(..., description="주택 수")
    is_self_registration: bool = Field(..., description="셀프등기 여부")
    is_first_time_buyer: bool = Field(..., description="생애최초 구입 여부")


@dataclass(frozen=True)
class RegistrationCostResult(ResultRecord):
    """등기비용 계산 결과

    Attributes:
        housing_bond_purchase: 국민주택채권 매입액
        housing_bond_actual_cost: 채권 즉시매도 시 실부담액
        total_taxes: 취득세(감면 후) + 지방교육세 + 농어촌특별세
        total_cost: 세금 + 채권 실부담액 + 법무사 보수
    """
    acquisition_tax: int
    local_education_tax: int
    rural_special_tax: int
    housing_bond_purchase: int
    housing_bond_actual_cost: int
    attorney_fee: int
    first_time_buyer_discount: int
    total_taxes: int
    total_cost: int


def _acquisition_tax_rate(params: RegistrationCostInput) -> Decimal:
    rules = get_rule_engine()
    if params.property_type != RegistrationPropertyType.HOUSING:
        return rules.constant('registration_cost.non_housing_rate')
    if params.housing_count == HousingCountCategory.ONE:
        return rules.step_table('registration_cost.single_home_rates').find(params.property_price).value
    if params.housing_count == HousingCountCategory.TWO:
        return rules.constant('registration_cost.two_homes_rate')
    return rules.constant('registration_cost.three_or_more_homes_rate')


def _housing_bond_rate(region: RegistrationRegion, price: Decimal) -> Decimal:
    rules = get_rule_engine()
    price_in_units = price / rules.constant('registration_cost.bond_price_unit')
    table_name = '서울' if region == RegistrationRegion.SEOUL else '기타'
    return rules.step_table(f'registration_cost.bond_rates.{table_name}').find(price_in_units).value


@traced
def calculate_registration_cost(data: InputData) -> RegistrationCostResult:
    """소유권 이전 등기에 드는 세금과 부대비용 계산

    지방교육세는 주택 10%, 그 외 20%이며 감면 전 취득세에 부과합니다.
    """
    params = parse_input(RegistrationCostInput, data)
    rules = get_rule_engine()
    is_housing = params.property_type == RegistrationPropertyType.HOUSING
    price = params.property_price

    acquisition_tax = round_to_won(price * _acquisition_tax_rate(params))

    if is_housing:
        education_rate = rules.constant('registration_cost.housing_education_tax_rate')
    else:
        education_rate = rules.constant('registration_cost.non_housing_education_tax_rate')
    local_education_tax = round_to_won(acquisition_tax * education_rate)

    rural_special_tax = 0
    if is_housing and price > rules.constant('registration_cost.rural_special_tax_threshold'):
        rural_special_tax = round_to_won(price * rules.constant('registration_cost.rural_special_tax_rate'))

    housing_bond_purchase = round_to_won(price * _housing_bond_rate(params.region, price))
    housing_bond_actual_cost = round_to_won(
        housing_bond_purchase * rules.constant('registration_cost.bond_discount_rate')
    )
    attorney_fee = 0 if params.is_self_registration else round_to_won(rules.constant('registration_cost.attorney_fee'))

    first_time_buyer_discount = 0
    if params.is_first_time_buyer and is_housing and params.housing_count == HousingCountCategory.ONE:
        first_time_buyer_discount = min(
            acquisition_tax, round_to_won(rules.constant('registration_cost.first_time_buyer_discount'))
        )

    total_taxes = acquisition_tax - first_time_buyer_discount + local_education_tax + rural_special_tax

    return RegistrationCostResult(
        acquisition_tax=acquisition_tax,
        local_education_tax=local_education_tax,
        rural_special_tax=rural_special_tax,
        housing_bond_purchase=housing_bond_purchase,
        housing_bond_actual_cost=housing_bond_actual_cost,
        attorney_fee=attorney_fee,
        first_time_buyer_discount=first_time_buyer_discount,
        total_taxes=total_taxes,
        total_cost=total_taxes + housing_bond_actual_cost + attorney_fee,
    )
