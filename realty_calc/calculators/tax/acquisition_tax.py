"""취득세 계산기 (주택 유상취득)"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Literal

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    as_percent,
    get_rule_engine,
    parse_input,
    percent_of,
    round_to_won,
    to_decimal,
    traced,
)
from ...core.numeric import Number

# 세율은 백분율 소수점 넷째 자리까지
RATE_QUANTUM = Decimal("0.000001")


class AcquisitionTaxInput(CalculatorInput):
    """취득세 입력"""

    purchase_price: Decimal = Field(..., gt=0, description="매매가")
    housing_count: Literal[1, 2, 3] = Field(..., description="주택 수")
    is_regulated: bool = Field(..., description="조정대상지역 여부")
    is_first_time_buyer: bool = Field(..., description="생애최초 구입 여부")


@dataclass(frozen=True)
class AcquisitionTaxResult(ResultRecord):
    """취득세 계산 결과

    Attributes:
        acquisition_tax: 취득세 (생애최초 감면 후)
        local_education_tax: 지방교육세
        rural_special_tax: 농어촌특별세
        total_tax: 합계
        effective_rate: 실효세율 (%)
        first_time_buyer_discount: 생애최초 감면액
        tax_rate: 적용 세율 (%)
    """
    acquisition_tax: int
    local_education_tax: int
    rural_special_tax: int
    total_tax: int
    effective_rate: float
    first_time_buyer_discount: int
    tax_rate: float


def _single_home_rate(price: Decimal) -> Decimal:
    rules = get_rule_engine()
    lower_limit = rules.constant('acquisition_tax.single_home_lower_limit')
    upper_limit = rules.constant('acquisition_tax.single_home_upper_limit')
    lower_rate = rules.constant('acquisition_tax.single_home_lower_rate')
    upper_rate = rules.constant('acquisition_tax.single_home_upper_rate')

    if price <= lower_limit:
        return lower_rate
    if price > upper_limit:
        return upper_rate

    # 6억 초과 9억 이하: 가액에 비례하여 1%에서 3%까지 증가
    rate = lower_rate + (price - lower_limit) * (upper_rate - lower_rate) / (upper_limit - lower_limit)
    return rate.quantize(RATE_QUANTUM, rounding=ROUND_HALF_UP)


def get_acquisition_tax_rate(price: Number, housing_count: int, is_regulated: bool) -> Decimal:
    """주택 수와 조정대상지역 여부에 따른 취득세율

    Args:
        price: 취득가액
        housing_count: 취득 후 주택 수 (3은 3주택 이상)
        is_regulated: 조정대상지역 여부

    Returns:
        세율 (소수, 예: 0.01)
    """
    rules = get_rule_engine()
    value = to_decimal(price)

    if housing_count <= 1:
        return _single_home_rate(value)
    if housing_count == 2:
        if is_regulated:
            return rules.constant('acquisition_tax.two_homes_regulated_rate')
        return _single_home_rate(value)
    if is_regulated:
        return rules.constant('acquisition_tax.three_homes_regulated_rate')
    return rules.constant('acquisition_tax.three_homes_rate')


@traced
def calculate_acquisition_tax(data: InputData) -> AcquisitionTaxResult:
    """취득세 계산

    생애최초 감면은 1주택 취득에만 적용되며, 지방교육세는 감면 후 취득세 기준입니다.

    Args:
        data: AcquisitionTaxInput 또는 같은 필드의 딕셔너리

    Returns:
        취득세 계산 결과

    Raises:
        InputValidationError: 입력값 검증 실패
    """
    params = parse_input(AcquisitionTaxInput, data)
    rules = get_rule_engine()
    price = params.purchase_price

    tax_rate = get_acquisition_tax_rate(price, params.housing_count, params.is_regulated)
    gross_tax = round_to_won(price * tax_rate)

    discount = 0
    if params.is_first_time_buyer and params.housing_count == 1:
        discount = min(round_to_won(rules.constant('acquisition_tax.first_time_buyer_discount')), gross_tax)
    acquisition_tax = gross_tax - discount

    local_education_tax = round_to_won(
        acquisition_tax * rules.constant('acquisition_tax.local_education_tax_rate')
    )

    rural_special_tax = 0
    if price > rules.constant('acquisition_tax.rural_special_tax_threshold'):
        rural_special_tax = round_to_won(price * rules.constant('acquisition_tax.rural_special_tax_rate'))

    total_tax = acquisition_tax + local_education_tax + rural_special_tax

    return AcquisitionTaxResult(
        acquisition_tax=acquisition_tax,
        local_education_tax=local_education_tax,
        rural_special_tax=rural_special_tax,
        total_tax=total_tax,
        effective_rate=percent_of(total_tax, price),
        first_time_buyer_discount=discount,
        tax_rate=as_percent(tax_rate),
    )
