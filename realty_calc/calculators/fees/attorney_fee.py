"""법무사 보수 계산기 (소유권이전등기)"""

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


class AttorneyPropertyType(str, Enum):
    HOUSING = "주택"
    OTHER_BUILDING = "그외건물"


class AttorneyFeeInput(CalculatorInput):
    """법무사 보수 입력

    건물 종류는 보수표 구분에 영향을 주지 않으며 기록용으로 받습니다.
    """

    property_price: Decimal = Field(..., gt=0, description="부동산 가액")
    property_type: AttorneyPropertyType = Field(..., description="건물 종류")
    include_public_costs: bool = Field(..., description="공과금 포함 여부")


@dataclass(frozen=True)
class AttorneyFeeResult(ResultRecord):
    """법무사 보수 결과

    Attributes:
        base_fee: 기본보수
        revenue_seal: 수입인지
        registration_seal: 등기신청 수수료 (증지)
        miscellaneous_costs: 교통비·일당 등 기타 실비
        public_costs: 공과금 (포함하지 않으면 0)
        total_fee: 합계
    """
    base_fee: int
    revenue_seal: int
    registration_seal: int
    miscellaneous_costs: int
    public_costs: int
    total_fee: int


@traced
def calculate_attorney_fee(data: InputData) -> AttorneyFeeResult:
    params = parse_input(AttorneyFeeInput, data)
    rules = get_rule_engine()

    base_fee = round_to_won(rules.stepped_schedule('attorney_fee.schedule').amount(params.property_price))
    revenue_seal = round_to_won(rules.step_table('attorney_fee.revenue_seal').find(params.property_price).value)
    registration_seal = round_to_won(rules.constant('attorney_fee.registration_seal'))
    miscellaneous_costs = round_to_won(rules.constant('attorney_fee.miscellaneous_costs'))
    public_costs = revenue_seal + registration_seal if params.include_public_costs else 0

    return AttorneyFeeResult(
        base_fee=base_fee,
        revenue_seal=revenue_seal,
        registration_seal=registration_seal,
        miscellaneous_costs=miscellaneous_costs,
        public_costs=public_costs,
        total_fee=base_fee + public_costs + miscellaneous_costs,
    )
