"""중개보수 계산기

매매·전세·월세 거래금액 구간별 상한요율과 한도액을 적용합니다.
월세는 보증금 + 월세 × 100 (5천만원 미만이면 × 70)으로 환산한 금액이 기준입니다.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field, model_validator

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
from ...core.numeric import HUNDRED
from ...core.tables import StepEntry


class ContractType(str, Enum):
    SALE = "매매"
    JEONSE = "전세"
    MONTHLY = "월세"


class BrokeragePropertyType(str, Enum):
    HOUSING = "주택"
    OFFICETEL = "오피스텔"
    OTHER = "그외"


class BrokerageInput(CalculatorInput):
    """중개보수 입력"""

    contract_type: ContractType = Field(..., description="계약 유형")
    property_type: BrokeragePropertyType = Field(..., description="중개대상물 종류")
    transaction_amount: Decimal = Field(..., ge=0, description="거래금액")
    monthly_rent: Optional[Decimal] = Field(None, ge=0, description="월세")

    @model_validator(mode="after")
    def _require_monthly_rent(self) -> "BrokerageInput":
        if self.contract_type == ContractType.MONTHLY and not self.monthly_rent:
            raise ValueError("월세 계약의 경우 월세액을 입력해야 합니다.")
        return self


@dataclass(frozen=True)
class BrokerageResult(ResultRecord):
    """중개보수 결과

    Attributes:
        effective_amount: 요율 적용 기준 금액
        commission: 중개보수 (한도액 적용 후)
        applied_rate: 상한요율 (%)
        vat: 부가가치세 (오피스텔·그외만)
        total_with_vat: 합계
        has_vat: 부가가치세 대상 여부
    """
    effective_amount: int
    commission: int
    applied_rate: float
    vat: int
    total_with_vat: int
    has_vat: bool


def effective_transaction_amount(params: BrokerageInput) -> Decimal:
    """월세 계약은 환산보증금, 그 외는 거래금액"""
    if params.contract_type != ContractType.MONTHLY:
        return params.transaction_amount

    rules = get_rule_engine()
    converted = params.transaction_amount + params.monthly_rent * rules.constant('brokerage.monthly_rent_multiplier')
    if converted < rules.constant('brokerage.small_transaction_threshold'):
        return params.transaction_amount + params.monthly_rent * rules.constant(
            'brokerage.small_monthly_rent_multiplier'
        )
    return converted


def _rate_entry(contract_type: ContractType, property_type: BrokeragePropertyType, amount: Decimal) -> StepEntry:
    rules = get_rule_engine()
    if property_type == BrokeragePropertyType.HOUSING:
        path = 'brokerage.housing_sale' if contract_type == ContractType.SALE else 'brokerage.housing_rental'
        return rules.step_table(path).find(amount)
    if property_type == BrokeragePropertyType.OFFICETEL:
        key = 'officetel_sale_rate' if contract_type == ContractType.SALE else 'officetel_rental_rate'
        return StepEntry(value=rules.constant(f'brokerage.{key}'))
    return StepEntry(value=rules.constant('brokerage.other_rate'))


@traced
def calculate_brokerage(data: InputData) -> BrokerageResult:
    """중개보수 계산

    Raises:
        InputValidationError: 입력값 검증 실패 (월세 계약에 월세 누락 포함)
    """
    params = parse_input(BrokerageInput, data)
    rules = get_rule_engine()

    amount = effective_transaction_amount(params)
    entry = _rate_entry(params.contract_type, params.property_type, amount)

    commission = round_to_won(amount * entry.value / HUNDRED)
    if entry.cap is not None:
        commission = min(commission, round_to_won(entry.cap))

    has_vat = params.property_type != BrokeragePropertyType.HOUSING
    vat = round_to_won(commission * rules.constant('brokerage.vat_rate')) if has_vat else 0

    return BrokerageResult(
        effective_amount=round_to_won(amount),
        commission=commission,
        applied_rate=round_to(entry.value, 2),
        vat=vat,
        total_with_vat=commission + vat,
        has_vat=has_vat,
    )
