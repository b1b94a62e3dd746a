"""간주임대료 계산기"""

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
from ...core.numeric import HUNDRED


class RentalPropertyType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class DeemedRentalInput(CalculatorInput):
    """간주임대료 입력"""

    deposit: Decimal = Field(..., gt=0, description="보증금")
    rental_days: Decimal = Field(..., gt=0, description="임대기간")
    interest_rate: Decimal = Field(..., gt=0, description="이자율")
    property_type: RentalPropertyType = Field(..., description="임대 유형")


@dataclass(frozen=True)
class DeemedRentalResult(ResultRecord):
    deemed_rental: int
    taxable_deposit: int
    applied_rate: float


@traced
def calculate_deemed_rental(data: InputData) -> DeemedRentalResult:
    """보증금에 대한 간주임대료 계산

    주택은 보증금 3억 초과분의 60%, 상가는 보증금 전액에 이자율과 임대일수를 적용합니다.
    """
    params = parse_input(DeemedRentalInput, data)
    rules = get_rule_engine()
    days_per_year = rules.constant('deemed_rental.days_per_year')
    rate = params.interest_rate / HUNDRED

    deemed_rental = 0
    taxable_deposit = 0
    if params.property_type == RentalPropertyType.RESIDENTIAL:
        threshold = rules.constant('deemed_rental.residential_deposit_threshold')
        if params.deposit >= threshold:
            taxable_deposit = round_to_won(params.deposit - threshold)
            ratio = rules.constant('deemed_rental.residential_deposit_ratio')
            deemed_rental = round_to_won(taxable_deposit * ratio * rate * params.rental_days / days_per_year)
    else:
        taxable_deposit = round_to_won(params.deposit)
        deemed_rental = round_to_won(params.deposit * rate * params.rental_days / days_per_year)

    return DeemedRentalResult(
        deemed_rental=deemed_rental,
        taxable_deposit=taxable_deposit,
        applied_rate=float(params.interest_rate),
    )
