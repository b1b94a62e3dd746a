"""RTI (임대업 이자상환비율) 계산기"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    floor_to_won,
    get_rule_engine,
    parse_input,
    round_to,
    round_to_won,
    traced,
)
from ...core.numeric import HUNDRED


class RtiPropertyType(str, Enum):
    RESIDENTIAL = "주거용"
    NON_RESIDENTIAL = "비주거용"


class RtiInput(CalculatorInput):
    """RTI 입력"""

    annual_rental_income: Decimal = Field(..., gt=0, description="연간임대소득")
    loan_amount: Decimal = Field(..., gt=0, description="대출금액")
    interest_rate: Decimal = Field(..., gt=0, description="대출이자율")
    property_type: RtiPropertyType = Field(..., description="부동산 유형")


@dataclass(frozen=True)
class RtiResult(ResultRecord):
    """RTI 계산 결과

    Attributes:
        rti_ratio: 임대소득 / 연간 이자비용 (배)
        annual_rental_income: 연간 임대소득
        annual_interest_cost: 연간 이자비용
        is_qualified: 기준 충족 여부
        required_rti: 기준 RTI (주거용 1.25, 비주거용 1.5)
        max_loan_amount: 기준 RTI를 충족하는 최대 대출금액 (원 미만 절사)
    """
    rti_ratio: float
    annual_rental_income: int
    annual_interest_cost: int
    is_qualified: bool
    required_rti: float
    max_loan_amount: int


@traced
def calculate_rti(data: InputData) -> RtiResult:
    """RTI 계산 및 기준 충족 여부 판정"""
    params = parse_input(RtiInput, data)
    required = get_rule_engine().constant(f'rti.required_ratios.{params.property_type.value}')

    rate = params.interest_rate / HUNDRED
    annual_interest_cost = params.loan_amount * rate
    rti_ratio = round_to(params.annual_rental_income / annual_interest_cost, 2)

    return RtiResult(
        rti_ratio=rti_ratio,
        annual_rental_income=round_to_won(params.annual_rental_income),
        annual_interest_cost=round_to_won(annual_interest_cost),
        is_qualified=rti_ratio >= float(required),
        required_rti=float(required),
        max_loan_amount=floor_to_won(params.annual_rental_income / required / rate),
    )
