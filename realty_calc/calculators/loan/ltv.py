"""LTV 계산기"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    as_percent,
    get_rule_engine,
    parse_input,
    round_to_won,
    traced,
)
from ...core.enums import BorrowerType, LtvRegion


class LtvInput(CalculatorInput):
    """LTV 입력"""

    property_price: Decimal = Field(..., gt=0, description="주택가격")
    borrower_type: BorrowerType = Field(..., description="차주 유형")
    region: LtvRegion = Field(..., description="지역")


@dataclass(frozen=True)
class LtvResult(ResultRecord):
    ltv_rate: float
    max_loan_amount: int


def ltv_ratio(borrower_type: BorrowerType, region: LtvRegion) -> Decimal:
    """차주 유형과 지역에 따른 LTV 비율 (소수)"""
    return get_rule_engine().rate_matrix('ltv_rates', BorrowerType, LtvRegion).lookup(borrower_type, region)


@traced
def calculate_ltv(data: InputData) -> LtvResult:
    """주택가격 × LTV 비율로 최대 대출금액 계산"""
    params = parse_input(LtvInput, data)
    rate = ltv_ratio(params.borrower_type, params.region)
    return LtvResult(
        ltv_rate=as_percent(rate),
        max_loan_amount=round_to_won(params.property_price * rate),
    )
