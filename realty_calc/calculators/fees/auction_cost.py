"""경매 부대비용 계산기"""

from dataclasses import dataclass
from decimal import Decimal

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


class AuctionCostInput(CalculatorInput):
    bid_price: Decimal = Field(..., gt=0, description="매각대금")


@dataclass(frozen=True)
class AuctionCostResult(ResultRecord):
    """경매 부대비용 결과

    Attributes:
        acquisition_tax: 취득세 등 (매각대금 × 4.6%)
        eviction_cost: 명도비용
        moving_cost: 이사비용
        repair_cost: 수리비 (매각대금 × 3%)
        lawyer_fee: 법무비용
        total_incidental_cost: 부대비용 합계
        total_investment: 총 투자금액 (매각대금 + 부대비용)
    """
    acquisition_tax: int
    eviction_cost: int
    moving_cost: int
    repair_cost: int
    lawyer_fee: int
    total_incidental_cost: int
    total_investment: int


@traced
def calculate_auction_cost(data: InputData) -> AuctionCostResult:
    params = parse_input(AuctionCostInput, data)
    rules = get_rule_engine()

    acquisition_tax = round_to_won(params.bid_price * rules.constant('auction_cost.acquisition_tax_rate'))
    eviction_cost = round_to_won(rules.constant('auction_cost.eviction_cost'))
    moving_cost = round_to_won(rules.constant('auction_cost.moving_cost'))
    repair_cost = round_to_won(params.bid_price * rules.constant('auction_cost.repair_cost_rate'))
    lawyer_fee = round_to_won(rules.constant('auction_cost.lawyer_fee'))

    total = acquisition_tax + eviction_cost + moving_cost + repair_cost + lawyer_fee

    return AuctionCostResult(
        acquisition_tax=acquisition_tax,
        eviction_cost=eviction_cost,
        moving_cost=moving_cost,
        repair_cost=repair_cost,
        lawyer_fee=lawyer_fee,
        total_incidental_cost=total,
        total_investment=round_to_won(params.bid_price) + total,
    )
