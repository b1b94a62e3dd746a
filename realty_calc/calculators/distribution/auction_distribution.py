"""경매 배당 계산기

매각대금을 경매비용 → 선순위채권 → 임차보증금 → 후순위채권 순으로 배당하고
남는 금액은 소유자에게 돌려줍니다.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Tuple

from pydantic import Field

from ...core import CalculatorInput, InputData, ResultRecord, parse_input, round_to_won, traced

OWNER_RESIDUAL = "소유자 잔여금"


class AuctionDistributionInput(CalculatorInput):
    """경매 배당 입력"""

    sale_price: Decimal = Field(..., ge=0, description="매각대금")
    auction_cost: Decimal = Field(Decimal("0"), ge=0, description="경매비용")
    senior_claim: Decimal = Field(Decimal("0"), ge=0, description="선순위채권액")
    tenant_deposit: Decimal = Field(Decimal("0"), ge=0, description="임차보증금")
    junior_claim: Decimal = Field(Decimal("0"), ge=0, description="후순위채권액")


@dataclass(frozen=True)
class DistributionItem(ResultRecord):
    """배당 항목

    Attributes:
        name: 항목 이름
        claim: 청구액
        distributed: 배당액
        satisfied: 전액 배당 여부
        shortfall: 미배당액
    """
    name: str
    claim: int
    distributed: int
    satisfied: bool
    shortfall: int


@dataclass(frozen=True)
class AuctionDistributionResult(ResultRecord):
    total_sale_price: int
    total_distributed: int
    distributions: Tuple[DistributionItem, ...]


@traced
def calculate_auction_distribution(data: InputData) -> AuctionDistributionResult:
    """우선순위대로 배당

    금액은 배당 전에 원 단위로 반올림하므로 배당액 합계는 매각대금과 정확히 같습니다.
    """
    params = parse_input(AuctionDistributionInput, data)
    sale_price = round_to_won(params.sale_price)
    claims = [
        ("경매비용", params.auction_cost),
        ("선순위채권", params.senior_claim),
        ("임차보증금", params.tenant_deposit),
        ("후순위채권", params.junior_claim),
    ]

    remaining = sale_price
    items: List[DistributionItem] = []
    for name, amount in claims:
        claim = round_to_won(amount)
        distributed = min(remaining, claim)
        remaining -= distributed
        items.append(DistributionItem(
            name=name,
            claim=claim,
            distributed=distributed,
            satisfied=distributed >= claim,
            shortfall=claim - distributed,
        ))

    items.append(DistributionItem(
        name=OWNER_RESIDUAL,
        claim=0,
        distributed=remaining,
        satisfied=True,
        shortfall=0,
    ))

    return AuctionDistributionResult(
        total_sale_price=sale_price,
        total_distributed=sum(item.distributed for item in items),
        distributions=tuple(items),
    )
