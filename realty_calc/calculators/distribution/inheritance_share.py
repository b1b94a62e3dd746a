"""법정상속분 계산기 (배우자 1.5 : 자녀 1)"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Tuple

from pydantic import Field

from ...core import (
    BusinessRuleError,
    CalculatorInput,
    InputData,
    ResultRecord,
    get_rule_engine,
    parse_input,
    percent_of,
    round_to_won,
    traced,
)
from ...core.numeric import ZERO


class InheritanceShareInput(CalculatorInput):
    total_assets: Decimal = Field(..., gt=0, description="상속재산가액")
    has_spouse: bool = Field(..., description="배우자 유무")
    number_of_children: int = Field(..., ge=0, description="자녀수")


@dataclass(frozen=True)
class HeirShare(ResultRecord):
    heir: str
    share_ratio: float
    amount: int


@dataclass(frozen=True)
class InheritanceShareResult(ResultRecord):
    shares: Tuple[HeirShare, ...]


@traced
def calculate_inheritance_share(data: InputData) -> InheritanceShareResult:
    """상속인별 법정상속분과 금액 계산

    Raises:
        BusinessRuleError: 배우자와 자녀가 모두 없는 경우
    """
    params = parse_input(InheritanceShareInput, data)
    if not params.has_spouse and params.number_of_children == 0:
        raise BusinessRuleError("상속인이 없습니다.")

    rules = get_rule_engine()
    heirs: List[Tuple[str, Decimal]] = []
    if params.has_spouse:
        heirs.append(("배우자", rules.constant('inheritance_share.spouse_weight')))
    child_weight = rules.constant('inheritance_share.child_weight')
    heirs.extend((f"자녀 {index}", child_weight) for index in range(1, params.number_of_children + 1))

    total_weight = sum((weight for _, weight in heirs), ZERO)
    shares = tuple(
        HeirShare(
            heir=heir,
            share_ratio=percent_of(weight, total_weight),
            amount=round_to_won(params.total_assets * weight / total_weight),
        )
        for heir, weight in heirs
    )
    return InheritanceShareResult(shares=shares)
