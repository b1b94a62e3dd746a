"""명도 비용 계산기 (강제집행)"""

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


class EvictionRegion(str, Enum):
    SEOUL = "서울"
    GYEONGGI = "경기"
    OTHER = "기타"


class EvictionCostInput(CalculatorInput):
    area: Decimal = Field(..., gt=0, description="부동산 면적")
    region: EvictionRegion = Field(..., description="지역")


@dataclass(frozen=True)
class EvictionCostResult(ResultRecord):
    application_fee: int
    delivery_fee: int
    executor_fee: int
    execution_cost: int
    storage_fee: int
    total_cost: int


@traced
def calculate_eviction_cost(data: InputData) -> EvictionCostResult:
    """신청·송달·집행관 수수료와 면적별 집행비용, 보관비용 합산

    현재 비용표는 지역 구분 없이 동일합니다.
    """
    params = parse_input(EvictionCostInput, data)
    rules = get_rule_engine()

    fees = {
        name: round_to_won(rules.constant(f'eviction_cost.{name}'))
        for name in ('application_fee', 'delivery_fee', 'executor_fee', 'storage_fee')
    }
    execution_cost = round_to_won(rules.step_table('eviction_cost.execution_cost').find(params.area).value)

    return EvictionCostResult(
        execution_cost=execution_cost,
        total_cost=sum(fees.values()) + execution_cost,
        **fees,
    )
