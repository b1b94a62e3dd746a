"""건물 잔존가치 계산기 (정액법, 최소 잔존가치 10%)"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from pydantic import Field

from ...core import (
    BusinessRuleError,
    CalculatorInput,
    InputData,
    ResultRecord,
    as_percent,
    get_rule_engine,
    parse_input,
    round_to_won,
    traced,
)
from ...core.numeric import ONE


class StructureType(str, Enum):
    """건물 구조"""
    RC = "rc"                    # 철근콘크리트
    BRICK = "brick"              # 벽돌
    LIGHT_STEEL = "light-steel"  # 경량철골
    CONTAINER = "container"


class RemainingValueInput(CalculatorInput):
    original_value: Decimal = Field(..., gt=0, description="신축가액")
    elapsed_years: int = Field(..., ge=0, description="경과연수")
    structure_type: StructureType = Field(..., description="건물 구조")


@dataclass(frozen=True)
class RemainingValueResult(ResultRecord):
    """잔존가치 결과

    Attributes:
        original_value: 신축가액
        useful_life: 내용연수 (년)
        depreciation_amount: 감가상각 누계액
        remaining_value: 잔존가치
        depreciation_rate: 감가율 (%)
    """
    original_value: int
    useful_life: int
    depreciation_amount: int
    remaining_value: int
    depreciation_rate: float


@traced
def calculate_remaining_value(data: InputData) -> RemainingValueResult:
    """경과연수 / 내용연수 비율로 감가하고 신축가액의 10%를 하한으로 적용

    Raises:
        BusinessRuleError: 경과연수가 내용연수를 초과하는 경우
    """
    params = parse_input(RemainingValueInput, data)
    rules = get_rule_engine()
    useful_life = int(rules.constant(f'remaining_value.useful_life.{params.structure_type.value}'))

    if params.elapsed_years > useful_life:
        raise BusinessRuleError(f"경과연수는 내용연수 {useful_life}년을 초과할 수 없습니다.")

    # 감가율은 소수 넷째 자리에서 반올림
    depreciation = (Decimal(params.elapsed_years) / useful_life).quantize(Decimal("0.0001"), rounding=ROUND_HALF_UP)
    remaining = round_to_won(params.original_value * (ONE - depreciation))
    minimum = round_to_won(params.original_value * rules.constant('remaining_value.minimum_residual_rate'))
    remaining = max(remaining, minimum)
    original = round_to_won(params.original_value)

    return RemainingValueResult(
        original_value=original,
        useful_life=useful_life,
        depreciation_amount=original - remaining,
        remaining_value=remaining,
        depreciation_rate=as_percent(depreciation),
    )
