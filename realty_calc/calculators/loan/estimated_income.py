"""신고소득 추정 계산기 (국민연금·건강보험 납부액 기준)"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

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


class IncomeType(str, Enum):
    NATIONAL_PENSION = "국민연금"
    HEALTH_INSURANCE = "건강보험"


class EstimatedIncomeInput(CalculatorInput):
    """신고소득 추정 입력"""

    income_type: IncomeType = Field(..., description="소득 추정 기준")
    monthly_payment: Decimal = Field(..., gt=0, description="월납입액")


@dataclass(frozen=True)
class EstimatedIncomeResult(ResultRecord):
    monthly_estimated_income: int
    annual_estimated_income: int
    applied_rate: float
    income_type: str


@traced
def calculate_estimated_income(data: InputData) -> EstimatedIncomeResult:
    """월 보험료를 보험료율로 나누어 월·연 소득을 추정"""
    params = parse_input(EstimatedIncomeInput, data)
    rate = get_rule_engine().constant(f'estimated_income.{params.income_type.value}')

    monthly = round_to_won(params.monthly_payment / rate)

    return EstimatedIncomeResult(
        monthly_estimated_income=monthly,
        annual_estimated_income=monthly * 12,
        applied_rate=as_percent(rate),
        income_type=params.income_type.value,
    )
