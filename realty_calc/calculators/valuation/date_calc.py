"""기간 계산기 (일·월·년)"""

import datetime
from dataclasses import dataclass

from pydantic import Field, model_validator

from ...core import CalculatorInput, InputData, ResultRecord, get_rule_engine, parse_input, round_to, traced


class DateCalcInput(CalculatorInput):
    start_date: datetime.date = Field(..., description="시작일")
    end_date: datetime.date = Field(..., description="종료일")

    @model_validator(mode="after")
    def _check_order(self) -> "DateCalcInput":
        if self.end_date < self.start_date:
            raise ValueError("종료일은 시작일보다 이후여야 합니다.")
        return self


@dataclass(frozen=True)
class DateCalcResult(ResultRecord):
    total_days: int
    total_months: float
    total_years: float


@traced
def calculate_date_diff(data: InputData) -> DateCalcResult:
    """두 날짜 사이 일수와 평균 월(30.44일)·년(365.25일) 환산"""
    params = parse_input(DateCalcInput, data)
    rules = get_rule_engine()
    days = (params.end_date - params.start_date).days

    return DateCalcResult(
        total_days=days,
        total_months=round_to(days / rules.constant('date_calc.days_per_month'), 1),
        total_years=round_to(days / rules.constant('date_calc.days_per_year'), 2),
    )
