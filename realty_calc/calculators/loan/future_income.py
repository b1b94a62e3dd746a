"""미래소득 계산기 (청년층 DSR 산정용 소득 증가율 적용)"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    RuleTableError,
    get_rule_engine,
    parse_input,
    round_to,
    round_to_won,
    to_decimal,
    traced,
)
from ...core.numeric import HUNDRED, ONE, ZERO


class FutureIncomeInput(CalculatorInput):
    """미래소득 입력"""

    current_income: Decimal = Field(..., gt=0, description="현재 연소득")
    age: int = Field(..., ge=20, le=70, description="만 나이")
    loan_term_years: Literal[10, 15, 20, 30] = Field(..., description="대출기간")


@dataclass(frozen=True)
class FutureIncomeResult(ResultRecord):
    """미래소득 결과

    Attributes:
        current_income: 현재 연소득
        growth_rate: 적용 증가율 (%)
        future_income: 미래 연소득
        income_increase: 증가액
        age_group: 연령대 (예: "25-29", 통계가 없으면 None)
        average_annual_income: 연령대 평균 연소득 (만원)
    """
    current_income: int
    growth_rate: float
    future_income: int
    income_increase: int
    age_group: Optional[str] = None
    average_annual_income: Optional[float] = None


def growth_rate_for(age: int, loan_term_years: int) -> Decimal:
    """나이대와 대출기간별 소득 증가율 (%)

    증가율 표에 없는 연령대(35세 이상)는 0%입니다.
    """
    for band in get_rule_engine().section('future_income.growth_rates'):
        if age <= band['max_age']:
            rates = band['rates']
            if loan_term_years not in rates:
                raise RuleTableError(f"미래소득 증가율 표에 {loan_term_years}년 항목이 없습니다.")
            return to_decimal(rates[loan_term_years])
    return ZERO


@traced
def calculate_future_income(data: InputData) -> FutureIncomeResult:
    """현재 소득에 연령대·대출기간별 증가율을 적용하여 미래소득 계산"""
    params = parse_input(FutureIncomeInput, data)
    growth_rate = growth_rate_for(params.age, params.loan_term_years)

    future_income = round_to_won(params.current_income * (ONE + growth_rate / HUNDRED))

    age_group = None
    average_annual_income = None
    for band in get_rule_engine().section('future_income.average_income'):
        if params.age <= band['max_age']:
            age_group = band['label']
            average_annual_income = band['yearly']
            break

    return FutureIncomeResult(
        current_income=round_to_won(params.current_income),
        growth_rate=round_to(growth_rate, 1),
        future_income=future_income,
        income_increase=round_to_won(future_income - params.current_income),
        age_group=age_group,
        average_annual_income=average_annual_income,
    )
