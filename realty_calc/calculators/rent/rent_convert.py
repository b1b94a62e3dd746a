"""전월세 전환 계산기

전환율 공식: 월세 = (전세보증금 − 월세보증금) × 전환율 / 12
"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field, model_validator

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    parse_input,
    percent_of,
    round_to,
    round_to_won,
    traced,
)
from ...core.numeric import HUNDRED, MONTHS_PER_YEAR


class JeonseToMonthlyInput(CalculatorInput):
    """전세 → 월세 전환 입력"""

    jeonse_deposit: Decimal = Field(..., ge=0, description="전세보증금")
    monthly_deposit: Decimal = Field(..., ge=0, description="월세보증금")
    conversion_rate: Decimal = Field(..., gt=0, description="전환율")

    @model_validator(mode="after")
    def _check_deposit_order(self) -> "JeonseToMonthlyInput":
        if self.monthly_deposit >= self.jeonse_deposit:
            raise ValueError("월세보증금은 전세보증금보다 작아야 합니다.")
        return self


class MonthlyToJeonseInput(CalculatorInput):
    """월세 → 전세 전환 입력"""

    monthly_deposit: Decimal = Field(..., ge=0, description="월세보증금")
    monthly_rent: Decimal = Field(..., gt=0, description="월세")
    conversion_rate: Decimal = Field(..., gt=0, description="전환율")


class ConversionRateInput(CalculatorInput):
    """전환율 역산 입력"""

    jeonse_deposit: Decimal = Field(..., gt=0, description="전세보증금")
    monthly_deposit: Decimal = Field(..., ge=0, description="월세보증금")
    monthly_rent: Decimal = Field(..., gt=0, description="월세")

    @model_validator(mode="after")
    def _check_deposit_order(self) -> "ConversionRateInput":
        if self.monthly_deposit >= self.jeonse_deposit:
            raise ValueError("월세보증금은 전세보증금보다 작아야 합니다.")
        return self


@dataclass(frozen=True)
class MonthlyRentResult(ResultRecord):
    monthly_rent: int
    conversion_rate: float


@dataclass(frozen=True)
class JeonseEquivalentResult(ResultRecord):
    jeonse_equivalent: int
    conversion_rate: float


@dataclass(frozen=True)
class ConversionRateResult(ResultRecord):
    """전환율 역산 결과

    Attributes:
        conversion_rate: 전환율 (연 %)
        deposit_difference: 전세보증금 − 월세보증금
        annual_rent: 연 월세 합계
    """
    conversion_rate: float
    deposit_difference: int
    annual_rent: int


@traced
def convert_jeonse_to_monthly(data: InputData) -> MonthlyRentResult:
    """전세보증금을 월세로 전환

    Raises:
        InputValidationError: 월세보증금이 전세보증금 이상인 경우 등
    """
    params = parse_input(JeonseToMonthlyInput, data)
    rate = params.conversion_rate / HUNDRED
    monthly_rent = round_to_won((params.jeonse_deposit - params.monthly_deposit) * rate / MONTHS_PER_YEAR)
    return MonthlyRentResult(monthly_rent=monthly_rent, conversion_rate=float(params.conversion_rate))


@traced
def convert_monthly_to_jeonse(data: InputData) -> JeonseEquivalentResult:
    """월세 조건을 같은 가치의 전세보증금으로 환산"""
    params = parse_input(MonthlyToJeonseInput, data)
    rate = params.conversion_rate / HUNDRED
    jeonse = round_to_won(params.monthly_deposit + params.monthly_rent * MONTHS_PER_YEAR / rate)
    return JeonseEquivalentResult(jeonse_equivalent=jeonse, conversion_rate=float(params.conversion_rate))


@traced
def calculate_conversion_rate(data: InputData) -> ConversionRateResult:
    """전세·월세 조건에서 적용된 전환율 역산"""
    params = parse_input(ConversionRateInput, data)
    difference = params.jeonse_deposit - params.monthly_deposit
    annual_rent = params.monthly_rent * MONTHS_PER_YEAR
    return ConversionRateResult(
        conversion_rate=percent_of(annual_rent, difference),
        deposit_difference=round_to_won(difference),
        annual_rent=round_to_won(annual_rent),
    )
