"""임대료 인상 계산기 (주택임대차보호법 5% 상한)"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import CalculatorInput, InputData, ResultRecord, parse_input, round_to_won, traced
from ...core.numeric import HUNDRED, MONTHS_PER_YEAR, ONE


class RentIncreaseInput(CalculatorInput):
    """임대료 인상 입력"""

    current_deposit: Decimal = Field(..., ge=0, description="현재 보증금")
    current_rent: Decimal = Field(..., ge=0, description="현재 월세")
    conversion_rate: Decimal = Field(..., gt=0, description="전환율")
    increase_rate: Decimal = Field(..., gt=0, le=5, description="인상률")


@dataclass(frozen=True)
class RentIncreaseOption(ResultRecord):
    """인상 방식별 결과

    Attributes:
        method_name: 방식 이름
        new_deposit: 인상 후 보증금
        new_rent: 인상 후 월세
        deposit_increase: 보증금 인상액
        rent_increase: 월세 인상액
        total_increase: 총 인상액 (월세 인상분은 12개월 환산)
    """
    method_name: str
    new_deposit: int
    new_rent: int
    deposit_increase: int
    rent_increase: int
    total_increase: int


@dataclass(frozen=True)
class RentIncreaseResult(ResultRecord):
    method1: RentIncreaseOption
    method2: RentIncreaseOption


@traced
def calculate_rent_increase(data: InputData) -> RentIncreaseResult:
    """두 가지 인상 방식 비교

    방식 1 (전월세전환방식): 월세를 보증금으로 환산한 총액의 인상률만큼 보증금만 인상
    방식 2 (각각인상방식): 보증금과 월세를 각각 인상률만큼 인상
    """
    params = parse_input(RentIncreaseInput, data)
    rate = params.conversion_rate / HUNDRED
    increase = params.increase_rate / HUNDRED
    current_deposit = round_to_won(params.current_deposit)
    current_rent = round_to_won(params.current_rent)

    converted_deposit = round_to_won(params.current_deposit + params.current_rent * MONTHS_PER_YEAR / rate)
    increase_limit = round_to_won(converted_deposit * increase)
    method1_deposit = round_to_won(params.current_deposit + increase_limit)
    method1_increase = method1_deposit - current_deposit

    method2_deposit = round_to_won(params.current_deposit * (ONE + increase))
    method2_rent = round_to_won(params.current_rent * (ONE + increase))
    method2_deposit_increase = method2_deposit - current_deposit
    method2_rent_increase = method2_rent - current_rent

    return RentIncreaseResult(
        method1=RentIncreaseOption(
            method_name="전월세전환방식",
            new_deposit=method1_deposit,
            new_rent=current_rent,
            deposit_increase=method1_increase,
            rent_increase=0,
            total_increase=method1_increase,
        ),
        method2=RentIncreaseOption(
            method_name="각각인상방식",
            new_deposit=method2_deposit,
            new_rent=method2_rent,
            deposit_increase=method2_deposit_increase,
            rent_increase=method2_rent_increase,
            total_increase=round_to_won(method2_deposit_increase + method2_rent_increase * MONTHS_PER_YEAR),
        ),
    )
