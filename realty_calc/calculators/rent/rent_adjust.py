"""보증금·월세 조정 계산기

보증금을 바꾸면 전환율로 월세를, 월세를 바꾸면 보증금을 다시 계산합니다.
조정 결과가 음수가 되면 0으로 표시하고, 차액은 계산값 그대로 보고합니다.
"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import CalculatorInput, InputData, ResultRecord, parse_input, round_to_won, traced
from ...core.numeric import HUNDRED, MONTHS_PER_YEAR


class _RentTerms(CalculatorInput):
    current_deposit: Decimal = Field(..., ge=0, description="현재 보증금")
    current_rent: Decimal = Field(..., ge=0, description="현재 월세")
    conversion_rate: Decimal = Field(..., gt=0, description="전환율")


class DepositAdjustInput(_RentTerms):
    new_deposit: Decimal = Field(..., ge=0, description="변경 보증금")


class RentAdjustInput(_RentTerms):
    new_rent: Decimal = Field(..., ge=0, description="변경 월세")


@dataclass(frozen=True)
class RentAdjustResult(ResultRecord):
    new_deposit: int
    new_rent: int
    deposit_diff: int
    rent_diff: int


@traced
def adjust_deposit_to_rent(data: InputData) -> RentAdjustResult:
    """보증금 변경에 따른 새 월세"""
    params = parse_input(DepositAdjustInput, data)
    rate = params.conversion_rate / HUNDRED
    current_rent = round_to_won(params.current_rent)

    deposit_diff = params.new_deposit - params.current_deposit
    new_rent = round_to_won(params.current_rent - deposit_diff * rate / MONTHS_PER_YEAR)

    return RentAdjustResult(
        new_deposit=round_to_won(params.new_deposit),
        new_rent=max(0, new_rent),
        deposit_diff=round_to_won(deposit_diff),
        rent_diff=new_rent - current_rent,
    )


@traced
def adjust_rent_to_deposit(data: InputData) -> RentAdjustResult:
    """월세 변경에 따른 새 보증금"""
    params = parse_input(RentAdjustInput, data)
    rate = params.conversion_rate / HUNDRED
    current_deposit = round_to_won(params.current_deposit)

    rent_diff = params.new_rent - params.current_rent
    new_deposit = round_to_won(params.current_deposit - rent_diff * MONTHS_PER_YEAR / rate)

    return RentAdjustResult(
        new_deposit=max(0, new_deposit),
        new_rent=round_to_won(params.new_rent),
        deposit_diff=new_deposit - current_deposit,
        rent_diff=round_to_won(rent_diff),
    )
