"""중도상환수수료 계산기"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import (
    BusinessRuleError,
    CalculatorInput,
    InputData,
    ResultRecord,
    parse_input,
    round_to,
    round_to_won,
    traced,
)
from ...core.numeric import HUNDRED


class EarlyRepaymentInput(CalculatorInput):
    """중도상환수수료 입력"""

    repayment_amount: Decimal = Field(..., gt=0, description="중도상환금액")
    fee_rate: Decimal = Field(..., ge=0, description="수수료율")
    remaining_days: int = Field(..., ge=0, description="대출잔여일수")
    total_days: int = Field(..., gt=0, description="대출전체기간")


@dataclass(frozen=True)
class EarlyRepaymentResult(ResultRecord):
    early_repayment_fee: int
    net_amount: int
    repayment_amount: int
    fee_rate: float
    day_ratio: float


@traced
def calculate_early_repayment(data: InputData) -> EarlyRepaymentResult:
    """중도상환수수료 = 상환금액 × 수수료율 × 잔여일수 / 전체일수

    Raises:
        InputValidationError: 입력값 검증 실패
        BusinessRuleError: 잔여일수가 전체기간보다 긴 경우
    """
    params = parse_input(EarlyRepaymentInput, data)
    if params.remaining_days > params.total_days:
        raise BusinessRuleError("대출잔여일수는 대출전체기간보다 클 수 없습니다.")

    day_ratio = Decimal(params.remaining_days) / Decimal(params.total_days)
    fee = round_to_won(params.repayment_amount * params.fee_rate / HUNDRED * day_ratio)
    amount = round_to_won(params.repayment_amount)

    return EarlyRepaymentResult(
        early_repayment_fee=fee,
        net_amount=amount - fee,
        repayment_amount=amount,
        fee_rate=float(params.fee_rate),
        day_ratio=round_to(day_ratio, 4),
    )
