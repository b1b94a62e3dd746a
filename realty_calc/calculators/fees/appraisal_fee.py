"""감정평가 수수료 계산기"""

from dataclasses import dataclass
from decimal import Decimal

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


class AppraisalFeeInput(CalculatorInput):
    appraisal_value: Decimal = Field(..., gt=0, description="감정평가액")


@dataclass(frozen=True)
class AppraisalFeeResult(ResultRecord):
    base_fee: int
    vat: int
    total_fee: int


@traced
def calculate_appraisal_fee(data: InputData) -> AppraisalFeeResult:
    """감정평가액 구간별 기본액 + 초과분 요율로 수수료 계산 (부가세 10% 별도)"""
    params = parse_input(AppraisalFeeInput, data)
    rules = get_rule_engine()

    base_fee = round_to_won(rules.stepped_schedule('appraisal_fee.schedule').amount(params.appraisal_value))
    vat = round_to_won(base_fee * rules.constant('appraisal_fee.vat_rate'))

    return AppraisalFeeResult(base_fee=base_fee, vat=vat, total_fee=base_fee + vat)
