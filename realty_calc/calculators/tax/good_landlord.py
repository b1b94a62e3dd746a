"""착한 임대인 세액공제 계산기"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import (
    BusinessRuleError,
    CalculatorInput,
    InputData,
    ResultRecord,
    get_rule_engine,
    parse_input,
    round_to_won,
    traced,
)
from ...core.numeric import HUNDRED


class GoodLandlordInput(CalculatorInput):
    """착한 임대인 세액공제 입력"""

    previous_rent: Decimal = Field(..., ge=0, description="기존 월세")
    reduced_rent: Decimal = Field(..., ge=0, description="인하된 월세")
    months_reduced: int = Field(..., gt=0, le=12, description="인하 개월수")
    tax_rate: Decimal = Field(..., ge=6, le=45, description="세율")


@dataclass(frozen=True)
class GoodLandlordResult(ResultRecord):
    """착한 임대인 세액공제 결과

    Attributes:
        rent_reduction: 월 인하액
        total_reduction: 총 인하액
        tax_credit: 세액공제액 (인하액의 70%)
        actual_tax_savings: 실제 절세액 (공제액과 인하액 × 한계세율 중 작은 값)
        net_burden_reduction: 임대인 순부담 변화
    """
    rent_reduction: int
    total_reduction: int
    tax_credit: int
    actual_tax_savings: int
    net_burden_reduction: int


@traced
def calculate_good_landlord(data: InputData) -> GoodLandlordResult:
    """임대료 인하액에 대한 세액공제 효과 계산

    Raises:
        InputValidationError: 입력값 검증 실패
        BusinessRuleError: 인하된 월세가 기존 월세보다 큰 경우
    """
    params = parse_input(GoodLandlordInput, data)
    rules = get_rule_engine()

    rent_reduction = round_to_won(params.previous_rent - params.reduced_rent)
    if rent_reduction < 0:
        raise BusinessRuleError("인하된 월세가 기존 월세보다 클 수 없습니다.")

    total_reduction = rent_reduction * params.months_reduced
    tax_credit = round_to_won(total_reduction * rules.constant('good_landlord.tax_credit_rate'))
    theoretical_savings = round_to_won(total_reduction * params.tax_rate / HUNDRED)
    actual_tax_savings = min(tax_credit, theoretical_savings)

    return GoodLandlordResult(
        rent_reduction=rent_reduction,
        total_reduction=total_reduction,
        tax_credit=tax_credit,
        actual_tax_savings=actual_tax_savings,
        net_burden_reduction=tax_credit - total_reduction + actual_tax_savings,
    )
