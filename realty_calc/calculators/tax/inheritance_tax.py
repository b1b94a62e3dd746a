"""상속세 계산기"""

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
from ...core.numeric import ZERO


class InheritanceTaxInput(CalculatorInput):
    """상속세 입력"""

    estate_value: Decimal = Field(..., ge=0, description="상속재산가액")
    has_spouse: bool = Field(..., description="배우자 유무")
    children_count: int = Field(..., ge=0, description="자녀 수")
    debt_amount: Decimal = Field(..., ge=0, description="채무액")


@dataclass(frozen=True)
class InheritanceTaxResult(ResultRecord):
    """상속세 계산 결과

    Attributes:
        estate_value: 순상속재산가액 (채무 차감 후)
        total_deduction: 상속공제 합계
        taxable_income: 과세표준
        calculated_tax: 산출세액
        reporting_discount: 신고세액공제
        final_tax: 납부세액
    """
    estate_value: int
    total_deduction: int
    taxable_income: int
    calculated_tax: int
    reporting_discount: int
    final_tax: int


@traced
def calculate_inheritance_tax(data: InputData) -> InheritanceTaxResult:
    """상속세 계산

    상속공제는 일괄공제(5억)와 기초공제(2억) + 배우자공제(5억) 중 큰 금액입니다.
    """
    params = parse_input(InheritanceTaxInput, data)
    rules = get_rule_engine()

    net_estate = round_to_won(max(ZERO, params.estate_value - params.debt_amount))

    basic_with_spouse = rules.constant('inheritance_tax.basic_deduction')
    if params.has_spouse:
        basic_with_spouse += rules.constant('inheritance_tax.spouse_deduction')
    total_deduction = round_to_won(max(rules.constant('inheritance_tax.lump_sum_deduction'), basic_with_spouse))

    taxable_income = max(0, net_estate - total_deduction)
    calculated_tax = round_to_won(rules.bracket_table('inheritance_gift_brackets').tax(taxable_income))
    reporting_discount = round_to_won(calculated_tax * rules.constant('inheritance_tax.reporting_discount_rate'))

    return InheritanceTaxResult(
        estate_value=net_estate,
        total_deduction=total_deduction,
        taxable_income=taxable_income,
        calculated_tax=calculated_tax,
        reporting_discount=reporting_discount,
        final_tax=calculated_tax - reporting_discount,
    )
