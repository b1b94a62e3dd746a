"""종합소득세 계산기 (임대소득 포함)"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    get_rule_engine,
    parse_input,
    percent_of,
    round_to_won,
    traced,
)


class IncomeTaxInput(CalculatorInput):
    """종합소득세 입력"""

    rental_income: Decimal = Field(..., ge=0, description="임대소득")
    other_income: Decimal = Field(..., ge=0, description="기타소득")
    expenses: Decimal = Field(..., ge=0, description="필요경비")
    dependents: int = Field(..., ge=0, description="부양가족 수")


@dataclass(frozen=True)
class IncomeTaxResult(ResultRecord):
    """종합소득세 계산 결과"""
    total_income: int
    taxable_income: int
    calculated_tax: int
    local_income_tax: int
    total_tax: int
    effective_rate: float


@traced
def calculate_income_tax(data: InputData) -> IncomeTaxResult:
    """종합소득세 계산

    기본공제는 본인과 부양가족 1인당 150만원입니다.
    """
    params = parse_input(IncomeTaxInput, data)
    rules = get_rule_engine()

    total_income = round_to_won(params.rental_income + params.other_income - params.expenses)
    basic_deduction = round_to_won(
        rules.constant('income_tax.basic_deduction_per_person') * (1 + params.dependents)
    )
    taxable_income = max(0, total_income - basic_deduction)

    calculated_tax = round_to_won(rules.bracket_table('income_tax_brackets').tax(taxable_income))
    local_income_tax = round_to_won(calculated_tax * rules.constant('income_tax.local_income_tax_rate'))
    total_tax = calculated_tax + local_income_tax

    return IncomeTaxResult(
        total_income=total_income,
        taxable_income=taxable_income,
        calculated_tax=calculated_tax,
        local_income_tax=local_income_tax,
        total_tax=total_tax,
        effective_rate=percent_of(total_tax, total_income),
    )
