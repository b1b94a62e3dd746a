"""주택임대소득 분리과세 계산기"""

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


class RentalIncomeTaxInput(CalculatorInput):
    """임대소득세 입력"""

    monthly_rent: Decimal = Field(..., ge=0, description="월세수입")
    deposit: Decimal = Field(..., ge=0, description="보증금")
    rental_months: int = Field(..., gt=0, description="임대기간")
    is_registered: bool = Field(..., description="임대사업자 등록 여부")


@dataclass(frozen=True)
class RentalIncomeTaxResult(ResultRecord):
    """임대소득세 계산 결과"""
    annual_income: int
    expenses: int
    basic_deduction: int
    taxable_income: int
    calculated_tax: int


@traced
def calculate_rental_income_tax(data: InputData) -> RentalIncomeTaxResult:
    """분리과세(14%) 임대소득세 계산

    연간 수입금액은 월세의 12개월분으로 환산합니다.
    등록 임대사업자는 필요경비율 60%와 기본공제 400만원,
    미등록은 50%와 200만원을 적용합니다.
    """
    params = parse_input(RentalIncomeTaxInput, data)
    rules = get_rule_engine()
    kind = 'registered' if params.is_registered else 'unregistered'

    annual_income = round_to_won(params.monthly_rent * params.rental_months * 12 / params.rental_months)
    expenses = round_to_won(annual_income * rules.constant(f'rental_income_tax.{kind}.expense_rate'))
    basic_deduction = round_to_won(rules.constant(f'rental_income_tax.{kind}.basic_deduction'))
    taxable_income = max(0, annual_income - expenses - basic_deduction)

    return RentalIncomeTaxResult(
        annual_income=annual_income,
        expenses=expenses,
        basic_deduction=basic_deduction,
        taxable_income=taxable_income,
        calculated_tax=round_to_won(taxable_income * rules.constant('rental_income_tax.separate_tax_rate')),
    )
