"""종합부동산세 계산기 (주택분)"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    as_percent,
    get_rule_engine,
    parse_input,
    percent_of,
    round_to_won,
    traced,
)
from ...core.numeric import ZERO


class ComprehensiveTaxInput(CalculatorInput):
    """종합부동산세 입력"""

    total_assessed_value: Decimal = Field(..., gt=0, description="공시가격 합산액")
    is_single_home_owner: bool = Field(..., description="1세대 1주택자 여부")
    owner_age: Decimal = Field(..., ge=0, le=120, description="소유자 나이")
    holding_years: Decimal = Field(..., ge=0, le=100, description="보유기간")


@dataclass(frozen=True)
class ComprehensiveTaxResult(ResultRecord):
    """종합부동산세 계산 결과

    Attributes:
        deduction: 기본공제액
        tax_base: 과세표준
        calculated_tax: 산출세액
        age_deduction_rate: 고령자 공제율 (%)
        holding_deduction_rate: 장기보유 공제율 (%)
        total_deduction_rate: 합산 공제율 (%, 상한 적용)
        tax_deduction: 세액공제액
        comprehensive_tax: 종합부동산세
        local_education_tax: 농어촌특별세 (종부세의 20%)
        total_tax: 합계
        effective_rate: 실효세율 (%, 소수점 셋째 자리)
    """
    deduction: int
    tax_base: int
    calculated_tax: int
    age_deduction_rate: float
    holding_deduction_rate: float
    total_deduction_rate: float
    tax_deduction: int
    comprehensive_tax: int
    local_education_tax: int
    total_tax: int
    effective_rate: float


@traced
def calculate_comprehensive_tax(data: InputData) -> ComprehensiveTaxResult:
    """종합부동산세 계산

    1세대 1주택자는 고령자 공제와 장기보유 공제를 합산하되 80%를 넘지 않습니다.

    Args:
        data: ComprehensiveTaxInput 또는 같은 필드의 딕셔너리

    Returns:
        종합부동산세 계산 결과
    """
    params = parse_input(ComprehensiveTaxInput, data)
    rules = get_rule_engine()

    if params.is_single_home_owner:
        deduction = round_to_won(rules.constant('comprehensive_tax.single_home_deduction'))
    else:
        deduction = round_to_won(rules.constant('comprehensive_tax.general_deduction'))

    taxable_value = max(ZERO, params.total_assessed_value - deduction)
    tax_base = round_to_won(taxable_value * rules.constant('comprehensive_tax.fair_market_ratio'))
    calculated_tax = round_to_won(rules.bracket_table('comprehensive_tax.brackets').tax(tax_base))

    age_rate = holding_rate = total_rate = ZERO
    tax_deduction = 0
    if params.is_single_home_owner:
        age_rate = rules.step_table('comprehensive_tax.age_credit').find(params.owner_age).value
        holding_rate = rules.step_table('comprehensive_tax.holding_credit').find(params.holding_years).value
        total_rate = min(age_rate + holding_rate, rules.constant('comprehensive_tax.max_combined_credit_rate'))
        tax_deduction = round_to_won(calculated_tax * total_rate)

    comprehensive_tax = calculated_tax - tax_deduction
    rural_tax = round_to_won(comprehensive_tax * rules.constant('comprehensive_tax.rural_special_tax_rate'))
    total_tax = comprehensive_tax + rural_tax

    return ComprehensiveTaxResult(
        deduction=deduction,
        tax_base=tax_base,
        calculated_tax=calculated_tax,
        age_deduction_rate=as_percent(age_rate),
        holding_deduction_rate=as_percent(holding_rate),
        total_deduction_rate=as_percent(total_rate),
        tax_deduction=tax_deduction,
        comprehensive_tax=comprehensive_tax,
        local_education_tax=rural_tax,
        total_tax=total_tax,
        effective_rate=percent_of(total_tax, params.total_assessed_value, digits=3),
    )
