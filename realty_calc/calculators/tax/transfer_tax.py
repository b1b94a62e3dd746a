"""양도소득세 계산기 (주택)"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_FLOOR
from typing import Optional

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
from ...core.numeric import ONE, ZERO


class TransferTaxInput(CalculatorInput):
    """양도소득세 입력"""

    acquisition_price: Decimal = Field(..., ge=0, description="취득가액")
    transfer_price: Decimal = Field(..., ge=0, description="양도가액")
    expenses: Decimal = Field(..., ge=0, description="필요경비")
    holding_years: Decimal = Field(..., ge=0, description="보유기간")
    residence_years: Decimal = Field(..., ge=0, description="거주기간")
    housing_count: int = Field(..., ge=1, description="주택 수")
    is_single_household: bool = Field(..., description="1세대 여부")
    is_regulated: bool = Field(..., description="조정대상지역 여부")


@dataclass(frozen=True)
class TransferTaxResult(ResultRecord):
    """양도소득세 계산 결과

    비과세이거나 양도차익이 없으면 세액 항목이 모두 0이고 사유가 채워집니다.
    """
    capital_gain: int
    long_term_deduction: int
    long_term_deduction_rate: float
    taxable_income: int
    tax_base: int
    tax_rate: float
    progressive_deduction: int
    calculated_tax: int
    local_income_tax: int
    total_tax: int
    effective_rate: float
    is_tax_exempt: bool
    tax_exempt_reason: Optional[str] = None
    surcharge_rate: float = 0.0


def _whole_years(years: Decimal) -> int:
    return int(years.to_integral_value(rounding=ROUND_FLOOR))


def _zero_result(capital_gain: int, is_tax_exempt: bool, reason: str) -> TransferTaxResult:
    return TransferTaxResult(
        capital_gain=capital_gain,
        long_term_deduction=0,
        long_term_deduction_rate=0.0,
        taxable_income=0,
        tax_base=0,
        tax_rate=0.0,
        progressive_deduction=0,
        calculated_tax=0,
        local_income_tax=0,
        total_tax=0,
        effective_rate=0.0,
        is_tax_exempt=is_tax_exempt,
        tax_exempt_reason=reason,
    )


def is_exempt_single_home(params: TransferTaxInput) -> bool:
    """1세대 1주택 비과세 요건 (2년 보유·거주, 양도가액 12억 이하)"""
    rules = get_rule_engine()
    return (
        params.is_single_household
        and params.housing_count == 1
        and params.holding_years >= rules.constant('transfer_tax.exemption.min_holding_years')
        and params.residence_years >= rules.constant('transfer_tax.exemption.min_residence_years')
        and params.transfer_price <= rules.constant('transfer_tax.high_value_threshold')
    )


def long_term_deduction_rate(holding_years: Decimal, residence_years: Decimal, is_single_home_owner: bool) -> Decimal:
    """장기보유특별공제율

    Args:
        holding_years: 보유기간(년)
        residence_years: 거주기간(년)
        is_single_home_owner: 1세대 1주택 여부

    Returns:
        공제율 (0 ~ 0.80)
    """
    rules = get_rule_engine()
    prefix = 'transfer_tax.long_term_deduction'
    holding = _whole_years(holding_years)
    residence = _whole_years(residence_years)

    if holding < rules.constant(f'{prefix}.min_holding_years'):
        return ZERO

    if is_single_home_owner and residence >= rules.constant(f'{prefix}.single_home.min_residence_years'):
        holding_rate = min(
            holding * rules.constant(f'{prefix}.single_home.holding_annual_rate'),
            rules.constant(f'{prefix}.single_home.holding_max_rate'),
        )
        residence_rate = min(
            residence * rules.constant(f'{prefix}.single_home.residence_annual_rate'),
            rules.constant(f'{prefix}.single_home.residence_max_rate'),
        )
        return min(holding_rate + residence_rate, rules.constant(f'{prefix}.single_home.max_rate'))

    return min(
        holding * rules.constant(f'{prefix}.general.annual_rate'),
        rules.constant(f'{prefix}.general.max_rate'),
    )


def multi_home_surcharge_rate(housing_count: int, is_regulated: bool, holding_years: Decimal) -> Decimal:
    """조정대상지역 다주택자 중과 가산세율 (중과 배제 기간에는 0)"""
    rules = get_rule_engine()
    surcharge = rules.section('transfer_tax.multi_home_surcharge')
    if surcharge.get('suspended', False):
        return ZERO
    if not is_regulated or housing_count < 2:
        return ZERO
    if holding_years < rules.constant('transfer_tax.multi_home_surcharge.min_holding_years'):
        return ZERO
    if housing_count >= 3:
        return rules.constant('transfer_tax.multi_home_surcharge.three_or_more_homes')
    return rules.constant('transfer_tax.multi_home_surcharge.two_homes')


@traced
def calculate_transfer_tax(data: InputData) -> TransferTaxResult:
    """양도소득세 계산

    계산 순서:
        1. 1세대 1주택 비과세 확인
        2. 양도차익 (손실이면 0원 결과)
        3. 고가주택 안분 (12억 초과분만 과세)
        4. 장기보유특별공제, 기본공제
        5. 세율 적용 (1년 미만 단기세율, 그 외 기본세율 + 중과)
        6. 지방소득세

    Args:
        data: TransferTaxInput 또는 같은 필드의 딕셔너리

    Returns:
        양도소득세 계산 결과

    Raises:
        InputValidationError: 입력값 검증 실패
    """
    params = parse_input(TransferTaxInput, data)
    rules = get_rule_engine()

    if is_exempt_single_home(params):
        return _zero_result(0, True, rules.section('transfer_tax.exemption.reason'))

    raw_gain = round_to_won(params.transfer_price - params.acquisition_price - params.expenses)
    if raw_gain <= 0:
        return _zero_result(raw_gain, False, rules.section('transfer_tax.loss_reason'))

    is_single_home_owner = params.is_single_household and params.housing_count == 1
    threshold = rules.constant('transfer_tax.high_value_threshold')
    taxable_ratio = ONE
    if is_single_home_owner and params.transfer_price > threshold:
        taxable_ratio = (params.transfer_price - threshold) / params.transfer_price
    capital_gain = round_to_won(raw_gain * taxable_ratio)

    is_short_term = params.holding_years < ONE
    surcharge = ZERO if is_short_term else multi_home_surcharge_rate(
        params.housing_count, params.is_regulated, params.holding_years
    )

    # 중과 대상은 장기보유특별공제 배제
    if is_short_term or surcharge > ZERO:
        deduction_rate = ZERO
    else:
        deduction_rate = long_term_deduction_rate(
            params.holding_years, params.residence_years, is_single_home_owner
        )
    long_term_deduction = round_to_won(capital_gain * deduction_rate)

    taxable_income = capital_gain - long_term_deduction
    tax_base = max(0, taxable_income - round_to_won(rules.constant('transfer_tax.basic_deduction')))

    if is_short_term:
        tax_rate = rules.constant('transfer_tax.short_term_rate')
        progressive_deduction = ZERO
    else:
        bracket = rules.bracket_table('income_tax_brackets').find(tax_base)
        tax_rate = bracket.rate + surcharge
        progressive_deduction = bracket.subtracted_amount

    calculated_tax = round_to_won(max(ZERO, tax_base * tax_rate - progressive_deduction))
    local_income_tax = round_to_won(calculated_tax * rules.constant('transfer_tax.local_income_tax_rate'))
    total_tax = calculated_tax + local_income_tax

    return TransferTaxResult(
        capital_gain=capital_gain,
        long_term_deduction=long_term_deduction,
        long_term_deduction_rate=as_percent(deduction_rate),
        taxable_income=taxable_income,
        tax_base=tax_base,
        tax_rate=as_percent(tax_rate),
        progressive_deduction=round_to_won(progressive_deduction),
        calculated_tax=calculated_tax,
        local_income_tax=local_income_tax,
        total_tax=total_tax,
        effective_rate=percent_of(total_tax, raw_gain),
        is_tax_exempt=False,
        surcharge_rate=as_percent(surcharge),
    )
