"""증여세 계산기"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

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


class DonorRelation(str, Enum):
    """증여자와의 관계"""
    SPOUSE = "spouse"
    DIRECT_ASCENDANT = "direct-ascendant"
    DIRECT_DESCENDANT = "direct-descendant"
    RELATIVE = "relative"
    OTHER = "other"


class GiftTaxInput(CalculatorInput):
    """증여세 입력"""

    gift_value: Decimal = Field(..., ge=0, description="증여재산가액")
    donor_relation: DonorRelation = Field(..., description="증여자와의 관계")


@dataclass(frozen=True)
class GiftTaxResult(ResultRecord):
    """증여세 계산 결과"""
    gift_value: int
    exemption_limit: int
    taxable_income: int
    calculated_tax: int
    reporting_discount: int
    final_tax: int


@traced
def calculate_gift_tax(data: InputData) -> GiftTaxResult:
    """증여세 계산

    관계별 증여재산공제 후 누진세율을 적용하고, 신고세액공제 3%를 차감합니다.
    """
    params = parse_input(GiftTaxInput, data)
    rules = get_rule_engine()

    gift_value = round_to_won(params.gift_value)
    exemption_limit = round_to_won(rules.constant(f'gift_tax.exemption_limits.{params.donor_relation.value}'))
    taxable_income = max(0, gift_value - exemption_limit)

    calculated_tax = round_to_won(rules.bracket_table('inheritance_gift_brackets').tax(taxable_income))
    reporting_discount = round_to_won(calculated_tax * rules.constant('gift_tax.reporting_discount_rate'))

    return GiftTaxResult(
        gift_value=gift_value,
        exemption_limit=exemption_limit,
        taxable_income=taxable_income,
        calculated_tax=calculated_tax,
        reporting_discount=reporting_discount,
        final_tax=calculated_tax - reporting_discount,
    )
