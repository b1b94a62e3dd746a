"""경락잔금대출 계산기"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    as_percent,
    get_rule_engine,
    parse_input,
    round_to_won,
    traced,
)
from ...core.enums import CapitalRegion, CapitalRegionField, FinancialTier, FinancialTierField


class ForeclosureBorrowerType(str, Enum):
    """경락잔금대출 차주 유형"""
    HOMELESS = "무주택자"
    ONE_HOME = "1주택자"
    MULTI_HOME = "다주택자"


class ForeclosureLoanInput(CalculatorInput):
    """경락잔금대출 입력"""

    sale_price: Decimal = Field(..., gt=0, description="낙찰가")
    appraisal_price: Decimal = Field(..., gt=0, description="감정가")
    borrower_type: ForeclosureBorrowerType = Field(..., description="차주 유형")
    region: CapitalRegionField = Field(..., description="지역")
    financial_tier: FinancialTierField = Field(..., description="금융권")


@dataclass(frozen=True)
class ForeclosureLoanResult(ResultRecord):
    """경락잔금대출 결과

    Attributes:
        ltv_rate: 적용 LTV (%)
        collateral_base: 담보 기준가 (낙찰가와 감정가 중 낮은 금액)
        max_loan_amount: 최대 대출금액
        required_equity: 필요 자기자본 (낙찰가 − 대출금액)
    """
    ltv_rate: float
    collateral_base: int
    max_loan_amount: int
    required_equity: int


@traced
def calculate_foreclosure_loan(data: InputData) -> ForeclosureLoanResult:
    """낙찰가와 감정가 중 낮은 금액에 LTV를 적용하여 경락잔금대출 한도 계산"""
    params = parse_input(ForeclosureLoanInput, data)
    matrix = get_rule_engine().rate_matrix(
        'foreclosure_loan_rates', FinancialTier, ForeclosureBorrowerType, CapitalRegion
    )
    ltv = matrix.lookup(params.financial_tier, params.borrower_type, params.region)

    collateral_base = min(params.sale_price, params.appraisal_price)
    max_loan_amount = round_to_won(collateral_base * ltv)

    return ForeclosureLoanResult(
        ltv_rate=as_percent(ltv),
        collateral_base=round_to_won(collateral_base),
        max_loan_amount=max_loan_amount,
        required_equity=round_to_won(params.sale_price - max_loan_amount),
    )
