"""임대 수익률 계산기"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import CalculatorInput, InputData, ResultRecord, parse_input, percent_of, round_to_won, traced
from ...core.numeric import HUNDRED, MONTHS_PER_YEAR


class RentalYieldInput(CalculatorInput):
    """임대 수익률 입력"""

    purchase_price: Decimal = Field(..., ge=0, description="매매가")
    other_costs: Decimal = Field(Decimal("0"), ge=0, description="기타비용")
    loan_amount: Decimal = Field(Decimal("0"), ge=0, description="대출금")
    loan_rate: Decimal = Field(Decimal("0"), ge=0, le=100, description="대출이율")
    deposit: Decimal = Field(Decimal("0"), ge=0, description="보증금")
    monthly_rent: Decimal = Field(..., ge=0, description="월세")
    annual_expenses: Decimal = Field(Decimal("0"), ge=0, description="연간운영비용")


@dataclass(frozen=True)
class RentalYieldResult(ResultRecord):
    """임대 수익률 결과

    Attributes:
        total_investment: 총 투자금액 (매매가 + 기타비용)
        equity: 실투자금 (총 투자금액 − 대출금 − 보증금)
        annual_rental_income: 연 임대수입
        annual_loan_interest: 연 대출이자
        net_income: 연 순수익
        gross_yield: 표면 수익률 (%)
        roi: 실투자금 대비 수익률 (%), 실투자금이 0 이하이면 0
        cap_rate: 자본환원율 (%)
    """
    total_investment: int
    equity: int
    annual_rental_income: int
    annual_loan_interest: int
    net_income: int
    gross_yield: float
    roi: float
    cap_rate: float


@traced
def calculate_rental_yield(data: InputData) -> RentalYieldResult:
    params = parse_input(RentalYieldInput, data)

    total_investment = round_to_won(params.purchase_price + params.other_costs)
    equity = round_to_won(total_investment - params.loan_amount - params.deposit)
    annual_rental_income = round_to_won(params.monthly_rent * MONTHS_PER_YEAR)
    annual_loan_interest = round_to_won(params.loan_amount * params.loan_rate / HUNDRED)
    net_income = round_to_won(annual_rental_income - annual_loan_interest - params.annual_expenses)

    return RentalYieldResult(
        total_investment=total_investment,
        equity=equity,
        annual_rental_income=annual_rental_income,
        annual_loan_interest=annual_loan_interest,
        net_income=net_income,
        gross_yield=percent_of(annual_rental_income, total_investment),
        roi=percent_of(net_income, equity),
        cap_rate=percent_of(annual_rental_income - params.annual_expenses, total_investment),
    )
