"""부동산 투자 수익률 계산기"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field

from ...core import (
    CalculatorInput,
    InputData,
    ResultRecord,
    parse_input,
    percent_of,
    round_to,
    round_to_won,
    to_decimal,
    traced,
)
from ...core.numeric import HUNDRED


class InvestmentReturnInput(CalculatorInput):
    """투자 수익률 입력"""

    purchase_price: Decimal = Field(..., gt=0, description="매입가")
    current_price: Decimal = Field(..., ge=0, description="현재 시세")
    total_investment: Decimal = Field(..., gt=0, description="총 투자금")
    annual_rental_income: Decimal = Field(Decimal("0"), ge=0, description="연 임대수익")
    annual_expenses: Decimal = Field(Decimal("0"), ge=0, description="연 비용")
    holding_years: Decimal = Field(..., ge=1, le=100, description="보유기간")
    loan_amount: Decimal = Field(Decimal("0"), ge=0, description="대출금")
    loan_interest_rate: Decimal = Field(Decimal("0"), ge=0, le=30, description="대출 금리")


@dataclass(frozen=True)
class InvestmentReturnResult(ResultRecord):
    """투자 수익률 결과

    Attributes:
        total_gain: 시세차익
        net_rental_income: 연 순임대수익
        total_rental_income: 보유기간 순임대수익
        annual_loan_interest: 연 대출이자
        total_loan_interest: 보유기간 대출이자
        total_profit: 총 순수익
        roi: 총 투자금 대비 수익률 (%)
        annualized_return: 연환산 수익률 (%)
        cap_rate: 자본환원율 (%)
        leverage_effect: 레버리지 배율 (매입가 / 총 투자금)
    """
    total_gain: int
    net_rental_income: int
    total_rental_income: int
    annual_loan_interest: int
    total_loan_interest: int
    total_profit: int
    roi: float
    annualized_return: float
    cap_rate: float
    leverage_effect: float


@traced
def calculate_investment_return(data: InputData) -> InvestmentReturnResult:
    params = parse_input(InvestmentReturnInput, data)

    total_gain = round_to_won(params.current_price - params.purchase_price)
    net_rental_income = round_to_won(params.annual_rental_income - params.annual_expenses)
    total_rental_income = round_to_won(net_rental_income * params.holding_years)
    annual_loan_interest = round_to_won(params.loan_amount * params.loan_interest_rate / HUNDRED)
    total_loan_interest = round_to_won(annual_loan_interest * params.holding_years)
    total_profit = total_gain + total_rental_income - total_loan_interest

    roi = percent_of(total_profit, params.total_investment)

    return InvestmentReturnResult(
        total_gain=total_gain,
        net_rental_income=net_rental_income,
        total_rental_income=total_rental_income,
        annual_loan_interest=annual_loan_interest,
        total_loan_interest=total_loan_interest,
        total_profit=total_profit,
        roi=roi,
        annualized_return=round_to(to_decimal(roi) / params.holding_years, 2),
        cap_rate=percent_of(net_rental_income, params.purchase_price),
        leverage_effect=round_to(params.purchase_price / params.total_investment, 2),
    )
