"""대출 계산기"""

from .repayment import calculate_loan_repayment, calculate_loan_limit
from .ltv import calculate_ltv
from .dti import calculate_dti
from .dsr import calculate_dsr
from .max_loan import calculate_max_loan
from .foreclosure_loan import calculate_foreclosure_loan
from .early_repayment import calculate_early_repayment
from .overdue_interest import calculate_overdue_interest
from .rti import calculate_rti
from .savings_interest import calculate_savings_interest
from .future_income import calculate_future_income
from .estimated_income import calculate_estimated_income

__all__ = [
    'calculate_loan_repayment',
    'calculate_loan_limit',
    'calculate_ltv',
    'calculate_dti',
    'calculate_dsr',
    'calculate_max_loan',
    'calculate_foreclosure_loan',
    'calculate_early_repayment',
    'calculate_overdue_interest',
    'calculate_rti',
    'calculate_savings_interest',
    'calculate_future_income',
    'calculate_estimated_income',
]
