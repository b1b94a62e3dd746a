"""계산 엔진 공통 모듈"""

from .errors import CalculatorError, InputValidationError, BusinessRuleError, RuleTableError
from .numeric import (
    to_decimal,
    round_to_won,
    floor_to_won,
    round_to,
    monthly_rate_from_annual,
    percent_of,
    as_percent,
)
from .tables import BracketTable, TaxBracket, SteppedSchedule, StepTable, RateMatrix
from .rule_engine import RuleEngine, get_rule_engine, reset_rule_engine
from .validation import CalculatorInput, InputData, parse_input
from .records import ResultRecord
from .instrumentation import traced
from .amortization import (
    RepaymentPeriod,
    annuity_payment,
    build_schedule,
    first_payment,
    max_principal_for_payment,
)

__all__ = [
    'CalculatorError',
    'InputValidationError',
    'BusinessRuleError',
    'RuleTableError',
    'to_decimal',
    'round_to_won',
    'floor_to_won',
    'round_to',
    'monthly_rate_from_annual',
    'percent_of',
    'as_percent',
    'BracketTable',
    'TaxBracket',
    'SteppedSchedule',
    'StepTable',
    'RateMatrix',
    'RuleEngine',
    'get_rule_engine',
    'reset_rule_engine',
    'CalculatorInput',
    'InputData',
    'parse_input',
    'ResultRecord',
    'traced',
    'RepaymentPeriod',
    'annuity_payment',
    'build_schedule',
    'first_payment',
    'max_principal_for_payment',
]
