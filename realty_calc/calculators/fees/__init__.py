"""수수료·부대비용 계산기"""

from .brokerage import calculate_brokerage
from .appraisal_fee import calculate_appraisal_fee
from .attorney_fee import calculate_attorney_fee
from .housing_bond import calculate_housing_bond
from .eviction_cost import calculate_eviction_cost
from .auction_cost import calculate_auction_cost

__all__ = [
    'calculate_brokerage',
    'calculate_appraisal_fee',
    'calculate_attorney_fee',
    'calculate_housing_bond',
    'calculate_eviction_cost',
    'calculate_auction_cost',
]
