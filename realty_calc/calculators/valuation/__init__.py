"""면적·가치·기간 계산기"""

from .area_convert import calculate_area_convert
from .unit_price import calculate_unit_price
from .building_price import calculate_building_price
from .building_ratio import calculate_building_ratio
from .land_share import calculate_land_share
from .remaining_value import calculate_remaining_value
from .reconstruction import calculate_reconstruction
from .date_calc import calculate_date_diff
from .investment_return import calculate_investment_return

__all__ = [
    'calculate_area_convert',
    'calculate_unit_price',
    'calculate_building_price',
    'calculate_building_ratio',
    'calculate_land_share',
    'calculate_remaining_value',
    'calculate_reconstruction',
    'calculate_date_diff',
    'calculate_investment_return',
]
