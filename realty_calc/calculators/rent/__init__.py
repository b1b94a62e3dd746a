"""전월세 계산기"""

from .rent_convert import convert_jeonse_to_monthly, convert_monthly_to_jeonse, calculate_conversion_rate
from .rent_adjust import adjust_deposit_to_rent, adjust_rent_to_deposit
from .rent_increase import calculate_rent_increase
from .rental_yield import calculate_rental_yield

__all__ = [
    'convert_jeonse_to_monthly',
    'convert_monthly_to_jeonse',
    'calculate_conversion_rate',
    'adjust_deposit_to_rent',
    'adjust_rent_to_deposit',
    'calculate_rent_increase',
    'calculate_rental_yield',
]
