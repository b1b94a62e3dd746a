"""세금 계산기"""

from .acquisition_tax import calculate_acquisition_tax, get_acquisition_tax_rate
from .transfer_tax import calculate_transfer_tax
from .property_tax import calculate_property_tax
from .comprehensive_tax import calculate_comprehensive_tax
from .holding_tax import calculate_holding_tax
from .gift_tax import calculate_gift_tax
from .inheritance_tax import calculate_inheritance_tax
from .income_tax import calculate_income_tax
from .progressive_tax import calculate_progressive_tax
from .rental_income_tax import calculate_rental_income_tax
from .regional_tax import calculate_regional_tax
from .stamp_tax import calculate_stamp_tax
from .deemed_rental import calculate_deemed_rental
from .building_vat import calculate_building_vat
from .registration_cost import calculate_registration_cost
from .good_landlord import calculate_good_landlord

__all__ = [
    'calculate_acquisition_tax',
    'get_acquisition_tax_rate',
    'calculate_transfer_tax',
    'calculate_property_tax',
    'calculate_comprehensive_tax',
    'calculate_holding_tax',
    'calculate_gift_tax',
    'calculate_inheritance_tax',
    'calculate_income_tax',
    'calculate_progressive_tax',
    'calculate_rental_income_tax',
    'calculate_regional_tax',
    'calculate_stamp_tax',
    'calculate_deemed_rental',
    'calculate_building_vat',
    'calculate_registration_cost',
    'calculate_good_landlord',
]
