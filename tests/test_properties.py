"""계산기 공통 성질 테스트 (멱등성, 결과 직렬화, 목록)"""

import json

import pytest

from realty_calc.calculators import CALCULATORS, get_calculator, list_calculators


SAMPLE_INPUTS = {
    'acquisition-tax': {
        'purchase_price': 750_000_000, 'housing_count': 1, 'is_regulated': False, 'is_first_time_buyer': True,
    },
    'transfer-tax': {
        'acquisition_price': 300_000_000, 'transfer_price': 500_000_000, 'expenses': 10_000_000,
        'holding_years': 5, 'residence_years': 3, 'housing_count': 2,
        'is_single_household': True, 'is_regulated': True,
    },
    'property-tax': {'assessed_value': 1_000_000_000, 'is_urban_area': True},
    'comprehensive-tax': {
        'total_assessed_value': 2_000_000_000, 'is_single_home_owner': True, 'owner_age': 66, 'holding_years': 12,
    },
    'holding-tax': {'public_price': 150_000, 'is_single_household': True, 'housing_count': 1},
    'gift-tax': {'gift_value': 300_000_000, 'donor_relation': 'direct-descendant'},
    'inheritance-tax': {
        'estate_value': 2_000_000_000, 'has_spouse': True, 'children_count': 2, 'debt_amount': 100_000_000,
    },
    'income-tax': {'rental_income': 30_000_000, 'other_income': 20_000_000, 'expenses': 5_000_000, 'dependents': 1},
    'progressive-tax': {'taxable_income': 123_456_789},
    'rental-income-tax': {'monthly_rent': 1_000_000, 'deposit': 0, 'rental_months': 12, 'is_registered': True},
    'regional-tax': {
        'building_value': 100_000_000, 'building_type': '그외', 'is_single_household': False,
        'is_fire_risk': True, 'is_large_fire_risk': False,
    },
    'stamp-tax': {'transaction_amount': 500_000_000},
    'deemed-rental': {'deposit': 500_000_000, 'rental_days': 365, 'interest_rate': 3.5, 'property_type': 'residential'},
    'building-vat': {'total_price': 1_000_000_000, 'land_price': 600_000_000},
    'registration-cost': {
        'property_price': 500_000_000, 'property_type': '주택', 'region': '서울', 'area': 84,
        'housing_count': '1주택', 'is_self_registration': False, 'is_first_time_buyer': False,
    },
    'good-landlord': {'previous_rent': 1_000_000, 'reduced_rent': 800_000, 'months_reduced': 6, 'tax_rate': 24},
    'loan-repayment': {
        'loan_amount': 300_000_000, 'annual_rate': 4, 'loan_term_years': 30,
        'repayment_method': 'equal-principal-interest',
    },
    'loan-limit': {
        'property_value': 1_000_000_000, 'annual_income': 60_000_000, 'region': '수도권',
        'is_first_time_buyer': False, 'financial_institution': '1금융권', 'loan_term_years': 30, 'annual_rate': 4,
    },
    'ltv': {'property_price': 500_000_000, 'borrower_type': '무주택자', 'region': '조정지역'},
    'dti': {'annual_income': 50_000_000, 'loan_amount': 200_000_000, 'loan_term_months': 360, 'loan_rate': 4},
    'dsr': {
        'annual_income': 50_000_000, 'loan_amount': 200_000_000, 'loan_term_months': 360, 'loan_rate': 4,
        'stress_rate': 1.5, 'other_debt_amount': 30_000_000, 'other_debt_rate': 5,
    },
    'max-loan': {
        'property_price': 1_000_000_000, 'annual_income': 50_000_000, 'borrower_type': '무주택자',
        'region': '비수도권', 'interest_rate': 4, 'loan_term_years': 30,
    },
    'foreclosure-loan': {
        'sale_price': 300_000_000, 'appraisal_price': 400_000_000, 'borrower_type': '무주택자',
        'region': '비수도권', 'financial_tier': '2금융권',
    },
    'early-repayment': {'repayment_amount': 100_000_000, 'fee_rate': 1.2, 'remaining_days': 730, 'total_days': 1095},
    'overdue-interest': {'overdue_amount': 10_000_000, 'annual_rate': 12, 'days': 90},
    'rti': {
        'annual_rental_income': 15_000_000, 'loan_amount': 300_000_000, 'interest_rate': 4, 'property_type': '주거용',
    },
    'savings-interest': {
        'principal': 10_000_000, 'annual_rate': 3, 'months': 24, 'interest_type': 'compound', 'tax_type': 'general',
    },
    'future-income': {'current_income': 40_000_000, 'age': 27, 'loan_term_years': 20},
    'estimated-income': {'income_type': '건강보험', 'monthly_payment': 200_000},
    'jeonse-to-monthly': {'jeonse_deposit': 300_000_000, 'monthly_deposit': 10_000_000, 'conversion_rate': 4.5},
    'monthly-to-jeonse': {'monthly_deposit': 10_000_000, 'monthly_rent': 1_087_500, 'conversion_rate': 4.5},
    'conversion-rate': {'jeonse_deposit': 300_000_000, 'monthly_deposit': 10_000_000, 'monthly_rent': 1_087_500},
    'rent-adjust-deposit': {
        'current_deposit': 100_000_000, 'current_rent': 1_000_000, 'conversion_rate': 6, 'new_deposit': 150_000_000,
    },
    'rent-adjust-rent': {
        'current_deposit': 100_000_000, 'current_rent': 1_000_000, 'conversion_rate': 6, 'new_rent': 700_000,
    },
    'rent-increase': {
        'current_deposit': 100_000_000, 'current_rent': 1_000_000, 'conversion_rate': 6, 'increase_rate': 5,
    },
    'rental-yield': {
        'purchase_price': 500_000_000, 'loan_amount': 200_000_000, 'loan_rate': 4,
        'deposit': 50_000_000, 'monthly_rent': 2_000_000,
    },
    'brokerage': {
        'contract_type': '월세', 'property_type': '주택', 'transaction_amount': 10_000_000, 'monthly_rent': 500_000,
    },
    'appraisal-fee': {'appraisal_value': 300_000_000},
    'attorney-fee': {'property_price': 300_000_000, 'property_type': '주택', 'include_public_costs': True},
    'housing-bond': {'sale_price': 500_000_000, 'region': '광역시', 'area_size': '85㎡초과'},
    'eviction-cost': {'area': 84, 'region': '경기'},
    'auction-cost': {'bid_price': 300_000_000},
    'area-convert': {'value': 84, 'from_unit': 'sqm'},
    'unit-price': {'total_price': 1_000_000_000, 'area': 84, 'unit': 'sqm'},
    'building-price': {
        'area': 100, 'construction_price_per_sqm': 820_000, 'structure_index': 1,
        'use_index': 1.1, 'location_index': 0.9, 'age_rate': 80,
    },
    'building-ratio': {'land_area': 200, 'building_area': 120, 'total_floor_area': 480, 'floors': 4},
    'land-share': {'total_land_area': 1000, 'total_building_area': 5000, 'unit_area': 84},
    'remaining-value': {'original_value': 100_000_000, 'elapsed_years': 10, 'structure_type': 'brick'},
    'reconstruction': {'approval_year': 1990, 'building_type': 'rc', 'reference_year': 2025},
    'date-calc': {'start_date': '2020-02-29', 'end_date': '2025-01-01'},
    'investment-return': {
        'purchase_price': 500_000_000, 'current_price': 600_000_000, 'total_investment': 200_000_000,
        'annual_rental_income': 12_000_000, 'holding_years': 5,
    },
    'auction-distribution': {
        'sale_price': 500_000_000, 'auction_cost': 5_000_000, 'senior_claim': 300_000_000,
        'tenant_deposit': 150_000_000, 'junior_claim': 100_000_000,
    },
    'inheritance-share': {'total_assets': 1_000_000_000, 'has_spouse': True, 'number_of_children': 3},
}


class TestCatalogue:
    """계산기 목록 테스트"""

    def test_every_calculator_has_sample(self):
        assert set(SAMPLE_INPUTS) == set(CALCULATORS)

    def test_categories(self):
        categories = {entry.category for entry in list_calculators()}

        assert categories == {'tax', 'loan', 'rent', 'fees', 'valuation', 'distribution'}
        assert len(list_calculators('fees')) == 6

    def test_unknown_slug(self):
        assert get_calculator('no-such-calculator') is None


class TestCalculatorProperties:
    """모든 계산기 공통 성질"""

    @pytest.mark.parametrize("slug", sorted(SAMPLE_INPUTS))
    def test_idempotent(self, slug):
        """같은 입력으로 두 번 호출하면 같은 결과"""
        calculate = get_calculator(slug).function
        data = SAMPLE_INPUTS[slug]

        first = calculate(data)
        second = calculate(dict(data))

        assert first == second
        assert first.to_dict() == second.to_dict()

    @pytest.mark.parametrize("slug", sorted(SAMPLE_INPUTS))
    def test_result_is_json_serializable(self, slug):
        """결과 딕셔너리는 JSON으로 직렬화 가능"""
        result = get_calculator(slug).function(SAMPLE_INPUTS[slug])

        json.dumps(result.to_dict(), ensure_ascii=False)

    @pytest.mark.parametrize("slug", sorted(SAMPLE_INPUTS))
    def test_result_is_frozen(self, slug):
        result = get_calculator(slug).function(SAMPLE_INPUTS[slug])
        field_name = next(iter(result.to_dict()))

        with pytest.raises(AttributeError):
            setattr(result, field_name, None)

    @pytest.mark.parametrize("slug", sorted(SAMPLE_INPUTS))
    def test_input_is_not_mutated(self, slug):
        data = dict(SAMPLE_INPUTS[slug])
        get_calculator(slug).function(data)

        assert data == SAMPLE_INPUTS[slug]

    @pytest.mark.parametrize("slug", sorted(SAMPLE_INPUTS))
    def test_rejects_unknown_field(self, slug):
        from realty_calc.core import InputValidationError

        with pytest.raises(InputValidationError):
            get_calculator(slug).function({**SAMPLE_INPUTS[slug], 'unexpected_field': 1})
