"""면적·가치평가 계산기 테스트"""

import pytest

from realty_calc.core import BusinessRuleError, InputValidationError
from realty_calc.calculators.valuation import (
    calculate_area_convert,
    calculate_building_price,
    calculate_building_ratio,
    calculate_date_diff,
    calculate_investment_return,
    calculate_land_share,
    calculate_reconstruction,
    calculate_remaining_value,
    calculate_unit_price,
)


class TestAreaConvert:
    """면적 환산 테스트"""

    def test_from_sqm(self):
        result = calculate_area_convert({'value': 100, 'from_unit': 'sqm'})

        assert result.sqm == 100.0
        assert result.pyeong == 30.25
        assert result.sqft == 1076.39
        assert result.acre == 0.0247

    def test_from_pyeong(self):
        result = calculate_area_convert({'value': 1, 'from_unit': 'pyeong'})

        assert result.pyeong == 1.0
        assert result.sqm == 3.31
        assert result.sqft == 35.58

    def test_unknown_unit(self):
        with pytest.raises(InputValidationError):
            calculate_area_convert({'value': 1, 'from_unit': 'hectare'})


class TestUnitPrice:
    """단가 계산 테스트"""

    def test_sqm_input(self):
        """10억, 84㎡"""
        result = calculate_unit_price({'total_price': 1_000_000_000, 'area': 84, 'unit': 'sqm'})

        assert result.price_per_sqm == 11_904_762
        assert result.price_per_pyeong == 39_354_583
        assert result.area_pyeong == 25.41

    def test_pyeong_input(self):
        result = calculate_unit_price({'total_price': 1_000_000_000, 'area': 25, 'unit': 'pyeong'})

        assert result.price_per_pyeong == 40_000_000
        assert result.area_pyeong == 25.0


class TestBuildingPrice:
    """건물 시가표준액 테스트"""

    def test_standard_price(self):
        result = calculate_building_price({
            'area': 100,
            'construction_price_per_sqm': 820_000,
            'structure_index': 1,
            'use_index': 1,
            'location_index': 1,
            'age_rate': 80,
        })

        assert result.price_per_sqm == 656_000
        assert result.standard_price == 65_600_000
        assert result.price_per_pyeong == 2_168_595


class TestBuildingRatio:
    """건폐율·용적률 테스트"""

    def test_ratios(self):
        result = calculate_building_ratio({
            'land_area': 200,
            'building_area': 120,
            'total_floor_area': 480,
            'floors': 4,
        })

        assert result.building_coverage_ratio == 60.0
        assert result.floor_area_ratio == 240.0
        assert result.avg_floor_area == 120.0
        assert result.land_area_pyeong == 60.5


class TestLandShare:
    """대지지분 테스트"""

    def test_share(self):
        result = calculate_land_share({
            'total_land_area': 1000,
            'total_building_area': 5000,
            'unit_area': 100,
        })

        assert result.land_share_sqm == 20.0
        assert result.land_share_pyeong == 6.05
        assert result.share_ratio == 2.0

    def test_unit_area_exceeds_total(self):
        """전용면적 > 전체연면적은 업무 규칙 위반"""
        with pytest.raises(BusinessRuleError) as exc_info:
            calculate_land_share({
                'total_land_area': 1000,
                'total_building_area': 100,
                'unit_area': 150,
            })

        assert exc_info.value.message == "전용면적은 전체연면적보다 클 수 없습니다."


class TestRemainingValue:
    """잔존가치 테스트"""

    def test_linear_depreciation(self):
        """철근콘크리트 50년 중 10년 경과: 20% 감가"""
        result = calculate_remaining_value({
            'original_value': 100_000_000,
            'elapsed_years': 10,
            'structure_type': 'rc',
        })

        assert result.useful_life == 50
        assert result.remaining_value == 80_000_000
        assert result.depreciation_amount == 20_000_000
        assert result.depreciation_rate == 20.0

    def test_minimum_residual(self):
        """잔존가치 하한 10%"""
        result = calculate_remaining_value({
            'original_value': 100_000_000,
            'elapsed_years': 48,
            'structure_type': 'rc',
        })

        assert result.remaining_value == 10_000_000
        assert result.depreciation_amount == 90_000_000

    def test_elapsed_exceeds_useful_life(self):
        with pytest.raises(BusinessRuleError) as exc_info:
            calculate_remaining_value({
                'original_value': 100_000_000,
                'elapsed_years': 21,
                'structure_type': 'container',
            })

        assert exc_info.value.message == "경과연수는 내용연수 20년을 초과할 수 없습니다."


class TestReconstruction:
    """재건축 연한 테스트"""

    def test_rc(self):
        result = calculate_reconstruction({
            'approval_year': 1990,
            'building_type': 'rc',
            'reference_year': 2025,
        })

        assert result.standard_years == 40
        assert result.minimum_years == 30
        assert result.reconstruction_year == 2030
        assert result.early_reconstruction_year == 2020
        assert result.elapsed_years == 35
        assert result.remaining_years == 5

    def test_past_standard(self):
        result = calculate_reconstruction({
            'approval_year': 1970,
            'building_type': 'wood',
            'reference_year': 2025,
        })

        assert result.remaining_years == 0

    def test_approval_after_reference(self):
        with pytest.raises(InputValidationError):
            calculate_reconstruction({
                'approval_year': 2030,
                'building_type': 'rc',
                'reference_year': 2025,
            })


class TestDateCalc:
    """기간 계산 테스트"""

    def test_one_year(self):
        result = calculate_date_diff({'start_date': '2024-01-01', 'end_date': '2024-12-31'})

        assert result.total_days == 365
        assert result.total_months == 12.0
        assert result.total_years == 1.0

    def test_same_day(self):
        result = calculate_date_diff({'start_date': '2024-03-01', 'end_date': '2024-03-01'})

        assert result.total_days == 0

    def test_end_before_start(self):
        with pytest.raises(InputValidationError) as exc_info:
            calculate_date_diff({'start_date': '2024-03-01', 'end_date': '2024-02-01'})

        assert exc_info.value.message == "종료일은 시작일보다 이후여야 합니다."


class TestInvestmentReturn:
    """투자 수익률 테스트"""

    def test_leveraged_investment(self):
        result = calculate_investment_return({
            'purchase_price': 500_000_000,
            'current_price': 600_000_000,
            'total_investment': 200_000_000,
            'annual_rental_income': 12_000_000,
            'annual_expenses': 2_000_000,
            'holding_years': 5,
            'loan_amount': 300_000_000,
            'loan_interest_rate': 4,
        })

        assert result.total_gain == 100_000_000
        assert result.total_rental_income == 50_000_000
        assert result.total_loan_interest == 60_000_000
        assert result.total_profit == 90_000_000
        assert result.roi == 45.0
        assert result.annualized_return == 9.0
        assert result.cap_rate == 2.0
        assert result.leverage_effect == 2.5
