"""전월세 계산기 테스트"""

import pytest
from decimal import Decimal

from realty_calc.core import InputValidationError
from realty_calc.calculators.rent import (
    adjust_deposit_to_rent,
    adjust_rent_to_deposit,
    calculate_conversion_rate,
    calculate_rent_increase,
    calculate_rental_yield,
    convert_jeonse_to_monthly,
    convert_monthly_to_jeonse,
)


class TestRentConversion:
    """전월세 전환 테스트"""

    def test_jeonse_to_monthly(self):
        """전세 3억 → 보증금 1천만원, 전환율 4.5%"""
        result = convert_jeonse_to_monthly({
            'jeonse_deposit': 300_000_000,
            'monthly_deposit': 10_000_000,
            'conversion_rate': Decimal('4.5'),
        })

        assert result.monthly_rent == 1_087_500
        assert result.conversion_rate == 4.5

    def test_monthly_to_jeonse(self):
        result = convert_monthly_to_jeonse({
            'monthly_deposit': 10_000_000,
            'monthly_rent': 1_087_500,
            'conversion_rate': Decimal('4.5'),
        })

        assert result.jeonse_equivalent == 300_000_000

    @pytest.mark.parametrize("jeonse, deposit, rate", [
        (300_000_000, 10_000_000, Decimal('4.5')),
        (123_456_789, 0, Decimal('2.5')),
        (550_000_000, 200_000_000, Decimal('6')),
        (80_000_000, 79_000_000, Decimal('3.3')),
    ])
    def test_round_trip(self, jeonse, deposit, rate):
        """전세 → 월세 → 전세 환산은 반올림 오차 이내로 복원"""
        monthly = convert_jeonse_to_monthly({
            'jeonse_deposit': jeonse,
            'monthly_deposit': deposit,
            'conversion_rate': rate,
        })
        back = convert_monthly_to_jeonse({
            'monthly_deposit': deposit,
            'monthly_rent': monthly.monthly_rent,
            'conversion_rate': rate,
        })

        # 월세 0.5원 오차가 12 / 전환율 배로 확대
        tolerance = Decimal('6') / (rate / 100) + 1
        assert abs(back.jeonse_equivalent - jeonse) <= tolerance

    def test_deposit_not_below_jeonse(self):
        """월세보증금 ≥ 전세보증금은 입력 오류"""
        with pytest.raises(InputValidationError) as exc_info:
            convert_jeonse_to_monthly({
                'jeonse_deposit': 100_000_000,
                'monthly_deposit': 100_000_000,
                'conversion_rate': 5,
            })

        assert exc_info.value.message == "월세보증금은 전세보증금보다 작아야 합니다."

    def test_rate_must_be_positive(self):
        with pytest.raises(InputValidationError) as exc_info:
            convert_monthly_to_jeonse({
                'monthly_deposit': 10_000_000,
                'monthly_rent': 500_000,
                'conversion_rate': 0,
            })

        assert exc_info.value.message == "전환율은 0보다 커야 합니다."

    def test_conversion_rate(self):
        """적용 전환율 역산"""
        result = calculate_conversion_rate({
            'jeonse_deposit': 300_000_000,
            'monthly_deposit': 10_000_000,
            'monthly_rent': 1_087_500,
        })

        assert result.conversion_rate == 4.5
        assert result.deposit_difference == 290_000_000
        assert result.annual_rent == 13_050_000


class TestRentAdjust:
    """보증금·월세 조정 테스트"""

    base = {
        'current_deposit': 100_000_000,
        'current_rent': 1_000_000,
        'conversion_rate': 6,
    }

    def test_deposit_up_rent_down(self):
        """보증금 1억 인상 → 월세 50만원 인하"""
        result = adjust_deposit_to_rent({**self.base, 'new_deposit': 200_000_000})

        assert result.new_rent == 500_000
        assert result.deposit_diff == 100_000_000
        assert result.rent_diff == -500_000

    def test_rent_floored_at_zero(self):
        result = adjust_deposit_to_rent({**self.base, 'new_deposit': 400_000_000})

        assert result.new_rent == 0

    def test_rent_down_deposit_up(self):
        """월세 50만원 인하 → 보증금 1억 인상"""
        result = adjust_rent_to_deposit({**self.base, 'new_rent': 500_000})

        assert result.new_deposit == 200_000_000
        assert result.deposit_diff == 100_000_000
        assert result.rent_diff == -500_000

    def test_deposit_floored_at_zero(self):
        result = adjust_rent_to_deposit({**self.base, 'new_rent': 2_000_000})

        assert result.new_deposit == 0


class TestRentIncrease:
    """임대료 인상 방식 비교 테스트"""

    def test_two_methods(self):
        """보증금 1억 + 월세 100만원, 전환율 6%, 인상률 5%"""
        result = calculate_rent_increase({
            'current_deposit': 100_000_000,
            'current_rent': 1_000_000,
            'conversion_rate': 6,
            'increase_rate': 5,
        })

        # 환산보증금 3억 × 5% = 1,500만원
        assert result.method1.method_name == "전월세전환방식"
        assert result.method1.new_deposit == 115_000_000
        assert result.method1.new_rent == 1_000_000
        assert result.method1.total_increase == 15_000_000

        assert result.method2.method_name == "각각인상방식"
        assert result.method2.new_deposit == 105_000_000
        assert result.method2.new_rent == 1_050_000
        assert result.method2.total_increase == 5_600_000
        assert isinstance(result.method2.total_increase, int)

    def test_increase_cap(self):
        """인상률 상한 5%"""
        with pytest.raises(InputValidationError) as exc_info:
            calculate_rent_increase({
                'current_deposit': 100_000_000,
                'current_rent': 1_000_000,
                'conversion_rate': 6,
                'increase_rate': 6,
            })

        assert exc_info.value.message == "인상률은 5 이하여야 합니다."

    def test_nested_dict(self):
        result = calculate_rent_increase({
            'current_deposit': 100_000_000,
            'current_rent': 0,
            'conversion_rate': 6,
            'increase_rate': 5,
        }).to_dict()

        assert result['method1']['new_deposit'] == 105_000_000
        assert result['method2']['rent_increase'] == 0


class TestRentalYield:
    """임대 수익률 테스트"""

    def test_yield(self):
        result = calculate_rental_yield({
            'purchase_price': 500_000_000,
            'other_costs': 20_000_000,
            'loan_amount': 200_000_000,
            'loan_rate': 4,
            'deposit': 50_000_000,
            'monthly_rent': 2_000_000,
            'annual_expenses': 2_000_000,
        })

        assert result.total_investment == 520_000_000
        assert result.equity == 270_000_000
        assert result.annual_rental_income == 24_000_000
        assert result.annual_loan_interest == 8_000_000
        assert result.net_income == 14_000_000
        assert result.gross_yield == 4.62
        assert result.roi == 5.19
        assert result.cap_rate == 4.23

    def test_no_equity(self):
        """실투자금이 0 이하이면 ROI 0"""
        result = calculate_rental_yield({
            'purchase_price': 100_000_000,
            'loan_amount': 80_000_000,
            'deposit': 30_000_000,
            'monthly_rent': 500_000,
        })

        assert result.equity == -10_000_000
        assert result.roi == 0.0
