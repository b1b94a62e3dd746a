"""대출 계산기 테스트"""

import pytest
from decimal import Decimal

from realty_calc.core import BusinessRuleError, InputValidationError
from realty_calc.calculators.loan import (
    calculate_dsr,
    calculate_dti,
    calculate_early_repayment,
    calculate_estimated_income,
    calculate_foreclosure_loan,
    calculate_future_income,
    calculate_loan_limit,
    calculate_loan_repayment,
    calculate_ltv,
    calculate_max_loan,
    calculate_overdue_interest,
    calculate_rti,
    calculate_savings_interest,
)


class TestLoanRepayment:
    """대출 상환 계산 테스트"""

    def test_equal_principal_interest_30_years(self):
        """3억, 연 4%, 30년 원리금균등: 월 약 143만원"""
        result = calculate_loan_repayment({
            'loan_amount': 300_000_000,
            'annual_rate': 4,
            'loan_term_years': 30,
            'repayment_method': 'equal-principal-interest',
        })

        assert 1_400_000 < result.monthly_payment < 1_440_000
        assert len(result.schedule) == 360
        assert sum(period.principal for period in result.schedule) == 300_000_000
        assert result.total_interest == result.total_payment - 300_000_000

    def test_korean_method_name(self):
        """상환방식은 한글 표기도 허용"""
        english = calculate_loan_repayment({
            'loan_amount': 100_000_000,
            'annual_rate': 3,
            'loan_term_years': 10,
            'repayment_method': 'equal-principal',
        })
        korean = calculate_loan_repayment({
            'loan_amount': 100_000_000,
            'annual_rate': 3,
            'loan_term_years': 10,
            'repayment_method': '원금균등',
        })

        assert english == korean

    def test_zero_rate(self):
        result = calculate_loan_repayment({
            'loan_amount': 12_000_000,
            'annual_rate': 0,
            'loan_term_years': 1,
            'repayment_method': 'equal-principal-interest',
        })

        assert result.monthly_payment == 1_000_000
        assert result.total_interest == 0

    def test_unknown_method(self):
        with pytest.raises(InputValidationError):
            calculate_loan_repayment({
                'loan_amount': 12_000_000,
                'annual_rate': 3,
                'loan_term_years': 1,
                'repayment_method': 'balloon',
            })

    def test_schedule_in_dict(self):
        """to_dict는 스케줄을 딕셔너리 목록으로 변환"""
        result = calculate_loan_repayment({
            'loan_amount': 1_200_000,
            'annual_rate': 0,
            'loan_term_years': 1,
            'repayment_method': 'bullet',
        })
        data = result.to_dict()

        assert data['schedule'][-1] == {
            'period': 12,
            'principal': 1_200_000,
            'interest': 0,
            'payment': 1_200_000,
            'remaining_balance': 0,
        }


class TestLoanLimit:
    """LTV·스트레스 DSR 대출한도 테스트"""

    base = {
        'property_value': 1_000_000_000,
        'annual_income': 60_000_000,
        'region': '비수도권',
        'is_first_time_buyer': False,
        'financial_institution': '1금융권',
        'loan_term_years': 30,
        'annual_rate': 4,
    }

    def test_general_buyer_non_capital(self):
        """일반 구입, 비수도권, 1금융권: LTV 70%, DSR 40%, 가산금리 0.75%p"""
        result = calculate_loan_limit(self.base)

        assert result.max_loan_by_ltv == 700_000_000
        assert result.ltv_limit == 70.0
        assert result.dsr_limit == 40.0
        assert result.stress_rate == 0.75
        assert result.max_loan == min(result.max_loan_by_ltv, result.max_loan_by_dsr)

    def test_first_time_buyer_capital(self):
        """생애최초, 수도권: LTV 80%, 가산금리 1.5%p"""
        result = calculate_loan_limit({**self.base, 'is_first_time_buyer': True, 'region': 'capital'})

        assert result.max_loan_by_ltv == 800_000_000
        assert result.stress_rate == 1.5

    def test_second_tier_dsr(self):
        """2금융권 DSR 50%는 1금융권보다 한도가 큼"""
        first = calculate_loan_limit(self.base)
        second = calculate_loan_limit({**self.base, 'financial_institution': 'second'})

        assert second.dsr_limit == 50.0
        assert second.max_loan_by_dsr > first.max_loan_by_dsr

    def test_other_debt_exceeds_dsr(self):
        """기타부채 원리금이 DSR 한도를 넘으면 DSR 한도 0"""
        result = calculate_loan_limit({**self.base, 'other_debt_payment': 30_000_000})

        assert result.max_loan_by_dsr == 0
        assert result.max_loan == 0


class TestLtv:
    """LTV 계산 테스트"""

    @pytest.mark.parametrize("borrower_type, region, expected_rate", [
        ('생애최초', '비수도권', 80.0),
        ('무주택자', '조정지역', 50.0),
        ('1주택자', '투기지역', 40.0),
        ('다주택자', '수도권', 0.0),
    ])
    def test_ltv_matrix(self, borrower_type, region, expected_rate):
        result = calculate_ltv({
            'property_price': 500_000_000,
            'borrower_type': borrower_type,
            'region': region,
        })

        assert result.ltv_rate == expected_rate
        assert result.max_loan_amount == int(500_000_000 * expected_rate / 100)


class TestDtiDsr:
    """DTI·DSR 계산 테스트"""

    def test_dti_zero_rate(self):
        """1억 2천만원, 0%, 120개월: 연 1,200만원 상환"""
        result = calculate_dti({
            'annual_income': 60_000_000,
            'loan_amount': 120_000_000,
            'loan_term_months': 120,
            'loan_rate': 0,
        })

        assert result.monthly_repay == 1_000_000
        assert result.loan_annual_repay == 12_000_000
        assert result.dti_rate == 20.0
        assert result.dti_limit == 40.0
        assert result.is_within_limit is True
        # 연 2,400만원까지 상환 가능
        assert result.max_loan_amount == 240_000_000

    def test_dti_annual_repay_rounded_once(self):
        """3억, 4%, 360개월: 연 상환액은 반올림 전 월 상환액 × 12를 한 번만 반올림"""
        result = calculate_dti({
            'annual_income': 50_000_000,
            'loan_amount': 300_000_000,
            'loan_term_months': 360,
            'loan_rate': 4,
            'repayment_method': 'equal-principal-interest',
        })

        assert result.monthly_repay == 1_432_246
        assert result.loan_annual_repay == 17_186_950
        assert result.annual_total_repay == 17_186_950
        assert result.dti_rate == 34.37

    def test_dsr_annual_repay_rounded_once(self):
        result = calculate_dsr({
            'annual_income': 50_000_000,
            'loan_amount': 300_000_000,
            'loan_term_months': 360,
            'loan_rate': 4,
            'repayment_method': 'equal-principal-interest',
        })

        assert result.monthly_repay == 1_432_246
        assert result.loan_annual_repay == 17_186_950
        assert result.annual_total_repay == 17_186_950
        assert result.dsr_rate == 34.37

    def test_dti_other_debt_interest_only(self):
        """DTI는 기타부채 이자만 반영"""
        result = calculate_dti({
            'annual_income': 50_000_000,
            'loan_amount': 0,
            'loan_term_months': 360,
            'loan_rate': 4,
            'other_debt_amount': 100_000_000,
            'other_debt_rate': 5,
        })

        assert result.other_debt_annual_interest == 5_000_000
        assert result.dti_rate == 10.0

    def test_dsr_not_below_dti(self):
        """DSR은 기타부채 원리금까지 반영하므로 DTI 이상"""
        data = {
            'annual_income': 50_000_000,
            'loan_amount': 200_000_000,
            'loan_term_months': 360,
            'loan_rate': 4,
            'other_debt_amount': 30_000_000,
            'other_debt_rate': 5,
        }
        dti = calculate_dti(data)
        dsr = calculate_dsr(data)

        assert dsr.dsr_rate >= dti.dti_rate
        assert dsr.other_debt_annual_repay > dti.other_debt_annual_interest

    def test_dsr_stress_rate(self):
        """스트레스 금리는 적용 금리에 더해짐"""
        data = {
            'annual_income': 50_000_000,
            'loan_amount': 200_000_000,
            'loan_term_months': 360,
            'loan_rate': 4,
        }
        plain = calculate_dsr(data)
        stressed = calculate_dsr({**data, 'stress_rate': Decimal('1.5')})

        assert stressed.applied_rate == 5.5
        assert stressed.monthly_repay > plain.monthly_repay
        assert stressed.max_loan_amount < plain.max_loan_amount

    def test_bullet_zero_rate_has_no_income_limit(self):
        """만기일시 + 0%: 월 상환액이 원금과 무관하여 소득 기준 한도 없음"""
        result = calculate_dti({
            'annual_income': 50_000_000,
            'loan_amount': 100_000_000,
            'loan_term_months': 12,
            'loan_rate': 0,
            'repayment_method': 'bullet',
        })

        assert result.monthly_repay == 0
        assert result.max_loan_amount is None

    def test_custom_limit(self):
        result = calculate_dsr({
            'annual_income': 50_000_000,
            'loan_amount': 100_000_000,
            'loan_term_months': 120,
            'loan_rate': 0,
            'dsr_limit': 20,
        })

        # 연 1,000만원 상환, DSR 20%
        assert result.dsr_rate == 20.0
        assert result.is_within_limit is True


class TestMaxLoan:
    """최대 대출가능액 테스트"""

    base = {
        'property_price': 1_000_000_000,
        'annual_income': 50_000_000,
        'borrower_type': '무주택자',
        'region': '비수도권',
        'interest_rate': 4,
        'loan_term_years': 30,
    }

    def test_min_of_ltv_and_dsr(self):
        result = calculate_max_loan(self.base)

        assert result.ltv_limit == 700_000_000
        assert result.ltv_rate == 70.0
        assert result.dsr_rate == 40.0
        assert result.dsr_limit < result.ltv_limit
        assert result.max_loan_amount == result.dsr_limit

    def test_stress_rate_lowers_dsr_limit(self):
        plain = calculate_max_loan(self.base)
        stressed = calculate_max_loan({**self.base, 'stress_rate': 1.5})

        assert stressed.dsr_limit < plain.dsr_limit

    def test_interest_rate_must_be_positive(self):
        with pytest.raises(InputValidationError):
            calculate_max_loan({**self.base, 'interest_rate': 0})


class TestForeclosureLoan:
    """경락잔금대출 테스트"""

    def test_lower_of_sale_and_appraisal(self):
        """2금융권, 무주택자, 비수도권: 85%"""
        result = calculate_foreclosure_loan({
            'sale_price': 300_000_000,
            'appraisal_price': 400_000_000,
            'borrower_type': '무주택자',
            'region': '비수도권',
            'financial_tier': '2금융권',
        })

        assert result.ltv_rate == 85.0
        assert result.collateral_base == 300_000_000
        assert result.max_loan_amount == 255_000_000
        assert result.required_equity == 45_000_000

    def test_multi_home_first_tier(self):
        """1금융권 다주택자는 대출 불가"""
        result = calculate_foreclosure_loan({
            'sale_price': 300_000_000,
            'appraisal_price': 250_000_000,
            'borrower_type': '다주택자',
            'region': '수도권',
            'financial_tier': '1금융권',
        })

        assert result.max_loan_amount == 0
        assert result.required_equity == 300_000_000


class TestEarlyRepayment:
    """중도상환수수료 테스트"""

    def test_fee(self):
        """1억, 1.2%, 잔여 730일 / 전체 1,095일"""
        result = calculate_early_repayment({
            'repayment_amount': 100_000_000,
            'fee_rate': Decimal('1.2'),
            'remaining_days': 730,
            'total_days': 1095,
        })

        assert result.early_repayment_fee == 800_000
        assert result.net_amount == 99_200_000
        assert result.day_ratio == 0.6667

    def test_remaining_days_exceed_total(self):
        """잔여일수 > 전체기간은 업무 규칙 위반"""
        with pytest.raises(BusinessRuleError) as exc_info:
            calculate_early_repayment({
                'repayment_amount': 100_000_000,
                'fee_rate': 1,
                'remaining_days': 400,
                'total_days': 365,
            })

        assert exc_info.value.message == "대출잔여일수는 대출전체기간보다 클 수 없습니다."


class TestOverdueInterest:
    """연체이자 테스트"""

    def test_one_year(self):
        result = calculate_overdue_interest({'overdue_amount': 10_000_000, 'annual_rate': 12, 'days': 365})

        assert result.overdue_interest == 1_200_000
        assert result.total_amount == 11_200_000

    def test_zero_days(self):
        result = calculate_overdue_interest({'overdue_amount': 10_000_000, 'annual_rate': 12, 'days': 0})

        assert result.overdue_interest == 0


class TestRti:
    """RTI 테스트"""

    def test_residential_on_threshold(self):
        """임대소득 1,500만원 / 이자 1,200만원 = 1.25배"""
        result = calculate_rti({
            'annual_rental_income': 15_000_000,
            'loan_amount': 300_000_000,
            'interest_rate': 4,
            'property_type': '주거용',
        })

        assert result.rti_ratio == 1.25
        assert result.annual_interest_cost == 12_000_000
        assert result.is_qualified is True
        assert result.max_loan_amount == 300_000_000

    def test_non_residential_fails(self):
        result = calculate_rti({
            'annual_rental_income': 15_000_000,
            'loan_amount': 300_000_000,
            'interest_rate': 4,
            'property_type': '비주거용',
        })

        assert result.required_rti == 1.5
        assert result.is_qualified is False
        assert result.max_loan_amount == 250_000_000


class TestSavingsInterest:
    """예적금 이자 테스트"""

    @pytest.mark.parametrize("tax_type, expected_tax", [
        ('general', 46_200),
        ('preferential', 28_500),
        ('tax-free', 0),
    ])
    def test_simple_interest_tax(self, tax_type, expected_tax):
        """1천만원, 연 3%, 12개월 단리: 세전 30만원"""
        result = calculate_savings_interest({
            'principal': 10_000_000,
            'annual_rate': 3,
            'months': 12,
            'interest_type': 'simple',
            'tax_type': tax_type,
        })

        assert result.interest_before_tax == 300_000
        assert result.interest_tax == expected_tax
        assert result.interest_after_tax == 300_000 - expected_tax
        assert result.total_after_tax == 10_300_000 - expected_tax

    def test_compound_exceeds_simple(self):
        data = {
            'principal': 10_000_000,
            'annual_rate': 3,
            'months': 24,
            'tax_type': 'tax-free',
        }
        simple = calculate_savings_interest({**data, 'interest_type': 'simple'})
        compound = calculate_savings_interest({**data, 'interest_type': 'compound'})

        assert compound.interest_before_tax > simple.interest_before_tax


class TestFutureIncome:
    """미래소득 테스트"""

    def test_young_borrower(self):
        """27세, 20년: 28.4% 증가"""
        result = calculate_future_income({'current_income': 40_000_000, 'age': 27, 'loan_term_years': 20})

        assert result.growth_rate == 28.4
        assert result.future_income == 51_360_000
        assert result.income_increase == 11_360_000
        assert result.age_group == "25-29"

    def test_age_35_or_older_has_no_growth(self):
        """35세 이상은 증가율 0%"""
        result = calculate_future_income({'current_income': 40_000_000, 'age': 36, 'loan_term_years': 30})

        assert result.growth_rate == 0.0
        assert result.future_income == 40_000_000
        assert result.age_group == "35-39"

        older = calculate_future_income({'current_income': 40_000_000, 'age': 50, 'loan_term_years': 30})
        assert older.age_group is None

    def test_unsupported_term(self):
        with pytest.raises(InputValidationError):
            calculate_future_income({'current_income': 40_000_000, 'age': 27, 'loan_term_years': 25})


class TestEstimatedIncome:
    """신고소득 추정 테스트"""

    def test_national_pension(self):
        """국민연금 월 13만 5천원 / 4.5% = 월 300만원"""
        result = calculate_estimated_income({'income_type': '국민연금', 'monthly_payment': 135_000})

        assert result.monthly_estimated_income == 3_000_000
        assert result.annual_estimated_income == 36_000_000
        assert result.applied_rate == 4.5
        assert result.income_type == '국민연금'
