"""계산기 목록

API와 외부 호출자는 slug로 계산기를 찾습니다.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..core import InputData, ResultRecord
from . import distribution, fees, loan, rent, tax, valuation

Calculator = Callable[[InputData], ResultRecord]


@dataclass(frozen=True)
class CalculatorEntry:
    """등록된 계산기

    Attributes:
        slug: 경로 이름 (예: "acquisition-tax")
        title: 화면 표시 이름
        category: tax, loan, rent, fees, valuation, distribution
        function: 계산 함수
    """
    slug: str
    title: str
    category: str
    function: Calculator


_ENTRIES = [
    # 세금
    CalculatorEntry("acquisition-tax", "취득세", "tax", tax.calculate_acquisition_tax),
    CalculatorEntry("transfer-tax", "양도소득세", "tax", tax.calculate_transfer_tax),
    CalculatorEntry("property-tax", "재산세", "tax", tax.calculate_property_tax),
    CalculatorEntry("comprehensive-tax", "종합부동산세", "tax", tax.calculate_comprehensive_tax),
    CalculatorEntry("holding-tax", "보유세", "tax", tax.calculate_holding_tax),
    CalculatorEntry("gift-tax", "증여세", "tax", tax.calculate_gift_tax),
    CalculatorEntry("inheritance-tax", "상속세", "tax", tax.calculate_inheritance_tax),
    CalculatorEntry("income-tax", "종합소득세", "tax", tax.calculate_income_tax),
    CalculatorEntry("progressive-tax", "누진세 구간별 계산", "tax", tax.calculate_progressive_tax),
    CalculatorEntry("rental-income-tax", "임대소득세", "tax", tax.calculate_rental_income_tax),
    CalculatorEntry("regional-tax", "지역자원시설세", "tax", tax.calculate_regional_tax),
    CalculatorEntry("stamp-tax", "인지세", "tax", tax.calculate_stamp_tax),
    CalculatorEntry("deemed-rental", "간주임대료", "tax", tax.calculate_deemed_rental),
    CalculatorEntry("building-vat", "건물분 부가가치세", "tax", tax.calculate_building_vat),
    CalculatorEntry("registration-cost", "등기비용", "tax", tax.calculate_registration_cost),
    CalculatorEntry("good-landlord", "착한임대인 세액공제", "tax", tax.calculate_good_landlord),
    # 대출
    CalculatorEntry("loan-repayment", "대출 상환", "loan", loan.calculate_loan_repayment),
    CalculatorEntry("loan-limit", "대출한도", "loan", loan.calculate_loan_limit),
    CalculatorEntry("ltv", "LTV", "loan", loan.calculate_ltv),
    CalculatorEntry("dti", "DTI", "loan", loan.calculate_dti),
    CalculatorEntry("dsr", "DSR", "loan", loan.calculate_dsr),
    CalculatorEntry("max-loan", "최대 대출가능액", "loan", loan.calculate_max_loan),
    CalculatorEntry("foreclosure-loan", "경락잔금대출", "loan", loan.calculate_foreclosure_loan),
    CalculatorEntry("early-repayment", "중도상환수수료", "loan", loan.calculate_early_repayment),
    CalculatorEntry("overdue-interest", "연체이자", "loan", loan.calculate_overdue_interest),
    CalculatorEntry("rti", "RTI", "loan", loan.calculate_rti),
    CalculatorEntry("savings-interest", "예적금 이자", "loan", loan.calculate_savings_interest),
    CalculatorEntry("future-income", "미래소득", "loan", loan.calculate_future_income),
    CalculatorEntry("estimated-income", "신고소득 추정", "loan", loan.calculate_estimated_income),
    # 전월세
    CalculatorEntry("jeonse-to-monthly", "전세 → 월세 전환", "rent", rent.convert_jeonse_to_monthly),
    CalculatorEntry("monthly-to-jeonse", "월세 → 전세 전환", "rent", rent.convert_monthly_to_jeonse),
    CalculatorEntry("conversion-rate", "전월세 전환율", "rent", rent.calculate_conversion_rate),
    CalculatorEntry("rent-adjust-deposit", "보증금 조정", "rent", rent.adjust_deposit_to_rent),
    CalculatorEntry("rent-adjust-rent", "월세 조정", "rent", rent.adjust_rent_to_deposit),
    CalculatorEntry("rent-increase", "임대료 인상", "rent", rent.calculate_rent_increase),
    CalculatorEntry("rental-yield", "임대 수익률", "rent", rent.calculate_rental_yield),
    # 수수료
    CalculatorEntry("brokerage", "중개보수", "fees", fees.calculate_brokerage),
    CalculatorEntry("appraisal-fee", "감정평가 수수료", "fees", fees.calculate_appraisal_fee),
    CalculatorEntry("attorney-fee", "법무사 보수", "fees", fees.calculate_attorney_fee),
    CalculatorEntry("housing-bond", "국민주택채권", "fees", fees.calculate_housing_bond),
    CalculatorEntry("eviction-cost", "명도 비용", "fees", fees.calculate_eviction_cost),
    CalculatorEntry("auction-cost", "경매 부대비용", "fees", fees.calculate_auction_cost),
    # 면적·가치
    CalculatorEntry("area-convert", "면적 환산", "valuation", valuation.calculate_area_convert),
    CalculatorEntry("unit-price", "평당가", "valuation", valuation.calculate_unit_price),
    CalculatorEntry("building-price", "건물 시가표준액", "valuation", valuation.calculate_building_price),
    CalculatorEntry("building-ratio", "건폐율·용적률", "valuation", valuation.calculate_building_ratio),
    CalculatorEntry("land-share", "대지지분", "valuation", valuation.calculate_land_share),
    CalculatorEntry("remaining-value", "건물 잔존가치", "valuation", valuation.calculate_remaining_value),
    CalculatorEntry("reconstruction", "재건축 연한", "valuation", valuation.calculate_reconstruction),
    CalculatorEntry("date-calc", "기간 계산", "valuation", valuation.calculate_date_diff),
    CalculatorEntry("investment-return", "투자 수익률", "valuation", valuation.calculate_investment_return),
    # 배당
    CalculatorEntry("auction-distribution", "경매 배당", "distribution", distribution.calculate_auction_distribution),
    CalculatorEntry("inheritance-share", "법정상속분", "distribution", distribution.calculate_inheritance_share),
]

CALCULATORS: Dict[str, CalculatorEntry] = {entry.slug: entry for entry in _ENTRIES}


def get_calculator(slug: str) -> Optional[CalculatorEntry]:
    return CALCULATORS.get(slug)


def list_calculators(category: Optional[str] = None) -> List[CalculatorEntry]:
    """등록된 계산기 목록 (category를 주면 해당 분류만)"""
    if category is None:
        return list(_ENTRIES)
    return [entry for entry in _ENTRIES if entry.category == category]


__all__ = [
    'CalculatorEntry',
    'CALCULATORS',
    'get_calculator',
    'list_calculators',
]
