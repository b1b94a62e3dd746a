"""여러 계산기가 공유하는 열거형"""

from enum import Enum
from typing import Annotated, Any, Callable, Dict, Type

from pydantic import BeforeValidator


class RepaymentMethod(str, Enum):
    """상환 방식"""
    EQUAL_PRINCIPAL_INTEREST = "equal-principal-interest"  # 원리금균등
    EQUAL_PRINCIPAL = "equal-principal"                    # 원금균등
    BULLET = "bullet"                                      # 만기일시


class BorrowerType(str, Enum):
    """차주 유형 (LTV)"""
    FIRST_TIME = "생애최초"
    HOMELESS = "무주택자"
    ONE_HOME = "1주택자"
    MULTI_HOME = "다주택자"


class LtvRegion(str, Enum):
    """LTV 규제 지역 구분"""
    SPECULATION = "투기지역"
    ADJUSTED = "조정지역"
    CAPITAL = "수도권"
    NON_CAPITAL = "비수도권"


class CapitalRegion(str, Enum):
    """수도권 여부"""
    CAPITAL = "수도권"
    NON_CAPITAL = "비수도권"


class FinancialTier(str, Enum):
    """금융권 구분"""
    FIRST = "1금융권"
    SECOND = "2금융권"


ENUM_ALIASES: Dict[Type[Enum], Dict[str, Enum]] = {
    RepaymentMethod: {
        "원리금균등": RepaymentMethod.EQUAL_PRINCIPAL_INTEREST,
        "원금균등": RepaymentMethod.EQUAL_PRINCIPAL,
        "만기일시": RepaymentMethod.BULLET,
    },
    CapitalRegion: {
        "capital": CapitalRegion.CAPITAL,
        "non-capital": CapitalRegion.NON_CAPITAL,
    },
    FinancialTier: {
        "first": FinancialTier.FIRST,
        "second": FinancialTier.SECOND,
    },
}


def _alias_resolver(enum_cls: Type[Enum]) -> Callable[[Any], Any]:
    aliases = ENUM_ALIASES.get(enum_cls, {})

    def resolve(value: Any) -> Any:
        if isinstance(value, str) and value in aliases:
            return aliases[value]
        return value

    return resolve


# 한글/영문 표기를 모두 받는 입력 필드 타입
RepaymentMethodField = Annotated[RepaymentMethod, BeforeValidator(_alias_resolver(RepaymentMethod))]
CapitalRegionField = Annotated[CapitalRegion, BeforeValidator(_alias_resolver(CapitalRegion))]
FinancialTierField = Annotated[FinancialTier, BeforeValidator(_alias_resolver(FinancialTier))]
