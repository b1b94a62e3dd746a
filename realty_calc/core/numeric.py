"""금액·비율 반올림 유틸리티

모든 금액 계산은 Decimal로 수행하고, 결과를 원 단위 정수로 반올림합니다.
"""

from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, str, Decimal]

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")
MONTHS_PER_YEAR = Decimal("12")


def to_decimal(value: Number) -> Decimal:
    """숫자를 Decimal로 변환

    float는 문자열을 거쳐 변환하여 이진 표현 오차를 피합니다.

    Args:
        value: 변환할 숫자

    Returns:
        Decimal 값

    Raises:
        ValueError: 유한한 숫자가 아닌 경우 (NaN, 무한대)
    """
    if isinstance(value, bool):
        raise ValueError(f"숫자가 아닙니다: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        result = Decimal(str(value))
    if not result.is_finite():
        raise ValueError(f"유한한 숫자가 아닙니다: {value!r}")
    return result


def round_to_won(value: Number) -> int:
    """원 단위 반올림 (사사오입)"""
    return int(to_decimal(value).quantize(ONE, rounding=ROUND_HALF_UP))


def floor_to_won(value: Number) -> int:
    """원 단위 절사"""
    return int(to_decimal(value).quantize(ONE, rounding=ROUND_FLOOR))


def round_to(value: Number, digits: int) -> float:
    """소수점 digits 자리로 반올림

    Args:
        value: 반올림할 값
        digits: 소수점 이하 자릿수

    Returns:
        반올림된 float 값
    """
    quantum = ONE.scaleb(-digits)
    return float(to_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def monthly_rate_from_annual(annual_percent: Number) -> Decimal:
    """연이율(%)을 월이율(소수)로 변환

    예: 4.5 -> 0.00375
    """
    return to_decimal(annual_percent) / HUNDRED / MONTHS_PER_YEAR


def percent_of(part: Number, whole: Number, digits: int = 2) -> float:
    """part / whole 을 퍼센트로 환산 (whole이 0 이하이면 0)"""
    whole_value = to_decimal(whole)
    if whole_value <= ZERO:
        return 0.0
    return round_to(to_decimal(part) / whole_value * HUNDRED, digits)


def as_percent(rate: Number, digits: int = 2) -> float:
    """소수 비율을 퍼센트로 표시 (0.015 -> 1.5)"""
    return round_to(to_decimal(rate) * HUNDRED, digits)
