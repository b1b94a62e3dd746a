"""세율 구간표·요율표·조회 행렬

모든 표는 불변 pydantic 모델로, 규칙 파일을 읽을 때 한 번만 검증됩니다.
"""

import itertools
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import RuleTableError
from .numeric import Number, ZERO, to_decimal


class ImmutableModel(BaseModel):
    """불변 규칙 모델 기본 클래스"""

    model_config = ConfigDict(frozen=True, extra="forbid")


def _check_upper_limits(limits: Sequence[Optional[Decimal]]) -> None:
    """구간 상한 검증: 순증가, 마지막 구간만 상한 없음"""
    if not limits:
        raise ValueError("구간이 하나 이상 필요합니다.")
    if limits[-1] is not None:
        raise ValueError("마지막 구간은 상한이 없어야 합니다.")
    bounded = limits[:-1]
    if any(limit is None for limit in bounded):
        raise ValueError("상한이 없는 구간은 마지막에만 올 수 있습니다.")
    for previous, current in zip(bounded, bounded[1:]):
        if current <= previous:
            raise ValueError(f"구간 상한이 증가하지 않습니다: {previous} -> {current}")


class TaxBracket(ImmutableModel):
    """누진세율 구간

    Attributes:
        upper_limit: 구간 상한 (None이면 최고 구간)
        rate: 세율 (소수)
        subtracted_amount: 누진공제액
        label: 구간 이름
    """

    upper_limit: Optional[Decimal] = None
    rate: Decimal = Field(ge=0)
    subtracted_amount: Decimal = ZERO
    label: str = ""


class BracketShare(ImmutableModel):
    """구간별 과세 분할 결과"""

    bracket: TaxBracket
    taxable_amount: Decimal
    tax_amount: Decimal


class BracketTable(ImmutableModel):
    """누진세율표

    과세표준이 구간 상한과 같으면 낮은 구간에 속합니다 (상한 포함).
    """

    brackets: Tuple[TaxBracket, ...]

    @model_validator(mode="after")
    def _validate_limits(self) -> "BracketTable":
        _check_upper_limits([bracket.upper_limit for bracket in self.brackets])
        return self

    def find(self, base: Number) -> TaxBracket:
        """과세표준이 속하는 첫 번째 구간 조회"""
        value = to_decimal(base)
        for bracket in self.brackets:
            if bracket.upper_limit is None or value <= bracket.upper_limit:
                return bracket
        return self.brackets[-1]

    def tax(self, base: Number) -> Decimal:
        """산출세액 = max(0, 과세표준 × 세율 − 누진공제액)"""
        value = to_decimal(base)
        bracket = self.find(value)
        return max(ZERO, value * bracket.rate - bracket.subtracted_amount)

    def marginal_shares(self, base: Number) -> List[BracketShare]:
        """과세표준을 구간별로 나누어 각 구간의 세액 계산

        과세 금액이 없는 구간은 제외합니다.
        """
        value = to_decimal(base)
        shares: List[BracketShare] = []
        lower = ZERO
        for bracket in self.brackets:
            if value <= lower:
                break
            upper = value if bracket.upper_limit is None else min(value, bracket.upper_limit)
            taxable = upper - lower
            shares.append(BracketShare(
                bracket=bracket,
                taxable_amount=taxable,
                tax_amount=taxable * bracket.rate,
            ))
            if bracket.upper_limit is None:
                break
            lower = bracket.upper_limit
        return shares


class FeeStep(ImmutableModel):
    """정액 + 초과분 정률 구간"""

    upper_limit: Optional[Decimal] = None
    base_amount: Decimal = Field(default=ZERO, ge=0)
    rate: Decimal = Field(default=ZERO, ge=0)


class SteppedSchedule(ImmutableModel):
    """구간별 기본액 + 하한 초과분 × 요율 (보수표, 소방분 세액표 등)"""

    steps: Tuple[FeeStep, ...]

    @model_validator(mode="after")
    def _validate_limits(self) -> "SteppedSchedule":
        _check_upper_limits([step.upper_limit for step in self.steps])
        return self

    def amount(self, value: Number) -> Decimal:
        target = to_decimal(value)
        lower = ZERO
        for step in self.steps:
            if step.upper_limit is None or target <= step.upper_limit:
                return step.base_amount + max(ZERO, target - lower) * step.rate
            lower = step.upper_limit
        raise RuleTableError("요율표에 해당 구간이 없습니다.")


class StepEntry(ImmutableModel):
    """구간별 고정값 (금액 또는 요율)과 선택적 상한액"""

    upper_limit: Optional[Decimal] = None
    value: Decimal
    cap: Optional[Decimal] = None


class StepTable(ImmutableModel):
    """구간 조회표

    Attributes:
        entries: 구간 목록
        inclusive: True면 '이하', False면 '미만' 기준으로 구간 판정
    """

    entries: Tuple[StepEntry, ...]
    inclusive: bool = True

    @model_validator(mode="after")
    def _validate_limits(self) -> "StepTable":
        _check_upper_limits([entry.upper_limit for entry in self.entries])
        return self

    def find(self, value: Number) -> StepEntry:
        target = to_decimal(value)
        for entry in self.entries:
            if entry.upper_limit is None:
                return entry
            if self.inclusive and target <= entry.upper_limit:
                return entry
            if not self.inclusive and target < entry.upper_limit:
                return entry
        return self.entries[-1]


AxisKey = Union[str, Enum]


class RateMatrix:
    """열거형 축으로 색인하는 요율 행렬

    생성 시 모든 축 값의 조합이 정의되어 있는지 확인합니다.
    """

    def __init__(self, name: str, axes: Sequence[Type[Enum]], values: Mapping[Tuple[str, ...], Decimal]):
        self.name = name
        self.axes = tuple(axes)
        self._values: Dict[Tuple[str, ...], Decimal] = dict(values)

        expected = set(itertools.product(*[[member.value for member in axis] for axis in self.axes]))
        missing = sorted(expected - set(self._values))
        if missing:
            raise RuleTableError(f"{name}: 정의되지 않은 조합이 있습니다: {missing}")
        unknown = sorted(set(self._values) - expected)
        if unknown:
            raise RuleTableError(f"{name}: 알 수 없는 키가 있습니다: {unknown}")

    @classmethod
    def from_nested(cls, name: str, nested: Mapping[str, Any], axes: Sequence[Type[Enum]]) -> "RateMatrix":
        """중첩 딕셔너리(규칙 파일 형식)에서 행렬 생성"""
        values: Dict[Tuple[str, ...], Decimal] = {}
        for path, value in _flatten(nested, len(axes)):
            try:
                values[path] = to_decimal(value)
            except (ValueError, ArithmeticError) as exc:
                raise RuleTableError(f"{name}: 잘못된 값 {path}={value!r}") from exc
        return cls(name, axes, values)

    def lookup(self, *keys: AxisKey) -> Decimal:
        if len(keys) != len(self.axes):
            raise RuleTableError(f"{self.name}: 축 개수가 맞지 않습니다 ({len(keys)} != {len(self.axes)})")
        path = tuple(key.value if isinstance(key, Enum) else str(key) for key in keys)
        try:
            return self._values[path]
        except KeyError:
            raise RuleTableError(f"{self.name}: 정의되지 않은 조합입니다: {path}") from None


def _flatten(nested: Any, depth: int, prefix: Tuple[str, ...] = ()) -> Iterable[Tuple[Tuple[str, ...], Any]]:
    if depth == 0:
        yield prefix, nested
        return
    if not isinstance(nested, Mapping):
        raise RuleTableError(f"행렬 깊이가 부족합니다: {prefix}")
    for key, value in nested.items():
        yield from _flatten(value, depth - 1, prefix + (str(key),))
