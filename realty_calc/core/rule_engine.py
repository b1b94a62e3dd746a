"""RuleEngine: 세율표·요율표 규칙 엔진"""

import copy
import logging
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TypeVar, Union

import yaml
from pydantic import ValidationError

from .. import config
from .errors import RuleTableError
from .numeric import to_decimal
from .tables import BracketTable, RateMatrix, StepTable, SteppedSchedule

logger = logging.getLogger(__name__)

METADATA_KEYS = ('version', 'effective_date', 'description')

T = TypeVar("T")


class RuleEngine:
    """YAML 규칙 파일에서 세율표와 요율표를 로드하는 엔진

    규칙 디렉토리의 모든 *.yaml 파일을 읽어 최상위 항목 단위로 합칩니다.
    표는 처음 조회할 때 검증하여 캐시하며, 이후 변경되지 않습니다.

    Attributes:
        rules_dir: 규칙 파일 디렉토리
        rules: 최상위 항목별 규칙 딕셔너리
        sources: 파일별 메타데이터
        version: 규칙 버전
    """

    def __init__(self, rules_dir: Optional[Union[str, Path]] = None):
        """RuleEngine 초기화

        Args:
            rules_dir: 규칙 파일 디렉토리 (기본값: 설정의 RULES_DIR)
        """
        self.rules_dir = Path(rules_dir) if rules_dir is not None else config.RULES_DIR
        self.sources: List[Dict[str, Any]] = []
        self.rules = self._load_rules()
        self.version = self.sources[0].get('version', 'unknown')
        self._cache: Dict[Tuple[str, str], Any] = {}

    def _load_rules(self) -> Dict[str, Any]:
        """규칙 파일 로드

        Returns:
            합쳐진 규칙 딕셔너리

        Raises:
            FileNotFoundError: 규칙 파일이 없는 경우
            RuleTableError: 형식 오류, 항목 중복, 버전 불일치
        """
        if not self.rules_dir.is_dir():
            raise FileNotFoundError(f"규칙 디렉토리를 찾을 수 없습니다: {self.rules_dir}")

        paths = sorted(self.rules_dir.glob("*.yaml"))
        if not paths:
            raise FileNotFoundError(f"규칙 파일이 없습니다: {self.rules_dir}")

        merged: Dict[str, Any] = {}
        owners: Dict[str, str] = {}
        for path in paths:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise RuleTableError(f"규칙 파일 형식이 올바르지 않습니다: {path.name}")

            metadata = {key: data.pop(key) for key in METADATA_KEYS if key in data}
            self.sources.append({'file': path.name, **metadata})

            for section, value in data.items():
                if section in merged:
                    raise RuleTableError(
                        f"규칙 항목 '{section}'이(가) {owners[section]}와 {path.name}에 중복 정의되어 있습니다."
                    )
                merged[section] = value
                owners[section] = path.name

        versions = {source.get('version') for source in self.sources}
        if len(versions) != 1:
            raise RuleTableError(f"규칙 파일 버전이 일치하지 않습니다: {sorted(map(str, versions))}")

        logger.info("규칙 로드 완료: %d개 파일, 버전 %s", len(paths), versions.pop())
        return merged

    def section(self, path: str) -> Any:
        """점(.)으로 구분된 경로의 규칙 항목 조회 (복사본 반환)

        Raises:
            RuleTableError: 항목이 없는 경우
        """
        node: Any = self.rules
        for part in path.split('.'):
            if not isinstance(node, dict) or part not in node:
                raise RuleTableError(f"규칙 항목을 찾을 수 없습니다: {path}")
            node = node[part]
        return copy.deepcopy(node)

    def constant(self, path: str) -> Decimal:
        """숫자 상수 조회"""
        value = self.section(path)
        try:
            return to_decimal(value)
        except (ValueError, ArithmeticError) as exc:
            raise RuleTableError(f"숫자가 아닌 규칙 값입니다: {path}={value!r}") from exc

    def bracket_table(self, path: str) -> BracketTable:
        """누진세율표 조회"""
        return self._cached('bracket', path, lambda raw: BracketTable(brackets=raw))

    def stepped_schedule(self, path: str) -> SteppedSchedule:
        """기본액 + 초과분 요율표 조회"""
        return self._cached('stepped', path, lambda raw: SteppedSchedule(steps=raw))

    def step_table(self, path: str) -> StepTable:
        """구간 조회표 조회

        규칙 파일에는 구간 목록 또는 {'inclusive': ..., 'entries': [...]} 형식으로 둡니다.
        """
        def build(raw: Any) -> StepTable:
            if isinstance(raw, dict):
                return StepTable(**raw)
            return StepTable(entries=raw)

        return self._cached('step', path, build)

    def rate_matrix(self, path: str, *axes: Type[Enum]) -> RateMatrix:
        """열거형 축 요율 행렬 조회 (모든 조합이 정의되어 있어야 함)"""
        key = path + ':' + ','.join(axis.__name__ for axis in axes)
        return self._cached('matrix', key, lambda raw: RateMatrix.from_nested(path, raw, axes), source=path)

    def _cached(self, kind: str, key: str, build: Callable[[Any], T], source: Optional[str] = None) -> T:
        cache_key = (kind, key)
        if cache_key not in self._cache:
            raw = _floats_as_text(self.section(source or key))
            try:
                self._cache[cache_key] = build(raw)
            except (ValidationError, TypeError) as exc:
                raise RuleTableError(f"규칙 표 형식이 올바르지 않습니다: {key}: {exc}") from exc
        return self._cache[cache_key]

    def get_rule_metadata(self) -> Dict[str, Any]:
        """규칙 메타데이터 조회

        Returns:
            메타데이터 딕셔너리
        """
        return {
            'version': self.version,
            'rules_dir': str(self.rules_dir),
            'sources': copy.deepcopy(self.sources),
        }


def _floats_as_text(raw: Any) -> Any:
    """YAML float를 문자열로 바꾸어 Decimal 변환 시 이진 오차를 없앰"""
    if isinstance(raw, float):
        return str(raw)
    if isinstance(raw, list):
        return [_floats_as_text(item) for item in raw]
    if isinstance(raw, dict):
        return {key: _floats_as_text(value) for key, value in raw.items()}
    return raw


_default_engine: Optional[RuleEngine] = None


def get_rule_engine() -> RuleEngine:
    """기본 규칙 엔진 반환 (최초 호출 시 로드)"""
    global _default_engine
    if _default_engine is None:
        _default_engine = RuleEngine()
    return _default_engine


def reset_rule_engine() -> None:
    """기본 규칙 엔진 초기화 (테스트용)"""
    global _default_engine
    _default_engine = None
