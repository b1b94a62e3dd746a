"""계산 결과 레코드 공통 기능"""

from dataclasses import asdict
from typing import Any, Dict


class ResultRecord:
    """불변 결과 데이터클래스의 믹스인"""

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환 (중첩 레코드와 튜플은 딕셔너리·리스트로 변환)"""
        return _plain(asdict(self))


def _plain(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
