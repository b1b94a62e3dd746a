"""계산기 예외 정의"""

from typing import Dict, List, Optional


class CalculatorError(ValueError):
    """계산기 공통 예외

    Attributes:
        message: 사용자에게 표시할 한국어 메시지
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(CalculatorError):
    """입력값 검증 실패

    계산을 시작하기 전에 발생합니다.

    Attributes:
        errors: 필드별 오류 목록 ({'field': ..., 'message': ...})
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.errors = errors or [{'field': '', 'message': message}]


class BusinessRuleError(CalculatorError):
    """업무 규칙 위반

    입력 형식은 유효하지만 항목 간 관계가 맞지 않는 경우 계산 중에 발생합니다.
    """


class RuleTableError(RuntimeError):
    """규칙 테이블 누락 또는 손상 (설정 오류)"""
