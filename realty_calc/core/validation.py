"""입력값 검증 계층

계산기마다 pydantic 입력 모델을 정의하고, 검증 오류는 한국어 메시지의
InputValidationError로 변환합니다.
"""

from decimal import Decimal
from typing import Any, Dict, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import InputValidationError


class CalculatorInput(BaseModel):
    """계산기 입력 모델 기본 클래스 (불변, 정의되지 않은 필드 거부)"""

    model_config = ConfigDict(frozen=True, extra="forbid")


ModelT = TypeVar("ModelT", bound=CalculatorInput)

# 계산기 함수가 받는 입력: 딕셔너리 또는 입력 모델
InputData = Union[CalculatorInput, Mapping[str, Any]]


def parse_input(model_cls: Type[ModelT], data: Union[ModelT, Mapping[str, Any]]) -> ModelT:
    """입력값을 검증하여 모델 인스턴스 반환

    이미 생성된 모델 인스턴스도 매 호출마다 다시 검증합니다.

    Args:
        model_cls: 입력 모델 클래스
        data: 딕셔너리 또는 모델 인스턴스

    Returns:
        검증된 입력 모델

    Raises:
        InputValidationError: 검증 실패
    """
    if isinstance(data, BaseModel):
        payload = data.model_dump()
    elif isinstance(data, Mapping):
        payload = dict(data)
    else:
        raise InputValidationError("입력값은 항목 이름과 값의 묶음이어야 합니다.")

    try:
        return model_cls.model_validate(payload)
    except ValidationError as exc:
        errors = [_translate_error(model_cls, error) for error in exc.errors()]
        message = " ".join(error['message'] for error in errors)
        raise InputValidationError(message, errors) from exc


def with_josa(word: str, pair: str) -> str:
    """단어 뒤에 받침에 맞는 조사를 붙임

    Args:
        word: 단어
        pair: '은/는', '이/가', '을/를' 형식의 조사 쌍

    Returns:
        조사가 붙은 단어
    """
    with_final, without_final = pair.split('/')
    if not word:
        return word
    last = word[-1]
    if '가' <= last <= '힣':
        has_final = (ord(last) - 0xAC00) % 28 != 0
        return word + (with_final if has_final else without_final)
    return f"{word}{with_final}({without_final})"


def _format_bound(value: Any) -> str:
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        number = Decimal(str(value))
        if number == number.to_integral_value():
            return f"{int(number):,}"
        return format(number.normalize(), 'f')
    return str(value)


def _field_label(model_cls: Type[BaseModel], loc: tuple) -> str:
    if not loc:
        return ''
    name = str(loc[0])
    field = model_cls.model_fields.get(name)
    if field is not None and field.description:
        return field.description
    return name


def _translate_error(model_cls: Type[BaseModel], error: Dict[str, Any]) -> Dict[str, str]:
    """pydantic 오류 하나를 한국어 메시지로 변환"""
    loc = tuple(error.get('loc', ()))
    field = '.'.join(str(part) for part in loc)
    label = _field_label(model_cls, loc)
    kind = error.get('type', '')
    ctx = error.get('ctx') or {}
    subject = with_josa(label, '은/는')

    if kind == 'missing':
        message = f"{with_josa(label, '을/를')} 입력해주세요."
    elif kind == 'greater_than':
        message = f"{subject} {_format_bound(ctx.get('gt'))}보다 커야 합니다."
    elif kind == 'greater_than_equal':
        message = f"{subject} {_format_bound(ctx.get('ge'))} 이상이어야 합니다."
    elif kind == 'less_than':
        message = f"{subject} {_format_bound(ctx.get('lt'))}보다 작아야 합니다."
    elif kind == 'less_than_equal':
        message = f"{subject} {_format_bound(ctx.get('le'))} 이하여야 합니다."
    elif kind in ('enum', 'literal_error'):
        message = f"{subject} {ctx.get('expected', '허용된 값')} 중 하나여야 합니다."
    elif kind.startswith('int_'):
        message = f"{subject} 정수여야 합니다."
    elif kind.startswith('bool_'):
        message = f"{subject} 참 또는 거짓이어야 합니다."
    elif kind.startswith('date_'):
        message = f"{subject} YYYY-MM-DD 형식의 날짜여야 합니다."
    elif kind == 'finite_number':
        message = f"{subject} 유한한 숫자여야 합니다."
    elif kind.startswith(('decimal_', 'float_')):
        message = f"{subject} 숫자여야 합니다."
    elif kind == 'extra_forbidden':
        message = f"알 수 없는 입력 항목입니다: {field}"
    elif kind in ('value_error', 'assertion_error') and 'error' in ctx:
        message = str(ctx['error'])
    else:
        message = f"{label}: {error.get('msg', '')}" if label else str(error.get('msg', ''))

    return {'field': field, 'message': message}

