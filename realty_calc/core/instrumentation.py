"""계산기 호출 추적 데코레이터

패키지 로거에 핸들러가 없으면 아무 것도 출력하지 않습니다.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


def traced(func: F) -> F:
    """계산기 진입/종료를 DEBUG 레벨로 기록

    예외는 기록 후 그대로 전파합니다.
    """
    logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s - 시작: args=%r kwargs=%r", func.__name__, args, kwargs)
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            logger.debug("%s - 실패: %s", func.__name__, exc, exc_info=True)
            raise
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s - 완료: %r", func.__name__, result)
        return result

    return wrapper  # type: ignore[return-value]
