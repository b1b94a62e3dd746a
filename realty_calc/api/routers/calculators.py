"""계산기 API 라우터"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, HTTPException, status

from ...calculators import get_calculator, list_calculators
from ...core import BusinessRuleError, InputValidationError, RuleTableError
from ..schemas import CalculationResponse, CalculatorInfo, CalculatorListResponse, ErrorDetail

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=CalculatorListResponse)
async def get_calculators(category: Optional[str] = None):
    """계산기 목록 조회

    category를 지정하면 해당 분류(tax, loan, rent, fees, valuation, distribution)만 반환합니다.
    """
    entries = list_calculators(category)
    return CalculatorListResponse(
        count=len(entries),
        calculators=[
            CalculatorInfo(slug=entry.slug, title=entry.title, category=entry.category)
            for entry in entries
        ]
    )


@router.post(
    "/{slug}",
    response_model=CalculationResponse,
    responses={
        400: {"model": ErrorDetail, "description": "입력값 검증 실패"},
        404: {"description": "알 수 없는 계산기"},
        422: {"model": ErrorDetail, "description": "업무 규칙 위반"},
    }
)
async def run_calculator(slug: str, payload: Dict[str, Any] = Body(...)):
    """계산 실행

    요청 본문은 계산기 입력 항목의 JSON 객체입니다.
    """
    entry = get_calculator(slug)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"계산기 '{slug}'를 찾을 수 없습니다."
        )

    try:
        result = entry.function(payload)
    except InputValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": e.message, "errors": e.errors}
        )
    except BusinessRuleError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": e.message, "errors": []}
        )
    except RuleTableError as e:
        logger.error("규칙 테이블 오류 (%s): %s", slug, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="계산 규칙을 불러오지 못했습니다."
        )

    return CalculationResponse(slug=entry.slug, title=entry.title, result=result.to_dict())
