"""API 요청/응답 스키마 (Pydantic)"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# ============================================================================
# 계산기 관련 스키마
# ============================================================================

class CalculatorInfo(BaseModel):
    """계산기 목록 항목"""
    slug: str = Field(..., description="경로 이름")
    title: str = Field(..., description="계산기 이름")
    category: str = Field(..., description="분류")


class CalculatorListResponse(BaseModel):
    """계산기 목록 응답"""
    count: int
    calculators: List[CalculatorInfo]


class CalculationResponse(BaseModel):
    """계산 결과 응답"""
    slug: str
    title: str
    result: Dict[str, Any]

    class Config:
        json_schema_extra = {
            "example": {
                "slug": "jeonse-to-monthly",
                "title": "전세 → 월세 전환",
                "result": {"monthly_rent": 1087500, "conversion_rate": 4.5}
            }
        }


class FieldError(BaseModel):
    """필드별 오류"""
    field: str
    message: str


class ErrorDetail(BaseModel):
    """오류 응답 본문 (HTTPException detail)"""
    message: str
    errors: List[FieldError] = Field(default_factory=list)


# ============================================================================
# 규제지역·규칙 관련 스키마
# ============================================================================

class RegionResponse(BaseModel):
    """규제지역"""
    name: str
    regulated: bool
    category: str


class RegulatedRegionsResponse(BaseModel):
    count: int
    regions: List[RegionResponse]


class RegionCheckResponse(BaseModel):
    name: str
    regulated: bool


class RuleSourceResponse(BaseModel):
    """규칙 파일 메타데이터"""
    file: str
    version: Optional[str] = None
    effective_date: Optional[str] = None
    description: Optional[str] = None


class RuleMetadataResponse(BaseModel):
    version: str
    sources: List[RuleSourceResponse]
