"""규칙 메타데이터 API 라우터"""

from fastapi import APIRouter

from ...core import get_rule_engine
from ..schemas import RuleMetadataResponse, RuleSourceResponse

router = APIRouter()


@router.get("", response_model=RuleMetadataResponse)
async def get_rules():
    """적용 중인 규칙 버전과 파일 목록"""
    metadata = get_rule_engine().get_rule_metadata()
    return RuleMetadataResponse(
        version=str(metadata['version']),
        sources=[
            RuleSourceResponse(**{key: str(value) for key, value in source.items()})
            for source in metadata['sources']
        ]
    )
