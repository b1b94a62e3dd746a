"""규제지역 API 라우터"""

from fastapi import APIRouter

from ...calculators.regions import is_regulated_region, list_regulated_regions
from ..schemas import RegionCheckResponse, RegionResponse, RegulatedRegionsResponse

router = APIRouter()


@router.get("/regulated", response_model=RegulatedRegionsResponse)
async def get_regulated_regions():
    """규제지역 목록 조회"""
    regions = list_regulated_regions()
    return RegulatedRegionsResponse(
        count=len(regions),
        regions=[RegionResponse(**region.to_dict()) for region in regions]
    )


@router.get("/regulated/{name}", response_model=RegionCheckResponse)
async def check_regulated_region(name: str):
    """지역 이름의 규제지역 여부 확인 (예: 서울 강남구)"""
    return RegionCheckResponse(name=name, regulated=is_regulated_region(name))
