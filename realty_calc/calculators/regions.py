"""규제지역 목록 (투기과열지구·조정대상지역)"""

from dataclasses import dataclass
from typing import List

from ..core import ResultRecord, get_rule_engine


@dataclass(frozen=True)
class RegionInfo(ResultRecord):
    """규제지역 정보

    Attributes:
        name: 지역 이름 (예: "서울 강남구")
        regulated: 규제 여부
        category: speculation, overheated, regulated 중 하나
    """
    name: str
    regulated: bool
    category: str


def list_regulated_regions() -> List[RegionInfo]:
    """규칙 파일에 정의된 규제지역 전체 목록"""
    regions: List[RegionInfo] = []
    for group in get_rule_engine().section('regulated_regions'):
        for name in group['names']:
            regions.append(RegionInfo(
                name=f"{group['prefix']} {name}",
                regulated=True,
                category=group['category'],
            ))
    return regions


def is_regulated_region(name: str) -> bool:
    """지역 이름이 규제지역 목록에 있는지 확인 (앞뒤 공백 무시)"""
    target = name.strip()
    return any(region.name == target for region in list_regulated_regions())
