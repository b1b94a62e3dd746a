"""재건축 연한 계산기"""

import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import Field, model_validator

from ...core import CalculatorInput, InputData, ResultRecord, get_rule_engine, parse_input, traced


class ReconstructionBuildingType(str, Enum):
    RC = "rc"
    BRICK = "brick"
    WOOD = "wood"
    STEEL = "steel"


class ReconstructionInput(CalculatorInput):
    """재건축 연한 입력

    기준 연도를 생략하면 올해를 기준으로 합니다.
    """

    approval_year: int = Field(..., ge=1900, description="사용승인 연도")
    building_type: ReconstructionBuildingType = Field(..., description="건물 구조")
    reference_year: Optional[int] = Field(None, ge=1900, description="기준 연도")

    @model_validator(mode="after")
    def _check_years(self) -> "ReconstructionInput":
        if self.approval_year > self.effective_reference_year:
            raise ValueError("사용승인 연도는 기준 연도를 초과할 수 없습니다.")
        return self

    @property
    def effective_reference_year(self) -> int:
        if self.reference_year is not None:
            return self.reference_year
        return datetime.date.today().year


@dataclass(frozen=True)
class ReconstructionResult(ResultRecord):
    standard_years: int
    minimum_years: int
    reconstruction_year: int
    early_reconstruction_year: int
    elapsed_years: int
    remaining_years: int


@traced
def calculate_reconstruction(data: InputData) -> ReconstructionResult:
    """구조별 표준·최소 연한으로 재건축 가능 연도 계산"""
    params = parse_input(ReconstructionInput, data)
    standards = get_rule_engine().section(f'reconstruction.standards.{params.building_type.value}')
    standard = int(standards['standard'])
    minimum = int(standards['minimum'])

    elapsed = params.effective_reference_year - params.approval_year

    return ReconstructionResult(
        standard_years=standard,
        minimum_years=minimum,
        reconstruction_year=params.approval_year + standard,
        early_reconstruction_year=params.approval_year + minimum,
        elapsed_years=elapsed,
        remaining_years=max(0, standard - elapsed),
    )
