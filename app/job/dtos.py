from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class JobCountsDTO(BaseModel):
    total: int = Field(description="활성 공고 수")
    open: int = Field(description="open 상태 활성 공고 수")
    closed: int = Field(description="closed 상태 활성 공고 수")


class PaginationDTO(BaseModel):
    page: int = Field(description="현재 페이지 (1부터)")
    limit: int = Field(description="페이지 크기")
    total_pages: int = Field(serialization_alias="totalPages", description="전체 페이지 수")


class BucketDTO(BaseModel):
    value: Optional[str] = Field(default=None, description="그룹 값")
    count: int = Field(description="공고 수")


class RecentActivityDTO(BaseModel):
    id: int
    title: str
    status: str
    updated_at: datetime = Field(serialization_alias="updatedAt")


class JobStatsOverviewDTO(BaseModel):
    total: int
    open: int
    closed: int
    closed_percentage: int = Field(
        serialization_alias="closedPercentage", description="마감 비율(%)"
    )
    by_employment_type: list[BucketDTO] = Field(
        default_factory=list, serialization_alias="byEmploymentType"
    )
    by_experience_level: list[BucketDTO] = Field(
        default_factory=list, serialization_alias="byExperienceLevel"
    )
    recent_activity: list[RecentActivityDTO] = Field(
        default_factory=list, serialization_alias="recentActivity"
    )
