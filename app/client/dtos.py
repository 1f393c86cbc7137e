"""
API 응답을 클라이언트에서 다루기 위한 DTO (camelCase 응답 → snake_case 속성)
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

CLIENT_MODEL_CONFIG = ConfigDict(populate_by_name=True, extra="ignore")


class JobDTO(BaseModel):
    """
    채용 공고

    목록 화면처럼 isActive / status 가 빠진 응답은 활성 / open 으로 간주합니다.
    """

    model_config = CLIENT_MODEL_CONFIG

    id: Optional[int] = None
    title: str = ""
    description: str = ""
    location: str = ""
    salary: str = "Not specified"
    employment_type: str = Field(default="", alias="employmentType")
    status: str = "open"
    is_active: bool = Field(default=True, alias="isActive")
    shareable_link: Optional[str] = Field(default=None, alias="shareableLink")
    closed_at: Optional[datetime] = Field(default=None, alias="closedAt")
    closed_by: Optional[int] = Field(default=None, alias="closedBy")
    skills: list[str] = Field(default_factory=list)
    experience_level: str = Field(default="", alias="experienceLevel")
    company: str = ""
    department: str = ""
    views: int = 0
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class BucketDTO(BaseModel):
    value: Optional[str] = None
    count: int = 0


class RecentActivityDTO(BaseModel):
    model_config = CLIENT_MODEL_CONFIG

    id: int
    title: str
    status: str
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class JobStatsDTO(BaseModel):
    model_config = CLIENT_MODEL_CONFIG

    total: int = 0
    open: int = 0
    closed: int = 0
    closed_percentage: int = Field(default=0, alias="closedPercentage")
    by_employment_type: list[BucketDTO] = Field(
        default_factory=list, alias="byEmploymentType"
    )
    by_experience_level: list[BucketDTO] = Field(
        default_factory=list, alias="byExperienceLevel"
    )
    recent_activity: list[RecentActivityDTO] = Field(
        default_factory=list, alias="recentActivity"
    )


class AuthUserDTO(BaseModel):
    model_config = CLIENT_MODEL_CONFIG

    id: int
    email: str
    role: str = "hr"
    name: str = ""

    @property
    def is_hr(self) -> bool:
        return self.role in ("hr", "admin")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class AuthSessionDTO(BaseModel):
    token: str
    refresh: Optional[str] = None
    user: AuthUserDTO
