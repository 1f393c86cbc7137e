"""
공개 채용 공고 목록 / 상세
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from client.api import JobBoardAPI, JobBoardAPIError
from client.dtos import JobDTO
from client.filters import ALL, filter_listing, related_jobs

logger = logging.getLogger(__name__)


@dataclass
class JobListing:
    """
    공개 목록 화면 상태

    open 공고를 한 번 불러온 뒤 검색어/고용 형태 필터는 클라이언트에서 적용합니다.
    """

    api: JobBoardAPI
    jobs: list[JobDTO] = field(default_factory=list)
    search_term: str = ""
    employment_type: str = ALL
    error: str = ""

    def load(self) -> list[JobDTO]:
        self.error = ""
        try:
            self.jobs = self.api.get_public_jobs()
        except JobBoardAPIError as e:
            logger.error(f"Error fetching jobs: {e.message}")
            self.jobs = []
            self.error = "Failed to load jobs. Please try again later."
            return self.jobs

        if not self.jobs:
            self.error = "No job postings available at the moment."
        return self.jobs

    @property
    def visible_jobs(self) -> list[JobDTO]:
        return filter_listing(self.jobs, self.search_term, self.employment_type)

    def clear_filters(self) -> None:
        self.search_term = ""
        self.employment_type = ALL

    def summary(self) -> str:
        shown = len(self.visible_jobs)
        plural = "" if shown == 1 else "s"
        return f"Showing {shown} of {len(self.jobs)} available job{plural}"


@dataclass
class JobDetail:
    """
    상세 화면 상태 (공고 + 같은 첫 단어/위치의 관련 공고 최대 3건)
    """

    api: JobBoardAPI
    job: Optional[JobDTO] = None
    related: list[JobDTO] = field(default_factory=list)
    error: str = ""

    def load(self, identifier) -> Optional[JobDTO]:
        self.error = ""
        try:
            self.job = self.api.get_job(identifier)
        except JobBoardAPIError as e:
            logger.error(f"Error fetching job {identifier}: {e.message}")
            self.job = None
            self.related = []
            self.error = "Job not found or has been removed."
            return None

        keyword = self.job.title.split(" ")[0] if self.job.title else ""
        try:
            candidates = self.api.search_jobs(keyword, self.job.location)
        except JobBoardAPIError as e:
            logger.warning(f"Error fetching related jobs: {e.message}")
            candidates = []
        self.related = related_jobs(self.job, candidates)
        return self.job

    def share_url(self, origin: str) -> Optional[str]:
        if self.job is None or not self.job.shareable_link:
            return None
        return f"{origin.rstrip('/')}{self.job.shareable_link}"
