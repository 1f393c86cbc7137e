"""
HR 대시보드

탭(all / open / closed)에 맞춰 공고를 불러오고, 생성/수정/마감/재오픈/삭제 후에는
목록과 통계를 다시 불러옵니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from client.api import JobBoardAPI, JobBoardAPIError
from client.dtos import JobDTO, JobStatsDTO
from client.filters import ALL, can_close, can_reopen, tab_status

logger = logging.getLogger(__name__)


@dataclass
class HRDashboard:
    api: JobBoardAPI
    active_tab: str = ALL
    jobs: list[JobDTO] = field(default_factory=list)
    stats: JobStatsDTO = field(default_factory=JobStatsDTO)
    error: str = ""

    def set_tab(self, tab: str) -> None:
        tab_status(tab)
        self.active_tab = tab
        self.refresh()

    def refresh(self) -> None:
        self.fetch_jobs()
        self.fetch_stats()

    def fetch_jobs(self) -> list[JobDTO]:
        self.error = ""
        try:
            self.jobs = self.api.get_all_jobs(
                status=tab_status(self.active_tab), show_all=True
            )
        except JobBoardAPIError as e:
            logger.error(f"Error fetching jobs: {e.message}")
            self.jobs = []
            self.error = "Failed to load jobs. Please try again."
            return self.jobs

        if not self.jobs:
            label = "" if self.active_tab == ALL else f"{self.active_tab} "
            self.error = f"No {label}jobs found."
        return self.jobs

    def fetch_stats(self) -> JobStatsDTO:
        try:
            self.stats = self.api.get_job_stats()
        except JobBoardAPIError as e:
            # 통계 실패는 목록 화면을 막지 않도록 0으로 표시
            logger.error(f"Error fetching stats: {e.message}")
            self.stats = JobStatsDTO()
        return self.stats

    def create_job(self, job_data: dict) -> JobDTO:
        job = self.api.create_job(job_data)
        self.refresh()
        return job

    def update_job(self, job_id: int, job_data: dict) -> JobDTO:
        job = self.api.update_job(job_id, job_data)
        self.refresh()
        return job

    def close_job(self, job: JobDTO) -> JobDTO:
        if not can_close(job):
            raise ValueError(f"Job {job.id} cannot be closed from status {job.status}")
        closed = self.api.close_job(job.id)
        self.refresh()
        return closed

    def reopen_job(self, job: JobDTO) -> JobDTO:
        if not can_reopen(job):
            raise ValueError(f"Job {job.id} cannot be reopened from status {job.status}")
        reopened = self.api.reopen_job(job.id)
        self.refresh()
        return reopened

    def delete_job(self, job_id: int) -> None:
        self.api.delete_job(job_id)
        self.refresh()
