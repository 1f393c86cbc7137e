"""
목록/대시보드 화면에서 쓰는 클라이언트 측 필터
"""

from typing import Iterable, Optional

from client.dtos import JobDTO

ALL = "all"
DASHBOARD_TABS = (ALL, "open", "closed")


def is_listed(job: JobDTO) -> bool:
    # 공개 목록에는 활성 + open 공고만
    return job.is_active and job.status == "open"


def matches_term(job: JobDTO, term: str) -> bool:
    term = term.strip().lower()
    if not term:
        return True
    return any(
        term in (value or "").lower()
        for value in (job.title, job.description, job.location)
    )


def matches_employment_type(job: JobDTO, employment_type: str) -> bool:
    if not employment_type or employment_type.lower() == ALL:
        return True
    return job.employment_type.lower() == employment_type.lower()


def filter_listing(
    jobs: Iterable[JobDTO], search_term: str = "", employment_type: str = ALL
) -> list[JobDTO]:
    """
    공개 목록 필터

    활성 + open → 검색어(제목/설명/위치, 대소문자 무시) → 고용 형태(대소문자 무시)
    """
    return [
        job
        for job in jobs
        if is_listed(job)
        and matches_term(job, search_term)
        and matches_employment_type(job, employment_type)
    ]


def tab_status(tab: str) -> Optional[str]:
    """대시보드 탭 → status 쿼리 값 (all 이면 None)"""
    if tab not in DASHBOARD_TABS:
        raise ValueError(f"Unknown dashboard tab: {tab}")
    return None if tab == ALL else tab


def can_close(job: JobDTO) -> bool:
    return job.status in ("open", "draft")


def can_reopen(job: JobDTO) -> bool:
    return job.status == "closed"


def available_actions(job: JobDTO) -> list[str]:
    if can_reopen(job):
        return ["reopen", "view"]
    return ["edit", "close", "delete"]


def related_jobs(job: JobDTO, candidates: Iterable[JobDTO], limit: int = 3) -> list:
    return [candidate for candidate in candidates if candidate.id != job.id][:limit]
