"""
Job Service

채용 공고 조회/생성/수정/소프트 삭제/통계 서비스
"""

import logging
import math
from typing import Dict, List, Optional

from common.application.result import Result
from common.claims import Claims
from django.db import transaction
from django.db.models import Count, Q
from job.application.container import (
    build_change_job_status_usecase,
    build_lookup_job_usecase,
)
from job.dtos import (
    BucketDTO,
    JobCountsDTO,
    JobStatsOverviewDTO,
    PaginationDTO,
    RecentActivityDTO,
)
from job.models import Job
from job.queries import build_job_filter, open_status_q, parse_sort

logger = logging.getLogger(__name__)

# API 생성 시 값이 비어 있으면 채우는 기본값
CREATE_DEFAULTS = {
    "salary": "Not specified",
    "employment_type": Job.EmploymentType.FULL_TIME,
    "status": Job.Status.OPEN,
    "experience_level": Job.ExperienceLevel.MID,
    "company": "Our Company",
    "department": "Engineering",
}

SUGGESTION_MIN_LENGTH = 2
SUGGESTION_LIMIT = 10
RECENT_ACTIVITY_LIMIT = 5


def _percentage(part: int, whole: int) -> int:
    # 반올림(half-up), total 이 0이면 0
    if whole <= 0:
        return 0
    return int(math.floor(part / whole * 100 + 0.5))


class JobService:
    """
    채용 공고 서비스

    상태 전이(마감/재오픈)와 식별자 조회는 유스케이스에 위임하고,
    나머지 CRUD/집계를 담당합니다.
    """

    @staticmethod
    def list_jobs(query_params: Dict) -> Dict:
        """
        채용 공고 목록 조회 (필터 + 페이지네이션)

        Args:
            query_params: JobListQuerySerializer 로 검증된 파라미터

        Returns:
            jobs(해당 페이지 목록), total(필터 결과 전체 수),
            pagination(PaginationDTO), stats(JobCountsDTO)
        """
        filters = build_job_filter(
            status=query_params.get("status"),
            show_all=query_params.get("show_all", False),
            search=query_params.get("search"),
            location=query_params.get("location"),
            employment_type=query_params.get("employment_type"),
            experience_level=query_params.get("experience_level"),
        )
        limit = query_params.get("limit", 50)
        page = query_params.get("page", 1)
        skip = (page - 1) * limit

        queryset = Job.objects.filter(filters).order_by(
            *parse_sort(query_params.get("sort"))
        )
        total = queryset.count()
        jobs = list(queryset[skip : skip + limit])

        return {
            "jobs": jobs,
            "total": total,
            "pagination": PaginationDTO(
                page=page, limit=limit, total_pages=math.ceil(total / limit)
            ),
            "stats": JobService.count_jobs(),
        }

    @staticmethod
    def count_jobs() -> JobCountsDTO:
        """
        현재 필터와 무관한 활성 공고 집계 (total / open / closed)
        """
        counts = Job.objects.filter(is_active=True).aggregate(
            total=Count("id"),
            open=Count("id", filter=open_status_q()),
            closed=Count("id", filter=Q(status=Job.Status.CLOSED)),
        )
        return JobCountsDTO(**counts)

    @staticmethod
    def get_active_job(job_id: int) -> Optional[Job]:
        """
        활성 공고 조회

        Args:
            job_id: 채용 공고 ID

        Returns:
            Job 객체 또는 None (없거나 소프트 삭제된 경우)
        """
        job = Job.objects.filter(pk=job_id, is_active=True).first()
        if job is None:
            logger.warning(f"Job {job_id} not found")
        return job

    @staticmethod
    def lookup_job(identifier: str) -> Result[Job]:
        usecase = build_lookup_job_usecase()
        return usecase.execute(identifier=identifier)

    @staticmethod
    def create_job(data: Dict, actor: Claims) -> Job:
        """
        채용 공고 생성

        Args:
            data: 검증된 채용 공고 데이터 딕셔너리
            actor: 생성 요청자 (closed 상태로 생성 시 closed_by 로 기록)

        Returns:
            생성된 Job 객체
        """
        values = dict(data)
        for key, default in CREATE_DEFAULTS.items():
            if not values.get(key):
                values[key] = default
        values.setdefault("skills", [])

        with transaction.atomic():
            job = Job(**values)
            job.save(actor_id=actor.user_id)
            logger.info(f"Created Job {job.pk} ({job.shareable_link})")
            return job

    @staticmethod
    def update_job(job_id: int, data: Dict, actor: Claims) -> Optional[Job]:
        """
        채용 공고 수정 (전달된 필드만)

        closed_at / closed_by 는 변경 전후 상태를 비교해 라이프사이클 규칙이 다시 계산합니다.

        Returns:
            수정된 Job 객체 또는 None
        """
        job = JobService.get_active_job(job_id)
        if not job:
            return None

        with transaction.atomic():
            for key, value in data.items():
                setattr(job, key, value)
            job.save(actor_id=actor.user_id)
            logger.info(f"Updated Job {job_id} by user {actor.user_id}")
            return job

    @staticmethod
    def soft_delete_job(job_id: int, actor: Claims) -> bool:
        """
        채용 공고 소프트 삭제 (is_active=False)

        Returns:
            삭제 성공 여부
        """
        job = JobService.get_active_job(job_id)
        if not job:
            return False

        with transaction.atomic():
            job.is_active = False
            job.save(actor_id=actor.user_id)
            logger.info(f"Soft-deleted Job {job_id} by user {actor.user_id}")
            return True

    @staticmethod
    def close_job(job_id: int, actor: Claims) -> Result[Job]:
        usecase = build_change_job_status_usecase()
        return usecase.close(job_id=job_id, actor=actor)

    @staticmethod
    def reopen_job(job_id: int, actor: Claims) -> Result[Job]:
        usecase = build_change_job_status_usecase()
        return usecase.reopen(job_id=job_id, actor=actor)

    @staticmethod
    def get_stats_overview() -> JobStatsOverviewDTO:
        """
        HR 대시보드용 통계

        Returns:
            JobStatsOverviewDTO (집계, 고용 형태/경력별 분포, 최근 변경 5건)
        """
        counts = JobService.count_jobs()
        active = Job.objects.filter(is_active=True)

        by_employment_type = [
            BucketDTO(value=row["employment_type"], count=row["count"])
            for row in active.values("employment_type")
            .annotate(count=Count("id"))
            .order_by("-count", "employment_type")
        ]
        by_experience_level = [
            BucketDTO(value=row["experience_level"], count=row["count"])
            for row in active.exclude(experience_level="")
            .values("experience_level")
            .annotate(count=Count("id"))
            .order_by("-count", "experience_level")
        ]
        recent_activity = [
            RecentActivityDTO(**row)
            for row in active.order_by("-updated_at", "-id").values(
                "id", "title", "status", "updated_at"
            )[:RECENT_ACTIVITY_LIMIT]
        ]

        return JobStatsOverviewDTO(
            total=counts.total,
            open=counts.open,
            closed=counts.closed,
            closed_percentage=_percentage(counts.closed, counts.total),
            by_employment_type=by_employment_type,
            by_experience_level=by_experience_level,
            recent_activity=recent_activity,
        )

    @staticmethod
    def suggest_jobs(query: Optional[str]) -> List[Job]:
        """
        검색어 자동완성 후보 (제목/설명/위치 부분 일치, 최대 10건)
        """
        query = (query or "").strip()
        if len(query) < SUGGESTION_MIN_LENGTH:
            return []

        return list(
            Job.objects.filter(is_active=True)
            .filter(
                Q(title__icontains=query)
                | Q(description__icontains=query)
                | Q(location__icontains=query)
            )
            .only("id", "title", "location", "employment_type")[:SUGGESTION_LIMIT]
        )
