"""
Job Views

채용 공고 API 엔드포인트 (Thin Controller)
"""

import logging
from collections.abc import Mapping

from common.application.result import Err, ErrorCode
from common.responses import (
    err_response,
    error_response,
    server_error_response,
    success_response,
    validation_error_response,
)
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from job.application.usecases.lookup_job import parse_job_id
from job.models import Job
from job.serializers import (
    JobListQuerySerializer,
    JobSerializer,
    JobSuggestionSerializer,
)
from job.services import JobService
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.viewsets import GenericViewSet

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "description", "location")

PUBLIC_ACTIONS = {"list", "retrieve", "suggestions"}


def _not_found():
    return error_response(
        "Job not found", code=ErrorCode.NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND
    )


class JobViewSet(GenericViewSet):
    """
    채용 공고 ViewSet (Thin Controller)

    비즈니스 로직은 JobService에 위임하고,
    HTTP 요청/응답 처리만 담당합니다.
    조회(list/retrieve/suggestions)는 공개, 나머지는 Bearer 토큰이 필요합니다.
    """

    queryset = Job.objects.filter(is_active=True)
    serializer_class = JobSerializer
    lookup_value_regex = "[^/]+"

    def get_permissions(self):
        if self.action in PUBLIC_ACTIONS:
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(
        parameters=[JobListQuerySerializer],
        summary="List jobs",
        description="Filter, search, sort and paginate active job postings.",
    )
    def list(self, request, *args, **kwargs):
        """
        채용 공고 목록 조회

        GET /api/jobs?status=&showAll=&search=&location=&employmentType=&experienceLevel=&sort=&limit=&page=
        """
        query = JobListQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return validation_error_response(
                "Invalid query parameters", details=query.errors
            )

        try:
            result = JobService.list_jobs(query.validated_data)
            serializer = self.get_serializer(result["jobs"], many=True)
            return success_response(
                serializer.data,
                count=len(serializer.data),
                total=result["total"],
                pagination=result["pagination"].model_dump(by_alias=True),
                stats=result["stats"].model_dump(),
            )
        except Exception as e:
            logger.error(f"Failed to list jobs: {str(e)}", exc_info=True)
            return server_error_response("Server error while fetching jobs")

    @extend_schema(
        parameters=[
            OpenApiParameter(
                "pk",
                OpenApiTypes.STR,
                OpenApiParameter.PATH,
                description="Job id, shareable slug or hyphenated title",
            )
        ],
        summary="Get job by id or slug",
    )
    def retrieve(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 상세 조회 (ID → 슬러그 → 제목 순으로 탐색, 조회수 증가)

        GET /api/jobs/<identifier>
        """
        try:
            result = JobService.lookup_job(pk)
            if isinstance(result, Err):
                return err_response(result)

            serializer = self.get_serializer(result.value)
            return success_response(serializer.data)
        except Exception as e:
            logger.error(f"Failed to retrieve job {pk}: {str(e)}", exc_info=True)
            return server_error_response("Server error while fetching job")

    def create(self, request, *args, **kwargs):
        """
        채용 공고 생성

        POST /api/jobs
        """
        # JSON 배열/스칼라 본문은 필드가 하나도 없는 것으로 취급
        data = request.data if isinstance(request.data, Mapping) else {}
        missing = [
            field for field in REQUIRED_FIELDS if not str(data.get(field) or "").strip()
        ]
        if missing:
            return validation_error_response(
                "Title, description, and location are required",
                details={"missing": missing},
            )

        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response("Invalid job data", details=serializer.errors)

        try:
            job = JobService.create_job(serializer.validated_data, actor=request.auth)
            return success_response(
                self.get_serializer(job).data,
                message="Job created successfully",
                status_code=status.HTTP_201_CREATED,
            )
        except Exception as e:
            logger.error(f"Failed to create job: {str(e)}", exc_info=True)
            return server_error_response("Server error while creating job")

    def update(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 수정 (전달된 필드만 반영)

        PUT /api/jobs/<id>
        PATCH /api/jobs/<id>
        """
        job_id = parse_job_id(pk)
        if job_id is None:
            return _not_found()

        serializer = self.get_serializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return validation_error_response("Invalid job data", details=serializer.errors)

        try:
            job = JobService.update_job(
                job_id, serializer.validated_data, actor=request.auth
            )
            if not job:
                return _not_found()

            return success_response(
                self.get_serializer(job).data, message="Job updated successfully"
            )
        except Exception as e:
            logger.error(f"Failed to update job {pk}: {str(e)}", exc_info=True)
            return server_error_response("Server error while updating job")

    def partial_update(self, request, pk=None, *args, **kwargs):
        return self.update(request, pk, *args, **kwargs)

    def destroy(self, request, pk=None, *args, **kwargs):
        """
        채용 공고 소프트 삭제

        DELETE /api/jobs/<id>
        """
        job_id = parse_job_id(pk)
        if job_id is None:
            return _not_found()

        try:
            if not JobService.soft_delete_job(job_id, actor=request.auth):
                return _not_found()
            return success_response(message="Job deleted successfully")
        except Exception as e:
            logger.error(f"Failed to delete job {pk}: {str(e)}", exc_info=True)
            return server_error_response("Server error while deleting job")

    @extend_schema(request=None, responses=JobSerializer, summary="Close job")
    @action(detail=True, methods=["patch"])
    def close(self, request, pk=None):
        """
        채용 공고 마감

        PATCH /api/jobs/<id>/close
        """
        job_id = parse_job_id(pk)
        if job_id is None:
            return _not_found()

        try:
            result = JobService.close_job(job_id, actor=request.auth)
            if isinstance(result, Err):
                return err_response(result)
            return success_response(
                self.get_serializer(result.value).data,
                message="Job closed successfully",
            )
        except Exception as e:
            logger.error(f"Failed to close job {pk}: {str(e)}", exc_info=True)
            return server_error_response("Server error while closing job")

    @extend_schema(request=None, responses=JobSerializer, summary="Reopen job")
    @action(detail=True, methods=["patch"])
    def reopen(self, request, pk=None):
        """
        채용 공고 재오픈

        PATCH /api/jobs/<id>/reopen
        """
        job_id = parse_job_id(pk)
        if job_id is None:
            return _not_found()

        try:
            result = JobService.reopen_job(job_id, actor=request.auth)
            if isinstance(result, Err):
                return err_response(result)
            return success_response(
                self.get_serializer(result.value).data,
                message="Job reopened successfully",
            )
        except Exception as e:
            logger.error(f"Failed to reopen job {pk}: {str(e)}", exc_info=True)
            return server_error_response("Server error while reopening job")

    @extend_schema(responses=OpenApiTypes.OBJECT, summary="Job statistics")
    @action(detail=False, methods=["get"], url_path="stats/overview")
    def stats_overview(self, request):
        """
        채용 공고 통계

        GET /api/jobs/stats/overview
        """
        try:
            stats = JobService.get_stats_overview()
            return success_response(stats.model_dump(by_alias=True, mode="json"))
        except Exception as e:
            logger.error(f"Failed to fetch job stats: {str(e)}", exc_info=True)
            return server_error_response("Server error while fetching job statistics")

    @extend_schema(
        parameters=[OpenApiParameter("query", OpenApiTypes.STR)],
        responses=JobSuggestionSerializer(many=True),
        summary="Search suggestions",
    )
    @action(detail=False, methods=["get"], url_path="search/suggestions")
    def suggestions(self, request):
        """
        검색어 자동완성

        GET /api/jobs/search/suggestions?query=
        """
        try:
            jobs = JobService.suggest_jobs(request.query_params.get("query"))
            return success_response(JobSuggestionSerializer(jobs, many=True).data)
        except Exception as e:
            logger.error(f"Failed to fetch suggestions: {str(e)}", exc_info=True)
            return server_error_response("Server error while fetching suggestions")
