from __future__ import annotations

from common.adapters.django_job_repo import DjangoJobRepository
from job.application.usecases.change_job_status import ChangeJobStatusUseCase
from job.application.usecases.lookup_job import LookupJobUseCase


def build_lookup_job_usecase() -> LookupJobUseCase:
    """
    Job 유스케이스 조립(Dependency Injection).
    """
    return LookupJobUseCase(job_repo=DjangoJobRepository())


def build_change_job_status_usecase() -> ChangeJobStatusUseCase:
    return ChangeJobStatusUseCase(job_repo=DjangoJobRepository())
