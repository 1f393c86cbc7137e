from __future__ import annotations

import logging

from common.application.result import Err, ErrorCode, Ok, Result
from common.claims import Claims
from common.ports.job_repo import JobRepositoryPort
from job.models import Job

logger = logging.getLogger(__name__)


class ChangeJobStatusUseCase:
    """
    채용 공고 마감/재오픈 유스케이스.

    상태만 바꾸고 저장하면 closed_at/closed_by 는 Job.save() 의
    라이프사이클 규칙이 맞춰 줍니다.

    주의: 읽고-수정-저장 사이에 낙관적 잠금이 없으므로
    같은 공고에 대한 동시 요청은 마지막 저장이 이깁니다.
    """

    def __init__(self, *, job_repo: JobRepositoryPort):
        self._job_repo = job_repo

    def close(self, *, job_id: int, actor: Claims) -> Result[Job]:
        job = self._job_repo.get_active_by_id(job_id)
        if job is None:
            return Err(code=ErrorCode.NOT_FOUND, message="Job not found")
        if job.status == Job.Status.CLOSED:
            return Err(code=ErrorCode.ALREADY_CLOSED, message="Job is already closed")

        job.status = Job.Status.CLOSED
        job.closed_at = None
        self._job_repo.save(job, actor_id=actor.user_id)
        logger.info(f"Job {job_id} closed by user {actor.user_id}")
        return Ok(job)

    def reopen(self, *, job_id: int, actor: Claims) -> Result[Job]:
        job = self._job_repo.get_active_by_id(job_id)
        if job is None:
            return Err(code=ErrorCode.NOT_FOUND, message="Job not found")
        if job.status == Job.Status.OPEN:
            return Err(code=ErrorCode.ALREADY_OPEN, message="Job is already open")

        job.status = Job.Status.OPEN
        self._job_repo.save(job, actor_id=actor.user_id)
        logger.info(f"Job {job_id} reopened by user {actor.user_id}")
        return Ok(job)
