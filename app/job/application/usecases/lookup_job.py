from __future__ import annotations

import logging
import re
from typing import Optional

from common.application.result import Err, ErrorCode, Ok, Result
from common.ports.job_repo import JobRepositoryPort
from job.domain.lifecycle import SHAREABLE_LINK_PREFIX
from job.models import Job

logger = logging.getLogger(__name__)

# 제목 폴백 시 하이픈 자리에 허용할 구분자
_TITLE_SEPARATOR = r"[-\s]+"
# ASCII 숫자만 (str.isdigit 은 "²" 같은 유니코드 숫자도 통과시킴)
_JOB_ID_PATTERN = re.compile(r"[0-9]+")


def parse_job_id(value) -> Optional[int]:
    text = "" if value is None else str(value).strip()
    if not _JOB_ID_PATTERN.fullmatch(text):
        return None
    return int(text)


def build_title_pattern(identifier: str) -> Optional[str]:
    """
    식별자 → 제목 매칭용 정규식

    하이픈으로 나눈 각 토큰은 re.escape 로 이스케이프해서
    사용자 입력이 패턴으로 해석되지 않도록 합니다.
    """
    tokens = [token for token in identifier.split("-") if token.strip()]
    if not tokens:
        return None
    return _TITLE_SEPARATOR.join(re.escape(token.strip()) for token in tokens)


class LookupJobUseCase:
    """
    식별자로 공개 공고를 조회하는 유스케이스.

    - 1) 숫자면 PK 조회
    - 2) shareable_link 슬러그 조회
    - 3) 제목 폴백 (이스케이프된 토큰 + 하이픈/공백 허용)
    - 찾으면 조회수를 1 증가시키고 증가된 값으로 반환
    """

    def __init__(self, *, job_repo: JobRepositoryPort):
        self._job_repo = job_repo

    def execute(self, *, identifier: str) -> Result[Job]:
        identifier = (identifier or "").strip()
        if not identifier:
            return Err(code=ErrorCode.NOT_FOUND, message="Job not found")

        job = self._find(identifier)
        if job is None:
            logger.info(f"Job lookup miss for identifier={identifier!r}")
            return Err(
                code=ErrorCode.NOT_FOUND,
                message="Job not found",
                details={"identifier": identifier},
            )

        return Ok(self._job_repo.increment_views(job))

    def _find(self, identifier: str) -> Optional[Job]:
        job_id = parse_job_id(identifier)
        if job_id is not None:
            job = self._job_repo.get_active_by_id(job_id)
            if job is not None:
                return job

        job = self._job_repo.get_active_by_shareable_link(
            f"{SHAREABLE_LINK_PREFIX}{identifier}"
        )
        if job is not None:
            return job

        pattern = build_title_pattern(identifier)
        if pattern is None:
            return None
        return self._job_repo.find_active_by_title_pattern(pattern)
