"""
채용 공고 상태 라이프사이클 규칙

저장 경로(생성/수정/마감/재오픈/관리자 액션)는 모두 Job.save() 를 거치고,
Job.save() 는 항상 apply_lifecycle_rules() 를 호출합니다.
"""

from __future__ import annotations

import re
import secrets
import string
from datetime import datetime, timezone
from typing import Optional, Protocol

STATUS_OPEN = "open"
STATUS_CLOSED = "closed"
STATUS_DRAFT = "draft"

SLUG_MAX_LENGTH = 50
SUFFIX_LENGTH = 9
SHAREABLE_LINK_PREFIX = "/jobs/"

_BASE36 = string.digits + string.ascii_lowercase
_NON_WORD = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE = re.compile(r"\s+", re.ASCII)


class LifecycleTarget(Protocol):
    title: str
    status: str
    shareable_link: str
    closed_at: Optional[datetime]
    closed_by_id: Optional[int]


def slugify_title(title: str) -> str:
    """
    제목 → URL 슬러그

    소문자화 → 영숫자/밑줄/공백/하이픈 외 문자 제거 → 공백 묶음을 하이픈으로 → 50자 절단
    """
    slug = _NON_WORD.sub("", (title or "").strip().lower())
    slug = _WHITESPACE.sub("-", slug)
    return slug[:SLUG_MAX_LENGTH]


def random_suffix(length: int = SUFFIX_LENGTH) -> str:
    return "".join(secrets.choice(_BASE36) for _ in range(length))


def build_shareable_link(title: str, suffix: Optional[str] = None) -> str:
    return f"{SHAREABLE_LINK_PREFIX}{slugify_title(title)}-{suffix or random_suffix()}"


def apply_lifecycle_rules(
    previous_status: Optional[str],
    job: LifecycleTarget,
    *,
    actor_id: Optional[int] = None,
    now: Optional[datetime] = None,
) -> LifecycleTarget:
    """
    저장 직전 파생 필드를 맞춥니다.

    Args:
        previous_status: DB에 저장돼 있던 상태 (신규 레코드면 None)
        job: 저장하려는 공고 (제자리에서 수정됨)
        actor_id: 상태를 바꾼 사용자 ID (closed_by 기록용, 선택)
        now: 기준 시각 (테스트용, 기본값은 현재 UTC)

    Returns:
        같은 job 인스턴스

    규칙:
    - shareable_link 가 비어 있을 때만 한 번 생성 (이후 제목이 바뀌어도 유지)
    - closed 상태인데 closed_at 이 없으면 closed_at=now
      (이번 저장에서 closed 로 바뀐 경우에만 closed_by=actor)
    - closed 가 아닌 상태에서는 closed_at/closed_by 를 항상 비움
      (closed_at 은 status == closed 일 때만 값을 가진다)
    """
    if not job.shareable_link:
        job.shareable_link = build_shareable_link(job.title)

    status_changed = previous_status != job.status

    if job.status == STATUS_CLOSED:
        if job.closed_at is None:
            job.closed_at = now or datetime.now(timezone.utc)
            if status_changed and actor_id is not None:
                job.closed_by_id = actor_id
    elif job.closed_at is not None or job.closed_by_id is not None:
        job.closed_at = None
        job.closed_by_id = None

    return job
