"""
채용 공고 목록 필터/정렬 조립

쿼리 파라미터(이미 검증된 값) → Django Q / order_by 인자
"""

from __future__ import annotations

import re
from typing import Optional

from django.db.models import Q
from job.models import Job

DEFAULT_SORT = "-createdAt"

# 외부(camelCase) 정렬 키 → 모델 필드
SORT_FIELDS = {
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "closedAt": "closed_at",
    "title": "title",
    "location": "location",
    "views": "views",
}

_SORT_SPLIT = re.compile(r"[\s,]+")


def open_status_q() -> Q:
    return Q(status=Job.Status.OPEN)


def build_job_filter(
    *,
    status: Optional[str] = None,
    show_all: bool = False,
    search: Optional[str] = None,
    location: Optional[str] = None,
    employment_type: Optional[str] = None,
    experience_level: Optional[str] = None,
) -> Q:
    """
    목록 필터 정책

    - 항상 is_active=True
    - show_all 이 아니면 open 공고만 (status 파라미터 무시)
    - show_all 이면 status 가 주어지고 "all" 이 아닐 때만 해당 상태로 제한
    - search: 공백으로 나눈 단어 중 하나라도 제목/설명에 포함되면 매칭
    - location: 대소문자 무시 부분 일치
    - employment_type / experience_level: "all" 이 아니면 정확히 일치
    """
    q = Q(is_active=True)

    if not show_all:
        q &= open_status_q()
    elif status and status != "all":
        q &= Q(status=status)

    terms = [term for term in (search or "").split() if term]
    if terms:
        text_q = Q()
        for term in terms:
            text_q |= Q(title__icontains=term) | Q(description__icontains=term)
        q &= text_q

    if location:
        q &= Q(location__icontains=location)

    if employment_type and employment_type != "all":
        q &= Q(employment_type=employment_type)

    if experience_level and experience_level != "all":
        q &= Q(experience_level=experience_level)

    return q


def parse_sort(sort: Optional[str]) -> list[str]:
    """
    "-createdAt" / "title,-views" / "location -updatedAt" → ["-created_at", ...]

    알 수 없는 키는 버리고, 남는 게 없으면 기본 정렬(-createdAt)을 사용합니다.
    """
    order_by: list[str] = []
    for token in _SORT_SPLIT.split((sort or "").strip()):
        if not token:
            continue
        descending = token.startswith("-")
        field = SORT_FIELDS.get(token.lstrip("-+"))
        if field is None:
            continue
        order_by.append(f"-{field}" if descending else field)

    if not order_by:
        return parse_sort(DEFAULT_SORT)
    # 동일 정렬 값 사이의 페이지 경계를 안정적으로 유지
    order_by.append("-id")
    return order_by
