from __future__ import annotations

import logging
import re
import time
import uuid
from typing import Callable

from common.request_id import reset_request_id, set_request_id
from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class RequestIdMiddleware:
    """
    요청 ID 전파

    클라이언트가 보낸 X-Request-ID 가 형식에 맞으면 그대로 쓰고,
    아니면 새 UUID 를 발급합니다. 응답 헤더에도 같은 값을 실어 보냅니다.
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"
    # 로그 한 줄을 오염시키지 않도록 길이와 문자 집합을 제한
    valid_pattern = re.compile(r"^[A-Za-z0-9._:-]{1,64}$")

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def resolve(self, request: HttpRequest) -> str:
        incoming = str(request.META.get(self.header_name) or "").strip()
        if incoming and self.valid_pattern.match(incoming):
            return incoming
        if incoming:
            logger.debug(f"Ignoring malformed request id header ({len(incoming)} chars)")
        return uuid.uuid4().hex

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = self.resolve(request)
        request.request_id = request_id  # type: ignore[attr-defined]
        token = set_request_id(request_id)
        try:
            response = self.get_response(request)
        finally:
            reset_request_id(token)
        response[self.response_header] = request_id
        return response


class RequestLogMiddleware:
    """
    요청 메서드/경로/상태 코드/소요 시간을 한 줄로 기록합니다.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000
        logger.info(
            f"{request.method} {request.path} -> {response.status_code} "
            f"({elapsed_ms:.1f}ms)"
        )
        return response
