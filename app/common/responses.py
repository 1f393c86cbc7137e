"""
공통 응답 봉투

성공: {"success": true, ["message"], ["data"], ...추가 필드}
실패: {"success": false, "error", "error_code", ["details"]}
"""

from __future__ import annotations

from typing import Any, Optional

from common.application.result import Err, ErrorCode
from rest_framework import status
from rest_framework.response import Response

# Err.code → HTTP 상태 (목록에 없으면 400)
ERROR_STATUS = {
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.AUTHENTICATION_FAILED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.REGISTRATION_DISABLED: status.HTTP_403_FORBIDDEN,
    ErrorCode.SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def success_response(
    data: Any = None,
    *,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
    **extra: Any,
) -> Response:
    payload: dict[str, Any] = {"success": True}
    if message:
        payload["message"] = message
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return Response(payload, status=status_code)


def error_response(
    message: str,
    *,
    code: str,
    status_code: int,
    details: Optional[dict] = None,
) -> Response:
    payload: dict[str, Any] = {"success": False, "error": message, "error_code": code}
    if details:
        payload["details"] = details
    return Response(payload, status=status_code)


def err_response(err: Err) -> Response:
    return error_response(
        err.message,
        code=err.code,
        status_code=ERROR_STATUS.get(err.code, status.HTTP_400_BAD_REQUEST),
        details=err.details,
    )


def validation_error_response(message: str, details: Optional[dict] = None) -> Response:
    return error_response(
        message,
        code=ErrorCode.VALIDATION_ERROR,
        status_code=status.HTTP_400_BAD_REQUEST,
        details=details,
    )


def server_error_response(message: str) -> Response:
    # 스택 트레이스는 서버 로그에만 남기고 응답에는 일반 메시지만 보냅니다
    return error_response(
        message,
        code=ErrorCode.SERVER_ERROR,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
