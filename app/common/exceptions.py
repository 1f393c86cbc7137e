"""
DRF 예외를 공통 에러 봉투로 변환

{"success": false, "error": "<메시지>", "error_code": "<코드>", "details": {...}}
"""

import logging

from common.application.result import ErrorCode
from rest_framework import exceptions
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

_ERROR_CODES = [
    (exceptions.NotAuthenticated, ErrorCode.AUTHENTICATION_FAILED),
    (exceptions.AuthenticationFailed, ErrorCode.AUTHENTICATION_FAILED),
    (exceptions.PermissionDenied, ErrorCode.PERMISSION_DENIED),
    (exceptions.NotFound, ErrorCode.NOT_FOUND),
    (exceptions.ValidationError, ErrorCode.VALIDATION_ERROR),
    (exceptions.MethodNotAllowed, ErrorCode.METHOD_NOT_ALLOWED),
    (exceptions.ParseError, ErrorCode.VALIDATION_ERROR),
]


def envelope_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        # 처리되지 않은 예외는 Django handler500 으로 넘어갑니다
        return None

    error_code = "REQUEST_ERROR"
    for exc_class, code in _ERROR_CODES:
        if isinstance(exc, exc_class):
            error_code = code
            break

    data = response.data
    details = None
    if isinstance(exc, exceptions.NotAuthenticated):
        message = "Access denied. No token provided."
    elif isinstance(data, dict) and "detail" in data:
        message = str(data["detail"])
    elif isinstance(exc, exceptions.ValidationError):
        message = "Invalid request data"
        details = data if isinstance(data, dict) else {"non_field_errors": data}
    else:
        message = str(getattr(exc, "detail", exc))

    payload = {"success": False, "error": message, "error_code": error_code}
    if details:
        payload["details"] = details

    if response.status_code >= 500:
        logger.error(f"API error {response.status_code}: {message}")
    response.data = payload
    return response
