from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorCode:
    """
    API 에러 봉투의 error_code 값.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    ALREADY_CLOSED = "ALREADY_CLOSED"
    ALREADY_OPEN = "ALREADY_OPEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    USER_EXISTS = "USER_EXISTS"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    REGISTRATION_DISABLED = "REGISTRATION_DISABLED"
    SERVER_ERROR = "SERVER_ERROR"


@dataclass(frozen=True, slots=True)
class Err:
    """
    유스케이스/서비스 실패 결과.

    - code: ErrorCode 값 (뷰에서 HTTP 상태로 변환)
    - message: 응답 error 필드에 그대로 실리는 메시지
    - details: 응답 details 필드 (선택)
    """

    code: str
    message: str
    details: Optional[dict] = None


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


Result = Ok[T] | Err
