from __future__ import annotations

import logging

from common.masking import mask_secrets
from common.request_id import get_request_id


class RequestIdFilter(logging.Filter):
    """모든 레코드에 request_id 속성을 채웁니다 (요청 밖에서는 "-")."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True


class SecretMaskingFilter(logging.Filter):
    """
    최종 메시지(args 포함)에서 토큰/비밀번호를 가립니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_secrets(message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True
