from __future__ import annotations

import re

REDACTED = "[REDACTED]"
MAX_LOG_TEXT = 500

# header.payload.signature 형태 (base64url 3조각)
_JWT_PATTERN = re.compile(r"\beyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]*")
_BEARER_PATTERN = re.compile(r"(Bearer)\s+\S+", re.IGNORECASE)
# "password": "..." / token=... 처럼 키가 드러난 값은 키는 남기고 값만 가림
_SECRET_FIELD_PATTERN = re.compile(
    r"(?P<key>\b(?:token|refresh|access|password|currentPassword|newPassword)\b['\"]?"
    r"\s*[:=]\s*)(?P<quote>['\"]?)[^\s,'\"}]+",
    re.IGNORECASE,
)


def mask_secrets(text: str, limit: int = MAX_LOG_TEXT) -> str:
    """
    로그에 토큰/비밀번호가 남지 않도록 마스킹하고 limit 글자로 자릅니다.
    """
    if not text:
        return text
    masked = _BEARER_PATTERN.sub(rf"\1 {REDACTED}", text)
    masked = _JWT_PATTERN.sub(REDACTED, masked)
    masked = _SECRET_FIELD_PATTERN.sub(
        lambda m: f"{m.group('key')}{m.group('quote')}{REDACTED}", masked
    )
    if len(masked) > limit:
        masked = masked[:limit] + "...[TRUNCATED]"
    return masked
