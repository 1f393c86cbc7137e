from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class Claims:
    """
    검증된 액세스 토큰에서 꺼낸 호출자 정보.

    뷰는 request.auth 로 이 객체를 받아 서비스/유스케이스에 명시적으로 전달합니다.
    (closedBy 기록, 변경 라우트 권한 확인에 사용)
    """

    user_id: int
    email: str
    role: str
    name: str

    @classmethod
    def from_token(cls, token: Any, user: Optional[Any] = None) -> "Claims":
        # 토큰에 없는 값은 DB 유저 정보로 보충
        return cls(
            user_id=int(token.get("user_id") or getattr(user, "pk", 0) or 0),
            email=str(token.get("email") or getattr(user, "email", "") or ""),
            role=str(token.get("role") or getattr(user, "role", "hr") or "hr"),
            name=str(token.get("name") or getattr(user, "name", "") or ""),
        )
