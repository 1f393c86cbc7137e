"""
Bearer 토큰 인증

Authorization: Bearer <token> 헤더만 받아들이며, 실패 시 항상 401로 닫힙니다.
성공하면 (user, Claims) 를 돌려주므로 뷰에서는 request.auth 로 Claims를 받습니다.
"""

import logging
import time
from typing import Optional

import jwt
from common.claims import Claims
from common.masking import mask_secrets
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import (
    AUTH_HEADER_TYPE_BYTES,
    JWTAuthentication,
)
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

logger = logging.getLogger(__name__)


class BearerClaimsAuthentication(JWTAuthentication):
    """
    1) 헤더가 없으면 익명 요청으로 통과 (보호 라우트는 권한 검사에서 401)
    2) Bearer 형식이 아니거나 토큰이 비어 있으면 401
    3) 서명 불일치/만료/형식 오류면 401
    """

    def authenticate(self, request):
        header = self.get_header(request)
        if header is None:
            return None

        parts = header.split()
        if not parts or parts[0] not in AUTH_HEADER_TYPE_BYTES:
            logger.warning("Rejected authorization header with non-Bearer scheme")
            raise AuthenticationFailed(
                "Access denied. Invalid token format.", code="invalid_token_format"
            )
        if len(parts) != 2:
            raise AuthenticationFailed(
                "Access denied. Invalid token.", code="invalid_token"
            )

        validated = self.get_validated_token(parts[1])
        user = self.get_user(validated)
        return user, Claims.from_token(validated, user)

    def get_validated_token(self, raw_token):
        try:
            return AccessToken(raw_token)
        except TokenError as e:
            logger.warning(f"Token verification failed: {mask_secrets(str(e))}")
            if _is_expired(raw_token):
                raise AuthenticationFailed("Token has expired", code="token_expired")
            raise AuthenticationFailed("Invalid token", code="token_not_valid")


def _is_expired(raw_token) -> bool:
    """서명 검증 없이 exp 만 읽어 만료 여부를 판단합니다 (에러 메시지 구분용)."""
    try:
        payload = jwt.decode(raw_token, options={"verify_signature": False})
    except jwt.PyJWTError:
        return False
    exp: Optional[float] = payload.get("exp")
    return exp is not None and float(exp) < time.time()
