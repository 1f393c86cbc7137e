"""
User Auth Service

이메일/비밀번호 로그인, HR 계정 등록, 비밀번호 변경, JWT 발급
"""

from __future__ import annotations

import logging
from typing import Optional

from common.application.result import Err, ErrorCode, Ok, Result
from common.claims import Claims
from django.conf import settings
from django.contrib.auth import authenticate
from django.db import IntegrityError, transaction
from rest_framework_simplejwt.tokens import RefreshToken
from user.models import User

logger = logging.getLogger(__name__)


class UserAuthService:
    @staticmethod
    def issue_tokens(user: User) -> dict:
        """
        access / refresh 토큰 발급

        access 토큰에는 user_id 외에 email, role, name 클레임을 함께 싣습니다.
        """
        refresh = RefreshToken.for_user(user)
        refresh["email"] = user.email
        refresh["role"] = user.role
        refresh["name"] = user.name
        return {
            "token": str(refresh.access_token),
            "refresh": str(refresh),
        }

    @staticmethod
    def login(*, email: str, password: str, request=None) -> Result[User]:
        """
        이메일(소문자) + 비밀번호 검증

        Returns:
            Ok(user) 또는 Err(INVALID_CREDENTIALS)
        """
        user = authenticate(request, username=email.strip().lower(), password=password)
        if user is None:
            logger.warning("Login failed: invalid credentials")
            return Err(code=ErrorCode.INVALID_CREDENTIALS, message="Invalid email or password")

        logger.info(f"User {user.pk} logged in")
        return Ok(user)

    @staticmethod
    def register(*, email: str, password: str, name: str) -> Result[User]:
        """
        HR 계정 등록 (role 은 항상 hr)

        Returns:
            Ok(user) 또는 Err(REGISTRATION_DISABLED / USER_EXISTS)
        """
        if not getattr(settings, "AUTH_REGISTRATION_ENABLED", True):
            return Err(
                code=ErrorCode.REGISTRATION_DISABLED, message="Registration is disabled"
            )

        email = email.strip().lower()
        if User.objects.filter(email=email).exists():
            return Err(code=ErrorCode.USER_EXISTS, message="User already exists")

        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    email=email, password=password, name=name, role=User.Role.HR
                )
        except IntegrityError:
            # 동시 가입 요청으로 유니크 제약에 걸린 경우
            return Err(code=ErrorCode.USER_EXISTS, message="User already exists")

        logger.info(f"Registered HR user {user.pk}")
        return Ok(user)

    @staticmethod
    def get_user(claims: Optional[Claims]) -> Optional[User]:
        if claims is None:
            return None
        return User.objects.filter(pk=claims.user_id, is_active=True).first()

    @staticmethod
    def change_password(
        *, actor: Claims, current_password: str, new_password: str
    ) -> Result[User]:
        user = UserAuthService.get_user(actor)
        if user is None:
            return Err(code=ErrorCode.NOT_FOUND, message="User not found")

        if not user.check_password(current_password):
            return Err(
                code=ErrorCode.INVALID_PASSWORD, message="Current password is incorrect"
            )

        user.set_password(new_password)
        user.save(update_fields=["password", "updated_at"])
        logger.info(f"User {user.pk} changed password")
        return Ok(user)
