"""
User Views

로그인 / 회원가입 / 토큰 확인 / 비밀번호 변경
"""

import logging

from common.application.result import Err
from common.authentication import BearerClaimsAuthentication
from common.responses import (
    err_response,
    server_error_response,
    validation_error_response,
)
from drf_spectacular.utils import OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from user.serializers import (
    ChangePasswordSerializer,
    UserLoginSerializer,
    UserRegistrationSerializer,
    UserSerializer,
)
from user.services import UserAuthService

logger = logging.getLogger(__name__)


def _validation_error(message, serializer):
    return validation_error_response(message, details=serializer.errors)


def _auth_payload(user, message):
    return {
        "success": True,
        "message": message,
        **UserAuthService.issue_tokens(user),
        "user": UserSerializer(user).data,
    }


class UserLoginView(APIView):
    # 만료된 토큰을 들고 와도 로그인은 가능해야 합니다
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        request=UserLoginSerializer,
        responses={200: OpenApiTypes.OBJECT},
        summary="User Login",
        description="Login with email and password to get JWT tokens.",
    )
    def post(self, request):
        serializer = UserLoginSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_error("Email and password are required", serializer)

        try:
            result = UserAuthService.login(
                email=serializer.validated_data["email"],
                password=serializer.validated_data["password"],
                request=request,
            )
            if isinstance(result, Err):
                return err_response(result)

            return Response(
                _auth_payload(result.value, "Login successful"),
                status=status.HTTP_200_OK,
            )
        except Exception as e:
            logger.error(f"Login error: {str(e)}", exc_info=True)
            return server_error_response("Server error during login")


class UserRegistrationView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        request=UserRegistrationSerializer,
        responses={201: OpenApiTypes.OBJECT},
        summary="Register HR user",
    )
    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_error("Invalid registration data", serializer)

        try:
            result = UserAuthService.register(**serializer.validated_data)
            if isinstance(result, Err):
                return err_response(result)

            return Response(
                _auth_payload(result.value, "User registered successfully"),
                status=status.HTTP_201_CREATED,
            )
        except Exception as e:
            logger.error(f"Registration error: {str(e)}", exc_info=True)
            return server_error_response("Server error during registration")


class AuthCheckView(APIView):
    """
    토큰 유효성 확인

    어떤 경우에도 실패 응답을 내지 않고 isAuthenticated 로만 결과를 알립니다.
    """

    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(responses={200: OpenApiTypes.OBJECT}, summary="Check token")
    def get(self, request):
        try:
            authenticated = BearerClaimsAuthentication().authenticate(request)
        except AuthenticationFailed as e:
            logger.info(f"Auth check rejected token: {e.detail}")
            authenticated = None

        if authenticated is None:
            return Response({"isAuthenticated": False})

        user, _claims = authenticated
        return Response({"isAuthenticated": True, "user": UserSerializer(user).data})


class ChangePasswordView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=ChangePasswordSerializer,
        responses={200: OpenApiTypes.OBJECT},
        summary="Change password",
    )
    def put(self, request):
        serializer = ChangePasswordSerializer(data=request.data)
        if not serializer.is_valid():
            return _validation_error("Invalid password data", serializer)

        try:
            result = UserAuthService.change_password(
                actor=request.auth, **serializer.validated_data
            )
            if isinstance(result, Err):
                return err_response(result)

            return Response(
                {"success": True, "message": "Password updated successfully"},
                status=status.HTTP_200_OK,
            )
        except Exception as e:
            logger.error(f"Change password error: {str(e)}", exc_info=True)
            return server_error_response("Server error while changing password")
