"""
Tests for auth endpoints (login / register / check / change-password)
"""

from datetime import timedelta

import pytest
from django.test import override_settings
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken
from user.models import User


@pytest.mark.django_db
class TestLogin:
    def setup_method(self):
        self.client = APIClient()
        self.user = User.objects.create_user(
            email="hr@example.com", password="secret123", name="HR Manager"
        )

    def test_login_success(self):
        # When
        response = self.client.post(
            "/api/auth/login",
            {"email": "HR@Example.com", "password": "secret123"},
            format="json",
        )

        # Then
        assert response.status_code == status.HTTP_200_OK
        assert response.data["success"] is True
        assert response.data["token"]
        assert response.data["refresh"]
        assert response.data["user"] == {
            "id": self.user.pk,
            "email": "hr@example.com",
            "role": "hr",
            "name": "HR Manager",
        }
        assert "password" not in response.data["user"]

        token = AccessToken(response.data["token"])
        assert token["email"] == "hr@example.com"
        assert token["role"] == "hr"
        assert token["name"] == "HR Manager"

    def test_login_wrong_password(self):
        response = self.client.post(
            "/api/auth/login",
            {"email": "hr@example.com", "password": "wrong-pass"},
            format="json",
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["error"] == "Invalid email or password"

    def test_login_unknown_email(self):
        response = self.client.post(
            "/api/auth/login",
            {"email": "nobody@example.com", "password": "secret123"},
            format="json",
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_requires_fields(self):
        response = self.client.post("/api/auth/login/", {}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["error"] == "Email and password are required"

    def test_password_is_hashed(self):
        self.user.refresh_from_db()

        assert self.user.password != "secret123"
        assert self.user.check_password("secret123")


@pytest.mark.django_db
class TestRegister:
    def setup_method(self):
        self.client = APIClient()

    def test_register_creates_hr_user(self):
        # When
        response = self.client.post(
            "/api/auth/register",
            {"email": "New@Example.com", "password": "secret1", "name": "New HR"},
            format="json",
        )

        # Then
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["user"]["email"] == "new@example.com"
        assert response.data["user"]["role"] == "hr"
        assert response.data["token"]
        assert User.objects.filter(email="new@example.com").exists()

    def test_register_duplicate(self):
        User.objects.create_user(email="hr@example.com", password="secret123")

        response = self.client.post(
            "/api/auth/register",
            {"email": "hr@example.com", "password": "secret1", "name": "Dup"},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["error"] == "User already exists"
        assert response.data["error_code"] == "USER_EXISTS"

    def test_register_short_password(self):
        response = self.client.post(
            "/api/auth/register",
            {"email": "a@example.com", "password": "12345", "name": "A"},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "password" in response.data["details"]

    @override_settings(AUTH_REGISTRATION_ENABLED=False)
    def test_register_disabled(self):
        response = self.client.post(
            "/api/auth/register",
            {"email": "a@example.com", "password": "secret1", "name": "A"},
            format="json",
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.data["error_code"] == "REGISTRATION_DISABLED"


@pytest.mark.django_db
class TestAuthCheck:
    def setup_method(self):
        self.client = APIClient()
        self.user = User.objects.create_user(
            email="hr@example.com", password="secret123", name="HR Manager"
        )

    def test_without_token(self):
        response = self.client.get("/api/auth/check")

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"isAuthenticated": False}

    def test_with_valid_token(self):
        token = AccessToken.for_user(self.user)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        response = self.client.get("/api/auth/check")

        assert response.data["isAuthenticated"] is True
        assert response.data["user"]["email"] == "hr@example.com"

    def test_with_expired_token(self):
        token = AccessToken.for_user(self.user)
        token.set_exp(lifetime=-timedelta(minutes=1))
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        response = self.client.get("/api/auth/check")

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"isAuthenticated": False}

    def test_with_deleted_user(self):
        token = AccessToken.for_user(self.user)
        self.user.delete()
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        response = self.client.get("/api/auth/check")

        assert response.data == {"isAuthenticated": False}


@pytest.mark.django_db
class TestChangePassword:
    def setup_method(self):
        self.client = APIClient()
        self.user = User.objects.create_user(
            email="hr@example.com", password="secret123", name="HR Manager"
        )
        token = AccessToken.for_user(self.user)
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

    def test_change_password(self):
        # When
        response = self.client.put(
            "/api/auth/change-password",
            {"currentPassword": "secret123", "newPassword": "newsecret"},
            format="json",
        )

        # Then
        assert response.status_code == status.HTTP_200_OK
        self.user.refresh_from_db()
        assert self.user.check_password("newsecret")

    def test_wrong_current_password(self):
        response = self.client.put(
            "/api/auth/change-password",
            {"currentPassword": "nope123", "newPassword": "newsecret"},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["error_code"] == "INVALID_PASSWORD"

    def test_requires_token(self):
        self.client.credentials()

        response = self.client.put(
            "/api/auth/change-password",
            {"currentPassword": "secret123", "newPassword": "newsecret"},
            format="json",
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
