"""
Tests for BearerClaimsAuthentication
"""

from datetime import timedelta

import pytest
from common.authentication import BearerClaimsAuthentication
from common.claims import Claims
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.test import APIRequestFactory
from rest_framework_simplejwt.tokens import AccessToken
from user.models import User
from user.services import UserAuthService


@pytest.mark.django_db
class TestBearerClaimsAuthentication:
    def setup_method(self):
        self.factory = APIRequestFactory()
        self.auth = BearerClaimsAuthentication()
        self.user = User.objects.create_user(
            email="hr@example.com", password="secret123", name="HR Manager"
        )

    def _request(self, header=None):
        extra = {"HTTP_AUTHORIZATION": header} if header is not None else {}
        return self.factory.get("/api/jobs/stats/overview", **extra)

    def test_no_header_is_anonymous(self):
        assert self.auth.authenticate(self._request()) is None

    def test_valid_token_returns_claims(self):
        # Given
        token = UserAuthService.issue_tokens(self.user)["token"]

        # When
        user, claims = self.auth.authenticate(self._request(f"Bearer {token}"))

        # Then
        assert user == self.user
        assert claims == Claims(
            user_id=self.user.pk, email="hr@example.com", role="hr", name="HR Manager"
        )

    def test_non_bearer_scheme(self):
        with pytest.raises(AuthenticationFailed) as exc_info:
            self.auth.authenticate(self._request("Basic abc"))

        assert str(exc_info.value.detail) == "Access denied. Invalid token format."

    def test_bearer_without_token(self):
        with pytest.raises(AuthenticationFailed) as exc_info:
            self.auth.authenticate(self._request("Bearer"))

        assert str(exc_info.value.detail) == "Access denied. Invalid token."

    def test_expired_token(self):
        # Given
        token = AccessToken.for_user(self.user)
        token.set_exp(lifetime=-timedelta(minutes=1))

        # When / Then
        with pytest.raises(AuthenticationFailed) as exc_info:
            self.auth.authenticate(self._request(f"Bearer {token}"))
        assert str(exc_info.value.detail) == "Token has expired"

    def test_tampered_token(self):
        token = str(AccessToken.for_user(self.user))
        tampered = token[:-4] + ("aaaa" if not token.endswith("aaaa") else "bbbb")

        with pytest.raises(AuthenticationFailed) as exc_info:
            self.auth.authenticate(self._request(f"Bearer {tampered}"))

        assert str(exc_info.value.detail) == "Invalid token"

    def test_garbage_token(self):
        with pytest.raises(AuthenticationFailed) as exc_info:
            self.auth.authenticate(self._request("Bearer not-a-jwt"))

        assert str(exc_info.value.detail) == "Invalid token"
