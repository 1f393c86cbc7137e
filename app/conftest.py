# app/conftest.py
"""
pytest fixtures for API testing
"""
import pytest
from rest_framework.test import APIClient
from user.models import User
from user.services import UserAuthService


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    """
    테스트에서는 빠른 해셔를 사용합니다.
    """
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def hr_user(db):
    """
    로그인 가능한 HR 사용자
    """
    return User.objects.create_user(
        email="hr@example.com", password="secret123", name="HR Manager"
    )


@pytest.fixture
def access_token(hr_user):
    return UserAuthService.issue_tokens(hr_user)["token"]


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def auth_client(access_token):
    """
    Bearer 토큰이 설정된 APIClient
    """
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {access_token}")
    return client


@pytest.fixture
def make_job(db):
    """
    Job 생성 팩토리 (기본값은 활성 open 공고)
    """
    from job.models import Job

    def _make_job(**overrides):
        values = {
            "title": "Backend Engineer",
            "description": "Build APIs with Django",
            "location": "Remote",
        }
        values.update(overrides)
        job = Job(**values)
        job.save()
        return job

    return _make_job
