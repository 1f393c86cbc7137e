"""
Job board API client

브라우저 클라이언트가 호출하던 jobs / auth 엔드포인트를 requests 세션으로 감쌉니다.
- Bearer 토큰을 보관했다가 모든 요청에 붙임
- 401 응답을 받으면 보관 중인 토큰/사용자 정보를 비움
- 실패 응답은 서버 에러 메시지를 담은 JobBoardAPIError 로 변환
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional, TypeVar
from urllib.parse import quote

import requests
from client.dtos import AuthSessionDTO, AuthUserDTO, JobDTO, JobStatsDTO
from common.masking import mask_secrets

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api"
DEFAULT_TIMEOUT = 10

T = TypeVar("T")


class JobBoardAPIError(Exception):
    """
    API 호출 실패

    - status_code: HTTP 상태 (네트워크 오류면 None)
    - error_code: 서버 에러 봉투의 error_code
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        payload: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.payload = payload or {}


def _jobs_from(payload: dict) -> list[JobDTO]:
    data = payload.get("data", payload.get("jobs", []))
    if not isinstance(data, list):
        data = []
    return [JobDTO.model_validate(item) for item in data]


class JobBoardAPI:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.user: Optional[AuthUserDTO] = None
        self.timeout = timeout
        self.session = session or requests.Session()

    # ---------------------------------------------------------------------
    # HTTP
    # ---------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
    ) -> dict:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        url = f"{self.base_url}{path}"
        logger.debug(f"API request {method} {path} params={params}")

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            logger.error(f"API timeout {method} {path}: {e}")
            raise JobBoardAPIError("Connection timeout. Please try again.") from e
        except requests.ConnectionError as e:
            logger.error(f"API connection error {method} {path}: {e}")
            raise JobBoardAPIError(
                "Cannot connect to server. Please check your connection."
            ) from e
        except requests.RequestException as e:
            logger.error(f"API request failed {method} {path}: {e}")
            raise JobBoardAPIError(
                "No response from server. Please check your connection."
            ) from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {"data": payload}

        if response.status_code == 401:
            # 토큰이 만료/무효이면 로컬 인증 정보를 버립니다
            self.clear_auth()

        if not response.ok or payload.get("success") is False:
            message = (
                payload.get("error")
                or payload.get("message")
                or f"HTTP {response.status_code} error"
            )
            logger.warning(
                f"API error {method} {path} -> {response.status_code}: "
                f"{mask_secrets(str(message))}"
            )
            raise JobBoardAPIError(
                message,
                status_code=response.status_code,
                error_code=payload.get("error_code"),
                payload=payload,
            )

        logger.debug(f"API response {method} {path} -> {response.status_code}")
        return payload

    # ---------------------------------------------------------------------
    # Jobs
    # ---------------------------------------------------------------------
    def get_all_jobs(
        self, *, status: Optional[str] = None, show_all: bool = False, **filters
    ) -> list[JobDTO]:
        """
        채용 공고 목록

        Args:
            status: open / closed / draft / all
            show_all: 대시보드용 (상태 기본 필터 해제)
            filters: search, location, employmentType, experienceLevel, sort, limit, page
        """
        params = {key: value for key, value in filters.items() if value}
        if status:
            params["status"] = status
        if show_all:
            params["showAll"] = "true"
        return _jobs_from(self._request("GET", "/jobs", params=params))

    def get_public_jobs(self) -> list[JobDTO]:
        return self.get_all_jobs(status="open")

    def get_open_jobs(self) -> list[JobDTO]:
        return self.get_all_jobs(status="open", show_all=True)

    def get_closed_jobs(self) -> list[JobDTO]:
        return self.get_all_jobs(status="closed", show_all=True)

    def search_jobs(self, keyword: str, location: str = "") -> list[JobDTO]:
        return self.get_all_jobs(search=keyword, location=location)

    def get_recently_closed_jobs(self, limit: int = 5) -> list[JobDTO]:
        jobs = self.get_all_jobs(status="closed", show_all=True, sort="-closedAt")
        return jobs[:limit]

    def get_job(self, identifier) -> JobDTO:
        """ID, 공유 슬러그 또는 하이픈 제목으로 조회 (조회수 증가)"""
        # 제목형 식별자에 ? / # / 공백이 섞여도 경로 한 조각으로 유지
        payload = self._request("GET", f"/jobs/{quote(str(identifier), safe='')}")
        return JobDTO.model_validate(payload.get("data", payload))

    def create_job(self, job_data: dict) -> JobDTO:
        payload = self._request("POST", "/jobs", json=job_data)
        job = JobDTO.model_validate(payload.get("data", payload))
        logger.info(f"Created job {job.id} ({job.shareable_link})")
        return job

    def update_job(self, job_id: int, job_data: dict) -> JobDTO:
        payload = self._request("PUT", f"/jobs/{job_id}", json=job_data)
        return JobDTO.model_validate(payload.get("data", payload))

    def update_job_status(self, job_id: int, status: str) -> JobDTO:
        return self.update_job(job_id, {"status": status})

    def delete_job(self, job_id: int) -> None:
        self._request("DELETE", f"/jobs/{job_id}")
        logger.info(f"Deleted job {job_id}")

    def close_job(self, job_id: int) -> JobDTO:
        payload = self._request("PATCH", f"/jobs/{job_id}/close")
        return JobDTO.model_validate(payload.get("data", payload))

    def reopen_job(self, job_id: int) -> JobDTO:
        payload = self._request("PATCH", f"/jobs/{job_id}/reopen")
        return JobDTO.model_validate(payload.get("data", payload))

    def get_job_stats(self) -> JobStatsDTO:
        payload = self._request("GET", "/jobs/stats/overview")
        return JobStatsDTO.model_validate(payload.get("data", payload))

    def get_suggestions(self, query: str) -> list[JobDTO]:
        return _jobs_from(
            self._request("GET", "/jobs/search/suggestions", params={"query": query})
        )

    # ---------------------------------------------------------------------
    # Auth
    # ---------------------------------------------------------------------
    def login(self, email: str, password: str) -> AuthSessionDTO:
        payload = self._request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        return self._store_session(payload)

    def register(self, email: str, password: str, name: str) -> AuthSessionDTO:
        payload = self._request(
            "POST",
            "/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        return self._store_session(payload)

    def check_auth(self) -> dict:
        """
        토큰 확인. 네트워크 오류를 포함한 모든 실패는 미인증으로 취급합니다.
        """
        try:
            return self._request("GET", "/auth/check")
        except JobBoardAPIError as e:
            logger.warning(f"Auth check failed: {e.message}")
            return {"isAuthenticated": False}

    def change_password(self, current_password: str, new_password: str) -> dict:
        return self._request(
            "PUT",
            "/auth/change-password",
            json={"currentPassword": current_password, "newPassword": new_password},
        )

    def logout(self) -> None:
        self.clear_auth()
        logger.info("Logged out")

    def _store_session(self, payload: dict) -> AuthSessionDTO:
        session = AuthSessionDTO.model_validate(payload)
        self.token = session.token
        self.user = session.user
        logger.info(f"Authenticated as user {session.user.id}")
        return session

    def clear_auth(self) -> None:
        self.token = None
        self.user = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token and self.user)

    def has_role(self, role: str) -> bool:
        return self.user is not None and self.user.role == role

    @property
    def is_hr(self) -> bool:
        return self.has_role("hr") or self.has_role("admin")

    @property
    def is_admin(self) -> bool:
        return self.has_role("admin")


def with_retry(
    call: Callable[[], T],
    max_retries: int = 3,
    delay: float = 1.0,
    *,
    sleep: Callable[[float], Any] = time.sleep,
) -> T:
    """
    API 호출 재시도 (n번째 재시도 전 delay * n 초 대기)

    마지막 시도까지 실패하면 그 예외를 그대로 올립니다.
    """
    for attempt in range(1, max_retries + 1):
        try:
            return call()
        except JobBoardAPIError:
            if attempt == max_retries:
                raise
            logger.info(
                f"Retry attempt {attempt} of {max_retries} after {delay * attempt}s"
            )
            sleep(delay * attempt)
    raise ValueError("max_retries must be at least 1")
