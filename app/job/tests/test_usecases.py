"""
Tests for job use cases (가짜 저장소 사용, DB 불필요)
"""

import re

from common.application.result import Err, Ok
from common.claims import Claims
from job.application.usecases.change_job_status import ChangeJobStatusUseCase
from job.application.usecases.lookup_job import (
    LookupJobUseCase,
    build_title_pattern,
    parse_job_id,
)
from job.models import Job

ACTOR = Claims(user_id=7, email="hr@example.com", role="hr", name="HR")


class FakeJobRepository:
    def __init__(self, jobs=()):
        self.jobs = list(jobs)
        self.saved = []

    def get_active_by_id(self, job_id):
        return next((j for j in self.jobs if j.pk == job_id and j.is_active), None)

    def get_active_by_shareable_link(self, shareable_link):
        return next(
            (
                j
                for j in self.jobs
                if j.shareable_link == shareable_link and j.is_active
            ),
            None,
        )

    def find_active_by_title_pattern(self, pattern):
        return next(
            (
                j
                for j in self.jobs
                if j.is_active and re.search(pattern, j.title, re.IGNORECASE)
            ),
            None,
        )

    def increment_views(self, job):
        job.views += 1
        return job

    def save(self, job, *, actor_id=None):
        self.saved.append((job, actor_id))
        return job


def _job(pk, **overrides):
    values = {
        "title": "Backend Engineer",
        "description": "APIs",
        "location": "Remote",
        "shareable_link": f"/jobs/backend-engineer-{pk:09d}",
    }
    values.update(overrides)
    job = Job(**values)
    job.pk = pk
    return job


class TestBuildTitlePattern:
    def test_hyphens_become_flexible_separators(self):
        assert build_title_pattern("backend-engineer") == r"backend[-\s]+engineer"

    def test_regex_metacharacters_are_escaped(self):
        assert build_title_pattern("c++-dev") == r"c\+\+[-\s]+dev"

    def test_only_hyphens(self):
        assert build_title_pattern("---") is None


class TestParseJobId:
    def test_ascii_digits(self):
        assert parse_job_id(" 42 ") == 42

    def test_unicode_digits_are_not_ids(self):
        # "²".isdigit() 는 True 지만 int("²") 는 실패
        assert parse_job_id("\u00b2") is None
        assert parse_job_id("\u0663") is None

    def test_mixed_or_empty(self):
        assert parse_job_id("12a") is None
        assert parse_job_id("") is None
        assert parse_job_id(None) is None


class TestLookupJobUseCase:
    def test_unicode_digit_identifier_is_not_found(self):
        # Given
        usecase = LookupJobUseCase(job_repo=FakeJobRepository([_job(2)]))

        # When
        result = usecase.execute(identifier="\u00b2")

        # Then
        assert isinstance(result, Err)
        assert result.code == "NOT_FOUND"

    def test_lookup_by_id_increments_views(self):
        # Given
        job = _job(1)
        usecase = LookupJobUseCase(job_repo=FakeJobRepository([job]))

        # When
        result = usecase.execute(identifier="1")

        # Then
        assert isinstance(result, Ok)
        assert result.value is job
        assert job.views == 1

    def test_lookup_by_slug(self):
        job = _job(2)
        usecase = LookupJobUseCase(job_repo=FakeJobRepository([job]))

        result = usecase.execute(identifier="backend-engineer-000000002")

        assert isinstance(result, Ok)
        assert result.value is job

    def test_lookup_falls_back_to_title(self):
        job = _job(3, title="Senior Data Engineer", shareable_link="/jobs/x-aaaaaaaaa")
        usecase = LookupJobUseCase(job_repo=FakeJobRepository([job]))

        result = usecase.execute(identifier="data-engineer")

        assert isinstance(result, Ok)
        assert result.value is job

    def test_regex_input_does_not_match_everything(self):
        """정규식 메타문자는 문자 그대로 취급"""
        job = _job(4, title="Backend Engineer", shareable_link="/jobs/x-aaaaaaaaa")
        usecase = LookupJobUseCase(job_repo=FakeJobRepository([job]))

        result = usecase.execute(identifier=".*")

        assert isinstance(result, Err)
        assert result.code == "NOT_FOUND"

    def test_inactive_job_is_not_found(self):
        job = _job(5, is_active=False)
        usecase = LookupJobUseCase(job_repo=FakeJobRepository([job]))

        result = usecase.execute(identifier="5")

        assert isinstance(result, Err)
        assert result.code == "NOT_FOUND"
        assert job.views == 0


class TestChangeJobStatusUseCase:
    def test_close_open_job(self):
        # Given
        job = _job(1)
        repo = FakeJobRepository([job])
        usecase = ChangeJobStatusUseCase(job_repo=repo)

        # When
        result = usecase.close(job_id=1, actor=ACTOR)

        # Then
        assert isinstance(result, Ok)
        assert job.status == Job.Status.CLOSED
        assert repo.saved == [(job, 7)]

    def test_close_already_closed(self):
        job = _job(1, status=Job.Status.CLOSED)
        repo = FakeJobRepository([job])

        result = ChangeJobStatusUseCase(job_repo=repo).close(job_id=1, actor=ACTOR)

        assert isinstance(result, Err)
        assert result.code == "ALREADY_CLOSED"
        assert repo.saved == []

    def test_reopen_already_open(self):
        job = _job(1)
        repo = FakeJobRepository([job])

        result = ChangeJobStatusUseCase(job_repo=repo).reopen(job_id=1, actor=ACTOR)

        assert isinstance(result, Err)
        assert result.code == "ALREADY_OPEN"

    def test_reopen_draft_job(self):
        job = _job(1, status=Job.Status.DRAFT)
        repo = FakeJobRepository([job])

        result = ChangeJobStatusUseCase(job_repo=repo).reopen(job_id=1, actor=ACTOR)

        assert isinstance(result, Ok)
        assert job.status == Job.Status.OPEN

    def test_missing_job(self):
        repo = FakeJobRepository()

        result = ChangeJobStatusUseCase(job_repo=repo).close(job_id=99, actor=ACTOR)

        assert isinstance(result, Err)
        assert result.code == "NOT_FOUND"
