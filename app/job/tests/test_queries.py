"""
Tests for job listing filters / sorting
"""

import pytest
from job.models import Job
from job.queries import build_job_filter, parse_sort


class TestParseSort:
    def test_default_sort(self):
        assert parse_sort(None) == ["-created_at", "-id"]

    def test_multiple_keys(self):
        assert parse_sort("title,-views") == ["title", "-views", "-id"]

    def test_space_separated_keys(self):
        assert parse_sort("location -updatedAt") == ["location", "-updated_at", "-id"]

    def test_unknown_keys_fall_back_to_default(self):
        assert parse_sort("-password") == ["-created_at", "-id"]


@pytest.mark.django_db
class TestBuildJobFilter:
    def setup_method(self):
        self.open_job = Job(title="Backend Engineer", description="Django", location="Seoul")
        self.open_job.save()
        self.closed_job = Job(
            title="Frontend Engineer",
            description="React",
            location="Remote",
            status=Job.Status.CLOSED,
        )
        self.closed_job.save()
        self.draft_job = Job(
            title="Data Engineer",
            description="Spark",
            location="Busan",
            status=Job.Status.DRAFT,
            employment_type=Job.EmploymentType.CONTRACT,
        )
        self.draft_job.save()
        self.deleted_job = Job(
            title="Deleted Engineer", description="Gone", location="Seoul", is_active=False
        )
        self.deleted_job.save()

    def _titles(self, **kwargs):
        return set(
            Job.objects.filter(build_job_filter(**kwargs)).values_list("title", flat=True)
        )

    def test_default_returns_only_active_open_jobs(self):
        assert self._titles() == {"Backend Engineer"}

    def test_status_is_ignored_without_show_all(self):
        assert self._titles(status="closed") == {"Backend Engineer"}

    def test_show_all_returns_every_active_status(self):
        assert self._titles(show_all=True) == {
            "Backend Engineer",
            "Frontend Engineer",
            "Data Engineer",
        }

    def test_show_all_with_status(self):
        assert self._titles(show_all=True, status="closed") == {"Frontend Engineer"}

    def test_show_all_with_status_all(self):
        assert len(self._titles(show_all=True, status="all")) == 3

    def test_search_matches_any_term_in_title_or_description(self):
        assert self._titles(show_all=True, search="react spark") == {
            "Frontend Engineer",
            "Data Engineer",
        }

    def test_location_is_case_insensitive(self):
        assert self._titles(show_all=True, location="seoul") == {"Backend Engineer"}

    def test_employment_type(self):
        assert self._titles(show_all=True, employment_type="Contract") == {
            "Data Engineer"
        }
        assert len(self._titles(show_all=True, employment_type="all")) == 3
