"""
Tests for HRDashboard / JobListing / JobDetail (API는 mock)
"""

from unittest.mock import MagicMock

import pytest
from client.api import JobBoardAPI, JobBoardAPIError
from client.dashboard import HRDashboard
from client.dtos import JobDTO, JobStatsDTO
from client.listing import JobDetail, JobListing


def _job(**overrides):
    values = {"id": 1, "title": "Backend Engineer", "location": "Remote"}
    values.update(overrides)
    return JobDTO.model_validate(values)


class TestHRDashboard:
    def setup_method(self):
        self.api = MagicMock(spec=JobBoardAPI)
        self.api.get_all_jobs.return_value = [_job()]
        self.api.get_job_stats.return_value = JobStatsDTO(total=1, open=1)
        self.dashboard = HRDashboard(api=self.api)

    def test_tab_selects_status(self):
        # When
        self.dashboard.set_tab("closed")

        # Then
        self.api.get_all_jobs.assert_called_with(status="closed", show_all=True)
        self.api.get_job_stats.assert_called_once()

    def test_all_tab_has_no_status(self):
        self.dashboard.refresh()

        self.api.get_all_jobs.assert_called_with(status=None, show_all=True)
        assert self.dashboard.stats.total == 1

    def test_close_refreshes_jobs_and_stats(self):
        # Given
        self.api.close_job.return_value = _job(status="closed")

        # When
        closed = self.dashboard.close_job(_job(status="open"))

        # Then
        assert closed.status == "closed"
        self.api.close_job.assert_called_once_with(1)
        assert self.api.get_all_jobs.call_count == 1
        assert self.api.get_job_stats.call_count == 1

    def test_failed_mutation_does_not_refresh(self):
        self.api.reopen_job.side_effect = JobBoardAPIError("Job is already open")

        with pytest.raises(JobBoardAPIError, match="already open"):
            self.dashboard.reopen_job(_job(status="closed"))

        self.api.get_all_jobs.assert_not_called()

    def test_empty_tab_message(self):
        self.api.get_all_jobs.return_value = []
        self.dashboard.active_tab = "open"

        self.dashboard.fetch_jobs()

        assert self.dashboard.error == "No open jobs found."

    def test_stats_failure_shows_zeroes(self):
        self.api.get_job_stats.side_effect = JobBoardAPIError("Server error")

        stats = self.dashboard.fetch_stats()

        assert stats == JobStatsDTO()


class TestJobListing:
    def test_load_and_filter(self):
        # Given
        api = MagicMock(spec=JobBoardAPI)
        api.get_public_jobs.return_value = [
            _job(id=1),
            _job(id=2, title="Designer", location="Seoul"),
        ]
        listing = JobListing(api=api)

        # When
        listing.load()
        listing.search_term = "seoul"

        # Then
        assert [job.id for job in listing.visible_jobs] == [2]
        assert listing.summary() == "Showing 1 of 2 available job"

    def test_load_failure(self):
        api = MagicMock(spec=JobBoardAPI)
        api.get_public_jobs.side_effect = JobBoardAPIError("down")
        listing = JobListing(api=api)

        assert listing.load() == []
        assert listing.error == "Failed to load jobs. Please try again later."


class TestJobDetail:
    def test_load_with_related_jobs(self):
        # Given
        api = MagicMock(spec=JobBoardAPI)
        api.get_job.return_value = _job(
            id=1, shareable_link="/jobs/backend-engineer-abc123xyz"
        )
        api.search_jobs.return_value = [_job(id=i) for i in range(1, 6)]
        detail = JobDetail(api=api)

        # When
        job = detail.load("backend-engineer-abc123xyz")

        # Then
        assert job.id == 1
        api.search_jobs.assert_called_once_with("Backend", "Remote")
        assert [j.id for j in detail.related] == [2, 3, 4]
        assert (
            detail.share_url("https://jobs.example.com/")
            == "https://jobs.example.com/jobs/backend-engineer-abc123xyz"
        )

    def test_not_found(self):
        api = MagicMock(spec=JobBoardAPI)
        api.get_job.side_effect = JobBoardAPIError("Job not found", status_code=404)
        detail = JobDetail(api=api)

        assert detail.load("missing") is None
        assert detail.error == "Job not found or has been removed."
