import pytest
from client.dtos import JobDTO
from client.filters import (
    available_actions,
    can_close,
    can_reopen,
    filter_listing,
    related_jobs,
    tab_status,
)


def _job(**overrides):
    values = {
        "id": 1,
        "title": "Backend Engineer",
        "description": "Build APIs",
        "location": "Remote",
        "employmentType": "Full-time",
    }
    values.update(overrides)
    return JobDTO.model_validate(values)


class TestFilterListing:
    def setup_method(self):
        self.jobs = [
            _job(id=1),
            _job(
                id=2,
                title="Designer",
                description="Figma",
                location="Seoul",
                employmentType="Part-time",
            ),
            _job(id=3, status="closed"),
            _job(id=4, isActive=False),
        ]

    def test_only_active_open_jobs(self):
        assert [job.id for job in filter_listing(self.jobs)] == [1, 2]

    def test_missing_status_and_active_flags_count_as_listed(self):
        job = JobDTO.model_validate({"id": 9, "title": "Bare"})

        assert filter_listing([job]) == [job]

    def test_search_term_is_case_insensitive(self):
        assert [job.id for job in filter_listing(self.jobs, "SEOUL")] == [2]
        assert [job.id for job in filter_listing(self.jobs, "apis")] == [1]

    def test_employment_type_is_case_insensitive(self):
        assert [job.id for job in filter_listing(self.jobs, "", "part-time")] == [2]
        assert len(filter_listing(self.jobs, "", "all")) == 2


class TestDashboardHelpers:
    def test_tab_status(self):
        assert tab_status("all") is None
        assert tab_status("open") == "open"
        assert tab_status("closed") == "closed"
        with pytest.raises(ValueError):
            tab_status("draft")

    def test_actions_by_status(self):
        assert can_close(_job(status="draft"))
        assert not can_reopen(_job(status="open"))
        assert available_actions(_job(status="open")) == ["edit", "close", "delete"]
        assert available_actions(_job(status="closed")) == ["reopen", "view"]

    def test_related_jobs_exclude_current(self):
        current = _job(id=1)
        candidates = [_job(id=i) for i in range(1, 6)]

        assert [job.id for job in related_jobs(current, candidates)] == [2, 3, 4]
