from __future__ import annotations

from typing import Optional, Protocol

from job.models import Job


class JobRepositoryPort(Protocol):
    def get_active_by_id(self, job_id: int) -> Optional[Job]: ...

    def get_active_by_shareable_link(self, shareable_link: str) -> Optional[Job]: ...

    def find_active_by_title_pattern(self, pattern: str) -> Optional[Job]: ...

    def increment_views(self, job: Job) -> Job: ...

    def save(self, job: Job, *, actor_id: Optional[int] = None) -> Job: ...
