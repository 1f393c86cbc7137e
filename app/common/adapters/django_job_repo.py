from __future__ import annotations

from typing import Optional

from django.db import transaction
from django.db.models import F
from job.models import Job


class DjangoJobRepository:
    def _active(self):
        return Job.objects.filter(is_active=True)

    def get_active_by_id(self, job_id: int) -> Optional[Job]:
        return self._active().filter(pk=job_id).first()

    def get_active_by_shareable_link(self, shareable_link: str) -> Optional[Job]:
        return self._active().filter(shareable_link=shareable_link).first()

    def find_active_by_title_pattern(self, pattern: str) -> Optional[Job]:
        return self._active().filter(title__iregex=pattern).first()

    def increment_views(self, job: Job) -> Job:
        # 조회수만 원자적으로 증가 (라이프사이클 필드는 건드리지 않으므로 save() 우회 가능)
        Job.objects.filter(pk=job.pk).update(views=F("views") + 1)
        job.refresh_from_db(fields=["views"])
        return job

    def save(self, job: Job, *, actor_id: Optional[int] = None) -> Job:
        with transaction.atomic():
            job.save(actor_id=actor_id)
        return job
