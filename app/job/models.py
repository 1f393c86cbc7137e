from django.conf import settings
from django.db import models
from job.domain.lifecycle import apply_lifecycle_rules

# 라이프사이클 규칙이 건드릴 수 있는 필드 (update_fields 저장 시 함께 반영)
LIFECYCLE_FIELDS = {"shareable_link", "closed_at", "closed_by", "updated_at"}


class Job(models.Model):
    """
    채용 공고

    - shareable_link: 최초 저장 시 한 번만 생성
    - closed_at / closed_by: status == closed 일 때만 값을 가짐
    - is_active: 소프트 삭제 플래그
    """

    class EmploymentType(models.TextChoices):
        FULL_TIME = "Full-time", "Full-time"
        PART_TIME = "Part-time", "Part-time"
        CONTRACT = "Contract", "Contract"
        INTERNSHIP = "Internship", "Internship"
        REMOTE = "Remote", "Remote"
        HYBRID = "Hybrid", "Hybrid"

    class Status(models.TextChoices):
        OPEN = "open", "Open"
        CLOSED = "closed", "Closed"
        DRAFT = "draft", "Draft"

    class ExperienceLevel(models.TextChoices):
        ENTRY = "Entry", "Entry"
        MID = "Mid", "Mid"
        SENIOR = "Senior", "Senior"
        LEAD = "Lead", "Lead"

    title = models.CharField(max_length=255)
    description = models.TextField()
    location = models.CharField(max_length=255)
    salary = models.CharField(max_length=255, blank=True, default="Not specified")
    employment_type = models.CharField(
        max_length=20,
        choices=EmploymentType.choices,
        default=EmploymentType.FULL_TIME,
    )
    status = models.CharField(
        max_length=10, choices=Status.choices, default=Status.OPEN
    )
    is_active = models.BooleanField(default=True)
    shareable_link = models.CharField(max_length=128, unique=True, editable=False)
    closed_at = models.DateTimeField(null=True, blank=True)
    closed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="closed_jobs",
    )
    applicants = models.JSONField(
        default=list, blank=True, help_text="지원자 참조 목록 (현재 미사용)"
    )
    skills = models.JSONField(default=list, blank=True, help_text="요구 기술 (JSON 배열)")
    experience_level = models.CharField(
        max_length=10,
        choices=ExperienceLevel.choices,
        default=ExperienceLevel.MID,
    )
    company = models.CharField(max_length=255, blank=True, default="")
    department = models.CharField(max_length=255, blank=True, default="")
    views = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "job"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "is_active"], name="job_status_active_idx"),
            models.Index(fields=["location"], name="job_location_idx"),
            models.Index(fields=["employment_type"], name="job_employment_type_idx"),
            models.Index(fields=["-created_at"], name="job_created_at_idx"),
        ]

    def __str__(self):
        return f"{self.title} ({self.status}) - {self.shareable_link}"

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        # 저장 시 상태 변경 여부를 판단하기 위해 DB 값을 기억
        instance._persisted_status = instance.__dict__.get("status")
        return instance

    def save(self, *args, actor_id=None, **kwargs):
        """
        라이프사이클 규칙을 적용한 뒤 저장합니다.

        Args:
            actor_id: 상태를 변경한 사용자 ID (closed_by 기록용)
        """
        previous_status = (
            None if self._state.adding else getattr(self, "_persisted_status", None)
        )
        apply_lifecycle_rules(previous_status, self, actor_id=actor_id)

        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            kwargs["update_fields"] = set(update_fields) | LIFECYCLE_FIELDS

        super().save(*args, **kwargs)
        self._persisted_status = self.status
