from __future__ import annotations

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Job",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("location", models.CharField(max_length=255)),
                (
                    "salary",
                    models.CharField(
                        blank=True, default="Not specified", max_length=255
                    ),
                ),
                (
                    "employment_type",
                    models.CharField(
                        choices=[
                            ("Full-time", "Full-time"),
                            ("Part-time", "Part-time"),
                            ("Contract", "Contract"),
                            ("Internship", "Internship"),
                            ("Remote", "Remote"),
                            ("Hybrid", "Hybrid"),
                        ],
                        default="Full-time",
                        max_length=20,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("open", "Open"),
                            ("closed", "Closed"),
                            ("draft", "Draft"),
                        ],
                        default="open",
                        max_length=10,
                    ),
                ),
                ("is_active", models.BooleanField(default=True)),
                (
                    "shareable_link",
                    models.CharField(editable=False, max_length=128, unique=True),
                ),
                ("closed_at", models.DateTimeField(blank=True, null=True)),
                (
                    "applicants",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text="지원자 참조 목록 (현재 미사용)",
                    ),
                ),
                (
                    "skills",
                    models.JSONField(
                        blank=True, default=list, help_text="요구 기술 (JSON 배열)"
                    ),
                ),
                (
                    "experience_level",
                    models.CharField(
                        choices=[
                            ("Entry", "Entry"),
                            ("Mid", "Mid"),
                            ("Senior", "Senior"),
                            ("Lead", "Lead"),
                        ],
                        default="Mid",
                        max_length=10,
                    ),
                ),
                ("company", models.CharField(blank=True, default="", max_length=255)),
                (
                    "department",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                ("views", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "closed_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="closed_jobs",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "job",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["status", "is_active"], name="job_status_active_idx"
                    ),
                    models.Index(fields=["location"], name="job_location_idx"),
                    models.Index(
                        fields=["employment_type"], name="job_employment_type_idx"
                    ),
                    models.Index(fields=["-created_at"], name="job_created_at_idx"),
                ],
            },
        ),
    ]
