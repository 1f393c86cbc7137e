from common.application.result import Err
from common.claims import Claims
from django.contrib import admin, messages
from job.models import Job
from job.services import JobService


def _actor(request) -> Claims:
    user = request.user
    return Claims(
        user_id=int(user.pk),
        email=user.email,
        role=getattr(user, "role", "admin"),
        name=getattr(user, "name", ""),
    )


def _apply_status_change(request, queryset, change):
    changed, skipped = 0, 0
    for job_id in queryset.values_list("pk", flat=True):
        result = change(int(job_id), actor=_actor(request))
        if isinstance(result, Err):
            skipped += 1
        else:
            changed += 1
    return changed, skipped


@admin.action(description="선택 공고 마감")
def action_close_jobs(modeladmin, request, queryset):
    changed, skipped = _apply_status_change(
        request, queryset, JobService.close_job
    )
    modeladmin.message_user(
        request,
        f"{changed}개 공고를 마감했습니다. (건너뜀 {skipped}개)",
        level=messages.SUCCESS,
    )


@admin.action(description="선택 공고 재오픈")
def action_reopen_jobs(modeladmin, request, queryset):
    changed, skipped = _apply_status_change(
        request, queryset, JobService.reopen_job
    )
    modeladmin.message_user(
        request,
        f"{changed}개 공고를 재오픈했습니다. (건너뜀 {skipped}개)",
        level=messages.SUCCESS,
    )


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    list_display = [
        "id",
        "title",
        "status",
        "is_active",
        "employment_type",
        "location",
        "views",
        "created_at",
    ]
    search_fields = ["title", "company", "location"]
    list_filter = ["status", "is_active", "employment_type", "experience_level"]
    readonly_fields = ["shareable_link", "closed_at", "closed_by", "views"]
    ordering = ["-created_at"]
    list_per_page = 100
    actions = [action_close_jobs, action_reopen_jobs]

    def save_model(self, request, obj, form, change):
        # 관리자 화면 저장도 라이프사이클 규칙(마감자 기록 포함)을 거칩니다
        obj.save(actor_id=request.user.pk)
