from job.models import Job
from rest_framework import serializers


class JobSerializer(serializers.ModelSerializer):
    """
    채용 공고 직렬화 (외부 필드명은 camelCase)

    shareableLink / closedAt / closedBy / views / 타임스탬프는 읽기 전용이며
    라이프사이클 규칙이 채웁니다.
    """

    employmentType = serializers.ChoiceField(
        source="employment_type",
        choices=Job.EmploymentType.choices,
        required=False,
    )
    experienceLevel = serializers.ChoiceField(
        source="experience_level",
        choices=Job.ExperienceLevel.choices,
        required=False,
    )
    isActive = serializers.BooleanField(source="is_active", required=False)
    shareableLink = serializers.CharField(source="shareable_link", read_only=True)
    closedAt = serializers.DateTimeField(source="closed_at", read_only=True)
    closedBy = serializers.PrimaryKeyRelatedField(source="closed_by", read_only=True)
    skills = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False
    )
    applicants = serializers.ListField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Job
        fields = [
            "id",
            "title",
            "description",
            "location",
            "salary",
            "employmentType",
            "status",
            "isActive",
            "shareableLink",
            "closedAt",
            "closedBy",
            "applicants",
            "skills",
            "experienceLevel",
            "company",
            "department",
            "views",
            "createdAt",
            "updatedAt",
        ]
        read_only_fields = ["id", "views"]


class JobSuggestionSerializer(serializers.ModelSerializer):
    employmentType = serializers.CharField(source="employment_type", read_only=True)

    class Meta:
        model = Job
        fields = ["id", "title", "location", "employmentType"]


class JobListQuerySerializer(serializers.Serializer):
    """
    GET /api/jobs 쿼리 파라미터 검증
    """

    status = serializers.CharField(required=False, allow_blank=True)
    # "true" 문자열일 때만 켜짐 (1/yes/on 등은 꺼진 것으로 취급)
    showAll = serializers.CharField(required=False, allow_blank=True, default="")
    search = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(required=False, allow_blank=True)
    employmentType = serializers.CharField(
        source="employment_type", required=False, allow_blank=True
    )
    experienceLevel = serializers.CharField(
        source="experience_level", required=False, allow_blank=True
    )
    sort = serializers.CharField(required=False, default="-createdAt")
    limit = serializers.IntegerField(required=False, default=50, min_value=1, max_value=100)
    page = serializers.IntegerField(required=False, default=1, min_value=1)

    def validate(self, attrs):
        attrs["show_all"] = attrs.pop("showAll", "") == "true"
        return attrs
