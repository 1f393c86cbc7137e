from rest_framework import serializers
from user.models import User

PASSWORD_MIN_LENGTH = 6


class UserSerializer(serializers.ModelSerializer):
    """
    응답용 사용자 정보 (비밀번호 제외)
    """

    class Meta:
        model = User
        fields = ["id", "email", "role", "name"]
        read_only_fields = fields


class UserLoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={"input_type": "password"})


class UserRegistrationSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        min_length=PASSWORD_MIN_LENGTH,
        style={"input_type": "password"},
        help_text="최소 6자 이상의 비밀번호를 입력하세요.",
    )
    name = serializers.CharField(max_length=150)

    def validate_email(self, value):
        return value.strip().lower()

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name is required")
        return value


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(
        source="current_password", write_only=True, style={"input_type": "password"}
    )
    newPassword = serializers.CharField(
        source="new_password",
        write_only=True,
        min_length=PASSWORD_MIN_LENGTH,
        style={"input_type": "password"},
    )
