from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework import serializers

from src.shared.enums import ProfileRole
from .models import Profile

User = get_user_model()


def _generate_unique_username(base: str) -> str:
    base = (base or "").strip() or "user"
    base = base.replace(" ", "_")[:30]
    candidate = base
    idx = 0
    while User.objects.filter(username=candidate).exists():
        idx += 1
        suffix = str(idx)
        trim = max(30 - len(suffix) - 1, 1)
        candidate = f"{base[:trim]}-{suffix}"
    return candidate


class ProfileSerializer(serializers.ModelSerializer):
    id = serializers.IntegerField(source="user_id", read_only=True)

    class Meta:
        model = Profile
        fields = (
            "id",
            "role",
            "name",
            "email",
            "phone",
            "university",
            "country",
            "email_confirmed_at",
            "created_at",
            "updated_at",
        )
        read_only_fields = ("id", "role", "email", "email_confirmed_at", "created_at", "updated_at")


class StudentSummarySerializer(serializers.ModelSerializer):
    id = serializers.IntegerField(source="user_id", read_only=True)

    class Meta:
        model = Profile
        fields = ("id", "name", "email", "university", "country", "phone")
        read_only_fields = fields


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)
    name = serializers.CharField(max_length=150)
    role = serializers.ChoiceField(choices=ProfileRole.choices, default=ProfileRole.STUDENT)
    phone = serializers.CharField(max_length=50, required=False, allow_blank=True)
    university = serializers.CharField(max_length=120, required=False, allow_blank=True)
    country = serializers.CharField(max_length=80, required=False, allow_blank=True)

    def validate_email(self, value):
        value = value.strip().lower()
        if User.objects.filter(email=value).exists():
            raise serializers.ValidationError("An account with this email already exists.")
        return value

    @transaction.atomic
    def create(self, validated_data):
        email = validated_data["email"]
        user = User.objects.create_user(
            username=_generate_unique_username(email.split("@")[0]),
            email=email,
            password=validated_data["password"],
        )
        Profile.objects.update_or_create(
            user=user,
            defaults={
                "email": email,
                "name": validated_data["name"].strip(),
                "role": validated_data["role"],
                "phone": validated_data.get("phone") or None,
                "university": validated_data.get("university") or None,
                "country": validated_data.get("country") or None,
            },
        )
        return user


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class PasswordResetRequestSerializer(serializers.Serializer):
    email = serializers.EmailField()


class PasswordResetConfirmSerializer(serializers.Serializer):
    uid = serializers.CharField()
    token = serializers.CharField()
    new_password = serializers.CharField(write_only=True, min_length=6)
