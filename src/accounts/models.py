from django.contrib.auth.models import AbstractUser
from django.conf import settings
from django.db import models
from src.shared.enums import ProfileRole

class User(AbstractUser):
    email = models.EmailField(unique=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    def get_display_name(self):
        profile = getattr(self, "profile", None)
        name = (getattr(profile, "name", "") or "").strip()
        if not name:
            name = (self.first_name + " " + self.last_name).strip()
        candidate = name or (self.username or "").strip() or "User"
        if "@" in candidate:
            local = candidate.split("@", 1)[0]
            if len(local) <= 2:
                return (local[:1] + "*" * max(len(local) - 1, 0)) or "User"
            return f"{local[0]}***{local[-1]}"
        return candidate

    def __str__(self):
        return self.get_display_name()


class Profile(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile",
    )
    role = models.CharField(max_length=16, choices=ProfileRole.choices, default=ProfileRole.STUDENT)
    name = models.CharField(max_length=150, blank=True, default="")
    email = models.EmailField()
    phone = models.CharField(max_length=50, blank=True, null=True)
    university = models.CharField(max_length=120, blank=True, null=True)
    country = models.CharField(max_length=80, blank=True, null=True)
    email_confirmed_at = models.DateTimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "profiles"
        indexes = [
            models.Index(fields=["role"], name="profiles_role_idx"),
            models.Index(fields=["email"], name="profiles_email_idx"),
        ]

    def __str__(self):
        return f"{self.name or self.email} ({self.role})"

    @property
    def is_owner(self):
        return self.role == ProfileRole.OWNER

    @property
    def is_student(self):
        return self.role == ProfileRole.STUDENT


def get_profile(user):
    if not user or not getattr(user, "is_authenticated", False):
        return None
    try:
        return user.profile
    except Profile.DoesNotExist:
        return None
