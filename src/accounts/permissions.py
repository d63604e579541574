from rest_framework.permissions import BasePermission, SAFE_METHODS
from src.accounts.models import get_profile
from src.accounts.policies import policy_for


class IsOwnerRole(BasePermission):
    message = "Only property owners can access the dashboard."

    def has_permission(self, request, view):
        profile = get_profile(request.user)
        return bool(profile and profile.is_owner)


class IsStudentRole(BasePermission):
    message = "Only students can access the applicant portal."

    def has_permission(self, request, view):
        profile = get_profile(request.user)
        return bool(profile and profile.is_student)


class IsOwnerRoleOrReadOnly(IsOwnerRole):
    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return super().has_permission(request, view)


class CanMutateOwnedResource(BasePermission):
    message = "You can only modify resources of your own properties."

    def has_object_permission(self, request, view, obj):
        if request.method in SAFE_METHODS and not getattr(view, "guard_reads", False):
            return True
        policy = policy_for(obj)
        if policy is None:
            return False
        return policy(obj, getattr(request.user, "id", None))
