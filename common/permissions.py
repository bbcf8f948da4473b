"""
Role helpers and DRF permission classes shared by the portal apps.

A portal admin is a staff user; an intern is a non-staff user whose
profile carries ``role="intern"``.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS


def is_portal_admin(user) -> bool:
    return bool(user and user.is_authenticated and user.is_staff)


def is_intern(user) -> bool:
    if not user or not user.is_authenticated or user.is_staff:
        return False
    profile = getattr(user, "profile", None)
    return bool(profile and profile.role == "intern")


class IsPortalAdmin(BasePermission):
    message = "Only portal admins can perform this action."

    def has_permission(self, request, view):
        return is_portal_admin(request.user)


class IsPortalAdminOrReadOnly(BasePermission):
    """Anyone may read; writes require an admin."""

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return is_portal_admin(request.user)


class IsPortalMember(BasePermission):
    """Admins and interns, i.e. anyone who can open a dashboard."""

    message = "Only portal members can perform this action."

    def has_permission(self, request, view):
        return is_portal_admin(request.user) or is_intern(request.user)

