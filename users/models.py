"""
Models for the users app.

A `UserProfile` model extends the built-in `auth.User` with the portal
fields: role, full name, branch and year of study.  A `OneToOneField`
links each profile to its user.  The `UserProfile` is created
automatically via signals when a new user instance is saved.
"""
from django.contrib.auth.models import User
from django.db import models


class UserProfile(models.Model):
    """Extension of Django's built-in User model."""

    ROLE_ADMIN = "admin"
    ROLE_INTERN = "intern"
    ROLE_CHOICES = [(ROLE_ADMIN, "Admin"), (ROLE_INTERN, "Intern")]

    BRANCH_CHOICES = [(b, b) for b in ("CSE", "ECE", "MECH", "CIVIL", "MME", "CHEM")]
    YEAR_CHOICES = [(y, y) for y in ("E1", "E2", "E3", "E4")]

    STATUS_ACTIVE = "Active"
    STATUS_INACTIVE = "Inactive"
    STATUS_CHOICES = [(STATUS_ACTIVE, "Active"), (STATUS_INACTIVE, "Inactive")]

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="profile")
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_INTERN, db_index=True)
    full_name = models.CharField(max_length=255, blank=True)
    branch = models.CharField(max_length=10, choices=BRANCH_CHOICES, blank=True)
    year = models.CharField(max_length=2, choices=YEAR_CHOICES, blank=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["full_name"]

    def __str__(self) -> str:
        return f"{self.display_name} ({self.role})"

    @property
    def display_name(self) -> str:
        return self.full_name or self.user.get_full_name() or self.user.email or self.user.username


def display_name(user) -> str:
    """Name shown next to messages, comments and uploads."""
    if user is None:
        return ""
    profile = getattr(user, "profile", None)
    if profile is not None:
        return profile.display_name
    return user.get_full_name() or user.email or user.username
