"""
Signals for the users app.

Ensure every `User` has exactly one `UserProfile`.  Staff accounts get the
admin role when their profile is first created.
"""
from django.contrib.auth import get_user_model
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import UserProfile

User = get_user_model()


@receiver(post_save, sender=User, dispatch_uid="users_ensure_profile")
def ensure_profile(sender, instance, created, raw=False, **kwargs):
    if raw:
        return
    role = UserProfile.ROLE_ADMIN if instance.is_staff else UserProfile.ROLE_INTERN
    UserProfile.objects.get_or_create(user=instance, defaults={"role": role})
