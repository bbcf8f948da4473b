"""
Admin configuration for the users app.

Unregisters the default `User` admin and re-registers it with an inline
profile form so the portal role, branch and year are editable in the
Django admin.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User

from .models import UserProfile


class UserProfileInline(admin.StackedInline):
    model = UserProfile
    can_delete = False


class UserAdmin(BaseUserAdmin):
    inlines = [UserProfileInline]
    list_display = ("username", "email", "is_staff", "is_active", "date_joined")


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "full_name", "role", "branch", "year", "status")
    list_filter = ("role", "branch", "year", "status")
    search_fields = ("full_name", "user__email")


admin.site.unregister(User)
admin.site.register(User, UserAdmin)
