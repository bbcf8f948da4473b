from django.contrib import admin

from .models import Submission, Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ("title", "assigned_to", "priority", "status", "due_date", "created_at")
    list_filter = ("status", "priority")
    search_fields = ("title", "assigned_to__email", "assigned_to__profile__full_name")


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    list_display = ("title", "intern_name", "file_name", "status", "date")
    list_filter = ("status",)
    search_fields = ("title", "intern_name", "file_name")
    actions = ["mark_reviewed"]

    @admin.action(description="Mark selected submissions as reviewed")
    def mark_reviewed(self, request, queryset):
        queryset.update(status=Submission.STATUS_REVIEWED)
