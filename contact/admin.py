from django.contrib import admin

from .models import ContactMessage


@admin.register(ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ("student_id", "email", "status", "resolved_by", "created_at")
    list_filter = ("status",)
    search_fields = ("student_id", "email", "message")
    readonly_fields = ("created_at",)
