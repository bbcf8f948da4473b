# messaging/admin.py
from django.contrib import admin

from .models import Message, ReadMarker


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("id", "type", "sender", "recipient", "task", "created_at")
    list_filter = ("type", "created_at")
    search_fields = ("sender__email", "recipient__email", "text")
    ordering = ("-created_at",)


@admin.register(ReadMarker)
class ReadMarkerAdmin(admin.ModelAdmin):
    list_display = ("user", "thread_key", "last_seen_id", "updated_at")
    search_fields = ("user__email", "thread_key")
