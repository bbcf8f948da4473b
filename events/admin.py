"""
Admin configuration for the events app.
"""
from django.contrib import admin

from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("title", "type", "date", "deadline", "created_by", "created_at")
    list_filter = ("type",)
    search_fields = ("title", "description")
    date_hierarchy = "date"
