# content/admin.py
from django.contrib import admin

from .models import Document, GalleryEntry, MoU, TickerSetting


@admin.register(GalleryEntry)
class GalleryEntryAdmin(admin.ModelAdmin):
    list_display = ("title", "uploader", "date", "created_at")
    search_fields = ("title", "uploader")
    ordering = ("-created_at",)


@admin.register(MoU)
class MoUAdmin(admin.ModelAdmin):
    list_display = ("partner", "scope", "status", "date", "duration")
    list_filter = ("status",)
    search_fields = ("partner", "scope")


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ("title", "assigned_name", "size", "uploaded_by", "created_at")
    search_fields = ("title", "assigned_name")


@admin.register(TickerSetting)
class TickerSettingAdmin(admin.ModelAdmin):
    list_display = ("value", "is_active", "ordering")
    list_editable = ("is_active", "ordering")
