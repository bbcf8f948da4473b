from django.contrib import admin

from .models import Notification, NotificationDismissal


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("subject", "type", "date", "created_by")
    list_filter = ("type",)
    search_fields = ("subject", "message")


admin.site.register(NotificationDismissal)
