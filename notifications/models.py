# notifications/models.py
from django.conf import settings
from django.db import models
from django.utils import timezone


class Notification(models.Model):
    """An announcement from the admins to every intern."""

    TYPE_INFO = "info"
    TYPE_URGENT = "urgent"
    TYPE_CHOICES = [(TYPE_INFO, "Info"), (TYPE_URGENT, "Urgent")]

    subject = models.CharField(max_length=255)
    message = models.TextField()
    type = models.CharField(max_length=10, choices=TYPE_CHOICES, default=TYPE_INFO)
    date = models.DateTimeField(default=timezone.now, db_index=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="notifications_sent",
    )

    class Meta:
        ordering = ["-date", "-id"]

    def __str__(self) -> str:
        return f"{self.type}: {self.subject}"


class NotificationDismissal(models.Model):
    notification = models.ForeignKey(Notification, on_delete=models.CASCADE, related_name="dismissals")
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="dismissed_notifications")
    dismissed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["notification", "user"], name="uniq_dismissal_per_user"),
        ]
