# messaging/models.py
from django.conf import settings
from django.db import models

from common.uploads import FolderUploadTo


class Message(models.Model):
    """
    One row per chat message.  Which thread it belongs to follows from
    ``type`` plus sender/recipient/task (see ``messaging.threads``).
    """

    TYPE_DIRECT_ADMIN = "direct_admin"
    TYPE_INTERN_TO_INTERN = "intern_to_intern"
    TYPE_TASK = "task"
    TYPE_CHOICES = [
        (TYPE_DIRECT_ADMIN, "Intern / admin team"),
        (TYPE_INTERN_TO_INTERN, "Intern to intern"),
        (TYPE_TASK, "Task discussion"),
    ]

    sender = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="sent_messages")
    # Null when an intern writes to the admin team or on task threads
    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="received_messages",
        null=True,
        blank=True,
    )
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, db_index=True)
    task = models.ForeignKey(
        "assignments.Task",
        on_delete=models.CASCADE,
        related_name="messages",
        null=True,
        blank=True,
    )
    text = models.TextField(blank=True)
    attachment = models.FileField(upload_to=FolderUploadTo("chat"), blank=True, null=True, max_length=500)
    attachment_name = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["type", "sender"], name="msg_type_sender_idx"),
            models.Index(fields=["type", "recipient"], name="msg_type_recipient_idx"),
        ]

    def __str__(self) -> str:
        return f"Message({self.type}, {self.sender_id} -> {self.recipient_id or self.task_id or 'admins'})"


class ReadMarker(models.Model):
    """Highest message id a user has seen in one thread."""

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="read_markers")
    thread_key = models.CharField(max_length=64)
    last_seen_id = models.BigIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "thread_key"], name="uniq_read_marker_per_thread"),
        ]

    def __str__(self) -> str:
        return f"ReadMarker({self.user_id}, {self.thread_key}, {self.last_seen_id})"
