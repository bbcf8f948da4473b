# contact/models.py
from django.db import models


class ContactMessage(models.Model):
    """A query sent through the public contact form."""

    STATUS_PENDING = "pending"
    STATUS_RESOLVED = "resolved"
    STATUS_CHOICES = [(STATUS_PENDING, "Pending"), (STATUS_RESOLVED, "Resolved")]

    student_id = models.CharField(max_length=64)
    email = models.EmailField()
    message = models.TextField()
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    # Display name of the admin who closed the query
    resolved_by = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"{self.student_id} <{self.email}> ({self.status})"

    @property
    def is_resolved(self) -> bool:
        return self.status == self.STATUS_RESOLVED
