"""
Models for the events app.

An ``Event`` is a dated programme item (workshop, seminar, hackathon, ...)
shown on the public site and the calendar.  ``date`` is the first day and
``deadline`` the optional last day; the running/upcoming/completed status
is derived from them (see ``events.status``) rather than stored.
"""
from django.conf import settings
from django.db import models


class Event(models.Model):
    TYPE_CHOICES = [
        ("Workshop", "Workshop"),
        ("Seminar", "Seminar"),
        ("Hackathon", "Hackathon"),
        ("Webinar", "Webinar"),
        ("Placement", "Placement"),
    ]

    title = models.CharField(max_length=255)
    # Suggested values are TYPE_CHOICES but free text is accepted
    type = models.CharField(max_length=50, default="Workshop")
    date = models.DateField(db_index=True)
    deadline = models.DateField(null=True, blank=True)
    description = models.TextField(blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="events_created",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-date", "-id"]

    def __str__(self) -> str:
        return f"{self.title} ({self.date:%d-%m-%Y})"

    @property
    def end_date(self):
        return self.deadline or self.date
