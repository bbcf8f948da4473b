"""
Models for the content app.

Public-site content managed from the dashboards: gallery entries (one
entry may carry several photos, stored as a comma-joined URL list), MoUs
with partner organisations, documents handed out to interns and the
custom ticker lines shown on the homepage.
"""
from django.conf import settings
from django.db import models

from common.uploads import FolderUploadTo


class GalleryEntry(models.Model):
    title = models.CharField(max_length=255)
    # Comma-joined public URLs; more than one makes the entry a collage
    url = models.TextField()
    # Storage names of files uploaded through the portal, removed with the entry
    stored_files = models.JSONField(default=list, blank=True)
    uploader = models.CharField(max_length=255, blank=True)
    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="gallery_entries",
    )
    date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        verbose_name_plural = "gallery entries"

    def __str__(self) -> str:
        return self.title

    @property
    def urls(self):
        return [u.strip() for u in (self.url or "").split(",") if u.strip()]


class MoU(models.Model):
    STATUS_CHOICES = [
        ("Active", "Active"),
        ("Under Review", "Under Review"),
        ("Expired", "Expired"),
    ]

    partner = models.CharField(max_length=255)
    scope = models.CharField(max_length=255, blank=True)
    date = models.DateField(null=True, blank=True)
    duration = models.CharField(max_length=100, blank=True)
    status = models.CharField(max_length=50, default="Active", db_index=True)
    description = models.TextField(blank=True)
    logo = models.FileField(upload_to=FolderUploadTo("logos"), blank=True, null=True)
    photo = models.FileField(upload_to=FolderUploadTo("photos"), blank=True, null=True)
    doc = models.FileField(upload_to=FolderUploadTo("docs"), blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-date", "-id"]
        verbose_name = "MoU"
        verbose_name_plural = "MoUs"

    def __str__(self) -> str:
        return self.partner


class Document(models.Model):
    """A file handed out to one intern, or to every intern when ``assigned_to`` is empty."""

    ALL_INTERNS = "All Interns"

    title = models.CharField(max_length=255)
    file = models.FileField(upload_to=FolderUploadTo("documents"))
    size = models.CharField(max_length=32, blank=True)
    assigned_to = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="documents",
    )
    assigned_name = models.CharField(max_length=255, default=ALL_INTERNS)
    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="documents_uploaded",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self) -> str:
        return f"{self.title} -> {self.assigned_name}"


class TickerSetting(models.Model):
    value = models.CharField(max_length=500)
    is_active = models.BooleanField(default=True)
    ordering = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["ordering", "id"]

    def __str__(self) -> str:
        return self.value
