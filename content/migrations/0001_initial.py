from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion

import common.uploads


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="GalleryEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("url", models.TextField()),
                ("stored_files", models.JSONField(blank=True, default=list)),
                ("uploader", models.CharField(blank=True, max_length=255)),
                ("date", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("uploaded_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="gallery_entries", to=settings.AUTH_USER_MODEL)),
            ],
            options={"ordering": ["-created_at", "-id"], "verbose_name_plural": "gallery entries"},
        ),
        migrations.CreateModel(
            name="MoU",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("partner", models.CharField(max_length=255)),
                ("scope", models.CharField(blank=True, max_length=255)),
                ("date", models.DateField(blank=True, null=True)),
                ("duration", models.CharField(blank=True, max_length=100)),
                ("status", models.CharField(db_index=True, default="Active", max_length=50)),
                ("description", models.TextField(blank=True)),
                ("logo", models.FileField(blank=True, null=True, upload_to=common.uploads.FolderUploadTo("logos"))),
                ("photo", models.FileField(blank=True, null=True, upload_to=common.uploads.FolderUploadTo("photos"))),
                ("doc", models.FileField(blank=True, null=True, upload_to=common.uploads.FolderUploadTo("docs"))),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={"ordering": ["-date", "-id"], "verbose_name": "MoU", "verbose_name_plural": "MoUs"},
        ),
        migrations.CreateModel(
            name="Document",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("file", models.FileField(upload_to=common.uploads.FolderUploadTo("documents"))),
                ("size", models.CharField(blank=True, max_length=32)),
                ("assigned_name", models.CharField(default="All Interns", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("assigned_to", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="documents", to=settings.AUTH_USER_MODEL)),
                ("uploaded_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="documents_uploaded", to=settings.AUTH_USER_MODEL)),
            ],
            options={"ordering": ["-created_at", "-id"]},
        ),
        migrations.CreateModel(
            name="TickerSetting",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("value", models.CharField(max_length=500)),
                ("is_active", models.BooleanField(default=True)),
                ("ordering", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={"ordering": ["ordering", "id"]},
        ),
    ]
