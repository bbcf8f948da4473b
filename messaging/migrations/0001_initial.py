from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion

import common.uploads


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("assignments", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Message",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("type", models.CharField(choices=[("direct_admin", "Intern / admin team"), ("intern_to_intern", "Intern to intern"), ("task", "Task discussion")], db_index=True, max_length=20)),
                ("text", models.TextField(blank=True)),
                ("attachment", models.FileField(blank=True, max_length=500, null=True, upload_to=common.uploads.FolderUploadTo("chat"))),
                ("attachment_name", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("recipient", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="received_messages", to=settings.AUTH_USER_MODEL)),
                ("sender", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="sent_messages", to=settings.AUTH_USER_MODEL)),
                ("task", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="messages", to="assignments.task")),
            ],
            options={"ordering": ["id"]},
        ),
        migrations.AddIndex(
            model_name="message",
            index=models.Index(fields=["type", "sender"], name="msg_type_sender_idx"),
        ),
        migrations.AddIndex(
            model_name="message",
            index=models.Index(fields=["type", "recipient"], name="msg_type_recipient_idx"),
        ),
        migrations.CreateModel(
            name="ReadMarker",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("thread_key", models.CharField(max_length=64)),
                ("last_seen_id", models.BigIntegerField(default=0)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="read_markers", to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.AddConstraint(
            model_name="readmarker",
            constraint=models.UniqueConstraint(fields=("user", "thread_key"), name="uniq_read_marker_per_thread"),
        ),
    ]
