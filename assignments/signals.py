"""
Signal handlers for the assignments app.

A deleted submission takes its stored file with it; removal runs in a
Celery task once the transaction commits.
"""
from django.db import transaction
from django.db.models.signals import post_delete
from django.dispatch import receiver

from content.tasks import delete_stored_files_task
from .models import Submission


@receiver(post_delete, sender=Submission, dispatch_uid="submission_cleanup_file")
def on_submission_deleted(sender, instance: Submission, **kwargs):
    name = instance.file.name
    if name:
        transaction.on_commit(lambda: delete_stored_files_task.delay([name]))
