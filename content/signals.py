"""
Signal handlers for the content app.

When a gallery entry, MoU or document is deleted, the files it owns are
removed from storage by a Celery task once the transaction commits.
"""
import logging

from django.db import transaction
from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Document, GalleryEntry, MoU
from .tasks import delete_stored_files_task

logger = logging.getLogger(__name__)


def _schedule_cleanup(names):
    names = [n for n in names if n]
    if names:
        transaction.on_commit(lambda: delete_stored_files_task.delay(names))


@receiver(post_delete, sender=GalleryEntry, dispatch_uid="gallery_entry_cleanup_files")
def on_gallery_entry_deleted(sender, instance: GalleryEntry, **kwargs):
    _schedule_cleanup(instance.stored_files or [])


@receiver(post_delete, sender=MoU, dispatch_uid="mou_cleanup_files")
def on_mou_deleted(sender, instance: MoU, **kwargs):
    _schedule_cleanup([instance.logo.name, instance.photo.name, instance.doc.name])


@receiver(post_delete, sender=Document, dispatch_uid="document_cleanup_files")
def on_document_deleted(sender, instance: Document, **kwargs):
    _schedule_cleanup([instance.file.name])
