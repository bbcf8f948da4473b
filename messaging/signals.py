"""
Signal handlers for the messaging app.

Removes a deleted message's attachment from storage after commit.
"""
from django.db import transaction
from django.db.models.signals import post_delete
from django.dispatch import receiver

from content.tasks import delete_stored_files_task
from .models import Message


@receiver(post_delete, sender=Message, dispatch_uid="message_cleanup_attachment")
def on_message_deleted(sender, instance: Message, **kwargs):
    name = instance.attachment.name if instance.attachment else ""
    if name:
        transaction.on_commit(lambda: delete_stored_files_task.delay([name]))
