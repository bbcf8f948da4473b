"""
Publish a ``db.change`` event for every write to a portal table.

Events carry only the table name, the action and the row id; clients
refetch through the REST API, which applies the usual permission checks.
Publishing happens after the surrounding transaction commits and a
failing channel layer never fails the write.
"""
import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.apps import apps
from django.db import transaction
from django.db.models.signals import post_delete, post_save

logger = logging.getLogger(__name__)

CHANGES_GROUP = "portal_changes"

# model label -> public table name
TABLES = {
    "events.Event": "events",
    "content.GalleryEntry": "gallery",
    "content.MoU": "mous",
    "content.Document": "documents",
    "content.TickerSetting": "ticker_settings",
    "assignments.Task": "tasks",
    "assignments.Submission": "submissions",
    "messaging.Message": "messages",
    "notifications.Notification": "notifications",
    "contact.ContactMessage": "contact_messages",
    "users.UserProfile": "profiles",
}


def table_for(instance):
    if instance._meta.label == "users.UserProfile":
        return "admins" if instance.role == "admin" else "interns"
    return TABLES[instance._meta.label]


def publish_change(table, action, pk):
    """Send one change event to the feed once the current transaction commits."""

    def _send():
        layer = get_channel_layer()
        if layer is None:
            return
        try:
            async_to_sync(layer.group_send)(
                CHANGES_GROUP, {"type": "db.change", "table": table, "action": action, "id": pk}
            )
        except Exception as exc:
            logger.warning("Change event for %s/%s not delivered: %s", table, pk, exc)

    transaction.on_commit(_send)


def _on_save(sender, instance, created, raw=False, **kwargs):
    if raw:
        return
    publish_change(table_for(instance), "insert" if created else "update", instance.pk)


def _on_delete(sender, instance, **kwargs):
    publish_change(table_for(instance), "delete", instance.pk)


def connect_change_signals():
    for label in TABLES:
        model = apps.get_model(label)
        post_save.connect(_on_save, sender=model, dispatch_uid=f"realtime_save_{label}")
        post_delete.connect(_on_delete, sender=model, dispatch_uid=f"realtime_delete_{label}")
