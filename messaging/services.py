# messaging/services.py
"""
Write paths shared by the REST views and the WebSocket consumer:
sending a message, advancing read markers and pushing realtime events.
"""
from __future__ import annotations

import logging
from typing import Optional

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from assignments.models import Task
from common.permissions import is_portal_admin
from users.models import UserProfile
from . import threads
from .models import Message, ReadMarker

logger = logging.getLogger(__name__)

User = get_user_model()

ADMINS_GROUP = "portal_admins"


def user_group(user_id) -> str:
    return f"user_{user_id}"


def _intern_or_404(user_id):
    try:
        return User.objects.get(pk=int(user_id), is_staff=False, profile__role=UserProfile.ROLE_INTERN)
    except (TypeError, ValueError, User.DoesNotExist):
        raise NotFound("No such intern.")


def send_message(sender, *, contact=None, task_id=None, text="", attachment=None) -> Message:
    """
    Create a message from ``sender`` to ``contact`` (``"all_admins"`` or an
    intern id) or on task ``task_id``.  The message type is derived from
    the sender's role and the target.
    """
    text = (text or "").strip()
    if not text and attachment is None:
        raise ValidationError({"text": "A message needs text or an attachment."})

    task: Optional[Task] = None
    recipient = None
    if task_id not in (None, ""):
        try:
            task = Task.objects.get(pk=int(task_id))
        except (TypeError, ValueError, Task.DoesNotExist):
            raise NotFound("No such task.")
        if not threads.can_view(sender, threads.task_thread(task.pk)):
            raise PermissionDenied("Only admins and the assignee can discuss this task.")
    elif contact in (None, ""):
        raise ValidationError({"contact": "Pick a contact or a task."})
    elif contact == threads.ADMIN_TEAM:
        if is_portal_admin(sender):
            raise ValidationError({"contact": "Admins write to a specific intern."})
    else:
        recipient = _intern_or_404(contact)
        if recipient.pk == sender.pk:
            raise ValidationError({"contact": "You cannot message yourself."})

    message = Message.objects.create(
        sender=sender,
        recipient=recipient,
        type=threads.message_type_for(sender, contact=contact, task=task),
        task=task,
        text=text,
        attachment=attachment,
        attachment_name=getattr(attachment, "name", "") or "",
    )
    logger.info("Message %s (%s) sent by %s", message.pk, message.type, sender.pk)
    return message


def audience_groups(message: Message):
    """Channel groups that should hear about ``message``."""
    groups = {user_group(message.sender_id)}
    if message.type == Message.TYPE_INTERN_TO_INTERN:
        groups.add(user_group(message.recipient_id))
    elif message.type == Message.TYPE_DIRECT_ADMIN:
        groups.add(ADMINS_GROUP)
        if message.recipient_id:
            groups.add(user_group(message.recipient_id))
    else:
        groups.add(ADMINS_GROUP)
        groups.add(user_group(message.task.assigned_to_id))
    return sorted(groups)


def broadcast(message: Message, event_type: str, payload: dict) -> None:
    """Push ``event_type`` to every group in the message's audience after commit."""
    groups = audience_groups(message)
    thread_key = threads.thread_of(message).key

    def _send():
        layer = get_channel_layer()
        if layer is None:
            return
        for group in groups:
            try:
                async_to_sync(layer.group_send)(
                    group, {"type": event_type, "thread": thread_key, **payload}
                )
            except Exception as exc:
                logger.warning("Realtime push to %s failed: %s", group, exc)

    transaction.on_commit(_send)


def mark_seen(user, thread: threads.Thread, last_seen_id: Optional[int] = None) -> ReadMarker:
    """
    Advance ``user``'s marker on ``thread`` to ``last_seen_id`` (default:
    the newest message).  Markers never move backwards and never pass the
    newest message of the thread.
    """
    latest = Message.objects.filter(threads.message_filter(thread)).order_by("-id").first()
    newest_id = latest.id if latest else 0
    last_seen_id = newest_id if last_seen_id is None else min(last_seen_id, newest_id)

    with transaction.atomic():
        marker, _ = ReadMarker.objects.select_for_update().get_or_create(
            user=user, thread_key=thread.key
        )
        if last_seen_id > marker.last_seen_id:
            marker.last_seen_id = last_seen_id
            marker.save(update_fields=["last_seen_id", "updated_at"])
    return marker


def last_seen_map(user):
    return dict(ReadMarker.objects.filter(user=user).values_list("thread_key", "last_seen_id"))
