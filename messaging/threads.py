"""
Thread selection for unified messages.

Every message belongs to exactly one thread, identified by a string key:

* ``admin:<intern_id>``  the intern's conversation with the admin team.
  Holds ``direct_admin`` messages sent by the intern, or sent by any admin
  to that intern.  Every admin shares this inbox.
* ``peer:<a>:<b>``       ``intern_to_intern`` messages between interns
  ``a`` and ``b`` (``a < b``), in either direction.
* ``task:<task_id>``     ``task`` messages about one task; visible to the
  admins and the task's assignee.
"""
from dataclasses import dataclass

from django.db.models import Q

from assignments.models import Task
from common.permissions import is_portal_admin
from .models import Message

ADMIN_TEAM = "all_admins"
ADMIN_TEAM_NAME = "Admin Team"

KIND_ADMIN = "admin"
KIND_PEER = "peer"
KIND_TASK = "task"


@dataclass(frozen=True)
class Thread:
    kind: str
    ids: tuple

    @property
    def key(self) -> str:
        return ":".join([self.kind, *(str(i) for i in self.ids)])


def admin_thread(intern_id) -> Thread:
    return Thread(KIND_ADMIN, (int(intern_id),))


def peer_thread(a, b) -> Thread:
    a, b = sorted((int(a), int(b)))
    if a == b:
        raise ValueError("A peer thread needs two different interns.")
    return Thread(KIND_PEER, (a, b))


def task_thread(task_id) -> Thread:
    return Thread(KIND_TASK, (int(task_id),))


def parse_thread_key(key: str) -> Thread:
    """Inverse of ``Thread.key``; raises ``ValueError`` on malformed keys."""
    parts = (key or "").split(":")
    kind, raw_ids = parts[0], parts[1:]
    try:
        ids = [int(i) for i in raw_ids]
    except ValueError:
        raise ValueError(f"Malformed thread key: {key!r}")
    if kind == KIND_ADMIN and len(ids) == 1:
        return admin_thread(ids[0])
    if kind == KIND_PEER and len(ids) == 2:
        return peer_thread(*ids)
    if kind == KIND_TASK and len(ids) == 1:
        return task_thread(ids[0])
    raise ValueError(f"Malformed thread key: {key!r}")


def thread_for_contact(viewer, contact) -> Thread:
    """
    The thread a dashboard opens when ``viewer`` picks ``contact``.

    Interns pick ``all_admins`` or another intern's id; admins pick an
    intern's id.
    """
    if is_portal_admin(viewer):
        if contact == ADMIN_TEAM:
            raise ValueError("Admins open intern conversations, not the admin team.")
        return admin_thread(contact)
    if contact == ADMIN_TEAM:
        return admin_thread(viewer.id)
    return peer_thread(viewer.id, contact)


def message_filter(thread: Thread) -> Q:
    """ORM filter selecting the messages of ``thread``."""
    if thread.kind == KIND_ADMIN:
        (intern_id,) = thread.ids
        return Q(type=Message.TYPE_DIRECT_ADMIN) & (
            Q(sender_id=intern_id) | Q(recipient_id=intern_id, sender__is_staff=True)
        )
    if thread.kind == KIND_PEER:
        a, b = thread.ids
        return Q(type=Message.TYPE_INTERN_TO_INTERN) & (
            Q(sender_id=a, recipient_id=b) | Q(sender_id=b, recipient_id=a)
        )
    (task_id,) = thread.ids
    return Q(type=Message.TYPE_TASK, task_id=task_id)


def thread_of(message: Message) -> Thread:
    if message.type == Message.TYPE_TASK:
        return task_thread(message.task_id)
    if message.type == Message.TYPE_INTERN_TO_INTERN:
        return peer_thread(message.sender_id, message.recipient_id)
    intern_id = message.recipient_id if message.sender.is_staff else message.sender_id
    return admin_thread(intern_id)


def can_view(user, thread: Thread) -> bool:
    if not user or not user.is_authenticated:
        return False
    admin = is_portal_admin(user)
    if thread.kind == KIND_ADMIN:
        return admin or thread.ids[0] == user.id
    if thread.kind == KIND_PEER:
        return user.id in thread.ids
    if admin:
        return True
    return Task.objects.filter(pk=thread.ids[0], assigned_to_id=user.id).exists()


def message_type_for(sender, contact=None, task=None) -> str:
    """Type a new message gets from who sends it and where."""
    if task is not None:
        return Message.TYPE_TASK
    if is_portal_admin(sender) or contact == ADMIN_TEAM:
        return Message.TYPE_DIRECT_ADMIN
    return Message.TYPE_INTERN_TO_INTERN


def unread_count(messages, viewer_id, last_seen_id) -> int:
    """Messages newer than the marker that someone else sent."""
    return sum(1 for m in messages if m.id > last_seen_id and m.sender_id != viewer_id)


def unread_in_thread(viewer, thread: Thread, last_seen_id: int) -> int:
    """Database-side equivalent of ``unread_count``."""
    return (
        Message.objects.filter(message_filter(thread), id__gt=last_seen_id)
        .exclude(sender_id=viewer.id)
        .count()
    )
