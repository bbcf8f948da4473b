"""
Unit tests for thread keys, visibility and unread counting.
"""
from types import SimpleNamespace

import pytest

from assignments.models import Task
from messaging import threads
from messaging.models import Message


def test_peer_thread_key_is_order_independent():
    assert threads.peer_thread(9, 4).key == threads.peer_thread(4, 9).key == "peer:4:9"
    with pytest.raises(ValueError):
        threads.peer_thread(3, 3)


@pytest.mark.parametrize("key", ["admin:7", "peer:2:5", "task:11"])
def test_parse_thread_key_inverts_key(key):
    assert threads.parse_thread_key(key).key == key


@pytest.mark.parametrize("key", ["", "admin", "admin:x", "peer:1", "task:1:2", "group:3"])
def test_parse_thread_key_rejects_garbage(key):
    with pytest.raises(ValueError):
        threads.parse_thread_key(key)


def test_unread_count_ignores_own_and_seen_messages():
    msgs = [SimpleNamespace(id=i, sender_id=s) for i, s in [(1, 2), (2, 1), (3, 2), (4, 1), (5, 2)]]
    assert threads.unread_count(msgs, viewer_id=1, last_seen_id=0) == 3
    assert threads.unread_count(msgs, viewer_id=1, last_seen_id=3) == 1
    assert threads.unread_count(msgs, viewer_id=2, last_seen_id=5) == 0


@pytest.mark.django_db
def test_admin_thread_does_not_leak_other_interns(portal_admin, intern, other_intern):
    mine = Message.objects.create(sender=intern, type=Message.TYPE_DIRECT_ADMIN, text="Hello admins")
    reply = Message.objects.create(
        sender=portal_admin, recipient=intern, type=Message.TYPE_DIRECT_ADMIN, text="Hi Ravi"
    )
    Message.objects.create(sender=other_intern, type=Message.TYPE_DIRECT_ADMIN, text="Sita here")

    ids = list(
        Message.objects.filter(threads.message_filter(threads.admin_thread(intern.id)))
        .order_by("id")
        .values_list("id", flat=True)
    )
    assert ids == [mine.id, reply.id]
    assert threads.thread_of(reply).key == f"admin:{intern.id}"


@pytest.mark.django_db
def test_can_view_rules(portal_admin, intern, other_intern):
    task = Task.objects.create(title="Docs", assigned_to=intern)
    peer = threads.peer_thread(intern.id, other_intern.id)

    assert threads.can_view(portal_admin, threads.admin_thread(intern.id))
    assert threads.can_view(intern, threads.admin_thread(intern.id))
    assert not threads.can_view(other_intern, threads.admin_thread(intern.id))

    assert threads.can_view(intern, peer)
    assert not threads.can_view(portal_admin, peer)

    assert threads.can_view(portal_admin, threads.task_thread(task.id))
    assert threads.can_view(intern, threads.task_thread(task.id))
    assert not threads.can_view(other_intern, threads.task_thread(task.id))


@pytest.mark.django_db
def test_message_type_for(portal_admin, intern):
    assert threads.message_type_for(intern, contact=threads.ADMIN_TEAM) == Message.TYPE_DIRECT_ADMIN
    assert threads.message_type_for(portal_admin, contact=str(intern.id)) == Message.TYPE_DIRECT_ADMIN
    assert threads.message_type_for(intern, contact="5") == Message.TYPE_INTERN_TO_INTERN
    assert threads.message_type_for(intern, task=object()) == Message.TYPE_TASK
