"""
Tests for the change feed: signals publish after commit and the socket
relays them.
"""
import pytest
from asgiref.sync import async_to_sync
from channels.db import database_sync_to_async
from channels.layers import get_channel_layer
from channels.routing import URLRouter
from channels.testing import WebsocketCommunicator

from contact.models import ContactMessage
from events.models import Event
from realtime.routing import websocket_urlpatterns
from realtime.signals import CHANGES_GROUP


@pytest.fixture
def feed_channel():
    layer = get_channel_layer()
    async_to_sync(layer.group_add)(CHANGES_GROUP, "test-feed")
    yield layer
    async_to_sync(layer.group_discard)(CHANGES_GROUP, "test-feed")


@pytest.mark.django_db
def test_save_and_delete_publish_after_commit(feed_channel, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        event = Event.objects.create(title="Orientation", date="2025-03-01")
    assert len(callbacks) == 1
    received = async_to_sync(feed_channel.receive)("test-feed")
    assert received == {"type": "db.change", "table": "events", "action": "insert", "id": event.id}

    event_id = event.id
    with django_capture_on_commit_callbacks(execute=True):
        event.delete()
    received = async_to_sync(feed_channel.receive)("test-feed")
    assert (received["action"], received["id"]) == ("delete", event_id)


@pytest.mark.django_db
def test_nothing_published_without_commit(django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks() as callbacks:
        ContactMessage.objects.create(student_id="R1", email="a@b.c", message="hi")
    # callback queued, not yet run
    assert len(callbacks) == 1


@pytest.mark.django_db
def test_profiles_map_to_role_tables(intern, portal_admin):
    from realtime.signals import table_for

    assert table_for(intern.profile) == "interns"
    assert table_for(portal_admin.profile) == "admins"


@pytest.mark.asyncio
@pytest.mark.django_db(transaction=True)
async def test_socket_relays_changes_to_anonymous_clients():
    communicator = WebsocketCommunicator(URLRouter(websocket_urlpatterns), "/ws/changes/")
    connected, _ = await communicator.connect()
    assert connected

    event = await database_sync_to_async(Event.objects.create)(title="Hackathon", date="2025-05-10")
    message = await communicator.receive_json_from(timeout=2)
    assert message == {"type": "db.change", "table": "events", "action": "insert", "id": event.id}

    await communicator.send_json_to({"type": "ping"})
    assert await communicator.receive_json_from(timeout=2) == {"type": "pong"}
    await communicator.disconnect()
