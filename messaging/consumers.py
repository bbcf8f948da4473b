"""
Channels consumer for portal messaging.

One socket per signed-in user.  The consumer authenticates through the
JWT middleware stack, joins the user's own group (plus the shared admin
group for admins) and relays ``message.created`` / ``message.deleted``
events for every thread the user can see.  Clients may also send
``message.send`` events instead of POSTing to the REST endpoint.
"""
from __future__ import annotations

import logging
from typing import Any

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncJsonWebsocketConsumer
from rest_framework.exceptions import APIException

from common.permissions import is_portal_admin
from . import services
from .serializers import MessageSerializer, SendMessageSerializer

logger = logging.getLogger(__name__)


class MessagingConsumer(AsyncJsonWebsocketConsumer):
    """Realtime WebSocket consumer for chat threads."""

    async def connect(self) -> None:
        user = self.scope.get("user")
        if not user or not user.is_authenticated:
            await self.close()
            return
        self.groups_joined = [services.user_group(user.id)]
        if is_portal_admin(user):
            self.groups_joined.append(services.ADMINS_GROUP)
        for group in self.groups_joined:
            await self.channel_layer.group_add(group, self.channel_name)
        await self.accept()

    async def disconnect(self, code: int) -> None:
        for group in getattr(self, "groups_joined", []):
            await self.channel_layer.group_discard(group, self.channel_name)

    async def receive_json(self, content: Any, **kwargs: Any) -> None:
        if isinstance(content, dict) and content.get("type") == "message.send":
            await self._handle_send(content)
        else:
            await self.send_json({"type": "error", "detail": "Unknown event type."})

    async def _handle_send(self, content: dict[str, Any]) -> None:
        payload = {k: content[k] for k in ("contact", "task", "text") if content.get(k) is not None}
        try:
            await database_sync_to_async(self._send)(payload)
        except APIException as exc:
            await self.send_json({"type": "error", "detail": exc.detail})

    def _send(self, payload):
        # Same validation as the REST endpoint; raises ValidationError on bad frames
        serializer = SendMessageSerializer(data=payload)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        message = services.send_message(
            self.scope["user"],
            contact=data.get("contact"),
            task_id=data.get("task"),
            text=data.get("text", ""),
        )
        services.broadcast(message, "message.created", {"message": MessageSerializer(message).data})
        return message

    async def message_created(self, event: dict[str, Any]) -> None:
        await self.send_json({"type": "message.created", "thread": event["thread"], "message": event["message"]})

    async def message_deleted(self, event: dict[str, Any]) -> None:
        await self.send_json({"type": "message.deleted", "thread": event["thread"], "message_id": event["message_id"]})
