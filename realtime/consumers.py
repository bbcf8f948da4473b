"""
Channels consumer for the portal change feed.
"""
from __future__ import annotations

from typing import Any

from channels.generic.websocket import AsyncJsonWebsocketConsumer

from .signals import CHANGES_GROUP


class ChangeFeedConsumer(AsyncJsonWebsocketConsumer):
    """Relays ``db.change`` events to any connected client."""

    async def connect(self) -> None:
        await self.channel_layer.group_add(CHANGES_GROUP, self.channel_name)
        await self.accept()

    async def disconnect(self, code: int) -> None:
        await self.channel_layer.group_discard(CHANGES_GROUP, self.channel_name)

    async def receive_json(self, content: dict[str, Any], **kwargs: Any) -> None:
        # Read-only feed; a ping gets a pong so clients can keep the socket alive
        if content.get("type") == "ping":
            await self.send_json({"type": "pong"})

    async def db_change(self, event: dict[str, Any]) -> None:
        await self.send_json(
            {"type": "db.change", "table": event["table"], "action": event["action"], "id": event["id"]}
        )
