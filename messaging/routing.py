"""
WebSocket routing for the messaging app.

A single socket per user: the consumer joins the user's own group (and
the admin group for admins) and relays every message event addressed to
them.
"""
from django.urls import re_path

from .consumers import MessagingConsumer


websocket_urlpatterns = [
    re_path(r"^ws/messaging/$", MessagingConsumer.as_asgi()),
]
