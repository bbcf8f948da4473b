"""
Project-level Channels routing configuration.

Collects the WebSocket routes of every app so the ASGI entry point can
wrap them in one JWT authentication middleware stack.
"""
from messaging.routing import websocket_urlpatterns as messaging_ws
from realtime.routing import websocket_urlpatterns as realtime_ws

websocket_urlpatterns = [
    *realtime_ws,
    *messaging_ws,
]
