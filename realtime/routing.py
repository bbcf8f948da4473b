from django.urls import re_path

from .consumers import ChangeFeedConsumer


websocket_urlpatterns = [
    re_path(r"^ws/changes/$", ChangeFeedConsumer.as_asgi()),
]
