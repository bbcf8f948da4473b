# messaging/urls.py
"""
URL configuration for the messaging app, included under ``/api/messaging/``.
"""
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import ContactListView, MessageViewSet, ThreadSeenView, ThreadView

app_name = "messaging"

router = DefaultRouter()
router.register(r"messages", MessageViewSet, basename="message")

urlpatterns = [
    path("", include(router.urls)),
    path("contacts/", ContactListView.as_view(), name="contacts"),
    path("threads/<str:key>/", ThreadView.as_view(), name="thread-detail"),
    path("threads/<str:key>/seen/", ThreadSeenView.as_view(), name="thread-seen"),
]
