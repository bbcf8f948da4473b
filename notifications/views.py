"""
Views for admin notifications.

Admins post announcements (``info`` or ``urgent``) and can fire the canned
urgent review alert from their dashboard; every signed-in user can list
them and dismiss the ones they have read.
"""
import logging

from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from common.permissions import IsPortalAdmin, IsPortalMember
from .models import Notification, NotificationDismissal
from .serializers import NotificationSerializer
from .tasks import post_urgent_alert

logger = logging.getLogger(__name__)


class NotificationViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    /api/notifications/                   GET (?active=1 hides dismissed), POST (admin)
    /api/notifications/{id}/              GET, DELETE (admin)
    /api/notifications/{id}/dismiss/      POST, idempotent
    /api/notifications/urgent-alert/      POST (admin) canned review alert
    """
    serializer_class = NotificationSerializer

    def get_permissions(self):
        if self.action in ("list", "retrieve", "dismiss"):
            return [IsPortalMember()]
        return [IsPortalAdmin()]

    def _dismissed_ids(self):
        user = self.request.user
        if not user.is_authenticated:
            return set()
        return set(
            NotificationDismissal.objects.filter(user=user).values_list("notification_id", flat=True)
        )

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context["dismissed_ids"] = self._dismissed_ids()
        return context

    def get_queryset(self):
        qs = Notification.objects.select_related("created_by__profile")
        if self.action == "list" and self.request.query_params.get("active") in ("1", "true"):
            qs = qs.exclude(dismissals__user=self.request.user)
        return qs

    def perform_create(self, serializer):
        note = serializer.save(created_by=self.request.user)
        logger.info("Notification %s (%s) posted by %s", note.pk, note.type, self.request.user.pk)

    @action(detail=False, methods=["post"], url_path="urgent-alert")
    def urgent_alert(self, request):
        note = post_urgent_alert(created_by=request.user)
        return Response(self.get_serializer(note).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"])
    def dismiss(self, request, pk=None):
        note = self.get_object()
        NotificationDismissal.objects.get_or_create(notification=note, user=request.user)
        return Response({"id": note.pk, "dismissed": True})
