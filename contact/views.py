"""
Views for the contact form and the "Student Queries" inbox.

Anyone may write in; admins and interns both work the inbox: they read,
reply by email, resolve and delete queries.
"""
import logging

from rest_framework import mixins, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle

from common.permissions import IsPortalMember
from users.models import display_name
from .emails import EmailDeliveryFailed, send_contact_reply
from .models import ContactMessage
from .serializers import ContactMessageSerializer, ContactReplySerializer

logger = logging.getLogger(__name__)

FILTERS = ("all", "unread", "resolved")


class ContactMessageViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    Portal members (admins and interns) handle the inbox.

    /api/contact/messages/                 POST (public, throttled), GET (?filter=all|unread|resolved)
    /api/contact/messages/{id}/            GET, DELETE
    /api/contact/messages/{id}/reply/      POST {"message"} emails the sender, then resolves
    /api/contact/messages/{id}/resolve/    POST
    """
    serializer_class = ContactMessageSerializer
    throttle_scope = "contact"

    def get_permissions(self):
        if self.action == "create":
            return [AllowAny()]
        return [IsPortalMember()]

    def get_throttles(self):
        if self.action == "create":
            return [ScopedRateThrottle()]
        return super().get_throttles()

    def get_queryset(self):
        qs = ContactMessage.objects.all()
        if self.action != "list":
            return qs
        which = (self.request.query_params.get("filter") or "all").lower()
        if which not in FILTERS:
            raise ValidationError({"filter": f"Must be one of: {', '.join(FILTERS)}."})
        if which == "unread":
            return qs.exclude(status=ContactMessage.STATUS_RESOLVED)
        if which == "resolved":
            return qs.filter(status=ContactMessage.STATUS_RESOLVED)
        return qs

    def perform_create(self, serializer):
        msg = serializer.save(status=ContactMessage.STATUS_PENDING)
        logger.info("Contact query %s received from %s", msg.pk, msg.student_id)

    def _resolve(self, msg, user):
        msg.status = ContactMessage.STATUS_RESOLVED
        msg.resolved_by = display_name(user)
        msg.save(update_fields=["status", "resolved_by"])

    @action(detail=True, methods=["post"])
    def reply(self, request, pk=None):
        msg = self.get_object()
        serializer = ContactReplySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if not send_contact_reply(msg, serializer.validated_data["message"], display_name(request.user)):
            raise EmailDeliveryFailed()
        self._resolve(msg, request.user)
        return Response(self.get_serializer(msg).data)

    @action(detail=True, methods=["post"])
    def resolve(self, request, pk=None):
        msg = self.get_object()
        self._resolve(msg, request.user)
        return Response(self.get_serializer(msg).data)
