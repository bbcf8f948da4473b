"""
Views for the messaging app.

Expose the chat contact list, the messages of one thread, sending and
deleting messages, and read markers.  Authentication is required for all
endpoints; thread visibility is checked with ``messaging.threads.can_view``.
"""
from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from rest_framework import mixins, status, viewsets
from rest_framework.exceptions import PermissionDenied, ValidationError
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from common.permissions import IsPortalMember, is_portal_admin
from users.models import UserProfile
from . import services, threads
from .models import Message
from .serializers import ContactSerializer, MessageSerializer, SeenSerializer, SendMessageSerializer

logger = logging.getLogger(__name__)

User = get_user_model()


def _thread_from_key(key):
    try:
        return threads.parse_thread_key(key)
    except ValueError as exc:
        raise ValidationError({"thread": str(exc)})


def _visible_thread(user, thread):
    if not threads.can_view(user, thread):
        raise PermissionDenied("You are not part of this conversation.")
    return thread


def _latest(thread):
    return (
        Message.objects.filter(threads.message_filter(thread))
        .select_related("sender__profile")
        .order_by("-id")
        .first()
    )


class ContactListView(APIView):
    """
    GET /api/messaging/contacts/?search=

    Interns get the admin team first, then every other intern; admins get
    every intern.  Each contact carries its thread key, unread count and
    latest message.
    """
    permission_classes = [IsPortalMember]

    def get(self, request):
        user = request.user
        search = (request.query_params.get("search") or "").strip().lower()
        seen = services.last_seen_map(user)
        admin = is_portal_admin(user)

        candidates = []
        if not admin:
            candidates.append((threads.ADMIN_TEAM, threads.ADMIN_TEAM_NAME, "admin_team", None))
        interns = (
            User.objects.filter(is_staff=False, profile__role=UserProfile.ROLE_INTERN)
            .exclude(pk=user.pk)
            .select_related("profile")
            .order_by("profile__full_name", "id")
        )
        for intern in interns:
            candidates.append((str(intern.pk), intern.profile.display_name, "intern", intern.profile))

        contacts = []
        for contact_id, name, kind, profile in candidates:
            if search and search not in name.lower():
                continue
            thread = threads.thread_for_contact(user, contact_id)
            contacts.append(
                {
                    "id": contact_id,
                    "name": name,
                    "kind": kind,
                    "branch": profile.branch if profile else "",
                    "year": profile.year if profile else "",
                    "thread": thread.key,
                    "unread": threads.unread_in_thread(user, thread, seen.get(thread.key, 0)),
                    "last_message": _latest(thread),
                }
            )
        return Response(ContactSerializer(contacts, many=True).data)


class MessageViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    /api/messaging/messages/?thread=<key>      GET the messages of one thread (oldest first)
        (also ?contact=<all_admins|intern id> or ?task=<id>)
    /api/messaging/messages/                   POST {"contact" | "task", "text", "attachment"}
    /api/messaging/messages/{id}/              DELETE (sender or admin)
    """
    serializer_class = MessageSerializer
    permission_classes = [IsPortalMember]
    parser_classes = (MultiPartParser, FormParser, JSONParser)

    def _requested_thread(self):
        params = self.request.query_params
        if params.get("thread"):
            return _thread_from_key(params["thread"])
        if params.get("task"):
            try:
                return threads.task_thread(params["task"])
            except ValueError:
                raise ValidationError({"task": "Must be an integer."})
        if params.get("contact"):
            try:
                return threads.thread_for_contact(self.request.user, params["contact"])
            except ValueError as exc:
                raise ValidationError({"contact": str(exc)})
        raise ValidationError({"thread": "Pass thread, contact or task."})

    def get_queryset(self):
        if self.action == "list":
            thread = _visible_thread(self.request.user, self._requested_thread())
            return (
                Message.objects.filter(threads.message_filter(thread))
                .select_related("sender__profile", "recipient", "task")
                .order_by("id")
            )
        return Message.objects.select_related("sender__profile", "task")

    def create(self, request, *args, **kwargs):
        serializer = SendMessageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        message = services.send_message(
            request.user,
            contact=data.get("contact"),
            task_id=data.get("task"),
            text=data.get("text", ""),
            attachment=data.get("attachment"),
        )
        payload = MessageSerializer(message).data
        services.broadcast(message, "message.created", {"message": payload})
        return Response(payload, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        message = get_object_or_404(self.get_queryset(), pk=kwargs["pk"])
        if not (is_portal_admin(request.user) or message.sender_id == request.user.id):
            raise PermissionDenied("Only the sender or an admin can delete this message.")
        services.broadcast(message, "message.deleted", {"message_id": message.pk})
        logger.info("Message %s deleted by %s", message.pk, request.user.pk)
        message.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)


class ThreadView(APIView):
    """GET /api/messaging/threads/{key}/ summary: marker, unread count, latest message."""

    permission_classes = [IsPortalMember]

    def get(self, request, key):
        thread = _visible_thread(request.user, _thread_from_key(key))
        last_seen = services.last_seen_map(request.user).get(thread.key, 0)
        latest = _latest(thread)
        return Response(
            {
                "thread": thread.key,
                "last_seen_id": last_seen,
                "unread": threads.unread_in_thread(request.user, thread, last_seen),
                "last_message": MessageSerializer(latest).data if latest else None,
            }
        )


class ThreadSeenView(APIView):
    """POST /api/messaging/threads/{key}/seen/ {"last_seen_id": optional}"""

    permission_classes = [IsPortalMember]

    def post(self, request, key):
        thread = _visible_thread(request.user, _thread_from_key(key))
        serializer = SeenSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        marker = services.mark_seen(request.user, thread, serializer.validated_data.get("last_seen_id"))
        return Response(
            {
                "thread": thread.key,
                "last_seen_id": marker.last_seen_id,
                "unread": threads.unread_in_thread(request.user, thread, marker.last_seen_id),
            }
        )
