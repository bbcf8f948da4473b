"""
ViewSets for the events app.

Anyone can browse events, the calendar and the ticker.  Admins and interns
publish events; an event is removed by an admin or by whoever created it.
"""
import logging

from rest_framework import mixins, permissions, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied, ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from common.permissions import IsPortalMember, is_portal_admin
from content.models import TickerSetting
from .models import Event
from .serializers import CalendarMonthSerializer, EventSerializer
from . import status as event_status

logger = logging.getLogger(__name__)


def _int_param(params, name, default, low, high):
    raw = params.get(name)
    if raw in (None, ""):
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValidationError({name: "Must be an integer."})
    if not low <= value <= high:
        raise ValidationError({name: f"Must be between {low} and {high}."})
    return value


class EventViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    /api/events/                 GET list (?status=running|upcoming|completed), POST create
    /api/events/{id}/            GET, DELETE (admin or creator)
    /api/events/calendar/        GET ?year=&month=
    /api/events/agenda/          GET ?filter=all|upcoming|past
    """
    serializer_class = EventSerializer
    queryset = Event.objects.select_related("created_by__profile").order_by("-date", "-id")

    def get_permissions(self):
        if self.action in ("list", "retrieve", "calendar", "agenda"):
            return [permissions.AllowAny()]
        return [IsPortalMember()]

    def list(self, request, *args, **kwargs):
        events = list(self.get_queryset())
        wanted = request.query_params.get("status")
        if wanted:
            if wanted not in event_status.STATUSES:
                raise ValidationError({"status": f"Expected one of {', '.join(event_status.STATUSES)}."})
            events = event_status.filter_by_status(events, wanted)
        return Response(self.get_serializer(events, many=True).data)

    def perform_create(self, serializer):
        event = serializer.save(created_by=self.request.user)
        logger.info("Event %s created by %s", event.pk, self.request.user.pk)

    def perform_destroy(self, instance):
        user = self.request.user
        if not (is_portal_admin(user) or instance.created_by_id == user.id):
            raise PermissionDenied("Only admins or the creator can delete this event.")
        instance.delete()

    @action(detail=False, methods=["get"], url_path="calendar")
    def calendar(self, request):
        today = event_status.today()
        year = _int_param(request.query_params, "year", today.year, 1, 9999)
        month = _int_param(request.query_params, "month", today.month, 1, 12)
        events = self.get_queryset().filter(date__year=year, date__month=month)
        grid = event_status.month_grid(year, month, list(events))
        return Response(CalendarMonthSerializer(grid).data)

    @action(detail=False, methods=["get"], url_path="agenda")
    def agenda(self, request):
        which = request.query_params.get("filter", "all")
        if which not in ("all", "upcoming", "past"):
            raise ValidationError({"filter": "Expected all, upcoming or past."})
        events = event_status.agenda(list(self.get_queryset()), which)
        return Response(self.get_serializer(events, many=True).data)


class TickerView(APIView):
    """GET /api/ticker/ returns the homepage announcement strings in order."""

    permission_classes = [permissions.AllowAny]

    def get(self, request):
        custom = TickerSetting.objects.filter(is_active=True).order_by("ordering", "id")
        items = event_status.ticker_items(
            Event.objects.all(), custom.values_list("value", flat=True)
        )
        return Response({"items": items})
