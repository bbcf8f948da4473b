"""
ViewSets for the content app.

Gallery, MoUs and the ticker feed the public site; documents are private
to the dashboards.  Listing the gallery and MoUs needs no login, writes
need a portal member (gallery) or an admin (everything else).
"""
import logging
import os

from django.db import transaction
from django.db.models import Q
from django.http import FileResponse
from django.utils import timezone
from django_filters.rest_framework import CharFilter, DjangoFilterBackend, FilterSet
from rest_framework import mixins, permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from common.permissions import IsPortalAdmin, IsPortalAdminOrReadOnly, IsPortalMember, is_portal_admin
from common.uploads import discard_files, size_label, store_files
from events.status import format_display_date
from users.models import display_name
from .models import Document, GalleryEntry, MoU, TickerSetting
from .serializers import (
    DocumentSerializer,
    GalleryEntrySerializer,
    GalleryUploadSerializer,
    MoUSerializer,
    TickerSettingSerializer,
)

logger = logging.getLogger(__name__)


def flatten_gallery(entries):
    """One row per photo, newest first by entry date (falling back to upload time)."""
    photos = []
    for entry in entries:
        taken_on = entry.date or timezone.localdate(entry.created_at)
        for index, url in enumerate(entry.urls):
            photos.append(
                {
                    "id": f"{entry.id}-{index}",
                    "entry_id": entry.id,
                    "title": entry.title,
                    "url": url,
                    "uploader": entry.uploader,
                    "date": taken_on,
                    "display_date": format_display_date(taken_on),
                    "created_at": entry.created_at,
                }
            )
    photos.sort(key=lambda p: (p["date"], p["created_at"]), reverse=True)
    return photos


class GalleryViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    /api/content/gallery/           GET list, POST upload (multipart ``files`` and/or ``urls``)
    /api/content/gallery/{id}/      GET, DELETE (admin any, intern own)
    /api/content/gallery/photos/    GET flattened photo stream (?limit=)
    """
    queryset = GalleryEntry.objects.select_related("uploaded_by").order_by("-created_at", "-id")
    serializer_class = GalleryEntrySerializer
    parser_classes = (MultiPartParser, FormParser, JSONParser)

    def get_permissions(self):
        if self.action in ("list", "retrieve", "photos"):
            return [permissions.AllowAny()]
        return [IsPortalMember()]

    def create(self, request, *args, **kwargs):
        upload = GalleryUploadSerializer(data=request.data)
        upload.is_valid(raise_exception=True)
        data = upload.validated_data

        stored = store_files(data.get("files") or [], "gallery")
        names = [name for name, _ in stored]
        urls = [url for _, url in stored] + list(data.get("urls") or [])
        try:
            entry = GalleryEntry.objects.create(
                title=data["title"],
                url=",".join(urls),
                stored_files=names,
                uploader=data.get("uploader") or display_name(request.user),
                uploaded_by=request.user,
                date=data.get("date"),
            )
        except Exception:
            discard_files(names)
            raise

        logger.info("Gallery entry %s with %d photo(s) added by %s", entry.pk, len(urls), request.user.pk)
        return Response(GalleryEntrySerializer(entry).data, status=status.HTTP_201_CREATED)

    def perform_destroy(self, instance):
        user = self.request.user
        if not (is_portal_admin(user) or instance.uploaded_by_id == user.id):
            raise PermissionDenied("You can only delete photos you uploaded.")
        instance.delete()

    @action(detail=False, methods=["get"], url_path="photos")
    def photos(self, request):
        photos = flatten_gallery(self.get_queryset())
        limit = request.query_params.get("limit")
        if limit:
            try:
                photos = photos[: max(int(limit), 0)]
            except ValueError:
                raise ValidationError({"limit": "Must be an integer."})
        return Response(photos)


class MoUFilter(FilterSet):
    search = CharFilter(method="filter_search")
    status = CharFilter(method="filter_status")

    class Meta:
        model = MoU
        fields = []

    def filter_search(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(Q(partner__icontains=value) | Q(scope__icontains=value))

    def filter_status(self, queryset, name, value):
        if not value or value == "All":
            return queryset
        return queryset.filter(status__iexact=value)


class MoUViewSet(viewsets.ModelViewSet):
    """Public MoU listing (?search=, ?status=); admins manage the records."""

    queryset = MoU.objects.all().order_by("-date", "-id")
    serializer_class = MoUSerializer
    permission_classes = [IsPortalAdminOrReadOnly]
    parser_classes = (MultiPartParser, FormParser, JSONParser)
    filter_backends = [DjangoFilterBackend]
    filterset_class = MoUFilter

    def perform_create(self, serializer):
        mou = serializer.save()
        logger.info("MoU %s (%s) added by %s", mou.pk, mou.partner, self.request.user.pk)


class DocumentViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    Admins upload documents for one intern or for every intern.
    Interns see what is addressed to them plus what is addressed to all.
    """
    serializer_class = DocumentSerializer
    parser_classes = (MultiPartParser, FormParser, JSONParser)

    def get_permissions(self):
        if self.action in ("list", "retrieve", "download"):
            return [IsPortalMember()]
        return [IsPortalAdmin()]

    def get_queryset(self):
        qs = Document.objects.select_related("assigned_to__profile").order_by("-created_at", "-id")
        user = self.request.user
        if is_portal_admin(user):
            return qs
        return qs.filter(Q(assigned_to=user) | Q(assigned_to__isnull=True))

    @transaction.atomic
    def perform_create(self, serializer):
        upload = serializer.validated_data["file"]
        assignee = serializer.validated_data.get("assigned_to")
        doc = serializer.save(
            size=size_label(upload.size),
            assigned_name=display_name(assignee) if assignee else Document.ALL_INTERNS,
            uploaded_by=self.request.user,
        )
        logger.info("Document %s shared with %s", doc.pk, doc.assigned_name)

    @action(detail=True, methods=["get"], url_path="download")
    def download(self, request, pk=None):
        """Stream the stored file with a Content-Disposition attachment header."""
        doc = self.get_object()
        extension = os.path.splitext(doc.file.name)[1]
        filename = doc.title if doc.title.lower().endswith(extension.lower()) else f"{doc.title}{extension}"
        try:
            handle = doc.file.open("rb")
        except (FileNotFoundError, OSError) as exc:
            logger.warning("Stored file for document %s is unavailable: %s", doc.pk, exc)
            raise NotFound("The file for this document is no longer available.")
        return FileResponse(handle, as_attachment=True, filename=filename)


class TickerSettingViewSet(viewsets.ModelViewSet):
    """Custom homepage ticker lines; the public feed is ``/api/ticker/``."""

    queryset = TickerSetting.objects.all().order_by("ordering", "id")
    serializer_class = TickerSettingSerializer
    permission_classes = [IsPortalAdmin]
