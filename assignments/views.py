"""
ViewSets for the assignments app.

Admins assign tasks and review submissions; interns see only their own
tasks and submissions, move their tasks through the status board and
comment on both.
"""
import logging

from django.db import transaction
from django_filters.rest_framework import CharFilter, DjangoFilterBackend, FilterSet
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from common.permissions import IsPortalAdmin, IsPortalMember, is_portal_admin
from common.uploads import discard_files, store_files
from users.models import display_name
from .comments import append_comment
from .models import Submission, Task
from .serializers import (
    CommentSerializer,
    SubmissionSerializer,
    SubmitWorkSerializer,
    TaskSerializer,
    TaskStatusSerializer,
)

logger = logging.getLogger(__name__)


def _role(user):
    return "admin" if is_portal_admin(user) else "intern"


class TaskFilter(FilterSet):
    status = CharFilter(method="filter_status")

    class Meta:
        model = Task
        fields = ["assigned_to", "priority"]

    def filter_status(self, queryset, name, value):
        if not value or value == "All":
            return queryset
        return queryset.filter(status=value)


class TaskViewSet(viewsets.ModelViewSet):
    """
    /api/tasks/                  GET (?status=, "All" disables), POST (admin)
    /api/tasks/{id}/             GET, PATCH (admin), DELETE (admin)
    /api/tasks/{id}/status/      POST {"status"} (admin or assignee)
    /api/tasks/{id}/comments/    POST {"text"} (admin or assignee)
    """
    serializer_class = TaskSerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = TaskFilter
    http_method_names = ["get", "post", "patch", "delete"]

    def get_permissions(self):
        if self.action in ("list", "retrieve", "set_status", "add_comment"):
            return [IsPortalMember()]
        return [IsPortalAdmin()]

    def get_queryset(self):
        qs = Task.objects.select_related("assigned_to__profile").order_by("-created_at", "-id")
        user = self.request.user
        if is_portal_admin(user):
            return qs
        return qs.filter(assigned_to=user)

    def perform_create(self, serializer):
        task = serializer.save(created_by=self.request.user, status=Task.STATUS_PENDING, comments=[])
        logger.info("Task %s assigned to %s", task.pk, task.assigned_to_id)

    @action(detail=True, methods=["post"], url_path="status")
    def set_status(self, request, pk=None):
        task = self.get_object()
        serializer = TaskStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        task.status = serializer.validated_data["status"]
        task.save(update_fields=["status", "updated_at"])
        return Response(self.get_serializer(task).data)

    @action(detail=True, methods=["post"], url_path="comments")
    def add_comment(self, request, pk=None):
        # get_object() runs the visibility check before the row is locked
        task = self.get_object()
        serializer = CommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        task, comment = append_comment(
            Task.objects.all(),
            task.pk,
            user=display_name(request.user),
            role=_role(request.user),
            text=serializer.validated_data["text"],
        )
        return Response(comment, status=status.HTTP_201_CREATED)


class SubmissionViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    /api/submissions/                  GET, POST multipart {"title", "files"} (intern)
    /api/submissions/{id}/             GET, DELETE (admin)
    /api/submissions/{id}/review/      POST (admin) marks as Reviewed
    /api/submissions/{id}/comments/    POST {"text"} (admin or owner)
    """
    serializer_class = SubmissionSerializer
    parser_classes = (MultiPartParser, FormParser, JSONParser)

    def get_permissions(self):
        if self.action in ("list", "retrieve", "create", "add_comment"):
            return [IsPortalMember()]
        return [IsPortalAdmin()]

    def get_queryset(self):
        qs = Submission.objects.select_related("intern").order_by("-created_at", "-id")
        user = self.request.user
        if is_portal_admin(user):
            return qs
        return qs.filter(intern=user)

    def create(self, request, *args, **kwargs):
        if is_portal_admin(request.user):
            raise PermissionDenied("Only interns submit work.")
        serializer = SubmitWorkSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        title = serializer.validated_data["title"]
        files = serializer.validated_data["files"]

        stored = store_files(files, "submissions")
        try:
            with transaction.atomic():
                rows = [
                    Submission.objects.create(
                        intern=request.user,
                        intern_name=display_name(request.user),
                        title=title,
                        file_name=upload.name,
                        file=name,
                        status=Submission.STATUS_PENDING,
                        comments=[],
                    )
                    for upload, (name, _) in zip(files, stored)
                ]
        except Exception:
            discard_files(name for name, _ in stored)
            raise

        logger.info("Intern %s submitted %d file(s) for %r", request.user.pk, len(rows), title)
        return Response(SubmissionSerializer(rows, many=True).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"], url_path="review")
    def review(self, request, pk=None):
        submission = self.get_object()
        submission.status = Submission.STATUS_REVIEWED
        submission.save(update_fields=["status"])
        logger.info("Submission %s reviewed by %s", submission.pk, request.user.pk)
        return Response(self.get_serializer(submission).data)

    @action(detail=True, methods=["post"], url_path="comments")
    def add_comment(self, request, pk=None):
        submission = self.get_object()
        serializer = CommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        submission, comment = append_comment(
            Submission.objects.all(),
            submission.pk,
            sender=display_name(request.user),
            role=_role(request.user),
            text=serializer.validated_data["text"],
        )
        return Response(comment, status=status.HTTP_201_CREATED)
