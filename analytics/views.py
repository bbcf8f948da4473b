"""
Views for the analytics app.

The admin dashboard counts interns, open tasks and contact queries and
lists the latest submissions.  Numbers are computed on request; there is
no stored aggregate.
"""
from __future__ import annotations

from django.contrib.auth import get_user_model
from rest_framework.response import Response
from rest_framework.views import APIView

from assignments.models import Submission, Task
from assignments.serializers import SubmissionSerializer
from common.permissions import IsPortalAdmin
from contact.models import ContactMessage
from users.models import UserProfile

User = get_user_model()

LATEST_SUBMISSIONS = 5


class DashboardView(APIView):
    """GET /api/dashboard/ (?latest=N, default 5) admin headline stats."""

    permission_classes = [IsPortalAdmin]

    def get(self, request):
        try:
            latest = max(int(request.query_params.get("latest", LATEST_SUBMISSIONS)), 0)
        except ValueError:
            latest = LATEST_SUBMISSIONS

        contact = ContactMessage.objects.all()
        submissions = Submission.objects.select_related("intern").order_by("-created_at", "-id")
        return Response(
            {
                "total_interns": User.objects.filter(is_staff=False, profile__role=UserProfile.ROLE_INTERN).count(),
                "active_tasks": Task.objects.exclude(status=Task.STATUS_COMPLETED).count(),
                "resolved_queries": contact.filter(status=ContactMessage.STATUS_RESOLVED).count(),
                "pending_queries": contact.exclude(status=ContactMessage.STATUS_RESOLVED).count(),
                "total_submissions": submissions.count(),
                "latest_submissions": SubmissionSerializer(
                    submissions[:latest], many=True, context={"request": request}
                ).data,
            }
        )
