"""
Views for the users app.

Provides email login, logout, the ``me`` endpoint, password change and the
intern directory.  Admins add and remove interns; every portal member can
list them (chat contacts and task assignment need the roster).
"""
import logging

from django.contrib.auth.models import User
from rest_framework import filters, mixins, permissions, status, viewsets, generics
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken, TokenError
from rest_framework_simplejwt.views import TokenObtainPairView

from common.permissions import IsPortalAdmin, IsPortalMember
from .email_utils import send_intern_welcome_email
from .models import UserProfile
from .serializers import (
    AdminSerializer,
    ChangePasswordSerializer,
    EmailTokenObtainPairSerializer,
    InternSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)


class EmailTokenObtainPairView(TokenObtainPairView):
    """
    Obtain JWT tokens using email + password.
    """
    permission_classes = [permissions.AllowAny]
    serializer_class = EmailTokenObtainPairSerializer


class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        try:
            refresh_token = request.data["refresh"]
            token = RefreshToken(refresh_token)
            token.blacklist()
            return Response({"detail": "Successfully logged out."}, status=status.HTTP_205_RESET_CONTENT)
        except KeyError:
            return Response({"error": "Refresh token is required."}, status=status.HTTP_400_BAD_REQUEST)
        except TokenError:
            return Response({"error": "Invalid or expired token."}, status=status.HTTP_400_BAD_REQUEST)


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(UserSerializer(request.user).data)


class ChangePasswordView(generics.GenericAPIView):
    permission_classes = [permissions.IsAuthenticated]
    serializer_class = ChangePasswordSerializer

    def post(self, request):
        serializer = self.get_serializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)

        user = request.user
        if not user.check_password(serializer.validated_data["old_password"]):
            return Response(
                {"old_password": ["Old password is incorrect."]},
                status=status.HTTP_400_BAD_REQUEST,
            )

        user.set_password(serializer.validated_data["new_password"])
        user.save()
        logger.info("Password changed for user %s", user.pk)
        return Response({"detail": "Password updated."}, status=status.HTTP_200_OK)


class InternViewSet(viewsets.ModelViewSet):
    """
    /api/interns/            GET list (?search= on name or email), POST add (admin)
    /api/interns/{id}/       GET, PATCH (admin), DELETE (admin)
    """
    serializer_class = InternSerializer
    filter_backends = [filters.SearchFilter]
    search_fields = ["profile__full_name", "email"]
    http_method_names = ["get", "post", "patch", "delete"]

    def get_queryset(self):
        return (
            User.objects.filter(is_staff=False, profile__role=UserProfile.ROLE_INTERN)
            .select_related("profile")
            .order_by("profile__full_name", "id")
        )

    def get_permissions(self):
        if self.action in ("list", "retrieve"):
            return [IsPortalMember()]
        return [IsPortalAdmin()]

    def perform_create(self, serializer):
        user = serializer.save()
        logger.info("Intern %s added by %s", user.email, self.request.user.pk)
        # Account stays created even when the mail server is down
        if not send_intern_welcome_email(user, user.temporary_password):
            logger.warning("Intern %s created without a delivered welcome email", user.email)

    def perform_destroy(self, instance):
        logger.info("Intern %s removed by %s", instance.email, self.request.user.pk)
        instance.delete()


class AdminListView(mixins.ListModelMixin, viewsets.GenericViewSet):
    """GET /api/admins/ lists portal admins."""

    serializer_class = AdminSerializer
    permission_classes = [IsPortalAdmin]

    def get_queryset(self):
        return User.objects.filter(is_staff=True, is_active=True).select_related("profile").order_by("id")
