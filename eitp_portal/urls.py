"""
URL configuration for the EITP internship portal backend.
All API endpoints live under the `/api/` prefix.  Authentication endpoints
are nested under `/api/auth/`.
"""

from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.views import (
    SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView
)
from django.conf import settings
from django.conf.urls.static import static

from eitp_portal.views import index


urlpatterns = [
    path("", index, name="index"),
    path("admin/", admin.site.urls),

    path("api/", RedirectView.as_view(pattern_name="swagger-ui", permanent=False)),

    #  Swagger/Redoc
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    # Auth endpoints
    path("api/auth/", include("users.urls")),
    path("api/", include("users.directory_urls")),

    path("api/", include("events.urls")),
    path("api/content/", include("content.urls")),
    path("api/", include("assignments.urls")),
    path("api/messaging/", include("messaging.urls")),
    path("api/", include("notifications.urls")),
    path("api/contact/", include("contact.urls")),
    path("api/", include("analytics.urls")),
]

if settings.DEBUG:
    # Only serve MEDIA_URL via Django if it's a local path (avoid trying to serve S3)
    if getattr(settings, "MEDIA_URL", "").startswith("/"):
        urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
