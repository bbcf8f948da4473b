"""Intern and admin directory routes, mounted under ``/api/``."""
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import AdminListView, InternViewSet

router = DefaultRouter()
router.register(r"interns", InternViewSet, basename="intern")
router.register(r"admins", AdminListView, basename="admin-user")

urlpatterns = [
    path("", include(router.urls)),
]
