"""
URL patterns for the content app, included under ``/api/content/``.
"""
from rest_framework.routers import DefaultRouter

from .views import DocumentViewSet, GalleryViewSet, MoUViewSet, TickerSettingViewSet

router = DefaultRouter()
router.register(r"gallery", GalleryViewSet, basename="gallery")
router.register(r"mous", MoUViewSet, basename="mou")
router.register(r"documents", DocumentViewSet, basename="document")
router.register(r"ticker-settings", TickerSettingViewSet, basename="ticker-setting")

urlpatterns = router.urls
