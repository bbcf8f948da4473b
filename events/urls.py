from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import EventViewSet, TickerView

router = DefaultRouter()
router.register(r"events", EventViewSet, basename="event")

urlpatterns = router.urls + [
    path("ticker/", TickerView.as_view(), name="ticker"),
]
