from rest_framework.routers import DefaultRouter

from .views import SubmissionViewSet, TaskViewSet

router = DefaultRouter()
router.register(r"tasks", TaskViewSet, basename="task")
router.register(r"submissions", SubmissionViewSet, basename="submission")

urlpatterns = router.urls
