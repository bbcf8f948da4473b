from django.apps import AppConfig


class AssignmentsConfig(AppConfig):
    """Configuration for the assignments app (tasks and submissions)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "assignments"

    def ready(self) -> None:
        from . import signals  # noqa: F401
