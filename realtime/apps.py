from django.apps import AppConfig


class RealtimeConfig(AppConfig):
    """Configuration for the realtime app.

    ``ready()`` hooks post-save and post-delete signals of every portal
    model into the ``portal_changes`` channel group.
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "realtime"

    def ready(self):
        from .signals import connect_change_signals

        connect_change_signals()
