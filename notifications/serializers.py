from rest_framework import serializers

from users.models import display_name
from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    created_by_name = serializers.SerializerMethodField()
    dismissed = serializers.SerializerMethodField()

    class Meta:
        model = Notification
        fields = ["id", "subject", "message", "type", "date", "created_by", "created_by_name", "dismissed"]
        read_only_fields = ["id", "date", "created_by", "created_by_name", "dismissed"]

    def get_created_by_name(self, obj):
        return display_name(obj.created_by) if obj.created_by_id else ""

    def get_dismissed(self, obj):
        dismissed = self.context.get("dismissed_ids")
        return obj.pk in dismissed if dismissed is not None else False
