"""
Serializers for the events app.
"""
from rest_framework import serializers

from users.models import display_name
from .models import Event
from .status import format_display_date, status_of


class EventSerializer(serializers.ModelSerializer):
    status = serializers.SerializerMethodField()
    display_date = serializers.SerializerMethodField()
    created_by_name = serializers.SerializerMethodField()

    class Meta:
        model = Event
        fields = [
            "id",
            "title",
            "type",
            "date",
            "deadline",
            "description",
            "status",
            "display_date",
            "created_by",
            "created_by_name",
            "created_at",
        ]
        read_only_fields = ["id", "status", "display_date", "created_by", "created_by_name", "created_at"]

    def get_status(self, obj):
        return status_of(obj)

    def get_display_date(self, obj):
        return format_display_date(obj.date)

    def get_created_by_name(self, obj):
        return display_name(obj.created_by) if obj.created_by_id else ""

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title is required.")
        return value

    def validate(self, attrs):
        start = attrs.get("date", getattr(self.instance, "date", None))
        end = attrs.get("deadline", getattr(self.instance, "deadline", None))
        if start and end and end < start:
            raise serializers.ValidationError({"deadline": "Deadline cannot be before the start date."})
        return attrs


class CalendarEventSerializer(serializers.ModelSerializer):
    status = serializers.SerializerMethodField()

    class Meta:
        model = Event
        fields = ["id", "title", "type", "date", "deadline", "status"]

    def get_status(self, obj):
        return status_of(obj)


class CalendarDaySerializer(serializers.Serializer):
    day = serializers.IntegerField()
    date = serializers.DateField()
    events = CalendarEventSerializer(many=True)


class CalendarMonthSerializer(serializers.Serializer):
    year = serializers.IntegerField()
    month = serializers.IntegerField()
    month_name = serializers.CharField()
    leading_blanks = serializers.IntegerField()
    days = CalendarDaySerializer(many=True)
