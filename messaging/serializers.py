from __future__ import annotations

from rest_framework import serializers

from common.permissions import is_portal_admin
from common.uploads import validate_upload_size
from users.models import display_name
from . import threads
from .models import Message


class MessageSerializer(serializers.ModelSerializer):
    sender_name = serializers.SerializerMethodField()
    sender_role = serializers.SerializerMethodField()
    thread = serializers.SerializerMethodField()

    class Meta:
        model = Message
        fields = [
            "id",
            "type",
            "thread",
            "sender",
            "sender_name",
            "sender_role",
            "recipient",
            "task",
            "text",
            "attachment",
            "attachment_name",
            "created_at",
        ]
        read_only_fields = fields

    def get_sender_name(self, obj):
        return display_name(obj.sender)

    def get_sender_role(self, obj):
        return "admin" if is_portal_admin(obj.sender) else "intern"

    def get_thread(self, obj):
        return threads.thread_of(obj).key


class SendMessageSerializer(serializers.Serializer):
    contact = serializers.CharField(required=False, allow_blank=True)
    task = serializers.IntegerField(required=False, allow_null=True)
    text = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)
    attachment = serializers.FileField(required=False, allow_null=True, validators=[validate_upload_size])


class SeenSerializer(serializers.Serializer):
    last_seen_id = serializers.IntegerField(required=False, min_value=0)


class ContactSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    kind = serializers.CharField()
    branch = serializers.CharField(allow_blank=True)
    year = serializers.CharField(allow_blank=True)
    thread = serializers.CharField()
    unread = serializers.IntegerField()
    last_message = MessageSerializer(allow_null=True)
