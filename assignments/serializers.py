"""
Serializers for the assignments app.
"""
from django.contrib.auth.models import User
from rest_framework import serializers

from common.uploads import validate_upload_size
from users.models import UserProfile, display_name
from .models import Submission, Task


class TaskSerializer(serializers.ModelSerializer):
    assigned_to = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(is_staff=False, profile__role=UserProfile.ROLE_INTERN)
    )
    assigned_name = serializers.SerializerMethodField()

    class Meta:
        model = Task
        fields = [
            "id",
            "title",
            "description",
            "assigned_to",
            "assigned_name",
            "due_date",
            "priority",
            "status",
            "comments",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "status", "comments", "created_by", "created_at", "updated_at"]

    def get_assigned_name(self, obj):
        return display_name(obj.assigned_to)

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title is required.")
        return value


class TaskStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Task.STATUS_CHOICES)


class CommentSerializer(serializers.Serializer):
    text = serializers.CharField(max_length=2000)

    def validate_text(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Comment cannot be empty.")
        return value


class SubmissionSerializer(serializers.ModelSerializer):
    class Meta:
        model = Submission
        fields = [
            "id",
            "intern",
            "intern_name",
            "title",
            "file_name",
            "file",
            "status",
            "date",
            "comments",
            "created_at",
        ]
        read_only_fields = fields


class SubmitWorkSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    files = serializers.ListField(
        child=serializers.FileField(validators=[validate_upload_size]),
        allow_empty=False,
    )

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title is required.")
        return value
