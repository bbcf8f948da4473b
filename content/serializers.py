"""
Serializers for the content app.

Gallery uploads come in as one or more files (multipart ``files``) and/or
already-hosted ``urls``; the view stores the files and the entry keeps the
comma-joined list of public URLs.
"""
from django.contrib.auth.models import User
from rest_framework import serializers

from common.uploads import validate_upload_size
from events.status import format_display_date
from users.models import UserProfile
from .models import Document, GalleryEntry, MoU, TickerSetting


class GalleryEntrySerializer(serializers.ModelSerializer):
    urls = serializers.ListField(child=serializers.CharField(), read_only=True)
    display_date = serializers.SerializerMethodField()

    class Meta:
        model = GalleryEntry
        fields = ["id", "title", "url", "urls", "uploader", "uploaded_by", "date", "display_date", "created_at"]
        read_only_fields = fields

    def get_display_date(self, obj):
        return format_display_date(obj.date)


class GalleryUploadSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    date = serializers.DateField(required=False, allow_null=True)
    uploader = serializers.CharField(max_length=255, required=False, allow_blank=True)
    files = serializers.ListField(
        child=serializers.FileField(validators=[validate_upload_size]),
        required=False,
        allow_empty=True,
    )
    urls = serializers.ListField(child=serializers.CharField(), required=False, allow_empty=True)

    def validate_title(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Title is required.")
        return value

    def validate_urls(self, value):
        # Accept "a,b" as well as ["a", "b"]
        urls = []
        for item in value:
            urls.extend(u.strip() for u in item.split(",") if u.strip())
        return urls

    def validate(self, attrs):
        if not attrs.get("files") and not attrs.get("urls"):
            raise serializers.ValidationError("Provide at least one file or URL.")
        return attrs


class MoUSerializer(serializers.ModelSerializer):
    class Meta:
        model = MoU
        fields = [
            "id",
            "partner",
            "scope",
            "date",
            "duration",
            "status",
            "description",
            "logo",
            "photo",
            "doc",
            "created_at",
        ]
        read_only_fields = ["id", "created_at"]
        extra_kwargs = {
            "logo": {"validators": [validate_upload_size]},
            "photo": {"validators": [validate_upload_size]},
            "doc": {"validators": [validate_upload_size]},
        }

    def validate_partner(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Partner is required.")
        return value


class DocumentSerializer(serializers.ModelSerializer):
    assigned_to = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(is_staff=False, profile__role=UserProfile.ROLE_INTERN),
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Document
        fields = ["id", "title", "file", "size", "assigned_to", "assigned_name", "uploaded_by", "created_at"]
        read_only_fields = ["id", "size", "assigned_name", "uploaded_by", "created_at"]
        extra_kwargs = {"file": {"validators": [validate_upload_size]}}


class TickerSettingSerializer(serializers.ModelSerializer):
    class Meta:
        model = TickerSetting
        fields = ["id", "value", "is_active", "ordering", "created_at"]
        read_only_fields = ["id", "created_at"]
