from rest_framework import serializers

from .models import ContactMessage


class ContactMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactMessage
        fields = ["id", "student_id", "email", "message", "status", "resolved_by", "created_at"]
        read_only_fields = ["id", "status", "resolved_by", "created_at"]

    def validate_student_id(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Student ID is required.")
        return value

    def validate_message(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Message cannot be empty.")
        return value


class ContactReplySerializer(serializers.Serializer):
    message = serializers.CharField(trim_whitespace=True)
