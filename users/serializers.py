"""
Serializers for the users app.

Covers email login, the ``me`` payload, password change and the intern
directory managed by admins.
"""
from django.contrib.auth.models import User
from django.contrib.auth.password_validation import validate_password
from django.db import transaction
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from .email_utils import generate_temporary_password
from .models import UserProfile


class EmailTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Login using email + password and return SimpleJWT refresh/access tokens.
    POST body: {"email": "...", "password": "..."}
    """
    email = serializers.EmailField(write_only=True)
    password = serializers.CharField(write_only=True, trim_whitespace=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Only Email + Password appear on the browsable form.
        self.fields.pop(self.username_field, None)

    def validate(self, attrs):
        email = attrs.get("email")
        password = attrs.get("password")

        # Emails are unique case-insensitively for accounts made through the
        # API, but older or admin-made rows may differ only in case
        candidates = User.objects.select_related("profile").filter(email__iexact=email).order_by("id")
        user = next((u for u in candidates if u.check_password(password)), None)
        if user is None:
            raise AuthenticationFailed("No active account found with the given credentials")

        if not user.is_active:
            raise AuthenticationFailed("User account is disabled")

        refresh = self.get_token(user)
        return {
            "refresh": str(refresh),
            "access": str(refresh.access_token),
            "user": UserSerializer(user).data,
        }


class ProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = UserProfile
        fields = ["role", "full_name", "branch", "year", "status"]
        read_only_fields = ["role", "status"]


class UserSerializer(serializers.ModelSerializer):
    profile = ProfileSerializer(read_only=True)
    role = serializers.SerializerMethodField()
    name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "email", "name", "role", "is_staff", "profile"]
        read_only_fields = fields

    def get_role(self, obj):
        return "admin" if obj.is_staff else "intern"

    def get_name(self, obj):
        profile = getattr(obj, "profile", None)
        return profile.display_name if profile else (obj.get_full_name() or obj.email)


class ChangePasswordSerializer(serializers.Serializer):
    old_password = serializers.CharField(write_only=True, trim_whitespace=False)
    new_password = serializers.CharField(write_only=True, trim_whitespace=False)
    confirm_new_password = serializers.CharField(write_only=True, trim_whitespace=False)

    def validate(self, attrs):
        if attrs["new_password"] != attrs["confirm_new_password"]:
            raise serializers.ValidationError({"confirm_new_password": "Passwords do not match."})
        validate_password(attrs["new_password"], self.context["request"].user)
        return attrs


class InternSerializer(serializers.ModelSerializer):
    """
    Flat intern record as shown on the admin "Interns" page.

    Creating an intern makes the auth user, fills in the profile and sets a
    generated temporary password which the view mails to the intern.
    """
    name = serializers.CharField(source="profile.full_name", max_length=255)
    branch = serializers.ChoiceField(source="profile.branch", choices=UserProfile.BRANCH_CHOICES)
    year = serializers.ChoiceField(source="profile.year", choices=UserProfile.YEAR_CHOICES)
    status = serializers.CharField(source="profile.status", read_only=True)
    email = serializers.EmailField()

    class Meta:
        model = User
        fields = ["id", "name", "email", "branch", "year", "status", "date_joined"]
        read_only_fields = ["id", "status", "date_joined"]

    def validate_name(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("Name is required.")
        return value

    def validate_email(self, value):
        value = value.strip().lower()
        others = User.objects.filter(email__iexact=value)
        if self.instance is not None:
            others = others.exclude(pk=self.instance.pk)
        if others.exists():
            raise serializers.ValidationError("A user with this email already exists.")
        return value

    @transaction.atomic
    def create(self, validated_data):
        profile_data = validated_data.pop("profile", {})
        email = validated_data["email"]
        temp_password = generate_temporary_password()

        user = User.objects.create_user(username=email, email=email, password=temp_password)
        profile = user.profile
        profile.role = UserProfile.ROLE_INTERN
        profile.full_name = profile_data.get("full_name", "")
        profile.branch = profile_data.get("branch", "")
        profile.year = profile_data.get("year", "")
        profile.status = UserProfile.STATUS_ACTIVE
        profile.save()

        # Handed to the view so the credentials can be mailed once
        user.temporary_password = temp_password
        return user

    def update(self, instance, validated_data):
        profile_data = validated_data.pop("profile", {})
        email = validated_data.get("email")
        if email and email != instance.email:
            instance.email = email
            instance.username = email
            instance.save(update_fields=["email", "username"])
        profile = instance.profile
        for field, value in profile_data.items():
            setattr(profile, field, value)
        if profile_data:
            profile.save()
        return instance


class AdminSerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "name", "email"]

    def get_name(self, obj):
        profile = getattr(obj, "profile", None)
        return profile.display_name if profile else obj.email
