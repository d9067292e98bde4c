# users/serializers.py

from django.contrib.auth import get_user_model
from rest_framework import serializers

from users.models import Profile

User = get_user_model()


# -----------------------------
# Auth
# -----------------------------
class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(write_only=True, min_length=6)
    full_name = serializers.CharField(max_length=150, required=False, allow_blank=True)
    phone = serializers.CharField(max_length=30, required=False, allow_blank=True)

    def validate_email(self, value):
        value = (value or "").strip().lower()
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("An account with this email already exists.")
        return value


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True)
    username = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        email = (attrs.get("email") or "").strip()
        username = (attrs.get("username") or "").strip()

        if email and username:
            raise serializers.ValidationError("Provide either email or username, not both.")
        if not email and not username:
            raise serializers.ValidationError("Email or username is required.")

        attrs["identifier"] = email or username
        return attrs


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField()


# -----------------------------
# Account
# -----------------------------
class UserSerializer(serializers.ModelSerializer):
    is_admin = serializers.BooleanField(read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "username", "role", "is_admin", "created_at"]
        read_only_fields = fields


class ProfileSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source="user.email", read_only=True)
    shipping_address = serializers.CharField(read_only=True)

    class Meta:
        model = Profile
        fields = [
            "user",
            "email",
            "full_name",
            "phone",
            "company_name",
            "address",
            "city",
            "state",
            "pincode",
            "shipping_address",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["user", "email", "shipping_address", "created_at", "updated_at"]


class ChangeEmailSerializer(serializers.Serializer):
    new_email = serializers.EmailField(max_length=255)
    current_password = serializers.CharField(write_only=True)


class ChangePasswordSerializer(serializers.Serializer):
    current_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(write_only=True, min_length=6)
    confirm_password = serializers.CharField(write_only=True)

    def validate(self, attrs):
        if attrs["new_password"] != attrs["confirm_password"]:
            raise serializers.ValidationError({"confirm_password": "Passwords do not match."})
        return attrs


# -----------------------------
# Admin
# -----------------------------
class AdminUserSerializer(serializers.ModelSerializer):
    """
    get-users row: profile merged with its account.
    """

    id = serializers.UUIDField(source="user.id", read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)
    role = serializers.CharField(source="user.role", read_only=True)
    is_active = serializers.BooleanField(source="user.is_active", read_only=True)

    class Meta:
        model = Profile
        fields = [
            "id",
            "email",
            "role",
            "is_active",
            "full_name",
            "phone",
            "company_name",
            "city",
            "state",
            "created_at",
        ]
        read_only_fields = fields
