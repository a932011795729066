"""
Authentication serializers
"""
from rest_framework import serializers

from .models import User


class LoginSerializer(serializers.Serializer):
    """Serializer for admin login"""
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class TokenResponseSerializer(serializers.Serializer):
    """Response serializer for the login endpoint"""
    token = serializers.CharField()
    refresh = serializers.CharField()


class UpdateCredentialsSerializer(serializers.Serializer):
    """Serializer for changing the logged-in admin's email and/or password"""
    email = serializers.EmailField(required=False, allow_blank=True)
    password = serializers.CharField(
        required=False, allow_blank=True, write_only=True, trim_whitespace=False
    )

    def validate_email(self, value):
        if not value:
            return value
        user = self.context.get('user')
        taken = User.objects.filter(email__iexact=value)
        if user is not None:
            taken = taken.exclude(pk=user.pk)
        if taken.exists():
            raise serializers.ValidationError("Email is already in use")
        return value


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
