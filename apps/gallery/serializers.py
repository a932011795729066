"""
Gallery serializers
"""
from rest_framework import serializers

from .models import GalleryImage


class GalleryImageSerializer(serializers.ModelSerializer):
    publicId = serializers.CharField(source='public_id', read_only=True)
    createdBy = serializers.UUIDField(source='created_by_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = GalleryImage
        fields = ['id', 'url', 'title', 'publicId', 'createdBy', 'createdAt']
        read_only_fields = fields


class GalleryUploadSerializer(serializers.Serializer):
    """Multipart upload form"""
    image = serializers.ImageField(required=False)
    title = serializers.CharField(required=False, allow_blank=True, max_length=255)


class GalleryUploadResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    image = GalleryImageSerializer()
