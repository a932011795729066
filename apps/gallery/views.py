"""
Gallery views
"""
import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.generics import ListAPIView, DestroyAPIView
from rest_framework.parsers import MultiPartParser, FormParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.core.exceptions import MediaStoreError
from apps.core.mixins import NotFoundMessageMixin
from apps.core.permissions import IsVenueAdmin
from apps.core.services.storage_service import gcs_storage
from .models import GalleryImage
from .serializers import (
    GalleryImageSerializer,
    GalleryUploadSerializer,
    GalleryUploadResponseSerializer,
)

logger = logging.getLogger(__name__)


class GalleryListView(ListAPIView):
    """Public gallery, newest first"""
    queryset = GalleryImage.objects.all()
    serializer_class = GalleryImageSerializer
    authentication_classes = []
    permission_classes = [AllowAny]
    filter_backends = []

    @extend_schema(
        summary="List gallery images",
        responses={200: GalleryImageSerializer(many=True)},
        tags=['Gallery']
    )
    def get(self, request, *args, **kwargs):
        return self.list(request, *args, **kwargs)


class GalleryUploadView(APIView):
    """Upload an image to the media bucket and record it"""
    permission_classes = [IsVenueAdmin]
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        summary="Upload gallery image",
        description="Multipart form with an `image` file and an optional `title`.",
        request={'multipart/form-data': GalleryUploadSerializer},
        responses={
            201: GalleryUploadResponseSerializer,
            400: OpenApiResponse(description="No file uploaded"),
            500: OpenApiResponse(description="Upload failed"),
        },
        tags=['Gallery']
    )
    def post(self, request):
        image_file = request.FILES.get('image')
        if not image_file:
            raise ValidationError('No file uploaded')

        uploaded = gcs_storage.upload_image(image_file, folder='gallery')
        if not uploaded:
            raise MediaStoreError('Upload failed')

        image = GalleryImage.objects.create(
            url=uploaded['url'],
            public_id=uploaded['public_id'],
            title=request.data.get('title', '') or '',
            created_by=request.user,
        )
        logger.info(f"Gallery image {image.id} uploaded by admin {request.user.id}")

        return Response(
            {'message': 'Image uploaded successfully', 'image': GalleryImageSerializer(image).data},
            status=status.HTTP_201_CREATED
        )


class GalleryImageDetailView(NotFoundMessageMixin, DestroyAPIView):
    """Remove an image from the bucket, then its record"""
    queryset = GalleryImage.objects.all()
    permission_classes = [IsVenueAdmin]
    not_found_message = 'Image not found'

    @extend_schema(
        summary="Delete gallery image",
        responses={
            200: OpenApiResponse(description="Image deleted successfully"),
            404: OpenApiResponse(description="Image not found"),
            500: OpenApiResponse(description="Failed to delete image"),
        },
        tags=['Gallery']
    )
    def delete(self, request, *args, **kwargs):
        image = self.get_object()

        if not gcs_storage.delete_image(image.public_id):
            raise MediaStoreError('Failed to delete image')

        image.delete()
        logger.info(f"Gallery image {kwargs.get('pk')} deleted")
        return Response({'message': 'Image deleted successfully'})
