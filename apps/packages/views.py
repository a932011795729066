"""
Package views
"""
import logging

from rest_framework import viewsets, mixins, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from apps.core.mixins import NotFoundMessageMixin
from apps.core.permissions import IsVenueAdmin
from .models import Package
from .serializers import PackageSerializer

logger = logging.getLogger(__name__)


class PackageViewSet(NotFoundMessageMixin, viewsets.ReadOnlyModelViewSet):
    """Public catalogue of venue packages, newest first"""
    queryset = Package.objects.all()
    serializer_class = PackageSerializer
    authentication_classes = []
    permission_classes = [AllowAny]
    filterset_fields = ['category', 'pricing_type']
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'created_at']
    ordering = ['-created_at']
    not_found_message = 'Package not found'

    @extend_schema(
        summary="List packages",
        description="Get all venue packages, newest first",
        parameters=[
            OpenApiParameter('category', str, description='Filter by category'),
            OpenApiParameter('search', str, description='Search in name and description'),
        ],
        responses={200: PackageSerializer(many=True)},
        tags=['Packages']
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(
        summary="Get package details",
        responses={
            200: PackageSerializer,
            404: OpenApiResponse(description="Package not found")
        },
        tags=['Packages']
    )
    def retrieve(self, request, *args, **kwargs):
        return super().retrieve(request, *args, **kwargs)


class AdminPackageViewSet(NotFoundMessageMixin,
                          viewsets.GenericViewSet,
                          mixins.CreateModelMixin,
                          mixins.UpdateModelMixin,
                          mixins.DestroyModelMixin):
    """Package management for administrators"""
    queryset = Package.objects.all()
    serializer_class = PackageSerializer
    permission_classes = [IsVenueAdmin]
    http_method_names = ['post', 'put', 'delete']
    not_found_message = 'Package not found'

    @extend_schema(
        summary="Create package",
        request=PackageSerializer,
        responses={
            201: PackageSerializer,
            400: OpenApiResponse(description="Bad Request - Missing fields or pricing"),
            403: OpenApiResponse(description="No token provided")
        },
        tags=['Packages']
    )
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        package = serializer.save(created_by=request.user)

        logger.info(f"Package {package.id} created by admin {request.user.id}")
        return Response(
            {'message': 'Package created', 'package': PackageSerializer(package).data},
            status=status.HTTP_201_CREATED
        )

    @extend_schema(
        summary="Update package",
        description="Lists are replaced, menu sections are merged, other fields are overwritten. "
                    "Fields left out are unchanged.",
        request=PackageSerializer,
        responses={
            200: PackageSerializer,
            404: OpenApiResponse(description="Package not found")
        },
        tags=['Packages']
    )
    def update(self, request, *args, **kwargs):
        package = self.get_object()
        serializer = self.get_serializer(package, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        package = serializer.save()

        return Response({'message': 'Package updated', 'package': PackageSerializer(package).data})

    @extend_schema(
        summary="Delete package",
        responses={
            200: OpenApiResponse(description="Package deleted"),
            404: OpenApiResponse(description="Package not found")
        },
        tags=['Packages']
    )
    def destroy(self, request, *args, **kwargs):
        package = self.get_object()
        package.delete()
        logger.info(f"Package {kwargs.get('pk')} deleted")
        return Response({'message': 'Package deleted'})
