"""
Views for the venue contact record.
"""
import logging

from rest_framework import generics, status
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.core.mixins import NotFoundMessageMixin
from apps.core.permissions import IsVenueAdminOrReadOnly
from .models import Contact
from .serializers import ContactSerializer, ContactListResponseSerializer

logger = logging.getLogger(__name__)


class ContactListView(generics.ListCreateAPIView):
    """
    Public list of contact records, admins may add new ones.
    """
    queryset = Contact.objects.all()
    serializer_class = ContactSerializer
    permission_classes = [IsVenueAdminOrReadOnly]
    filter_backends = []

    @extend_schema(
        summary='List contacts',
        description='Venue contact records, newest first.',
        responses={200: ContactListResponseSerializer},
        tags=['Contact'],
    )
    def get(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response({'contacts': serializer.data})

    @extend_schema(
        summary='Create contact',
        request=ContactSerializer,
        responses={
            201: ContactSerializer,
            400: OpenApiResponse(description='Phone or location missing'),
            403: OpenApiResponse(description='No token provided'),
        },
        tags=['Contact'],
    )
    def post(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contact = serializer.save()

        logger.info(f"Contact {contact.id} created by admin {request.user.id}")
        return Response(ContactSerializer(contact).data, status=status.HTTP_201_CREATED)


class ContactDetailView(NotFoundMessageMixin, generics.RetrieveUpdateDestroyAPIView):
    """
    Single contact record: public read, admin update and delete.
    """
    queryset = Contact.objects.all()
    serializer_class = ContactSerializer
    permission_classes = [IsVenueAdminOrReadOnly]
    http_method_names = ['get', 'put', 'delete']
    not_found_message = 'Contact not found'

    @extend_schema(
        summary='Get contact',
        responses={200: ContactSerializer, 404: OpenApiResponse(description='Contact not found')},
        tags=['Contact'],
    )
    def get(self, request, *args, **kwargs):
        return self.retrieve(request, *args, **kwargs)

    @extend_schema(
        summary='Update contact',
        description='Fields left out are unchanged. socialMedia links are merged.',
        request=ContactSerializer,
        responses={200: ContactSerializer, 404: OpenApiResponse(description='Contact not found')},
        tags=['Contact'],
    )
    def put(self, request, *args, **kwargs):
        return self.partial_update(request, *args, **kwargs)

    @extend_schema(
        summary='Delete contact',
        responses={200: OpenApiResponse(description='Contact deleted'),
                   404: OpenApiResponse(description='Contact not found')},
        tags=['Contact'],
    )
    def delete(self, request, *args, **kwargs):
        contact = self.get_object()
        contact.delete()
        logger.info(f"Contact {kwargs.get('pk')} deleted")
        return Response({'message': 'Contact deleted'})
