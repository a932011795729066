"""
Booking views
"""
from rest_framework import viewsets, status, mixins
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiResponse, OpenApiExample

from apps.core.mixins import NotFoundMessageMixin
from apps.core.permissions import IsVenueAdmin
from .models import Booking
from .serializers import (
    BookingSerializer,
    BookingCreateSerializer,
    ApproveBookingSerializer,
    BookedDatesSerializer,
    BookingCreatedResponseSerializer,
    BookingApprovedResponseSerializer,
    BookingRejectedResponseSerializer,
)
from .services.admission import admission_controller
from .services.lifecycle import booking_lifecycle
from .services.retention import retention_sweeper


class PublicBookingView(APIView):
    """
    Public availability calendar and booking requests.
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    @extend_schema(
        summary="Booked dates",
        description="Every day that already holds a booking, sorted ascending. "
                    "Used by the booking calendar to disable dates.",
        responses={200: BookedDatesSerializer},
        tags=['Bookings - Public']
    )
    def get(self, request):
        return Response({'bookedDates': admission_controller.booked_dates()})

    @extend_schema(
        summary="Request a booking",
        description="""
        Submit a booking request for one day. The booking starts as pending
        and waits for administrator approval.

        `date` accepts YYYY-MM-DD or any parseable date/time string; it is
        stored as the venue's local calendar day.
        """,
        request=BookingCreateSerializer,
        examples=[
            OpenApiExample(
                'Booking request',
                value={
                    'name': 'Asha Verma',
                    'email': 'asha@example.com',
                    'phone': '9876543210',
                    'package': 'Engagement Day Program',
                    'guests': 150,
                    'date': '2025-03-10',
                    'time': '18:00',
                    'specialRequests': 'Vegetarian menu only'
                },
                request_only=True
            )
        ],
        responses={
            201: BookingCreatedResponseSerializer,
            400: OpenApiResponse(description="Invalid or missing date, or missing fields"),
            409: OpenApiResponse(description="Selected date is already booked")
        },
        tags=['Bookings - Public']
    )
    def post(self, request):
        booking, booked_dates = admission_controller.submit_booking(request.data)
        return Response(
            {
                'message': 'Booking request submitted',
                'booking': BookingSerializer(booking).data,
                'bookedDates': booked_dates,
            },
            status=status.HTTP_201_CREATED
        )


class AdminBookingViewSet(NotFoundMessageMixin, viewsets.GenericViewSet,
                          mixins.ListModelMixin, mixins.RetrieveModelMixin):
    """
    Administrator booking workflow.

    Listing first deletes bookings whose day has passed.
    """
    permission_classes = [IsVenueAdmin]
    serializer_class = BookingSerializer
    not_found_message = 'Booking not found'
    filterset_fields = ['status', 'is_paid', 'payment_status']
    search_fields = ['name', 'email', 'phone', 'package']
    ordering_fields = ['date', 'created_at']
    ordering = ['date']

    def get_queryset(self):
        return Booking.objects.all()

    @extend_schema(
        summary="List bookings",
        description="Remove past bookings, then return every current booking",
        responses={
            200: BookingSerializer(many=True),
            401: OpenApiResponse(description="Invalid or expired token"),
            403: OpenApiResponse(description="No token provided")
        },
        tags=['Bookings - Admin']
    )
    def list(self, request, *args, **kwargs):
        retention_sweeper.sweep()
        return super().list(request, *args, **kwargs)

    @extend_schema(
        summary="Get booking",
        responses={
            200: BookingSerializer,
            404: OpenApiResponse(description="Booking not found")
        },
        tags=['Bookings - Admin']
    )
    def retrieve(self, request, *args, **kwargs):
        return super().retrieve(request, *args, **kwargs)

    @extend_schema(
        summary="Approve booking",
        description="Approve a booking and email the customer a payment link for `amount` "
                    "(major currency units).",
        request=ApproveBookingSerializer,
        responses={
            200: BookingApprovedResponseSerializer,
            400: OpenApiResponse(description="Valid amount is required"),
            404: OpenApiResponse(description="Booking not found"),
            409: OpenApiResponse(description="Booking already paid"),
            502: OpenApiResponse(description="Payment link could not be created")
        },
        tags=['Bookings - Admin']
    )
    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        booking, payment_link = booking_lifecycle.approve(pk, request.data.get('amount'))
        return Response({
            'message': 'Booking approved, payment link sent',
            'booking': BookingSerializer(booking).data,
            'paymentLink': payment_link,
        })

    @extend_schema(
        summary="Reject booking",
        description="Reject a booking. The booking is deleted and the customer is notified.",
        request=None,
        responses={
            200: BookingRejectedResponseSerializer,
            404: OpenApiResponse(description="Booking not found")
        },
        tags=['Bookings - Admin']
    )
    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        booking_id = booking_lifecycle.reject(pk)
        return Response({
            'message': 'Booking rejected and deleted',
            'bookingId': booking_id,
        })
