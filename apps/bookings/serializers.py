"""
Booking serializers
"""
from rest_framework import serializers

from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    """Booking representation returned to clients"""
    specialRequests = serializers.CharField(source='special_requests', read_only=True)
    isPaid = serializers.BooleanField(source='is_paid', read_only=True)
    paymentStatus = serializers.CharField(source='payment_status', read_only=True)
    paymentId = serializers.CharField(source='payment_id', read_only=True)
    orderId = serializers.CharField(source='order_id', read_only=True)
    approvedAt = serializers.DateTimeField(source='approved_at', read_only=True)
    rejectedAt = serializers.DateTimeField(source='rejected_at', read_only=True)
    paidAt = serializers.DateTimeField(source='paid_at', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Booking
        fields = [
            'id', 'name', 'email', 'phone', 'package', 'guests',
            'date', 'time', 'specialRequests', 'status',
            'isPaid', 'paymentStatus', 'paymentId', 'orderId', 'amount',
            'approvedAt', 'rejectedAt', 'paidAt', 'createdAt', 'updatedAt',
        ]
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    """Input serializer for public booking requests"""
    name = serializers.CharField(max_length=255)
    email = serializers.CharField(max_length=255)
    phone = serializers.CharField(max_length=50)
    package = serializers.CharField(max_length=255)
    guests = serializers.IntegerField(min_value=1)
    date = serializers.DateField()
    time = serializers.CharField(max_length=50)
    specialRequests = serializers.CharField(
        source='special_requests', required=False, allow_blank=True, default=''
    )


class ApproveBookingSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, help_text="Amount due in major currency units")


class BookedDatesSerializer(serializers.Serializer):
    bookedDates = serializers.ListField(child=serializers.DateField())


class BookingCreatedResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    booking = BookingSerializer()
    bookedDates = serializers.ListField(child=serializers.DateField())


class BookingApprovedResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    booking = BookingSerializer()
    paymentLink = serializers.DictField()


class BookingRejectedResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    bookingId = serializers.UUIDField()
