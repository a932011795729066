"""
Public booking intake.
"""
import logging
from typing import Any, List, Mapping, Tuple

from django.db import IntegrityError, transaction

from apps.bookings.models import Booking
from apps.bookings.serializers import BookingCreateSerializer
from apps.core.exceptions import BookingConflict
from apps.core.utils.constants import EVENT_BOOKING_CREATED
from apps.core.utils.dates import normalize_day
from apps.notifications.services.broadcast_service import BroadcastService, broadcaster
from apps.notifications.services.email_service import EmailNotificationService, email_notifications

logger = logging.getLogger(__name__)


class AdmissionController:
    """
    Accepts public booking requests, one booking per calendar day.

    The day is checked before insert and enforced again by the unique
    constraint on ``Booking.date``; a concurrent insert that loses the race
    gets the same ``BookingConflict`` as the pre-check.
    """

    def __init__(
        self,
        email_service: EmailNotificationService = None,
        broadcast_service: BroadcastService = None
    ):
        self.email_service = email_service or email_notifications
        self.broadcast_service = broadcast_service or broadcaster

    def booked_dates(self) -> List[str]:
        """All booked canonical days, ascending."""
        return [
            day.isoformat()
            for day in Booking.objects.order_by('date').values_list('date', flat=True)
        ]

    def is_day_taken(self, day: str) -> bool:
        return Booking.objects.filter(date=day).exists()

    def submit_booking(self, payload: Mapping[str, Any]) -> Tuple[Booking, List[str]]:
        """
        Admit a booking request in ``pending`` state.

        Args:
            payload: Request body (name, email, phone, package, guests, date,
                time, specialRequests)

        Returns:
            Tuple of (created booking, refreshed booked days)

        Raises:
            InvalidDate: date missing or unparseable
            BookingConflict: the day already holds a booking
            ValidationError: another required field is missing or invalid
        """
        day = normalize_day(payload.get('date'))

        if self.is_day_taken(day):
            logger.info(f"Rejected booking request for {day}: date already booked")
            raise BookingConflict()

        data = {key: payload[key] for key in payload}
        data['date'] = day
        serializer = BookingCreateSerializer(data=data)
        serializer.is_valid(raise_exception=True)

        try:
            with transaction.atomic():
                booking = Booking.objects.create(**serializer.validated_data)
        except IntegrityError:
            logger.warning(f"Concurrent booking for {day} lost the insert race")
            raise BookingConflict()

        logger.info(f"Booking {booking.id} created for {day}")

        self.email_service.send_new_booking_alert(booking)
        self.broadcast_service.publish(EVENT_BOOKING_CREATED, {
            'bookingId': str(booking.id),
            'date': day,
            'name': booking.name,
        })

        return booking, self.booked_dates()


admission_controller = AdmissionController()
