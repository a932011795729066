"""
Booking lifecycle transitions: approve, reject and payment confirmation.
"""
import logging
import uuid
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, Optional, Tuple

from django.core.exceptions import ValidationError as DjangoValidationError
from django.utils import timezone
from rest_framework.exceptions import NotFound

from apps.bookings.models import Booking
from apps.core.exceptions import BookingAlreadyPaid, InvalidAmount
from apps.core.utils.constants import (
    BOOKING_STATUS_APPROVED,
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUS_FAILED,
    EVENT_BOOKING_APPROVED,
    EVENT_BOOKING_REJECTED,
    EVENT_PAYMENT_UPDATE,
)
from apps.notifications.services.broadcast_service import BroadcastService, broadcaster
from apps.notifications.services.email_service import EmailNotificationService, email_notifications
from apps.payments.razorpay_service import RazorpayClient, razorpay_client

logger = logging.getLogger(__name__)


def parse_amount(value: Any) -> Decimal:
    """
    Validate an amount in major currency units.

    Raises:
        InvalidAmount: missing, non-numeric, non-finite or not positive
    """
    if value is None or isinstance(value, bool) or value == '':
        raise InvalidAmount()
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmount()
    if not amount.is_finite() or amount <= 0:
        raise InvalidAmount()
    return amount


def to_minor_units(amount: Decimal) -> int:
    """Convert major currency units to the smallest unit (e.g. rupees to paise)."""
    return int((amount * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


class BookingLifecycle:
    """
    Admin and payment-provider transitions of a booking.

    State changes are committed before any notification is attempted, and
    notification failures never undo them.
    """

    def __init__(
        self,
        gateway: RazorpayClient = None,
        email_service: EmailNotificationService = None,
        broadcast_service: BroadcastService = None
    ):
        self.gateway = gateway or razorpay_client
        self.email_service = email_service or email_notifications
        self.broadcast_service = broadcast_service or broadcaster

    @staticmethod
    def get_booking(booking_id) -> Booking:
        try:
            return Booking.objects.get(pk=booking_id)
        except (Booking.DoesNotExist, DjangoValidationError, ValueError):
            raise NotFound('Booking not found')

    def approve(self, booking_id, amount) -> Tuple[Booking, Dict[str, Any]]:
        """
        Approve a booking and send the payer a payment link.

        The approval is saved before the gateway is called; if the gateway
        fails the booking stays approved and the admin can approve again to
        resend a link. Writes are conditional on the row still existing
        unpaid, so a concurrent reject, sweep or payment is detected rather
        than overwritten.

        Args:
            booking_id: Booking UUID
            amount: Amount due in major currency units

        Returns:
            Tuple of (booking, payment link entity)

        Raises:
            InvalidAmount: amount missing or not positive
            NotFound: unknown booking, or deleted while approving
            BookingAlreadyPaid: the booking has already been paid
            PaymentGatewayError: payment link could not be created
        """
        major_amount = parse_amount(amount)
        minor_amount = to_minor_units(major_amount)
        if minor_amount < 1:
            raise InvalidAmount()
        booking = self.get_booking(booking_id)
        if booking.is_paid:
            raise BookingAlreadyPaid()

        now = timezone.now()
        if booking.status != BOOKING_STATUS_APPROVED:
            booking.status = BOOKING_STATUS_APPROVED
            booking.approved_at = now
        booking.amount = minor_amount
        booking.updated_at = now

        updated = Booking.objects.filter(pk=booking.pk, is_paid=False).update(
            status=booking.status,
            approved_at=booking.approved_at,
            amount=minor_amount,
            updated_at=now,
        )
        if not updated:
            self._raise_unapprovable(booking.pk)

        logger.info(f"Booking {booking.id} approved for {minor_amount} (minor units)")

        link = self.gateway.create_payment_link(booking, minor_amount)

        booking.order_id = link.get('id', '')
        updated = Booking.objects.filter(pk=booking.pk, is_paid=False).update(
            order_id=booking.order_id,
            updated_at=timezone.now(),
        )
        if not updated:
            logger.warning(
                f"Booking {booking.id} changed while creating payment link {booking.order_id}, cancelling it"
            )
            self.gateway.cancel_payment_link(booking.order_id)
            self._raise_unapprovable(booking.pk)

        self.email_service.send_booking_approved(booking, link.get('short_url', ''), major_amount)
        self.broadcast_service.publish(EVENT_BOOKING_APPROVED, {
            'bookingId': str(booking.id),
            'status': booking.status,
            'name': booking.name,
        })

        return booking, link

    @staticmethod
    def _raise_unapprovable(booking_id):
        if Booking.objects.filter(pk=booking_id).exists():
            raise BookingAlreadyPaid()
        raise NotFound('Booking not found')

    def reject(self, booking_id) -> str:
        """
        Reject a booking. Rejection deletes the record.

        Returns:
            The id of the deleted booking

        Raises:
            NotFound: unknown booking
        """
        booking = self.get_booking(booking_id)
        deleted_id = str(booking.id)
        name, email = booking.name, booking.email

        booking.delete()
        logger.info(f"Booking {deleted_id} rejected and deleted")

        self.email_service.send_booking_rejected(name, email)
        self.broadcast_service.publish(EVENT_BOOKING_REJECTED, {
            'bookingId': deleted_id,
            'name': name,
        })

        return deleted_id

    def confirm_payment(self, booking_id: Optional[str], payment_id: Optional[str]) -> Optional[Booking]:
        """
        Mark a booking paid after a verified provider callback.

        Safe to call repeatedly: only the first call for a booking changes
        it. Unknown or already deleted bookings are ignored.

        Returns:
            The booking, or None if it does not exist
        """
        if not self._is_booking_id(booking_id):
            logger.info(f"Payment {payment_id} carries no usable booking id ({booking_id!r}), ignored")
            return None

        now = timezone.now()
        updated = Booking.objects.filter(pk=booking_id, is_paid=False).update(
            is_paid=True,
            payment_status=PAYMENT_STATUS_PAID,
            payment_id=payment_id or '',
            paid_at=now,
            updated_at=now,
        )

        booking = Booking.objects.filter(pk=booking_id).first()
        if booking is None:
            logger.info(f"Payment {payment_id} for unknown booking {booking_id}, ignored")
            return None

        if not updated:
            logger.info(f"Booking {booking_id} already marked paid, duplicate payment event ignored")
            return booking

        logger.info(f"Booking {booking.id} marked as PAID (payment {payment_id})")
        self.broadcast_service.publish(EVENT_PAYMENT_UPDATE, {
            'bookingId': str(booking.id),
            'isPaid': True,
            'name': booking.name,
        })
        return booking

    def mark_payment_failed(self, booking_id: Optional[str], payment_id: Optional[str]) -> Optional[Booking]:
        """
        Record a failed payment attempt on an unpaid booking.

        A paid booking is never downgraded.
        """
        if not self._is_booking_id(booking_id):
            return None

        updated = Booking.objects.filter(pk=booking_id, is_paid=False).update(
            payment_status=PAYMENT_STATUS_FAILED,
            updated_at=timezone.now(),
        )
        if not updated:
            return None

        booking = Booking.objects.filter(pk=booking_id).first()
        if booking is not None:
            logger.info(f"Payment {payment_id} failed for booking {booking.id}")
            self.broadcast_service.publish(EVENT_PAYMENT_UPDATE, {
                'bookingId': str(booking.id),
                'isPaid': False,
                'paymentStatus': PAYMENT_STATUS_FAILED,
                'name': booking.name,
            })
        return booking

    @staticmethod
    def _is_booking_id(value) -> bool:
        if not value:
            return False
        try:
            uuid.UUID(str(value))
        except ValueError:
            return False
        return True


booking_lifecycle = BookingLifecycle()
