"""
Email notification service for the venue.
Handles transactional booking emails sent through Django's mail backend.
"""
import logging
from typing import Any, Dict, Optional

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils import timezone
from django.utils.html import strip_tags

from apps.core.utils.constants import (
    EMAIL_NEW_BOOKING,
    EMAIL_BOOKING_APPROVED,
    EMAIL_BOOKING_REJECTED,
)

logger = logging.getLogger(__name__)


class EmailNotificationService:
    """
    Service class for sending booking emails.

    Every send is best-effort: failures (including SMTP timeouts, bounded by
    ``settings.EMAIL_TIMEOUT``) are logged and reported as ``False``, never
    raised to the caller.
    """

    TEMPLATE_MAP = {
        EMAIL_NEW_BOOKING: 'emails/new_booking_admin.html',
        EMAIL_BOOKING_APPROVED: 'emails/booking_approved.html',
        EMAIL_BOOKING_REJECTED: 'emails/booking_rejected.html',
    }

    SUBJECT_MAP = {
        EMAIL_NEW_BOOKING: 'New Booking Request',
        EMAIL_BOOKING_APPROVED: 'Booking Approved - Complete Payment',
        EMAIL_BOOKING_REJECTED: 'Booking Rejected',
    }

    def __init__(self, from_email: Optional[str] = None):
        self.from_email = from_email

    def send_email(self, recipient_email: str, notification_type: str, context: Dict[str, Any]) -> bool:
        """
        Render and send one notification email.

        Args:
            recipient_email: Recipient's email address
            notification_type: One of the EMAIL_* constants
            context: Template context dictionary

        Returns:
            bool: True if the message was handed to the mail backend
        """
        if not recipient_email:
            logger.warning(f"Skipping {notification_type} email: no recipient")
            return False

        template_name = self.TEMPLATE_MAP.get(notification_type)
        if not template_name:
            logger.error(f"No template found for notification type: {notification_type}")
            return False

        try:
            context = {**context, 'current_year': timezone.now().year}
            html_content = render_to_string(template_name, context)
            text_content = strip_tags(html_content)

            email = EmailMultiAlternatives(
                subject=self.SUBJECT_MAP[notification_type],
                body=text_content,
                from_email=self.from_email or settings.DEFAULT_FROM_EMAIL,
                to=[recipient_email]
            )
            email.attach_alternative(html_content, "text/html")
            email.send(fail_silently=False)

            logger.info(f"Email sent successfully: {notification_type} to {recipient_email}")
            return True

        except Exception as e:
            logger.error(
                f"Failed to send email {notification_type} to {recipient_email}: {e}",
                exc_info=True
            )
            return False

    def admin_recipient(self) -> str:
        """Email of the first administrator, falling back to ADMIN_NOTIFICATION_EMAIL."""
        from apps.authentication.models import User

        admin = User.objects.first_admin()
        if admin:
            return admin.email
        return getattr(settings, 'ADMIN_NOTIFICATION_EMAIL', '')

    def send_new_booking_alert(self, booking) -> bool:
        """Tell the venue administrator a booking request is waiting for review."""
        return self.send_email(
            recipient_email=self.admin_recipient(),
            notification_type=EMAIL_NEW_BOOKING,
            context={'booking': booking},
        )

    def send_booking_approved(self, booking, payment_url: str, amount) -> bool:
        """
        Send the payer their approval and payment link.

        Args:
            booking: Approved booking
            payment_url: Short URL of the payment link
            amount: Amount due in major currency units
        """
        return self.send_email(
            recipient_email=booking.email,
            notification_type=EMAIL_BOOKING_APPROVED,
            context={
                'booking': booking,
                'payment_url': payment_url,
                'amount': amount,
                'currency': settings.PAYMENT_CURRENCY,
            },
        )

    def send_booking_rejected(self, name: str, email: str) -> bool:
        """Tell the requester their booking was rejected and removed."""
        return self.send_email(
            recipient_email=email,
            notification_type=EMAIL_BOOKING_REJECTED,
            context={'name': name},
        )


# Singleton instance
email_notifications = EmailNotificationService()
