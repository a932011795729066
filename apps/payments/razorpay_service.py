"""
Razorpay API client wrapper
"""
import logging
from typing import Any, Dict, Optional

import razorpay
import requests
from django.conf import settings
from razorpay.errors import (
    BadRequestError,
    GatewayError,
    ServerError,
    SignatureVerificationError,
)

from apps.core.exceptions import PaymentGatewayError

logger = logging.getLogger(__name__)


class RazorpayClient:
    """
    Payment Link gateway backed by Razorpay.

    Credentials default to the RAZORPAY_* settings; every API call is bounded
    by ``settings.RAZORPAY_TIMEOUT`` seconds.
    """

    def __init__(
        self,
        key_id: Optional[str] = None,
        key_secret: Optional[str] = None,
        webhook_secret: Optional[str] = None,
        timeout: Optional[int] = None
    ):
        self._key_id = key_id
        self._key_secret = key_secret
        self._webhook_secret = webhook_secret
        self._timeout = timeout
        self._client = None

    @property
    def key_id(self) -> str:
        return self._key_id or settings.RAZORPAY_KEY_ID

    @property
    def webhook_secret(self) -> str:
        return self._webhook_secret or settings.RAZORPAY_WEBHOOK_SECRET

    @property
    def timeout(self) -> int:
        return self._timeout or settings.RAZORPAY_TIMEOUT

    @property
    def client(self) -> razorpay.Client:
        """Lazy-load Razorpay client."""
        if not self._client:
            self._client = razorpay.Client(
                auth=(self.key_id, self._key_secret or settings.RAZORPAY_KEY_SECRET)
            )
        return self._client

    def create_payment_link(self, booking, amount: int) -> Dict[str, Any]:
        """
        Create a payment link for an approved booking.

        The booking id travels in the link's notes so the payment webhook can
        be matched back to the booking.

        Args:
            booking: Booking to collect payment for
            amount: Amount in the smallest currency unit

        Returns:
            Payment link entity (``id``, ``short_url``, ``status``, ...)

        Raises:
            PaymentGatewayError: Razorpay refused the request or was unreachable
        """
        data = {
            'amount': amount,
            'currency': settings.PAYMENT_CURRENCY,
            'customer': {
                'name': booking.name,
                'email': booking.email,
                'contact': booking.phone,
            },
            'notify': {
                'sms': True,
                'email': True,
            },
            'reminder_enable': True,
            'notes': {
                'bookingId': str(booking.id),
            },
            'callback_url': f"{settings.FRONTEND_URL}/payment-success?bookingId={booking.id}",
            'callback_method': 'get',
        }

        try:
            link = self.client.payment_link.create(data, timeout=self.timeout)
        except (BadRequestError, GatewayError, ServerError) as e:
            logger.error(f"Razorpay rejected payment link for booking {booking.id}: {str(e)}")
            raise PaymentGatewayError()
        except requests.RequestException as e:
            logger.error(f"Razorpay unreachable creating payment link for booking {booking.id}: {str(e)}")
            raise PaymentGatewayError()

        logger.info(f"Created payment link {link.get('id')} for booking {booking.id}")
        return link

    def cancel_payment_link(self, link_id: str) -> bool:
        """
        Cancel a payment link that can no longer be honoured.

        Returns:
            True if Razorpay cancelled the link, False otherwise
        """
        if not link_id:
            return False

        try:
            self.client.payment_link.cancel(link_id, timeout=self.timeout)
        except (BadRequestError, GatewayError, ServerError, requests.RequestException) as e:
            logger.error(f"Could not cancel payment link {link_id}: {str(e)}")
            return False

        logger.info(f"Cancelled payment link {link_id}")
        return True

    def verify_webhook_signature(self, body: bytes, signature: Optional[str]) -> bool:
        """
        Check the X-Razorpay-Signature header against the raw request body.

        Args:
            body: Raw request body, exactly as received
            signature: Header value (hex HMAC-SHA256)

        Returns:
            True only when the signature matches
        """
        if not signature or not self.webhook_secret:
            return False

        try:
            self.client.utility.verify_webhook_signature(
                body.decode('utf-8'), signature, self.webhook_secret
            )
            return True
        except (SignatureVerificationError, UnicodeDecodeError):
            return False


# Singleton instance
razorpay_client = RazorpayClient()
