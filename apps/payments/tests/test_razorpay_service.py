"""Unit tests for the Razorpay payment link client."""

import uuid
from types import SimpleNamespace
from unittest.mock import MagicMock

import requests
from django.test import SimpleTestCase, override_settings
from razorpay.errors import BadRequestError, ServerError

from apps.core.exceptions import PaymentGatewayError
from apps.payments.razorpay_service import RazorpayClient


def _booking():
    return SimpleNamespace(
        id=uuid.UUID("6f1c2a9e-6d1f-4a55-9a3f-0c1c7d0e2b11"),
        name="Asha Verma",
        email="asha@example.com",
        phone="9876543210",
    )


@override_settings(FRONTEND_URL="https://venue.test", PAYMENT_CURRENCY="INR")
class CreatePaymentLinkTests(SimpleTestCase):

    def setUp(self) -> None:
        self.gateway = RazorpayClient(key_id="rzp_test", key_secret="secret", timeout=7)
        self.gateway._client = MagicMock()
        self.api = self.gateway._client.payment_link

    def test_payload_and_timeout(self) -> None:
        self.api.create.return_value = {"id": "plink_1", "short_url": "https://rzp.io/i/x"}

        link = self.gateway.create_payment_link(_booking(), 5000000)

        self.assertEqual(link["id"], "plink_1")
        data = self.api.create.call_args.args[0]
        self.assertEqual(data["amount"], 5000000)
        self.assertEqual(data["currency"], "INR")
        self.assertEqual(data["customer"]["contact"], "9876543210")
        self.assertEqual(data["notes"], {"bookingId": "6f1c2a9e-6d1f-4a55-9a3f-0c1c7d0e2b11"})
        self.assertEqual(
            data["callback_url"],
            "https://venue.test/payment-success?bookingId=6f1c2a9e-6d1f-4a55-9a3f-0c1c7d0e2b11",
        )
        self.assertEqual(self.api.create.call_args.kwargs["timeout"], 7)

    def test_gateway_errors_are_mapped(self) -> None:
        for error in (BadRequestError("bad amount"), ServerError("oops"), requests.Timeout("slow")):
            self.api.create.side_effect = error

            with self.assertRaises(PaymentGatewayError):
                self.gateway.create_payment_link(_booking(), 100)

    def test_cancel_payment_link(self) -> None:
        self.assertTrue(self.gateway.cancel_payment_link("plink_1"))
        self.api.cancel.assert_called_once_with("plink_1", timeout=7)

        self.api.cancel.side_effect = BadRequestError("already paid")
        self.assertFalse(self.gateway.cancel_payment_link("plink_1"))
        self.assertFalse(self.gateway.cancel_payment_link(""))


class VerifySignatureTests(SimpleTestCase):

    def test_rejects_missing_signature_or_secret(self) -> None:
        gateway = RazorpayClient(key_id="rzp_test", key_secret="secret", webhook_secret="whsec")
        self.assertFalse(gateway.verify_webhook_signature(b"{}", None))
        self.assertFalse(gateway.verify_webhook_signature(b"{}", ""))

    def test_non_utf8_body_is_rejected(self) -> None:
        gateway = RazorpayClient(key_id="rzp_test", key_secret="secret", webhook_secret="whsec")
        self.assertFalse(gateway.verify_webhook_signature(b"\xff\xfe", "abc"))
