"""Integration tests for the Razorpay webhook endpoint."""

import hashlib
import hmac
import json
from unittest.mock import MagicMock, patch

from django.test import override_settings
from django.urls import reverse
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.bookings.services.lifecycle import booking_lifecycle
from apps.core.utils.constants import (
    BOOKING_STATUS_APPROVED,
    EVENT_PAYMENT_UPDATE,
    PAYMENT_STATUS_FAILED,
    PAYMENT_STATUS_PAID,
)
from apps.payments.models import WebhookLog
from apps.payments.razorpay_webhooks import RAZORPAY_EVENT_HANDLERS

WEBHOOK_SECRET = "test_webhook_secret"


def _sign(body: bytes, secret: str = WEBHOOK_SECRET) -> str:
    return hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()


def _payment_event(booking_id, event="payment.captured", payment_id="pay_Test123"):
    return {
        "entity": "event",
        "event": event,
        "payload": {
            "payment": {
                "entity": {
                    "id": payment_id,
                    "amount": 5000000,
                    "status": "captured",
                    "notes": {"bookingId": str(booking_id)},
                }
            }
        },
    }


class RazorpayWebhookTests(APITestCase):

    def setUp(self) -> None:
        self.url = reverse("razorpay-webhook")
        self.booking = Booking.objects.create(
            name="Asha Verma",
            email="asha@example.com",
            phone="9876543210",
            package="Engagement Day Program",
            guests=150,
            date="2031-03-10",
            time="18:00",
            status=BOOKING_STATUS_APPROVED,
            amount=5000000,
        )

    def _post(self, event, signature=None, event_id=None):
        body = json.dumps(event).encode()
        headers = {"HTTP_X_RAZORPAY_SIGNATURE": signature if signature is not None else _sign(body)}
        if event_id:
            headers["HTTP_X_RAZORPAY_EVENT_ID"] = event_id
        return self.client.post(self.url, data=body, content_type="application/json", **headers)

    def test_captured_payment_marks_booking_paid(self) -> None:
        with patch.object(booking_lifecycle, "broadcast_service") as broadcast:
            response = self._post(_payment_event(self.booking.id), event_id="evt_1")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})
        self.booking.refresh_from_db()
        self.assertTrue(self.booking.is_paid)
        self.assertEqual(self.booking.payment_status, PAYMENT_STATUS_PAID)
        self.assertEqual(self.booking.payment_id, "pay_Test123")
        self.assertIsNotNone(self.booking.paid_at)
        broadcast.publish.assert_called_once()
        self.assertEqual(broadcast.publish.call_args.args[0], EVENT_PAYMENT_UPDATE)

        log = WebhookLog.objects.get(event_id="evt_1")
        self.assertTrue(log.processed)
        self.assertEqual(log.event_type, "payment.captured")

    def test_repeated_delivery_is_idempotent(self) -> None:
        self._post(_payment_event(self.booking.id))
        self.booking.refresh_from_db()
        first_paid_at = self.booking.paid_at

        with patch.object(booking_lifecycle, "broadcast_service") as broadcast:
            response = self._post(_payment_event(self.booking.id, payment_id="pay_Other"))

        self.assertEqual(response.status_code, 200)
        self.booking.refresh_from_db()
        self.assertEqual(self.booking.paid_at, first_paid_at)
        self.assertEqual(self.booking.payment_id, "pay_Test123")
        broadcast.publish.assert_not_called()

    def test_replayed_event_id_is_skipped(self) -> None:
        self._post(_payment_event(self.booking.id), event_id="evt_1")

        handler = MagicMock()
        with patch.dict(RAZORPAY_EVENT_HANDLERS, {"payment.captured": handler}):
            response = self._post(_payment_event(self.booking.id), event_id="evt_1")

        self.assertEqual(response.status_code, 200)
        handler.assert_not_called()
        self.assertEqual(WebhookLog.objects.filter(event_id="evt_1").count(), 1)

    def test_payment_link_paid(self) -> None:
        event = {
            "event": "payment_link.paid",
            "payload": {
                "payment_link": {"entity": {"id": "plink_1", "notes": {"bookingId": str(self.booking.id)}}},
                "payment": {"entity": {"id": "pay_Link1", "notes": []}},
            },
        }

        response = self._post(event)

        self.assertEqual(response.status_code, 200)
        self.booking.refresh_from_db()
        self.assertTrue(self.booking.is_paid)
        self.assertEqual(self.booking.payment_id, "pay_Link1")

    def test_failed_payment_recorded(self) -> None:
        response = self._post(_payment_event(self.booking.id, event="payment.failed"))

        self.assertEqual(response.status_code, 200)
        self.booking.refresh_from_db()
        self.assertFalse(self.booking.is_paid)
        self.assertEqual(self.booking.payment_status, PAYMENT_STATUS_FAILED)

    def test_failed_payment_never_downgrades_paid_booking(self) -> None:
        self._post(_payment_event(self.booking.id))

        self._post(_payment_event(self.booking.id, event="payment.failed", payment_id="pay_Late"))

        self.booking.refresh_from_db()
        self.assertTrue(self.booking.is_paid)
        self.assertEqual(self.booking.payment_status, PAYMENT_STATUS_PAID)

    def test_invalid_signature_changes_nothing(self) -> None:
        response = self._post(_payment_event(self.booking.id), signature=_sign(b"other body"))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"message": "Invalid signature"})
        self.booking.refresh_from_db()
        self.assertFalse(self.booking.is_paid)
        self.assertFalse(WebhookLog.objects.exists())

    def test_missing_signature(self) -> None:
        body = json.dumps(_payment_event(self.booking.id)).encode()

        response = self.client.post(self.url, data=body, content_type="application/json")

        self.assertEqual(response.status_code, 400)
        self.booking.refresh_from_db()
        self.assertFalse(self.booking.is_paid)

    def test_signature_with_wrong_secret(self) -> None:
        body = json.dumps(_payment_event(self.booking.id)).encode()

        response = self._post(_payment_event(self.booking.id), signature=_sign(body, "not-the-secret"))

        self.assertEqual(response.status_code, 400)

    @override_settings(RAZORPAY_WEBHOOK_SECRET="")
    def test_unconfigured_secret_rejects_everything(self) -> None:
        response = self._post(_payment_event(self.booking.id), signature=_sign(b"", ""))

        self.assertEqual(response.status_code, 400)

    def test_unknown_booking_is_acknowledged(self) -> None:
        for booking_id in ("00000000-0000-0000-0000-000000000000", "not-a-uuid", ""):
            response = self._post(_payment_event(booking_id))

            self.assertEqual(response.status_code, 200, booking_id)

        self.booking.refresh_from_db()
        self.assertFalse(self.booking.is_paid)

    def test_unhandled_event_is_acknowledged(self) -> None:
        response = self._post({"event": "refund.created", "payload": {}})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(WebhookLog.objects.get().error_message, "No handler implemented")

    def test_unusable_signed_body_is_acknowledged(self) -> None:
        for body in (b"[1, 2, 3]", b"{not json"):
            response = self.client.post(
                self.url, data=body, content_type="application/json", HTTP_X_RAZORPAY_SIGNATURE=_sign(body)
            )

            self.assertEqual(response.status_code, 200, body)
            self.assertEqual(response.json(), {"status": "ok"})

        self.assertFalse(WebhookLog.objects.exists())
        self.booking.refresh_from_db()
        self.assertFalse(self.booking.is_paid)

    def test_handler_failure_is_500(self) -> None:
        with patch.object(booking_lifecycle, "confirm_payment", side_effect=RuntimeError("db down")):
            response = self._post(_payment_event(self.booking.id), event_id="evt_fail")

        self.assertEqual(response.status_code, 500)
        log = WebhookLog.objects.get(event_id="evt_fail")
        self.assertFalse(log.processed)
        self.assertIn("db down", log.error_message)

    def test_get_not_allowed(self) -> None:
        self.assertEqual(self.client.get(self.url).status_code, 405)
