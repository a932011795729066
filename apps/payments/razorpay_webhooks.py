"""
Razorpay webhook handlers for booking payments.

This module processes verified Razorpay webhook events for:
- Payment captured (booking paid)
- Payment link paid (booking paid)
- Payment failed
"""
import logging
import time
from typing import Any, Dict, Optional

from apps.bookings.services.lifecycle import booking_lifecycle
from apps.core.utils.constants import (
    RAZORPAY_EVENT_PAYMENT_CAPTURED,
    RAZORPAY_EVENT_PAYMENT_FAILED,
    RAZORPAY_EVENT_PAYMENT_LINK_PAID,
)
from apps.payments.models import WebhookLog

logger = logging.getLogger(__name__)


def log_webhook_event(event_type, event_id, payload, processed=False, error_message='', processing_time=None):
    """
    Log webhook event to database for debugging and audit trail.

    Args:
        event_type: Type of webhook event (e.g., 'payment.captured')
        event_id: Unique event ID from the X-Razorpay-Event-Id header, if any
        payload: Full event payload
        processed: Whether event was successfully processed
        error_message: Error message if processing failed
        processing_time: Seconds spent processing
    """
    fields = {
        'event_type': event_type,
        'payload': payload,
        'processed': processed,
        'error_message': error_message,
        'processing_time': processing_time,
    }
    try:
        if event_id:
            WebhookLog.objects.update_or_create(event_id=event_id, defaults=fields)
        else:
            WebhookLog.objects.create(**fields)
    except Exception as e:
        logger.error(f"Failed to log webhook event {event_type} ({event_id}): {str(e)}")


def _entity(event: Dict[str, Any], name: str) -> Dict[str, Any]:
    entity = ((event.get('payload') or {}).get(name) or {}).get('entity')
    return entity if isinstance(entity, dict) else {}


def _booking_id(entity: Dict[str, Any]) -> Optional[str]:
    # Razorpay sends empty notes as [] instead of {}
    notes = entity.get('notes')
    if not isinstance(notes, dict):
        return None
    return notes.get('bookingId')


def handle_payment_captured(event):
    """
    Handle payment.captured event.

    The payment carries the notes of the payment link it was made through,
    including the booking id.
    """
    payment = _entity(event, 'payment')
    booking_lifecycle.confirm_payment(_booking_id(payment), payment.get('id'))


def handle_payment_link_paid(event):
    """Handle payment_link.paid event."""
    link = _entity(event, 'payment_link')
    payment = _entity(event, 'payment')
    booking_lifecycle.confirm_payment(_booking_id(link), payment.get('id'))


def handle_payment_failed(event):
    """Handle payment.failed event."""
    payment = _entity(event, 'payment')
    booking_lifecycle.mark_payment_failed(_booking_id(payment), payment.get('id'))


RAZORPAY_EVENT_HANDLERS = {
    RAZORPAY_EVENT_PAYMENT_CAPTURED: handle_payment_captured,
    RAZORPAY_EVENT_PAYMENT_LINK_PAID: handle_payment_link_paid,
    RAZORPAY_EVENT_PAYMENT_FAILED: handle_payment_failed,
}


def process_razorpay_webhook(event: Dict[str, Any], event_id: Optional[str] = None) -> bool:
    """
    Main entry point for processing verified Razorpay webhooks.

    Args:
        event: Parsed webhook body
        event_id: X-Razorpay-Event-Id header value

    Returns:
        bool: True if processed (or deliberately ignored), False on failure
    """
    event_type = event.get('event', '')

    logger.info(f"Received Razorpay webhook: {event_type} ({event_id})")

    # Check if event already processed (idempotency)
    if event_id and WebhookLog.objects.filter(event_id=event_id, processed=True).exists():
        logger.info(f"Event {event_id} already processed, skipping")
        return True

    handler = RAZORPAY_EVENT_HANDLERS.get(event_type)
    if not handler:
        logger.info(f"No handler for event type: {event_type}")
        log_webhook_event(event_type, event_id, event, True, 'No handler implemented')
        return True

    start_time = time.time()
    try:
        handler(event)
    except Exception as e:
        logger.error(f"Failed to process event {event_type} ({event_id}): {str(e)}", exc_info=True)
        log_webhook_event(event_type, event_id, event, False, str(e))
        return False

    log_webhook_event(event_type, event_id, event, True, processing_time=time.time() - start_time)
    return True
