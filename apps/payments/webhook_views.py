"""
Webhook views for Razorpay events.
"""
import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.core.exceptions import SignatureInvalid

from .razorpay_service import razorpay_client
from .razorpay_webhooks import process_razorpay_webhook

logger = logging.getLogger(__name__)


def _invalid_signature():
    return JsonResponse(
        {'message': SignatureInvalid.default_detail},
        status=SignatureInvalid.status_code
    )


@csrf_exempt
@require_http_methods(["POST"])
def razorpay_webhook(request):
    """
    Handle incoming Razorpay webhooks.

    The X-Razorpay-Signature header must be the HMAC-SHA256 of the raw body
    under the webhook secret; nothing is parsed or stored before it matches.
    Once verified, the delivery is acknowledged even when its body is
    unusable or it refers to no known booking.
    """
    payload = request.body
    signature = request.META.get('HTTP_X_RAZORPAY_SIGNATURE')

    if not signature:
        logger.warning("Missing Razorpay signature header")
        return _invalid_signature()

    if not razorpay_client.verify_webhook_signature(payload, signature):
        logger.warning("Invalid Razorpay webhook signature")
        return _invalid_signature()

    try:
        event = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.error("Invalid JSON in Razorpay webhook, acknowledged without processing")
        return JsonResponse({'status': 'ok'})

    if not isinstance(event, dict):
        logger.error("Razorpay webhook body is not a JSON object, acknowledged without processing")
        return JsonResponse({'status': 'ok'})

    success = process_razorpay_webhook(event, request.META.get('HTTP_X_RAZORPAY_EVENT_ID'))

    if not success:
        return JsonResponse({'message': 'Webhook error'}, status=500)

    return JsonResponse({'status': 'ok'})
