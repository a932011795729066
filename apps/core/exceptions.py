"""
Custom exceptions and exception handler
"""
import logging

from rest_framework.views import exception_handler
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework import status

logger = logging.getLogger(__name__)


class InvalidDate(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid or missing date (expected YYYY-MM-DD or valid date)'
    default_code = 'invalid_date'


class InvalidAmount(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Valid amount is required'
    default_code = 'invalid_amount'


class ResourceConflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Resource conflict.'
    default_code = 'resource_conflict'


class BookingConflict(ResourceConflict):
    """The requested calendar day already holds a booking."""
    default_detail = 'Selected date is already booked'
    default_code = 'date_already_booked'


class BookingAlreadyPaid(ResourceConflict):
    default_detail = 'Booking already paid'
    default_code = 'booking_already_paid'


class PaymentGatewayError(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = 'Payment link could not be created, try again later.'
    default_code = 'payment_gateway_error'


class MediaStoreError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Upload failed'
    default_code = 'media_store_error'


class SignatureInvalid(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid signature'
    default_code = 'invalid_signature'


def custom_exception_handler(exc, context):
    """
    Custom exception handler that adds additional context.

    Unexpected exceptions are logged and rendered as a generic 500 body
    instead of Django's HTML error page.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
            exc_info=exc
        )
        return Response(
            {
                'error': True,
                'message': 'Internal server error',
                'status_code': status.HTTP_500_INTERNAL_SERVER_ERROR,
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    custom_response_data = {
        'error': True,
        'message': response.data.get('detail', str(exc)) if isinstance(response.data, dict) else str(exc),
        'status_code': response.status_code,
    }

    # Add field errors if present
    if isinstance(response.data, dict) and 'detail' not in response.data:
        custom_response_data['message'] = 'Validation failed'
        custom_response_data['errors'] = response.data
    elif isinstance(response.data, list):
        custom_response_data['message'] = ' '.join(str(item) for item in response.data)

    response.data = custom_response_data

    return response
