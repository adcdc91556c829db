# ==================== UTILS/EXCEPTIONS.PY ====================
import logging

from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler
from rest_framework import status

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = 'An unexpected error occurred'


class SpotNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Spot not found'
    default_code = 'spot_not_found'


class BookingNotFound(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Booking not found'
    default_code = 'booking_not_found'


class SelfBookingNotAllowed(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'You cannot book your own spot'
    default_code = 'self_booking'


class SpotUnavailable(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'This spot is no longer available'
    default_code = 'spot_unavailable'


class SpotConflict(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'This spot was just booked by someone else'
    default_code = 'spot_conflict'


class NotBookingRenter(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You can only cancel your own bookings'
    default_code = 'not_booking_renter'


class NotSpotOwner(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You can only delete your own spots'
    default_code = 'not_spot_owner'


class SpotDeleteBlocked(APIException):
    """The owner-filtered delete matched no row, so nothing was removed."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Spot could not be deleted'
    default_code = 'spot_delete_blocked'

    def __init__(self, spot_id, detail=None):
        super().__init__(detail)
        self.extra = {
            'spotId': spot_id,
            'hint': 'The spot was not deleted. It may have been removed or transferred concurrently.',
        }


class StoreFailure(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Database operation failed'
    default_code = 'store_failure'


def _first_message(detail):
    """Pick the first human readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ''
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


def api_exception_handler(exc, context):
    """Render every error as {"error": "..."}; unexpected exceptions become a 500."""
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(f"Unexpected error in {view.__class__.__name__ if view else 'view'}: {exc}")
        return Response({'error': UNEXPECTED_ERROR_MESSAGE}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        body = {'error': _first_message(exc.detail)}
    else:
        body = {'error': _first_message(response.data.get('detail', response.data))
                if isinstance(response.data, dict) else _first_message(response.data)}

    body.update(getattr(exc, 'extra', {}))
    if response.status_code >= 500:
        logger.error(f"{exc.__class__.__name__}: {body['error']}")

    response.data = body
    return response
