# ==================== BOOKINGS/SERVICES.PY ====================
import logging
from datetime import timedelta

from django.conf import settings
from django.db import DatabaseError, transaction
from django.utils import timezone

from spots.models import Spot
from utils.exceptions import (
    SpotNotFound, BookingNotFound, SelfBookingNotAllowed, SpotUnavailable,
    SpotConflict, NotBookingRenter, StoreFailure
)
from .models import Booking
from .tasks import send_booking_confirmation, send_booking_cancellation, queue_notification

logger = logging.getLogger(__name__)


def _mark_spot_unavailable(spot_id):
    """Flip availability off only if it is still on. Returns rows updated."""
    return Spot.objects.filter(id=spot_id, is_available=True).update(is_available=False)


def _mark_spot_available(spot_id):
    return Spot.objects.filter(id=spot_id).update(is_available=True)


class BookingService:
    """Booking and cancellation of spots.

    Each operation writes two rows (the booking and the spot's availability
    flag). Both writes share one transaction, so either both land or neither
    does.
    """

    @staticmethod
    def create_booking(renter, spot_id):
        step = 'load spot'
        try:
            with transaction.atomic():
                spot = Spot.objects.select_for_update().filter(id=spot_id).first()
                if spot is None:
                    raise SpotNotFound()
                if spot.owner_id == renter.id:
                    raise SelfBookingNotAllowed()
                if not spot.is_available:
                    raise SpotUnavailable()

                # Fixed one-day window starting now
                start_date = timezone.now()
                end_date = start_date + timedelta(days=settings.BOOKING_LENGTH_DAYS)

                step = 'create booking'
                booking = Booking.objects.create(
                    spot=spot,
                    renter=renter,
                    start_date=start_date,
                    end_date=end_date,
                    total_price=spot.price_per_day,
                    status=Booking.STATUS_CONFIRMED,
                )

                step = 'update spot availability'
                if _mark_spot_unavailable(spot.id) == 0:
                    logger.warning(f"Spot {spot.id} was booked concurrently, rolling back booking for user {renter.id}")
                    raise SpotConflict()
        except DatabaseError as e:
            logger.error(f"Booking failed for spot {spot_id} at step '{step}': {str(e)}")
            raise StoreFailure(f"Failed to {step}; no booking was made")

        transaction.on_commit(lambda: queue_notification(send_booking_confirmation, booking.id))
        logger.info(f"Booking created: {booking.id} for spot {spot.id} by user {renter.id}")
        return booking

    @staticmethod
    def cancel_booking(user, booking_id):
        try:
            booking = Booking.objects.get(id=booking_id)
        except Booking.DoesNotExist:
            raise BookingNotFound()

        if booking.renter_id != user.id:
            raise NotBookingRenter()

        step = 'delete booking'
        try:
            with transaction.atomic():
                deleted, _ = Booking.objects.filter(id=booking.id).delete()
                if deleted == 0:
                    # Cancelled by a concurrent request
                    raise BookingNotFound()

                step = 'update spot availability'
                _mark_spot_available(booking.spot_id)
        except DatabaseError as e:
            logger.error(f"Cancel of booking {booking.id} failed at step '{step}': {str(e)}")
            raise StoreFailure(f"Failed to {step}; the booking was not cancelled")

        spot_id, renter_name = booking.spot_id, user.display_name
        transaction.on_commit(lambda: queue_notification(send_booking_cancellation, spot_id, renter_name))
        logger.info(f"Booking cancelled: {booking.id} for spot {booking.spot_id} by user {user.id}")

    @staticmethod
    def bookings_for(renter):
        return Booking.objects.filter(renter=renter).select_related('spot').order_by('-created_at')
