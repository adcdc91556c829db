# ==================== SPOTS/SERVICES.PY ====================
import logging

from django.db import DatabaseError, transaction

from bookings.models import Booking
from bookings.tasks import send_spot_removed_notice, queue_notification
from utils.exceptions import SpotNotFound, NotSpotOwner, SpotDeleteBlocked, StoreFailure
from .models import Spot

logger = logging.getLogger(__name__)


def _delete_owned_spot(spot_id, owner):
    """Delete the spot only if it still belongs to owner. Returns spot rows removed."""
    _, per_model = Spot.objects.filter(id=spot_id, owner=owner).delete()
    return per_model.get(Spot._meta.label, 0)


class SpotService:
    """Listing and delisting of parking spots"""

    @staticmethod
    def create_spot(owner, validated_data):
        try:
            spot = Spot.objects.create(
                owner=owner,
                address=validated_data['address'],
                neighborhood=validated_data['neighborhood'],
                description=validated_data.get('description') or '',
                price_per_day=validated_data['price_per_day'],
                is_available=True,
            )
        except DatabaseError as e:
            logger.error(f"Error creating spot for user {owner.id}: {str(e)}")
            raise StoreFailure(f"Failed to create parking spot: {str(e)}")

        logger.info(f"Spot created: {spot.id} by user {owner.id}")
        return spot

    @staticmethod
    def delete_spot(owner, spot_id):
        """Delete a spot and every booking that references it.

        Bookings go first, then the spot itself with the owner repeated as a
        filter on the delete. Everything runs in one transaction, so a failure
        at any step leaves both the spot and its bookings in place.

        Returns True when at least one booking was removed along with the spot.
        """
        try:
            spot = Spot.objects.get(id=spot_id)
        except Spot.DoesNotExist:
            raise SpotNotFound()

        if spot.owner_id != owner.id:
            raise NotSpotOwner()

        step = 'query existing bookings'
        try:
            with transaction.atomic():
                bookings = Booking.objects.filter(spot_id=spot.id).select_related('renter')
                renter_emails = [b.renter.email for b in bookings if b.renter.email]
                booking_count = len(bookings)

                if booking_count:
                    step = 'delete bookings'
                    Booking.objects.filter(spot_id=spot.id).delete()

                step = 'delete spot'
                if _delete_owned_spot(spot.id, owner) == 0:
                    logger.warning(f"Delete of spot {spot.id} by user {owner.id} matched no rows")
                    raise SpotDeleteBlocked(spot.id)
        except DatabaseError as e:
            logger.error(f"Error deleting spot {spot.id} at step '{step}': {str(e)}")
            raise StoreFailure(f"Failed to {step}; the spot and its bookings were left unchanged")

        if renter_emails:
            address = spot.address
            transaction.on_commit(lambda: queue_notification(send_spot_removed_notice, renter_emails, address))

        logger.info(f"Spot {spot.id} deleted by user {owner.id}, {booking_count} booking(s) removed")
        return booking_count > 0
