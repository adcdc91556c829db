# ==================== BOOKINGS/TASKS.PY (CELERY TASKS) ====================
from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail
from spots.models import Spot
from .models import Booking
import logging

logger = logging.getLogger(__name__)


def queue_notification(task, *args):
    """Hand a notification task to the broker; an unreachable broker is logged, not raised.

    Called from on_commit hooks, so the database work has already landed and the
    request must still report success.
    """
    try:
        task.delay(*args)
    except Exception as e:
        logger.error(f"Could not queue {task.name} with args {args}: {str(e)}")


@shared_task
def send_booking_confirmation(booking_id):
    """Tell the spot owner their spot has been booked"""
    try:
        booking = Booking.objects.select_related('spot__owner', 'renter').get(id=booking_id)
        owner = booking.spot.owner
        if not owner.email:
            return

        send_mail(
            f'Your spot at {booking.spot.address} has been booked',
            f'''
            A new booking has been confirmed:
            Renter: {booking.renter.display_name}
            From: {booking.start_date}
            Until: {booking.end_date}
            Amount: {booking.total_price}
            ''',
            settings.DEFAULT_FROM_EMAIL,
            [owner.email],
            fail_silently=False,
        )
    except Exception as e:
        logger.error(f"Error sending booking confirmation for {booking_id}: {str(e)}")


@shared_task
def send_booking_cancellation(spot_id, renter_name):
    """Tell the spot owner a booking was cancelled and the spot is listed again"""
    try:
        spot = Spot.objects.select_related('owner').get(id=spot_id)
        if not spot.owner.email:
            return

        send_mail(
            f'Booking cancelled for {spot.address}',
            f'{renter_name} cancelled their booking. Your spot is available again.',
            settings.DEFAULT_FROM_EMAIL,
            [spot.owner.email],
            fail_silently=False,
        )
    except Exception as e:
        logger.error(f"Error sending cancellation notice for spot {spot_id}: {str(e)}")


@shared_task
def send_spot_removed_notice(renter_emails, address):
    """Tell renters their booking went away because the owner removed the spot"""
    send_mail(
        'Your parking booking has been cancelled',
        f'The owner removed the spot at {address}, so your booking was cancelled.',
        settings.DEFAULT_FROM_EMAIL,
        renter_emails,
        fail_silently=True,
    )
