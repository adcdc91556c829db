from django.conf import settings
from django.db import models

from spots.models import Spot


class Booking(models.Model):
    STATUS_CONFIRMED = 'confirmed'
    STATUS_CHOICES = (
        (STATUS_CONFIRMED, 'Confirmed'),
    )

    # Relations
    spot = models.ForeignKey(Spot, on_delete=models.CASCADE, related_name='bookings')
    renter = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='bookings')

    # Booking window
    start_date = models.DateTimeField(db_index=True)
    end_date = models.DateTimeField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_CONFIRMED)

    # Copied from the spot at booking time
    total_price = models.DecimalField(max_digits=10, decimal_places=2)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['renter', 'created_at'], name='booking_renter_created_idx'),
        ]

    def __str__(self):
        return f"Booking {self.id} - {self.renter} at {self.spot}"
