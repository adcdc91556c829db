# spots/models.py

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Spot(models.Model):
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='owned_spots')

    # Location info
    address = models.CharField(max_length=500)
    neighborhood = models.CharField(max_length=100, db_index=True)
    description = models.TextField(blank=True, default='')

    # Pricing, conventionally in steps of 5
    price_per_day = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(5)])

    # True iff no booking currently references this spot
    is_available = models.BooleanField(default=True, db_index=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='spot_owner_created_idx'),
        ]

    def __str__(self):
        return f"{self.neighborhood} - {self.address}"
