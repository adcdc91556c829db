# ==================== SPOTS/SERIALIZERS.PY ====================
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.conf import settings
from rest_framework import serializers
from .models import Spot

MISSING_FIELDS_MESSAGE = 'Missing required fields: neighborhood, address, and pricePerDay are required'
PRICE_MESSAGE = f'Price per day must be a number and at least ${settings.MIN_PRICE_PER_DAY}'

_required_messages = {
    'required': MISSING_FIELDS_MESSAGE,
    'blank': MISSING_FIELDS_MESSAGE,
    'null': MISSING_FIELDS_MESSAGE,
}


class PricePerDayField(serializers.DecimalField):
    """Accepts JSON numbers only; numeric strings and booleans are rejected.

    Prices with more than two decimal places are rounded half-up to the cent.
    The minimum is checked on the value as sent, so 4.999 does not round up
    into an accepted 5.00.
    """

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float, Decimal)):
            self.fail('invalid')
        try:
            value = Decimal(str(data))
            if not value.is_finite():
                self.fail('invalid')
            if self.min_value is not None and value < self.min_value:
                self.fail('min_value', min_value=self.min_value)
            value = value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            self.fail('invalid')
        return super().to_internal_value(value)


class SpotCreateSerializer(serializers.Serializer):
    """Payload for listing a new spot"""
    neighborhood = serializers.CharField(max_length=100, error_messages=_required_messages)
    address = serializers.CharField(max_length=500, error_messages=_required_messages)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
    pricePerDay = PricePerDayField(
        source='price_per_day',
        max_digits=10,
        decimal_places=2,
        min_value=settings.MIN_PRICE_PER_DAY,
        error_messages={
            **_required_messages,
            'invalid': PRICE_MESSAGE,
            'min_value': PRICE_MESSAGE,
            'max_digits': PRICE_MESSAGE,
            'max_decimal_places': PRICE_MESSAGE,
            'max_whole_digits': PRICE_MESSAGE,
        }
    )

    def validate_description(self, value):
        return value or ''


class SpotListSerializer(serializers.ModelSerializer):
    """Spot row joined with the owner's display name"""
    owner_id = serializers.IntegerField(read_only=True)
    owner_name = serializers.CharField(source='owner.display_name', read_only=True)

    class Meta:
        model = Spot
        fields = ['id', 'owner_id', 'address', 'neighborhood', 'description', 'price_per_day',
                  'is_available', 'created_at', 'owner_name']


class SpotDetailSerializer(SpotListSerializer):
    class Meta(SpotListSerializer.Meta):
        fields = SpotListSerializer.Meta.fields + ['updated_at']


class MySpotSerializer(serializers.ModelSerializer):
    owner_id = serializers.IntegerField(read_only=True)
    booking_count = serializers.IntegerField(source='bookings.count', read_only=True)

    class Meta:
        model = Spot
        fields = ['id', 'owner_id', 'address', 'neighborhood', 'description', 'price_per_day',
                  'is_available', 'created_at', 'booking_count']
