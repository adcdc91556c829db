# ==================== BOOKINGS/SERIALIZERS.PY ====================
from rest_framework import serializers
from spots.models import Spot
from .models import Booking


class BookingCreateSerializer(serializers.Serializer):
    spotId = serializers.IntegerField(error_messages={
        'required': 'Spot ID is required',
        'null': 'Spot ID is required',
        'invalid': 'Spot ID must be an integer',
    })


class BookingSpotSerializer(serializers.ModelSerializer):
    class Meta:
        model = Spot
        fields = ['id', 'address', 'neighborhood', 'description', 'price_per_day']


class BookingListSerializer(serializers.ModelSerializer):
    spot = BookingSpotSerializer(read_only=True)

    class Meta:
        model = Booking
        fields = ['id', 'created_at', 'status', 'start_date', 'end_date', 'total_price', 'spot']
