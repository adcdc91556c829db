# ============================= BOOKINGS VIEWS =============================
from rest_framework import viewsets, status, permissions
from rest_framework.decorators import action
from rest_framework.response import Response

from bookings.serializers import BookingCreateSerializer, BookingListSerializer
from bookings.services import BookingService


class BookingViewSet(viewsets.GenericViewSet):
    """Booking creation, cancellation and the renter's booking list"""

    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = r'[0-9]+'

    def get_serializer_class(self):
        if self.action == 'create':
            return BookingCreateSerializer
        return BookingListSerializer

    def get_queryset(self):
        return BookingService.bookings_for(self.request.user)

    def create(self, request):
        """Book an available spot owned by someone else"""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = BookingService.create_booking(request.user, serializer.validated_data['spotId'])
        return Response({'success': True, 'bookingId': booking.id})

    def destroy(self, request, pk=None):
        """Cancel a booking (renter only)"""
        BookingService.cancel_booking(request.user, pk)
        return Response({'success': True, 'message': 'Booking cancelled successfully'})

    @action(detail=False, methods=['get'])
    def mine(self, request):
        """Get all bookings for current user"""
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response({'bookings': serializer.data})
