# ============================= SPOT VIEWS =============================
from rest_framework import viewsets, status, permissions
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from utils.exceptions import SpotNotFound
from .models import Spot
from .serializers import (
    SpotCreateSerializer,
    SpotListSerializer,
    SpotDetailSerializer,
    MySpotSerializer
)
from .filters import SpotFilter
from .services import SpotService


class SpotViewSet(viewsets.GenericViewSet):
    """Spot directory plus listing and delisting for owners"""

    queryset = Spot.objects.select_related('owner').order_by('-created_at')
    filter_backends = [DjangoFilterBackend]
    filterset_class = SpotFilter
    lookup_value_regex = r'[0-9]+'

    def get_serializer_class(self):
        if self.action == 'create':
            return SpotCreateSerializer
        elif self.action == 'retrieve':
            return SpotDetailSerializer
        elif self.action == 'mine':
            return MySpotSerializer
        return SpotListSerializer

    def get_permissions(self):
        if self.action in ['list', 'retrieve']:
            permission_classes = [permissions.AllowAny]
        else:
            permission_classes = [permissions.IsAuthenticated]
        return [permission() for permission in permission_classes]

    def list(self, request):
        """Public browse: available spots only, newest first"""
        spots = self.filter_queryset(self.get_queryset().filter(is_available=True))
        serializer = self.get_serializer(spots, many=True)
        return Response({'spots': serializer.data})

    def retrieve(self, request, pk=None):
        """Any spot by id, booked or not"""
        spot = self.get_queryset().filter(pk=pk).first()
        if spot is None:
            raise SpotNotFound('Not found')
        return Response({'spot': self.get_serializer(spot).data})

    def create(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        spot = SpotService.create_spot(request.user, serializer.validated_data)
        return Response({'success': True, 'spotId': spot.id})

    def destroy(self, request, pk=None):
        had_bookings = SpotService.delete_spot(request.user, pk)
        return Response({
            'success': True,
            'message': 'Spot deleted successfully',
            'hadBookings': had_bookings,
        })

    @action(detail=False, methods=['get'])
    def mine(self, request):
        """Get all spots owned by current user"""
        spots = Spot.objects.filter(owner=request.user).order_by('-created_at')
        serializer = self.get_serializer(spots, many=True)
        return Response({'spots': serializer.data})
