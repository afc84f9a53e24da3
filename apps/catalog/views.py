"""Catalog API views."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings.conflicts import find_conflicts
from apps.users.permissions import IsAdminOrReadOnly, is_admin_user

from .filters import FoodFilterSet, RoomFilterSet, ServiceFilterSet
from .models import Food, Room, Service
from .serializers import (
    AvailabilityQuerySerializer,
    ConflictingBookingSerializer,
    FoodSerializer,
    RoomSerializer,
    ServiceSerializer,
)


class RoomViewSet(viewsets.ModelViewSet):
    """Rooms are public to read; only administrators manage them."""

    queryset = Room.objects.all()
    serializer_class = RoomSerializer
    permission_classes = [IsAdminOrReadOnly]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = RoomFilterSet
    ordering_fields = ["price_per_day", "capacity", "name"]

    @action(detail=True, methods=["get"])
    def availability(self, request, pk=None):  # type: ignore
        """Is the room free for ``[start_date, end_date)``?

        Only confirmed and checked-in bookings count as conflicts. The
        answer is a snapshot; a booking request re-checks under the room
        lock.
        """
        room = self.get_object()
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        start_date = query.validated_data["start_date"]
        end_date = query.validated_data["end_date"]

        conflicts = list(find_conflicts(room.pk, start_date, end_date))
        return Response(
            {
                "room_id": room.pk,
                "start_date": start_date,
                "end_date": end_date,
                "available": room.is_available and not conflicts,
                "conflicting_bookings": len(conflicts),
                "conflicts": ConflictingBookingSerializer(conflicts, many=True).data,
            }
        )


class ServiceViewSet(viewsets.ModelViewSet):
    serializer_class = ServiceSerializer
    permission_classes = [IsAdminOrReadOnly]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = ServiceFilterSet
    ordering_fields = ["price", "name"]

    def get_queryset(self):  # type: ignore
        qs = Service.objects.all()
        if is_admin_user(self.request.user):
            return qs
        return qs.filter(is_active=True)


class FoodViewSet(viewsets.ModelViewSet):
    serializer_class = FoodSerializer
    permission_classes = [IsAdminOrReadOnly]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = FoodFilterSet
    ordering_fields = ["price_per_serving", "name"]

    def get_queryset(self):  # type: ignore
        qs = Food.objects.all()
        if is_admin_user(self.request.user):
            return qs
        return qs.filter(is_active=True)
