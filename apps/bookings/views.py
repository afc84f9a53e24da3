"""API views for the booking domain."""

from __future__ import annotations

import logging

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.permissions import is_admin_user
from shared.domain.value_objects import Actor

from .application.command_handlers import (
    TransitionBookingCommand,
    create_booking,
    transition_booking,
)
from .exceptions import (
    BookingConflictError,
    BookingError,
    BookingNotFoundError,
    BookingPermissionError,
    BookingValidationError,
    CatalogItemUnavailableError,
    InvalidTransitionError,
    TransientBookingError,
)
from .filters import BookingFilterSet
from .models import Booking
from .serializers import (
    BookingCancelSerializer,
    BookingCreateSerializer,
    BookingSerializer,
    BookingTransitionSerializer,
)

logger = logging.getLogger(__name__)

# Checked in order, the first matching class wins
ERROR_STATUS: tuple[tuple[type[BookingError], int], ...] = (
    (BookingValidationError, status.HTTP_400_BAD_REQUEST),
    (CatalogItemUnavailableError, status.HTTP_400_BAD_REQUEST),
    (BookingNotFoundError, status.HTTP_404_NOT_FOUND),
    (BookingPermissionError, status.HTTP_403_FORBIDDEN),
    (BookingConflictError, status.HTTP_409_CONFLICT),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (TransientBookingError, status.HTTP_503_SERVICE_UNAVAILABLE),
)

RETRY_AFTER_SECONDS = 1


def booking_error_response(exc: BookingError) -> Response:
    """Translate a domain error into a JSON response with a stable code."""

    http_status = status.HTTP_400_BAD_REQUEST
    for error_class, error_status in ERROR_STATUS:
        if isinstance(exc, error_class):
            http_status = error_status
            break
    headers = {"Retry-After": str(RETRY_AFTER_SECONDS)} if exc.retryable else None
    logger.info("Booking request rejected (%s): %s", exc.code, exc.message)
    return Response(exc.as_dict(), status=http_status, headers=headers)


class BookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    """Create bookings and drive them through their lifecycle.

    There is no update or delete: bookings change only through status
    transitions, and cancelling keeps the row.
    """

    queryset = Booking.objects.select_related("user", "cat", "room").prefetch_related(
        "service_lines__service",
        "food_lines__food",
    )
    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = BookingFilterSet
    lookup_value_regex = r"\d+"

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        if self.action == "transition":
            return BookingTransitionSerializer
        if self.action == "cancel":
            return BookingCancelSerializer
        return BookingSerializer

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        user = self.request.user
        if is_admin_user(user):
            return qs
        return qs.filter(user=user)

    def _actor(self) -> Actor:
        return Actor.from_user(self.request.user)

    def _booking_response(self, booking: Booking, http_status=status.HTTP_200_OK) -> Response:
        booking = self.get_queryset().get(pk=booking.pk)
        data = BookingSerializer(booking, context=self.get_serializer_context()).data
        return Response(data, status=http_status)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            booking = create_booking(serializer.to_command(self._actor()))
        except BookingError as exc:
            return booking_error_response(exc)
        return self._booking_response(booking, status.HTTP_201_CREATED)

    def _transition(self, pk, new_status: str, reason: str) -> Response:
        try:
            booking = transition_booking(
                TransitionBookingCommand(
                    actor=self._actor(),
                    booking_id=int(pk),
                    new_status=new_status,
                    reason=reason,
                )
            )
        except BookingError as exc:
            return booking_error_response(exc)
        return self._booking_response(booking)

    @action(detail=True, methods=["post"])
    def transition(self, request, pk=None):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._transition(
            pk,
            serializer.validated_data["status"],
            serializer.validated_data.get("reason", ""),
        )

    @action(detail=True, methods=["post"])
    def cancel(self, request, pk=None):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._transition(
            pk,
            Booking.Status.CANCELLED,
            serializer.validated_data.get("reason", ""),
        )
