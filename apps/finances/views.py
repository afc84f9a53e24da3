"""API views for payments.

Customers record payments for their own pending bookings; a payment that
matches the booking total confirms the booking. Administrators can list
every payment and correct payment statuses afterwards.
"""

from __future__ import annotations

import logging

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings.exceptions import BookingError
from apps.bookings.views import booking_error_response
from apps.users.permissions import IsAdminRole, is_admin_user
from shared.domain.value_objects import Actor

from .exceptions import PaymentAlreadyExistsError, PaymentMismatchError
from .filters import PaymentFilterSet
from .models import Payment
from .serializers import PaymentCreateSerializer, PaymentSerializer, PaymentStatusSerializer
from .services import confirm_booking_payment

logger = logging.getLogger(__name__)


def payment_error_response(exc: BookingError) -> Response:
    if isinstance(exc, PaymentMismatchError):
        return Response(exc.as_dict(), status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, PaymentAlreadyExistsError):
        return Response(exc.as_dict(), status=status.HTTP_409_CONFLICT)
    return booking_error_response(exc)


class PaymentViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Viewset for payment records."""

    queryset = Payment.objects.select_related("booking", "user").all()
    serializer_class = PaymentSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = PaymentFilterSet

    def get_permissions(self):  # type: ignore
        if self.action == "set_status":
            return [IsAdminRole()]
        return super().get_permissions()

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        user = self.request.user
        if is_admin_user(user):
            return qs
        return qs.filter(booking__user=user)

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return PaymentCreateSerializer
        if self.action == "set_status":
            return PaymentStatusSerializer
        return PaymentSerializer

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            payment = confirm_booking_payment(
                booking_id=data["booking_id"],
                amount=data["amount"],
                actor=Actor.from_user(request.user),
                method=data["payment_method"],
                transaction_id=data.get("transaction_id", ""),
                notes=data.get("notes", ""),
            )
        except BookingError as exc:
            return payment_error_response(exc)
        return Response(PaymentSerializer(payment).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request, pk=None):  # type: ignore
        payment = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payment.set_status(serializer.validated_data["status"], serializer.validated_data.get("notes"))
        logger.info(f"Payment {payment.pk} set to {payment.status} by admin {request.user.pk}")
        return Response(PaymentSerializer(payment).data)
