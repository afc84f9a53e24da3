"""Payment processing services."""

from __future__ import annotations

import logging
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from apps.bookings import ledger
from apps.bookings.application.uow import BookingUnitOfWork
from apps.bookings.domain.state_machine import ensure_owner_or_admin, ensure_transition
from apps.bookings.models import Booking
from apps.bookings.pricing import amounts_match
from shared.domain.value_objects import Actor

from .exceptions import PaymentAlreadyExistsError, PaymentMismatchError
from .models import Payment

logger = logging.getLogger(__name__)


def confirm_booking_payment(
    booking_id: int,
    amount: Decimal,
    actor: Actor,
    method: str,
    transaction_id: str = "",
    notes: str = "",
) -> Payment:
    """
    Record a completed payment and confirm the booking it pays for.

    The payment and the ``pending -> confirmed`` transition commit
    together. If the confirmation fails (another booking took the room
    in the meantime) the payment is rolled back as well and the booking
    stays pending.

    Raises:
        BookingNotFoundError, BookingPermissionError,
        PaymentAlreadyExistsError, InvalidTransitionError,
        PaymentMismatchError, BookingConflictError, TransientBookingError
    """
    with BookingUnitOfWork() as uow:
        booking = ledger.get_booking_for_update(booking_id)
        ensure_owner_or_admin(booking, actor)

        if Payment.objects.filter(booking_id=booking.pk).exists():
            raise PaymentAlreadyExistsError(booking.pk)
        ensure_transition(booking.status, Booking.Status.CONFIRMED)

        if not amounts_match(booking.total_price, amount):
            raise PaymentMismatchError(booking.total_price, amount)

        payment = Payment.objects.create(
            booking=booking,
            user_id=actor.user_id or booking.user_id,
            status=Payment.Status.COMPLETED,
            method=method,
            amount=amount,
            currency=getattr(settings, "BOOKING_CURRENCY", "USD"),
            transaction_id=transaction_id or "",
            paid_at=timezone.now(),
            notes=notes or "",
        )

        # A matching payment authorizes confirmation even for customers
        confirming_actor = actor if actor.is_admin else Actor.system()
        ledger.transition(booking.pk, Booking.Status.CONFIRMED, confirming_actor, uow=uow)

    logger.info(
        f"Payment {payment.pk} of {amount} recorded for booking {booking.pk} "
        f"by {actor.role}:{actor.user_id}"
    )
    return payment
