"""Booking Ledger: the only code that writes bookings.

Writes happen inside a :class:`BookingUnitOfWork`. Rooms are the unit of
serialization: any code path that checks for conflicts and then writes
must first take the room's row lock with :func:`lock_room`, so two
requests for the same room cannot both pass the Conflict Checker.
"""

from __future__ import annotations

import logging

from django.utils import timezone  # type: ignore

from apps.catalog.models import Room
from shared.domain.value_objects import Actor, DateRange

from .application.uow import BookingUnitOfWork
from .conflicts import has_conflict
from .domain.events import BookingCreated, BookingStatusChanged
from .domain.state_machine import (
    ensure_actor_may_transition,
    ensure_owner_or_admin,
    ensure_transition,
)
from .exceptions import BookingConflictError, BookingNotFoundError
from .models import Booking, BookingFoodLine, BookingServiceLine
from .pricing import PriceBreakdown

logger = logging.getLogger(__name__)


def lock_room(room_id: int) -> Room | None:
    """Take the row lock that serializes bookings of one room.

    Returns ``None`` when the room does not exist. On backends without
    row locks (SQLite) the database-wide write lock plays the same role.
    """

    return Room.objects.select_for_update().filter(pk=room_id).first()


def insert_booking(
    uow: BookingUnitOfWork,
    *,
    user_id: int,
    cat_id: int,
    room_id: int,
    dates: DateRange,
    breakdown: PriceBreakdown,
    special_requests: str = "",
) -> Booking:
    """Persist a pending booking together with its snapshotted lines."""

    booking = Booking.objects.create(
        user_id=user_id,
        cat_id=cat_id,
        room_id=room_id,
        check_in_date=dates.start_date,
        check_out_date=dates.end_date,
        total_days=dates.nights,
        room_price=breakdown.room_price,
        services_price=breakdown.services_price,
        food_price=breakdown.food_price,
        total_price=breakdown.total,
        special_requests=special_requests or "",
        status=Booking.Status.PENDING,
    )

    BookingServiceLine.objects.bulk_create(
        [
            BookingServiceLine(
                booking=booking,
                service_id=line.request.service_id,
                quantity=line.quantity,
                unit_price=line.unit_price,
                price=line.price,
                service_date=line.request.service_date or dates.start_date,
                notes=line.request.notes or "",
            )
            for line in breakdown.service_lines
        ]
    )
    BookingFoodLine.objects.bulk_create(
        [
            BookingFoodLine(
                booking=booking,
                food_id=line.request.food_id,
                quantity=line.quantity,
                unit_price=line.unit_price,
                price=line.price,
                feeding_date=line.request.feeding_date or dates.start_date,
                meal_time=line.request.meal_time or BookingFoodLine.MealTime.BREAKFAST,
                notes=line.request.notes or "",
            )
            for line in breakdown.food_lines
        ]
    )

    uow.collect(
        BookingCreated(
            booking_id=booking.pk,
            room_id=room_id,
            user_id=user_id,
            check_in_date=dates.start_date.isoformat(),
            check_out_date=dates.end_date.isoformat(),
            total_price=breakdown.total,
        )
    )
    logger.info(
        "Booking %s created: room=%s dates=%s total=%s",
        booking.pk,
        room_id,
        dates,
        breakdown.total,
    )
    return booking


def get_booking_for_update(booking_id: int) -> Booking:
    booking = Booking.objects.select_for_update().filter(pk=booking_id).first()
    if booking is None:
        raise BookingNotFoundError("booking", booking_id)
    return booking


def transition(
    booking_id: int,
    new_status: str,
    actor: Actor,
    reason: str = "",
    *,
    uow: BookingUnitOfWork | None = None,
) -> Booking:
    """Move a booking to ``new_status`` if the state machine allows it.

    Pass ``uow`` to join a unit of work that is already open (payment
    confirmation does this); otherwise the transition runs in its own.
    """

    if uow is None:
        with BookingUnitOfWork() as own_uow:
            return _apply_transition(own_uow, booking_id, new_status, actor, reason)
    return _apply_transition(uow, booking_id, new_status, actor, reason)


def _apply_transition(
    uow: BookingUnitOfWork,
    booking_id: int,
    new_status: str,
    actor: Actor,
    reason: str,
) -> Booking:
    booking = get_booking_for_update(booking_id)
    ensure_owner_or_admin(booking, actor)
    ensure_transition(booking.status, new_status)
    ensure_actor_may_transition(booking, new_status, actor)

    if new_status == Booking.Status.CONFIRMED:
        # Pending holds never block, so two of them may overlap; only the
        # first one to be confirmed keeps the room.
        lock_room(booking.room_id)
        if has_conflict(
            booking.room_id,
            booking.check_in_date,
            booking.check_out_date,
            exclude_booking_id=booking.pk,
        ):
            raise BookingConflictError(
                "Room is not available for the selected dates",
                room_id=booking.room_id,
            )

    previous_status = booking.status
    booking.status = new_status
    update_fields = ["status", "updated_at"]
    if new_status == Booking.Status.CANCELLED:
        booking.cancelled_at = timezone.now()
        booking.cancellation_reason = (reason or "")[:255]
        update_fields += ["cancelled_at", "cancellation_reason"]
    booking.save(update_fields=update_fields)

    uow.collect(
        BookingStatusChanged(
            booking_id=booking.pk,
            room_id=booking.room_id,
            previous_status=str(previous_status),
            new_status=str(new_status),
            actor_role=actor.role,
        )
    )
    logger.info(
        "Booking %s: %s -> %s by %s %s",
        booking.pk,
        previous_status,
        new_status,
        actor.role,
        actor.user_id,
    )
    return booking
