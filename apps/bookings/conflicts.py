"""Conflict Checker: does a stay overlap bookings already holding the room?

Stays are half-open ``[check_in, check_out)``; two stays overlap iff
``a_in < b_out AND b_in < a_out``. A stay starting on the day another
ends is compatible. Only confirmed and checked-in bookings hold a room;
pending requests and cancelled bookings never block it.
"""

from __future__ import annotations

import logging
from datetime import date

from django.db.models import QuerySet  # type: ignore

from shared.infrastructure.query import QuerySpec

from .domain.state_machine import BLOCKING_STATUSES
from .models import Booking

logger = logging.getLogger(__name__)


def overlap_spec(
    room_id: int,
    check_in: date,
    check_out: date,
    *,
    exclude_booking_id: int | None = None,
) -> QuerySpec:
    """Typed description of the conflict query for one room and stay."""

    spec = (
        QuerySpec()
        .where("room_id", room_id)
        .where("status__in", BLOCKING_STATUSES)
        .where("check_in_date__lt", check_out)
        .where("check_out_date__gt", check_in)
    )
    if exclude_booking_id is not None:
        spec.exclude("pk", exclude_booking_id)
    return spec


def find_conflicts(
    room_id: int,
    check_in: date,
    check_out: date,
    *,
    exclude_booking_id: int | None = None,
) -> QuerySet:
    """Bookings that hold ``room_id`` somewhere inside the requested stay."""

    spec = overlap_spec(room_id, check_in, check_out, exclude_booking_id=exclude_booking_id)
    return spec.apply(Booking.objects.all()).order_by("check_in_date")


def has_conflict(
    room_id: int,
    check_in: date,
    check_out: date,
    exclude_booking_id: int | None = None,
) -> bool:
    """True when an existing confirmed or checked-in booking overlaps the stay.

    Callers that go on to write a booking must hold the room lock taken by
    :func:`apps.bookings.ledger.lock_room`, otherwise the answer can be stale
    by the time the insert happens.
    """

    conflict = find_conflicts(
        room_id,
        check_in,
        check_out,
        exclude_booking_id=exclude_booking_id,
    ).exists()
    if conflict:
        logger.info(
            "Room %s is taken between %s and %s", room_id, check_in, check_out
        )
    return conflict
