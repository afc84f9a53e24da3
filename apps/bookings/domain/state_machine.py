"""
Booking Status State Machine

    pending ──> confirmed ──> checked_in ──> checked_out
       │            │
       └────────────┴──> cancelled

checked_out and cancelled are terminal. Customers may only cancel their
own pending or confirmed bookings; every other transition needs an admin.
"""

from __future__ import annotations

from apps.bookings.exceptions import BookingPermissionError, InvalidTransitionError
from apps.bookings.models import Booking
from shared.domain.value_objects import Actor

Status = Booking.Status

TRANSITIONS: dict[str, frozenset[str]] = {
    Status.PENDING: frozenset({Status.CONFIRMED, Status.CANCELLED}),
    Status.CONFIRMED: frozenset({Status.CHECKED_IN, Status.CANCELLED}),
    Status.CHECKED_IN: frozenset({Status.CHECKED_OUT}),
    Status.CHECKED_OUT: frozenset(),
    Status.CANCELLED: frozenset(),
}

# Statuses that hold a room for the Conflict Checker
BLOCKING_STATUSES: tuple[str, ...] = (Status.CONFIRMED, Status.CHECKED_IN)

CUSTOMER_CANCELLABLE: frozenset[str] = frozenset({Status.PENDING, Status.CONFIRMED})


def allowed_transitions(current: str) -> frozenset[str]:
    return TRANSITIONS.get(current, frozenset())


def can_transition(current: str, requested: str) -> bool:
    return requested in allowed_transitions(current)


def ensure_transition(current: str, requested: str) -> None:
    """Raise InvalidTransitionError unless current -> requested is legal."""
    if requested not in Status.values or not can_transition(current, requested):
        raise InvalidTransitionError(str(current), str(requested))


def ensure_owner_or_admin(booking: Booking, actor: Actor) -> None:
    if not actor.is_admin and booking.user_id != actor.user_id:
        raise BookingPermissionError("Access denied")


def ensure_actor_may_transition(booking: Booking, requested: str, actor: Actor) -> None:
    """Admins drive every legal transition, owners may only cancel."""
    ensure_owner_or_admin(booking, actor)
    if actor.is_admin:
        return
    if requested != Status.CANCELLED or booking.status not in CUSTOMER_CANCELLABLE:
        raise BookingPermissionError(
            "Only administrators can change the booking status",
            current_status=booking.status,
            requested_status=requested,
        )
