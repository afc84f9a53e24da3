"""
Booking Command Handlers

These are the use cases of the booking engine. They validate input,
then run the Conflict Checker, the Price Calculator and the ledger
writes inside a single unit of work.

Commands:
- CreateBookingCommand: Reserve a room for a cat, with services and food
- TransitionBookingCommand: Move a booking through its status lifecycle
"""

from dataclasses import dataclass, field
from datetime import date
import logging

from django.utils import timezone

from apps.bookings import ledger
from apps.bookings.application.uow import BookingUnitOfWork
from apps.bookings.conflicts import has_conflict
from apps.bookings.exceptions import (
    BookingConflictError,
    BookingNotFoundError,
    BookingPermissionError,
    BookingValidationError,
)
from apps.bookings.models import Booking
from apps.bookings.pricing import FoodRequest, ServiceRequest, compute_price
from apps.catalog.services import CatalogItem
from apps.cats.models import Cat
from shared.domain.value_objects import Actor, DateRange

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class CreateBookingCommand:
    """
    Command to create a new booking

    ``today`` defaults to the current local date and only exists so the
    "check-in not in the past" rule can be evaluated against a fixed day.
    """
    actor: Actor
    cat_id: int
    room_id: int
    check_in: date
    check_out: date
    service_requests: list[ServiceRequest] = field(default_factory=list)
    food_requests: list[FoodRequest] = field(default_factory=list)
    special_requests: str = ''
    today: date | None = None


@dataclass
class TransitionBookingCommand:
    """Command to change the status of a booking"""
    actor: Actor
    booking_id: int
    new_status: str
    reason: str = ''


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateBooking command

    Validation is fail-fast and ordered:
    1. Dates: check-in not in the past, check-out after check-in
    2. Cat exists, is active and belongs to the actor (admins exempt)
    3. Room exists and is switched on by the admins
    4. No confirmed/checked-in booking overlaps the stay
    5. Every service and food line can be priced

    Steps 2-5 and the inserts share one transaction that starts by
    locking the room row, so the conflict read and the booking insert
    are serialized against every other writer of the same room.
    Any failure rolls back everything.
    """

    def handle(self, command: CreateBookingCommand) -> Booking:
        """
        Handle booking creation

        Returns: the new Booking in pending status

        Raises:
            BookingValidationError, BookingNotFoundError,
            BookingPermissionError, BookingConflictError,
            CatalogItemUnavailableError, TransientBookingError
        """
        dates = self._validate_dates(command)
        logger.info(
            f"Creating booking for room {command.room_id}, cat {command.cat_id}, "
            f"actor {command.actor.role}:{command.actor.user_id}, dates {dates}"
        )

        with BookingUnitOfWork() as uow:
            # Lock first: every read below must see the room's latest bookings
            room = ledger.lock_room(command.room_id)

            cat = self._load_cat(command)

            if room is None or not room.is_available:
                raise BookingNotFoundError("room", command.room_id)

            if has_conflict(room.pk, dates.start_date, dates.end_date):
                raise BookingConflictError(
                    "Room is not available for the selected dates",
                    room_id=room.pk,
                    check_in_date=dates.start_date.isoformat(),
                    check_out_date=dates.end_date.isoformat(),
                )

            breakdown = compute_price(
                CatalogItem.from_room(room),
                dates.nights,
                command.service_requests,
                command.food_requests,
            )

            booking = ledger.insert_booking(
                uow,
                user_id=cat.owner_id,
                cat_id=cat.pk,
                room_id=room.pk,
                dates=dates,
                breakdown=breakdown,
                special_requests=command.special_requests,
            )

        return booking

    @staticmethod
    def _validate_dates(command: CreateBookingCommand) -> DateRange:
        today = command.today or timezone.localdate()
        if command.check_in is None or command.check_out is None:
            raise BookingValidationError("Check-in and check-out dates are required")
        if command.check_in < today:
            raise BookingValidationError("Check-in date cannot be in the past")
        if command.check_out <= command.check_in:
            raise BookingValidationError("Check-out date must be after check-in date")
        return DateRange(command.check_in, command.check_out)

    @staticmethod
    def _load_cat(command: CreateBookingCommand) -> Cat:
        cat = Cat.objects.filter(pk=command.cat_id, is_active=True).first()
        if cat is None:
            raise BookingNotFoundError("cat", command.cat_id)
        if not command.actor.is_admin and cat.owner_id != command.actor.user_id:
            raise BookingPermissionError("You can only book for your own cats", cat_id=cat.pk)
        return cat


class TransitionBookingHandler:
    """Handler for booking status changes (confirm, check in/out, cancel)"""

    def handle(self, command: TransitionBookingCommand) -> Booking:
        logger.info(
            f"Transition of booking {command.booking_id} to {command.new_status} "
            f"requested by {command.actor.role}:{command.actor.user_id}"
        )
        return ledger.transition(
            command.booking_id,
            command.new_status,
            command.actor,
            command.reason,
        )


def create_booking(command: CreateBookingCommand) -> Booking:
    return CreateBookingHandler().handle(command)


def transition_booking(command: TransitionBookingCommand) -> Booking:
    return TransitionBookingHandler().handle(command)
