"""Status lifecycle: legal transitions, permissions and confirmation re-checks."""

from __future__ import annotations

from datetime import timedelta

import pytest

from apps.bookings.domain.state_machine import BLOCKING_STATUSES, allowed_transitions, can_transition
from apps.bookings.exceptions import (
    BookingConflictError,
    BookingNotFoundError,
    BookingPermissionError,
    InvalidTransitionError,
)
from apps.bookings.ledger import transition
from apps.bookings.models import Booking
from shared.domain.value_objects import Actor

Status = Booking.Status


@pytest.mark.parametrize(
    ("current", "requested"),
    [
        (Status.PENDING, Status.CONFIRMED),
        (Status.PENDING, Status.CANCELLED),
        (Status.CONFIRMED, Status.CHECKED_IN),
        (Status.CONFIRMED, Status.CANCELLED),
        (Status.CHECKED_IN, Status.CHECKED_OUT),
    ],
)
def test_legal_transitions(current, requested):
    assert can_transition(current, requested)


@pytest.mark.parametrize(
    ("current", "requested"),
    [
        (Status.PENDING, Status.CHECKED_IN),
        (Status.PENDING, Status.CHECKED_OUT),
        (Status.CONFIRMED, Status.PENDING),
        (Status.CHECKED_IN, Status.CANCELLED),
        (Status.CHECKED_OUT, Status.CONFIRMED),
        (Status.CANCELLED, Status.PENDING),
    ],
)
def test_illegal_transitions(current, requested):
    assert not can_transition(current, requested)


def test_terminal_states_have_no_exits():
    assert allowed_transitions(Status.CHECKED_OUT) == frozenset()
    assert allowed_transitions(Status.CANCELLED) == frozenset()


def test_only_confirmed_and_checked_in_block():
    assert set(BLOCKING_STATUSES) == {Status.CONFIRMED, Status.CHECKED_IN}


@pytest.mark.django_db
class TestLedgerTransition:
    def test_checked_out_cannot_be_confirmed(self, make_booking, admin_actor, stay):
        booking = make_booking(*stay, status=Status.CHECKED_OUT)

        with pytest.raises(InvalidTransitionError) as excinfo:
            transition(booking.pk, Status.CONFIRMED, admin_actor)

        assert excinfo.value.current == Status.CHECKED_OUT
        assert excinfo.value.requested == Status.CONFIRMED
        booking.refresh_from_db()
        assert booking.status == Status.CHECKED_OUT

    def test_unknown_status_is_invalid(self, make_booking, admin_actor, stay):
        booking = make_booking(*stay, status=Status.PENDING)

        with pytest.raises(InvalidTransitionError):
            transition(booking.pk, "teleported", admin_actor)

    def test_full_lifecycle_by_admin(self, make_booking, admin_actor, stay):
        booking = make_booking(*stay, status=Status.PENDING)

        for status in (Status.CONFIRMED, Status.CHECKED_IN, Status.CHECKED_OUT):
            booking = transition(booking.pk, status, admin_actor)

        booking.refresh_from_db()
        assert booking.status == Status.CHECKED_OUT

    def test_customer_cannot_confirm(self, make_booking, customer_actor, stay):
        booking = make_booking(*stay, status=Status.PENDING)

        with pytest.raises(BookingPermissionError):
            transition(booking.pk, Status.CONFIRMED, customer_actor)
        booking.refresh_from_db()
        assert booking.status == Status.PENDING

    def test_customer_cannot_check_in(self, make_booking, customer_actor, stay):
        booking = make_booking(*stay, status=Status.CONFIRMED)

        with pytest.raises(BookingPermissionError):
            transition(booking.pk, Status.CHECKED_IN, customer_actor)

    @pytest.mark.parametrize("status", [Status.PENDING, Status.CONFIRMED])
    def test_owner_cancels_and_reason_is_recorded(self, make_booking, customer_actor, stay, status):
        booking = make_booking(*stay, status=status)

        transition(booking.pk, Status.CANCELLED, customer_actor, "Vet appointment")

        booking.refresh_from_db()
        assert booking.status == Status.CANCELLED
        assert booking.cancelled_at is not None
        assert booking.cancellation_reason == "Vet appointment"

    def test_stranger_cannot_cancel(self, make_booking, other_customer, stay):
        booking = make_booking(*stay, status=Status.PENDING)

        with pytest.raises(BookingPermissionError):
            transition(booking.pk, Status.CANCELLED, Actor.from_user(other_customer))

    def test_missing_booking(self, admin_actor, db):
        with pytest.raises(BookingNotFoundError):
            transition(123456, Status.CONFIRMED, admin_actor)

    def test_confirm_rechecks_conflicts(self, make_booking, admin_actor, stay):
        check_in, check_out = stay
        first = make_booking(check_in, check_out, status=Status.PENDING)
        second = make_booking(check_in + timedelta(days=1), check_out + timedelta(days=1), status=Status.PENDING)

        transition(first.pk, Status.CONFIRMED, admin_actor)
        with pytest.raises(BookingConflictError):
            transition(second.pk, Status.CONFIRMED, admin_actor)

        second.refresh_from_db()
        assert second.status == Status.PENDING

    def test_confirm_ignores_cancelled_overlaps(self, make_booking, admin_actor, stay):
        make_booking(*stay, status=Status.CANCELLED)
        booking = make_booking(*stay, status=Status.PENDING)

        booking = transition(booking.pk, Status.CONFIRMED, admin_actor)

        assert booking.status == Status.CONFIRMED

    def test_system_actor_may_cancel(self, make_booking, stay):
        booking = make_booking(*stay, status=Status.PENDING)

        booking = transition(booking.pk, Status.CANCELLED, Actor.system(), "expired")

        assert booking.status == Status.CANCELLED
