"""Celery task that cancels stale pending holds."""

from __future__ import annotations

from datetime import timedelta

import pytest
from django.utils import timezone

from apps.bookings.models import Booking
from apps.bookings.tasks import EXPIRY_REASON, expire_stale_pending_bookings

pytestmark = pytest.mark.django_db


def _age(booking: Booking, hours: int) -> None:
    Booking.objects.filter(pk=booking.pk).update(created_at=timezone.now() - timedelta(hours=hours))


def test_stale_pending_bookings_are_cancelled(make_booking, stay, settings):
    settings.BOOKING_PENDING_HOLD_HOURS = 24
    stale = make_booking(*stay, status=Booking.Status.PENDING)
    fresh = make_booking(*stay, status=Booking.Status.PENDING)
    confirmed = make_booking(*stay, status=Booking.Status.CONFIRMED)
    _age(stale, 30)
    _age(confirmed, 30)

    result = expire_stale_pending_bookings()

    assert result == {"expired": 1, "skipped": 0}
    stale.refresh_from_db()
    fresh.refresh_from_db()
    confirmed.refresh_from_db()
    assert stale.status == Booking.Status.CANCELLED
    assert stale.cancellation_reason == EXPIRY_REASON
    assert fresh.status == Booking.Status.PENDING
    assert confirmed.status == Booking.Status.CONFIRMED


def test_zero_hold_hours_disables_expiry(make_booking, stay, settings):
    settings.BOOKING_PENDING_HOLD_HOURS = 0
    booking = make_booking(*stay, status=Booking.Status.PENDING)
    _age(booking, 1000)

    assert expire_stale_pending_bookings() == {"expired": 0, "skipped": 0}
    booking.refresh_from_db()
    assert booking.status == Booking.Status.PENDING


def test_task_runs_through_celery(make_booking, stay, settings):
    settings.BOOKING_PENDING_HOLD_HOURS = 1
    booking = make_booking(*stay, status=Booking.Status.PENDING)
    _age(booking, 2)

    result = expire_stale_pending_bookings.delay().get()

    assert result["expired"] == 1
