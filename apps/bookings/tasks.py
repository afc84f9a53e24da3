"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging
from datetime import timedelta

from celery import shared_task  # type: ignore
from django.conf import settings  # type: ignore
from django.utils import timezone  # type: ignore

from shared.domain.value_objects import Actor

from . import ledger
from .exceptions import BookingError
from .models import Booking

logger = logging.getLogger(__name__)

EXPIRY_REASON = "Pending hold expired"


# ============================================================================
# PERIODIC TASKS (run by Celery Beat)
# ============================================================================

@shared_task(name="bookings.expire_stale_pending_bookings")
def expire_stale_pending_bookings() -> dict[str, int]:
    """
    Cancel pending bookings older than ``BOOKING_PENDING_HOLD_HOURS``.

    Pending bookings never block a room, so this only tidies the ledger.
    Each booking goes through the normal transition path as the system
    actor; a booking confirmed in the meantime is skipped.

    Returns:
        dict: {"expired": number of cancelled bookings, "skipped": ...}
    """
    hold_hours = int(getattr(settings, "BOOKING_PENDING_HOLD_HOURS", 24))
    if hold_hours <= 0:
        return {"expired": 0, "skipped": 0}

    cutoff = timezone.now() - timedelta(hours=hold_hours)
    stale_ids = list(
        Booking.objects.filter(
            status=Booking.Status.PENDING,
            created_at__lte=cutoff,
        ).values_list("pk", flat=True)
    )

    actor = Actor.system()
    expired = skipped = 0
    for booking_id in stale_ids:
        try:
            ledger.transition(booking_id, Booking.Status.CANCELLED, actor, EXPIRY_REASON)
        except BookingError as exc:
            skipped += 1
            logger.warning(f"Could not expire booking {booking_id}: {exc.code} {exc.message}")
            continue
        expired += 1

    if expired:
        logger.info(f"Expired {expired} pending bookings older than {hold_hours}h")

    return {"expired": expired, "skipped": skipped}
