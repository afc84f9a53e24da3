"""Subscribers for booking domain events.

Notification delivery is handled elsewhere; the ledger only leaves an
audit trail that reporting tools can ship from the JSON logs.
"""

import logging

from apps.bookings.domain.events import BookingCreated, BookingStatusChanged
from shared.application.message_bus import message_bus

logger = logging.getLogger("apps.bookings.audit")


def log_booking_created(event: BookingCreated):
    logger.info(
        "booking_created",
        extra={
            "booking_id": event.booking_id,
            "room_id": event.room_id,
            "user_id": event.user_id,
            "check_in_date": event.check_in_date,
            "check_out_date": event.check_out_date,
            "total_price": str(event.total_price),
        },
    )


def log_status_changed(event: BookingStatusChanged):
    logger.info(
        "booking_status_changed",
        extra={
            "booking_id": event.booking_id,
            "room_id": event.room_id,
            "previous_status": event.previous_status,
            "new_status": event.new_status,
            "actor_role": event.actor_role,
        },
    )


def register():
    message_bus.register_event_handler(BookingCreated, log_booking_created)
    message_bus.register_event_handler(BookingStatusChanged, log_status_changed)
