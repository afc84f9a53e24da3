"""
Booking Domain Events

Published through the message bus after the transaction that produced
them commits. Downstream reporting and notification code subscribes
to these instead of polling the ledger.
"""

from dataclasses import dataclass
from decimal import Decimal

from shared.domain.base import DomainEvent


@dataclass
class BookingCreated(DomainEvent):
    """A pending booking was written with its priced lines"""
    booking_id: int
    room_id: int
    user_id: int
    check_in_date: str
    check_out_date: str
    total_price: Decimal


@dataclass
class BookingStatusChanged(DomainEvent):
    """A ledger transition was applied"""
    booking_id: int
    room_id: int
    previous_status: str
    new_status: str
    actor_role: str
