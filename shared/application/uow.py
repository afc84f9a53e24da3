"""
Unit of Work Pattern

Manages database transactions and ensures that domain events
are published only after successful transaction commit.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from django.conf import settings
from django.db import OperationalError, connection, transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class RetryableTransactionError(Exception):
    """Raised when the store gave up on a transaction that is safe to retry."""


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.commit()
        else:
            self.rollback()

    @abstractmethod
    def commit(self):
        """Commit the transaction"""
        pass

    @abstractmethod
    def rollback(self):
        """Rollback the transaction"""
        pass

    @abstractmethod
    def collect(self, event: DomainEvent):
        """Register an event to publish after commit"""
        pass


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Wraps ``transaction.atomic()``. On PostgreSQL the wait for row locks
    is bounded by ``lock_timeout_ms``; a lock timeout, deadlock or
    serialization failure rolls everything back and surfaces as
    ``transient_error_class`` so the caller can resubmit.

    Usage:
        with DjangoUnitOfWork() as uow:
            room = Room.objects.select_for_update().get(pk=room_id)
            ...
            uow.collect(BookingCreated(...))
            # Transaction commits here
        # Events are published after commit
    """

    transient_error_class = RetryableTransactionError

    def __init__(self, lock_timeout_ms: int | None = None):
        self._events: List[DomainEvent] = []
        self._transaction = None
        if lock_timeout_ms is None:
            lock_timeout_ms = getattr(settings, 'BOOKING_LOCK_TIMEOUT_MS', 5000)
        self.lock_timeout_ms = int(lock_timeout_ms)

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic()
        self._transaction.__enter__()
        try:
            self._apply_lock_timeout()
        except BaseException as exc:
            self._transaction.__exit__(type(exc), exc, exc.__traceback__)
            raise
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        except BaseException as exc:
            self._transaction.__exit__(type(exc), exc, exc.__traceback__)
            raise
        try:
            self._transaction.__exit__(exc_type, exc_val, exc_tb)
        except OperationalError as exc:
            # Commit itself can fail with a serialization error
            raise self.transient_error_class(str(exc)) from exc
        if exc_type is not None and issubclass(exc_type, OperationalError):
            logger.warning("Transaction aborted by the database: %s", exc_val)
            raise self.transient_error_class(str(exc_val)) from exc_val
        return False

    def _apply_lock_timeout(self):
        if connection.vendor != 'postgresql' or self.lock_timeout_ms <= 0:
            return
        with connection.cursor() as cursor:
            cursor.execute(f"SET LOCAL lock_timeout = {self.lock_timeout_ms:d}")

    def commit(self):
        """
        Schedule event publishing

        Events are published using Django's transaction.on_commit()
        to ensure they're only sent after database commit succeeds.
        """
        logger.debug(f"Committing transaction with {len(self._events)} events")

        events = self._events.copy()
        self._events.clear()

        if events:
            transaction.on_commit(lambda: self._publish_events(events))

    def rollback(self):
        """Discard events; the atomic block rolls the data back"""
        if self._events:
            logger.warning(f"Rolling back transaction, discarding {len(self._events)} events")
        self._events.clear()

    def collect(self, event: DomainEvent):
        self._events.append(event)

    def _publish_events(self, events: List[DomainEvent]):
        """
        Publish collected events to message bus

        Called after successful transaction commit.
        """
        from shared.application.message_bus import message_bus

        logger.info(f"Publishing {len(events)} domain events after commit")
        message_bus.publish_events(events)
