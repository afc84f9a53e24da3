"""Concurrent writers on one room never end up with overlapping held bookings.

Runs only on backends with row locks. SQLite serializes writers for the
whole database and does not exercise the room lock, so point the suite at
PostgreSQL to run these:

    TEST_DB_ENGINE=django.db.backends.postgresql TEST_DB_USER=... pytest -m concurrency

Lock ordering itself is covered on every backend by ``test_lock_ordering.py``.
"""

from __future__ import annotations

import threading
from datetime import timedelta
from decimal import Decimal

import pytest
from django.db import connection
from django.test import TransactionTestCase, skipUnlessDBFeature
from django.utils import timezone

from apps.bookings.application.command_handlers import CreateBookingCommand, create_booking
from apps.bookings.exceptions import BookingConflictError, BookingError
from apps.bookings.ledger import transition
from apps.bookings.models import Booking
from apps.catalog.models import Room
from apps.cats.models import Cat
from apps.users.models import User
from shared.domain.value_objects import Actor

WORKERS = 6


@pytest.mark.concurrency
@skipUnlessDBFeature("has_select_for_update")
class ConcurrentConfirmationTests(TransactionTestCase):
    def setUp(self) -> None:
        self.customer = User.objects.create_user(email="owner@example.com", password="OwnerPass123")
        self.admin = Actor(user_id=None, role=Actor.ADMIN)
        self.customer_actor = Actor.from_user(self.customer)
        self.cat = Cat.objects.create(owner=self.customer, name="Mochi", gender=Cat.Gender.MALE)
        self.room = Room.objects.create(name="Sunny Suite", price_per_day=Decimal("20.00"))
        self.check_in = timezone.localdate() + timedelta(days=5)

    def _run_concurrently(self, work) -> tuple[list, list]:
        barrier = threading.Barrier(WORKERS)
        successes: list = []
        failures: list = []
        lock = threading.Lock()

        def runner(index: int) -> None:
            try:
                barrier.wait()
                result = work(index)
                with lock:
                    successes.append(result)
            except BookingError as exc:
                with lock:
                    failures.append(exc)
            finally:
                connection.close()

        threads = [threading.Thread(target=runner, args=(i,)) for i in range(WORKERS)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return successes, failures

    def test_only_one_overlapping_booking_gets_confirmed(self) -> None:
        pending_ids = [
            create_booking(
                CreateBookingCommand(
                    actor=self.customer_actor,
                    cat_id=self.cat.pk,
                    room_id=self.room.pk,
                    check_in=self.check_in + timedelta(days=i % 2),
                    check_out=self.check_in + timedelta(days=3 + i % 2),
                )
            ).pk
            for i in range(WORKERS)
        ]

        successes, failures = self._run_concurrently(
            lambda i: transition(pending_ids[i], Booking.Status.CONFIRMED, self.admin)
        )

        self.assertEqual(len(successes), 1)
        self.assertEqual(len(failures), WORKERS - 1)
        self.assertTrue(all(isinstance(exc, BookingConflictError) for exc in failures))
        self.assertEqual(Booking.objects.filter(status=Booking.Status.CONFIRMED).count(), 1)

    def test_creation_against_a_freshly_confirmed_stay_is_rejected(self) -> None:
        pending = create_booking(
            CreateBookingCommand(
                actor=self.customer_actor,
                cat_id=self.cat.pk,
                room_id=self.room.pk,
                check_in=self.check_in,
                check_out=self.check_in + timedelta(days=4),
            )
        )

        def work(index: int):
            if index == 0:
                return transition(pending.pk, Booking.Status.CONFIRMED, self.admin)
            return create_booking(
                CreateBookingCommand(
                    actor=self.customer_actor,
                    cat_id=self.cat.pk,
                    room_id=self.room.pk,
                    check_in=self.check_in + timedelta(days=1),
                    check_out=self.check_in + timedelta(days=2),
                )
            )

        successes, failures = self._run_concurrently(work)

        self.assertEqual(len(successes) + len(failures), WORKERS)
        self.assertTrue(all(isinstance(exc, BookingConflictError) for exc in failures))
        self.assertEqual(Booking.objects.filter(status=Booking.Status.CONFIRMED).count(), 1)
