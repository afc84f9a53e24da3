"""Shared pytest fixtures: users, a cat and a small catalog."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.catalog.models import Food, Room, Service
from apps.cats.models import Cat
from apps.users.models import User
from shared.domain.value_objects import Actor


@pytest.fixture
def customer(db) -> User:
    return User.objects.create_user(
        email="owner@example.com",
        password="OwnerPass123",
        full_name="Cat Owner",
    )


@pytest.fixture
def other_customer(db) -> User:
    return User.objects.create_user(email="neighbour@example.com", password="OtherPass123")


@pytest.fixture
def admin_user(db) -> User:
    return User.objects.create_user(
        email="staff@example.com",
        password="StaffPass123",
        role=User.RoleChoices.ADMIN,
    )


@pytest.fixture
def customer_actor(customer) -> Actor:
    return Actor.from_user(customer)


@pytest.fixture
def admin_actor(admin_user) -> Actor:
    return Actor.from_user(admin_user)


@pytest.fixture
def cat(customer) -> Cat:
    return Cat.objects.create(owner=customer, name="Mochi", gender=Cat.Gender.FEMALE)


@pytest.fixture
def room(db) -> Room:
    return Room.objects.create(name="Sunny Suite", price_per_day=Decimal("20.00"), capacity=2)


@pytest.fixture
def service(db) -> Service:
    return Service.objects.create(name="Brushing", price=Decimal("10.00"))


@pytest.fixture
def food(db) -> Food:
    return Food.objects.create(name="Salmon pate", brand="Purr", price_per_serving=Decimal("5.00"))


@pytest.fixture
def today():
    return timezone.localdate()


@pytest.fixture
def stay(today):
    """A three night stay starting next week."""
    check_in = today + timedelta(days=7)
    return check_in, check_in + timedelta(days=3)


@pytest.fixture
def make_booking(customer, cat, room):
    """Insert a ledger row directly, bypassing the orchestrator."""

    from apps.bookings.models import Booking

    def _make(check_in, check_out, status=Booking.Status.CONFIRMED, **overrides):
        nights = (check_out - check_in).days
        target_room = overrides.pop("room", room)
        values = {
            "user": customer,
            "cat": cat,
            "room": target_room,
            "check_in_date": check_in,
            "check_out_date": check_out,
            "total_days": nights,
            "room_price": target_room.price_per_day * nights,
            "total_price": target_room.price_per_day * nights,
            "status": status,
        }
        values.update(overrides)
        return Booking.objects.create(**values)

    return _make
