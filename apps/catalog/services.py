"""Read-only catalog lookups consumed by the booking engine.

Every call goes to the database; prices and availability flags are
never cached between requests so a booking is always priced against
the current catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from .models import Food, Room, Service


@dataclass(frozen=True)
class CatalogItem:
    """Price and availability of a single catalog entry."""

    id: int
    price: Decimal
    is_active: bool

    @classmethod
    def from_room(cls, room: Room) -> "CatalogItem":
        return cls(id=room.pk, price=room.price_per_day, is_active=room.is_available)

    @classmethod
    def from_service(cls, service: Service) -> "CatalogItem":
        return cls(id=service.pk, price=service.price, is_active=service.is_active)

    @classmethod
    def from_food(cls, food: Food) -> "CatalogItem":
        return cls(id=food.pk, price=food.price_per_serving, is_active=food.is_active)


def get_room(room_id: int) -> CatalogItem | None:
    room = Room.objects.filter(pk=room_id).first()
    return CatalogItem.from_room(room) if room else None


def get_service(service_id: int) -> CatalogItem | None:
    service = Service.objects.filter(pk=service_id).first()
    return CatalogItem.from_service(service) if service else None


def get_food(food_id: int) -> CatalogItem | None:
    food = Food.objects.filter(pk=food_id).first()
    return CatalogItem.from_food(food) if food else None


def get_services(service_ids: Iterable[int]) -> dict[int, CatalogItem]:
    """Bulk variant of :func:`get_service`; missing ids are simply absent."""
    ids = set(service_ids)
    if not ids:
        return {}
    return {s.pk: CatalogItem.from_service(s) for s in Service.objects.filter(pk__in=ids)}


def get_foods(food_ids: Iterable[int]) -> dict[int, CatalogItem]:
    """Bulk variant of :func:`get_food`; missing ids are simply absent."""
    ids = set(food_ids)
    if not ids:
        return {}
    return {f.pk: CatalogItem.from_food(f) for f in Food.objects.filter(pk__in=ids)}
