"""Price Calculator for multi-line bookings.

    room_price     = price_per_day * nights
    services_price = sum(service price * max(quantity, 1))
    food_price     = sum(price per serving * max(quantity, 1))
    total          = room_price + services_price + food_price

Lines are priced against the current catalog. A single missing or
inactive item aborts the whole calculation; the error lists every
offending id so the caller can fix the request in one go.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable

from django.conf import settings  # type: ignore

from apps.catalog.services import CatalogItem, get_foods, get_services
from shared.domain.value_objects import CENT, Money

from .exceptions import CatalogItemUnavailableError

logger = logging.getLogger(__name__)


def _currency() -> str:
    return getattr(settings, "BOOKING_CURRENCY", "USD")


def _tolerance() -> Decimal:
    return Decimal(str(getattr(settings, "BOOKING_PRICE_TOLERANCE", CENT)))


@dataclass(frozen=True)
class ServiceRequest:
    service_id: int
    quantity: int = 1
    service_date: date | None = None
    notes: str = ""


@dataclass(frozen=True)
class FoodRequest:
    food_id: int
    quantity: int = 1
    feeding_date: date | None = None
    meal_time: str = "breakfast"
    notes: str = ""


@dataclass(frozen=True)
class PricedLine:
    """A request line with the catalog price captured at pricing time."""

    request: ServiceRequest | FoodRequest
    unit_price: Decimal
    price: Decimal

    @property
    def quantity(self) -> int:
        return max(self.request.quantity, 1)


@dataclass(frozen=True)
class PriceBreakdown:
    room_price: Decimal
    services_price: Decimal
    food_price: Decimal
    total: Decimal
    service_lines: list[PricedLine] = field(default_factory=list)
    food_lines: list[PricedLine] = field(default_factory=list)


def line_total(unit_price: Decimal, quantity: int) -> Decimal:
    """Price of ``quantity`` units; quantities below one count as one."""
    return (Money(unit_price, _currency()) * max(int(quantity), 1)).quantize().amount


def amounts_match(expected: Decimal, received: Decimal) -> bool:
    """Compare amounts allowing a rounding difference of one cent."""
    currency = _currency()
    return Money(Decimal(expected), currency).is_close_to(
        Money(Decimal(received), currency), _tolerance()
    )


def _price_lines(requests, catalog: dict[int, CatalogItem], kind: str, id_attr: str, missing: list):
    priced: list[PricedLine] = []
    for request in requests:
        item_id = getattr(request, id_attr)
        item = catalog.get(item_id)
        if item is None or not item.is_active:
            missing.append((kind, item_id))
            continue
        priced.append(PricedLine(request, item.price, line_total(item.price, request.quantity)))
    return priced


def compute_price(
    room: CatalogItem,
    nights: int,
    service_lines: Iterable[ServiceRequest] = (),
    food_lines: Iterable[FoodRequest] = (),
) -> PriceBreakdown:
    """Price a stay plus its service and food lines.

    ``nights`` must already be validated as a positive integer; callers
    reject empty or inverted date ranges before pricing.
    """

    if isinstance(nights, bool) or not isinstance(nights, int) or nights <= 0:
        raise ValueError(f"nights must be a positive integer, got {nights!r}")

    service_lines = list(service_lines)
    food_lines = list(food_lines)

    currency = _currency()
    room_price = (Money(room.price, currency) * nights).quantize()

    missing: list[tuple[str, int]] = []
    services = _price_lines(
        service_lines,
        get_services(line.service_id for line in service_lines),
        "service",
        "service_id",
        missing,
    )
    foods = _price_lines(
        food_lines,
        get_foods(line.food_id for line in food_lines),
        "food",
        "food_id",
        missing,
    )
    if missing:
        logger.info("Pricing aborted, unavailable catalog items: %s", missing)
        raise CatalogItemUnavailableError(missing)

    services_price = sum((line.price for line in services), Decimal("0.00"))
    food_price = sum((line.price for line in foods), Decimal("0.00"))
    total = (room_price + Money(services_price, currency) + Money(food_price, currency)).quantize()

    return PriceBreakdown(
        room_price=room_price.amount,
        services_price=services_price,
        food_price=food_price,
        total=total.amount,
        service_lines=services,
        food_lines=foods,
    )
