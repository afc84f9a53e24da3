"""System checks for the booking engine settings."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.core.checks import Error, Tags, register  # type: ignore

from shared.domain.value_objects import SUPPORTED_CURRENCIES


@register(Tags.compatibility)
def check_booking_currency(app_configs=None, **kwargs):
    currency = getattr(settings, "BOOKING_CURRENCY", "USD")
    if currency in SUPPORTED_CURRENCIES:
        return []
    return [
        Error(
            f"BOOKING_CURRENCY {currency!r} is not supported; prices and payments would fail.",
            hint=f"Use one of: {', '.join(SUPPORTED_CURRENCIES)}.",
            id="bookings.E001",
        )
    ]
