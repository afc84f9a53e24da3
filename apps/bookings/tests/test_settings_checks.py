from __future__ import annotations

from apps.bookings.checks import check_booking_currency


def test_supported_currency_passes(settings):
    settings.BOOKING_CURRENCY = "EUR"

    assert check_booking_currency() == []


def test_unsupported_currency_is_reported_at_startup(settings):
    settings.BOOKING_CURRENCY = "GBP"

    errors = check_booking_currency()

    assert [error.id for error in errors] == ["bookings.E001"]
    assert "GBP" in errors[0].msg
