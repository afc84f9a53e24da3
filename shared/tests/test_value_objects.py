"""Value objects need no database."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from shared.domain.value_objects import Actor, DateRange, Money


class TestMoney:
    def test_rejects_floats(self):
        with pytest.raises(TypeError):
            Money(10.5)  # type: ignore[arg-type]

    def test_rejects_negative_amounts(self):
        with pytest.raises(ValueError):
            Money(Decimal("-1.00"))

    def test_addition_keeps_currency(self):
        assert Money(Decimal("1.10")) + Money(Decimal("2.20")) == Money(Decimal("3.30"))

    def test_addition_across_currencies_fails(self):
        with pytest.raises(ValueError):
            Money(Decimal("1.00")) + Money(Decimal("1.00"), "EUR")

    def test_quantize_rounds_half_up(self):
        assert Money(Decimal("2.345")).quantize().amount == Decimal("2.35")

    def test_multiplication_by_bool_is_refused(self):
        with pytest.raises(TypeError):
            Money(Decimal("1.00")) * True

    def test_is_close_to(self):
        assert Money(Decimal("85.00")).is_close_to(Money(Decimal("84.99")))
        assert not Money(Decimal("85.00")).is_close_to(Money(Decimal("84.98")))


class TestDateRange:
    def test_needs_at_least_one_night(self):
        with pytest.raises(ValueError):
            DateRange(date(2030, 1, 5), date(2030, 1, 5))

    def test_nights(self):
        assert DateRange(date(2030, 1, 1), date(2030, 1, 4)).nights == 3

    def test_end_date_is_exclusive(self):
        stay = DateRange(date(2030, 1, 1), date(2030, 1, 4))

        assert stay.contains(date(2030, 1, 3))
        assert not stay.contains(date(2030, 1, 4))

    @pytest.mark.parametrize(
        "start, end, expected",
        [
            (date(2030, 1, 3), date(2030, 1, 7), True),
            (date(2030, 1, 5), date(2030, 1, 9), False),
            (date(2029, 12, 28), date(2030, 1, 1), False),
            (date(2029, 12, 28), date(2030, 1, 9), True),
        ],
    )
    def test_overlaps_with(self, start, end, expected):
        stay = DateRange(date(2030, 1, 1), date(2030, 1, 5))

        assert stay.overlaps_with(DateRange(start, end)) is expected


class TestActor:
    def test_system_actor_acts_as_admin(self):
        assert Actor.system().is_admin
        assert Actor.system().user_id is None

    def test_customer_is_not_admin(self):
        assert not Actor(user_id=3, role=Actor.CUSTOMER).is_admin
