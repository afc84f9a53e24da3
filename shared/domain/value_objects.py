"""
Common Value Objects

Value objects used across the booking engine:
- Money: Monetary amount with currency, decimal-only arithmetic
- DateRange: Half-open range of calendar dates (check-in to check-out)
- Actor: Caller identity handed over by the authentication layer
"""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from shared.domain.base import ValueObject

CENT = Decimal('0.01')
SUPPORTED_CURRENCIES = ('USD', 'VND', 'EUR')


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object

    Represents a monetary amount with currency.
    Amounts are always Decimal; floats are rejected so cent-level
    drift can never creep into a booking total.
    """
    amount: Decimal
    currency: str = 'USD'

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            raise TypeError("Money amount must be a Decimal")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")
        if self.currency not in SUPPORTED_CURRENCIES:
            raise ValueError(f"Unsupported currency: {self.currency}")

    @classmethod
    def zero(cls, currency: str = 'USD') -> 'Money':
        return cls(Decimal('0.00'), currency)

    def quantize(self) -> 'Money':
        """Round to whole cents"""
        return Money(self.amount.quantize(CENT, rounding=ROUND_HALF_UP), self.currency)

    def __add__(self, other: 'Money') -> 'Money':
        """Add two money objects"""
        if not isinstance(other, Money):
            raise TypeError("Can only add Money to Money")
        if self.currency != other.currency:
            raise ValueError(f"Cannot add different currencies: {self.currency} and {other.currency}")
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor) -> 'Money':
        """Multiply money by an integer or Decimal factor"""
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError("Can only multiply Money by int or Decimal")
        return Money(self.amount * factor, self.currency)

    def is_close_to(self, other: 'Money', tolerance: Decimal = CENT) -> bool:
        """True when both amounts differ by at most ``tolerance``"""
        if self.currency != other.currency:
            return False
        return abs(self.amount - other.amount) <= tolerance

    def __str__(self):
        return f"{self.amount:,.2f} {self.currency}"

    def __repr__(self):
        return f"Money({self.amount}, '{self.currency}')"


@dataclass(frozen=True)
class DateRange(ValueObject):
    """
    Date range value object

    Represents a range from start_date (inclusive) to end_date (exclusive),
    i.e. the nights a cat spends in a room.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date >= self.end_date:
            raise ValueError(f"Start date ({self.start_date}) must be before end date ({self.end_date})")

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        End dates are exclusive, so a stay that starts on the day another
        one ends does not overlap.

        Examples:
            - DateRange(1, 5) overlaps with DateRange(3, 7) -> True
            - DateRange(1, 5) overlaps with DateRange(5, 10) -> False (adjacent)
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        return (self.start_date < other.end_date and
                other.start_date < self.end_date)

    def contains(self, check_date: date) -> bool:
        """start_date is inclusive, end_date is exclusive"""
        return self.start_date <= check_date < self.end_date

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def __len__(self) -> int:
        return self.nights

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"


@dataclass(frozen=True)
class Actor(ValueObject):
    """
    Identity of the caller

    Supplied by the authentication layer and trusted as-is; the booking
    engine never re-verifies credentials.
    """
    user_id: int | None
    role: str

    ADMIN = 'admin'
    CUSTOMER = 'customer'
    SYSTEM = 'system'

    @property
    def is_admin(self) -> bool:
        return self.role in (self.ADMIN, self.SYSTEM)

    @classmethod
    def from_user(cls, user) -> 'Actor':
        if getattr(user, 'is_staff', False) or getattr(user, 'is_superuser', False):
            return cls(user_id=user.pk, role=cls.ADMIN)
        return cls(user_id=user.pk, role=getattr(user, 'role', cls.CUSTOMER))

    @classmethod
    def system(cls) -> 'Actor':
        return cls(user_id=None, role=cls.SYSTEM)
