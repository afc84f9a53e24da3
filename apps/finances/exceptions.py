"""Payment errors, part of the booking error taxonomy."""

from __future__ import annotations

from decimal import Decimal

from apps.bookings.exceptions import BookingError


class PaymentError(BookingError):
    code = "payment_error"


class PaymentMismatchError(PaymentError):
    """Paid amount differs from the booking total by more than the tolerance."""

    code = "payment_amount_mismatch"

    def __init__(self, expected: Decimal, received: Decimal) -> None:
        super().__init__(
            "Payment amount does not match booking total",
            expected_amount=str(expected),
            received_amount=str(received),
        )


class PaymentAlreadyExistsError(PaymentError):
    """The booking already has a payment."""

    code = "payment_already_exists"

    def __init__(self, booking_id: int) -> None:
        super().__init__("Payment already exists for this booking", booking_id=booking_id)
