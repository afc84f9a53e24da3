"""Unit of work used by every booking write."""

from shared.application.uow import DjangoUnitOfWork

from apps.bookings.exceptions import TransientBookingError


class BookingUnitOfWork(DjangoUnitOfWork):
    """
    Transaction boundary for the booking engine

    Lock timeouts, deadlocks and serialization failures surface as
    TransientBookingError, which callers may safely retry.
    """

    transient_error_class = TransientBookingError
