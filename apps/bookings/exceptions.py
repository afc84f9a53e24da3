"""Error taxonomy of the booking engine.

Every error carries a stable ``code`` for API clients and a
``retryable`` flag. Only transient errors are retryable; resubmitting
the identical request after one is safe because nothing was committed.
"""

from __future__ import annotations

from typing import Any, Iterable

from shared.application.uow import RetryableTransactionError


class BookingError(Exception):
    """Base class for all booking engine errors."""

    code = "booking_error"
    retryable = False

    def __init__(self, message: str = "", **extra: Any) -> None:
        super().__init__(message or self.__class__.__doc__ or self.code)
        self.message = message or str(self.args[0])
        self.extra = extra

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "detail": self.message}
        payload.update(self.extra)
        return payload


class BookingValidationError(BookingError):
    """Request data is invalid (bad date range, missing field)."""

    code = "validation_error"


class BookingNotFoundError(BookingError):
    """A referenced entity does not exist or is inactive."""

    code = "not_found"

    def __init__(self, entity: str, entity_id: Any, message: str = "") -> None:
        super().__init__(
            message or f"{entity.capitalize()} {entity_id} not found or inactive",
            entity=entity,
            entity_id=entity_id,
        )
        self.entity = entity
        self.entity_id = entity_id


class CatalogItemUnavailableError(BookingError):
    """One or more requested services or food items cannot be priced."""

    code = "catalog_item_unavailable"

    def __init__(self, missing: Iterable[tuple[str, Any]]) -> None:
        self.missing = list(missing)
        described = ", ".join(f"{kind} {item_id}" for kind, item_id in self.missing)
        super().__init__(
            f"Not found or inactive: {described}",
            items=[{"type": kind, "id": item_id} for kind, item_id in self.missing],
        )


class BookingPermissionError(BookingError):
    """The actor is not allowed to perform this operation."""

    code = "forbidden"


class BookingConflictError(BookingError):
    """The room is already taken for the requested dates."""

    code = "booking_conflict"


class InvalidTransitionError(BookingError):
    """Status change not allowed by the booking state machine."""

    code = "invalid_transition"

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            f"Cannot change status from {current} to {requested}",
            current_status=current,
            requested_status=requested,
        )
        self.current = current
        self.requested = requested


class TransientBookingError(BookingError, RetryableTransactionError):
    """The store could not serialize the request in time; retry it."""

    code = "transient_error"
    retryable = True
