"""
Query Specifications

Declarative, typed description of a filter: an ordered list of
(lookup, value) predicates rendered into a Django ``Q`` object.
Queries are assembled by appending predicates instead of building
SQL strings, so every value travels as a bound parameter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from django.db.models import Q, QuerySet  # type: ignore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Predicate:
    """Single ``field__lookup = value`` condition."""

    lookup: str
    value: Any
    negated: bool = False

    def to_q(self) -> Q:
        condition = Q(**{self.lookup: self.value})
        return ~condition if self.negated else condition


@dataclass
class QuerySpec:
    """
    Ordered conjunction of predicates

    Usage:
        spec = (
            QuerySpec()
            .where("room_id", room_id)
            .where("check_in_date__lt", check_out)
            .exclude("pk", booking_id)
        )
        spec.apply(Booking.objects.all())
    """

    predicates: list[Predicate] = field(default_factory=list)

    def where(self, lookup: str, value: Any) -> "QuerySpec":
        self.predicates.append(Predicate(lookup, value))
        return self

    def where_if(self, lookup: str, value: Any) -> "QuerySpec":
        """Add the predicate only when a value was supplied."""
        if value is not None and value != "":
            self.where(lookup, value)
        return self

    def exclude(self, lookup: str, value: Any) -> "QuerySpec":
        self.predicates.append(Predicate(lookup, value, negated=True))
        return self

    def to_q(self) -> Q:
        combined = Q()
        for predicate in self.predicates:
            combined &= predicate.to_q()
        return combined

    def apply(self, queryset: QuerySet) -> QuerySet:
        logger.debug("Applying query spec with %d predicate(s)", len(self.predicates))
        return queryset.filter(self.to_q())

    def __len__(self) -> int:
        return len(self.predicates)
