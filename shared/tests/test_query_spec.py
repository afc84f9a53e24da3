from __future__ import annotations

from django.db.models import Q

from shared.infrastructure.query import Predicate, QuerySpec


def test_empty_spec_matches_everything():
    assert QuerySpec().to_q() == Q()


def test_predicates_are_combined_with_and():
    spec = QuerySpec().where("room_id", 4).where("status__in", ["confirmed"])

    assert len(spec) == 2
    assert spec.to_q() == Q(room_id=4) & Q(status__in=["confirmed"])


def test_exclude_negates_the_predicate():
    assert Predicate("pk", 9, negated=True).to_q() == ~Q(pk=9)


def test_where_if_skips_missing_values():
    spec = QuerySpec().where_if("room_type", None).where_if("brand", "").where_if("capacity__gte", 2)

    assert len(spec) == 1
    assert spec.predicates[0].lookup == "capacity__gte"
