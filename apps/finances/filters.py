"""FilterSet for payment listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Payment


class PaymentFilterSet(django_filters.FilterSet):
    booking = django_filters.NumberFilter(field_name="booking_id")
    user = django_filters.NumberFilter(field_name="booking__user_id")
    status = django_filters.ChoiceFilter(choices=Payment.Status.choices)
    method = django_filters.ChoiceFilter(choices=Payment.Method.choices)

    class Meta:
        model = Payment
        fields = ["booking", "user", "status", "method"]
