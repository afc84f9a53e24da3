"""FilterSet for booking listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    """Filters used by the booking list for customers and admins.

    ``start_date``/``end_date`` select bookings whose stay touches the
    window; ``user`` is only honoured for admins (customers are already
    scoped to their own bookings by the viewset).
    """

    status = django_filters.ChoiceFilter(choices=Booking.Status.choices)
    room = django_filters.NumberFilter(field_name="room_id")
    cat = django_filters.NumberFilter(field_name="cat_id")
    user = django_filters.NumberFilter(field_name="user_id")
    start_date = django_filters.DateFilter(field_name="check_out_date", lookup_expr="gte")
    end_date = django_filters.DateFilter(field_name="check_in_date", lookup_expr="lte")

    class Meta:
        model = Booking
        fields = ["status", "room", "cat", "user", "start_date", "end_date"]
