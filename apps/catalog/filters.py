"""FilterSet definitions for catalog listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Food, Room, Service


class RoomFilterSet(django_filters.FilterSet):
    room_type = django_filters.ChoiceFilter(choices=Room.RoomType.choices)
    min_capacity = django_filters.NumberFilter(field_name="capacity", lookup_expr="gte")
    price_min = django_filters.NumberFilter(field_name="price_per_day", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="price_per_day", lookup_expr="lte")
    available_only = django_filters.BooleanFilter(method="filter_available_only")

    class Meta:
        model = Room
        fields = ["room_type", "min_capacity", "price_min", "price_max", "available_only"]

    def filter_available_only(self, queryset, name, value):  # type: ignore
        if value:
            return queryset.filter(is_available=True)
        return queryset


class ServiceFilterSet(django_filters.FilterSet):
    category = django_filters.ChoiceFilter(choices=Service.Category.choices)
    price_max = django_filters.NumberFilter(field_name="price", lookup_expr="lte")

    class Meta:
        model = Service
        fields = ["category", "price_max"]


class FoodFilterSet(django_filters.FilterSet):
    category = django_filters.ChoiceFilter(choices=Food.Category.choices)
    brand = django_filters.CharFilter(field_name="brand", lookup_expr="icontains")

    class Meta:
        model = Food
        fields = ["category", "brand"]
