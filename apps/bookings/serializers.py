"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from shared.domain.value_objects import Actor

from .application.command_handlers import CreateBookingCommand
from .models import Booking, BookingFoodLine, BookingServiceLine
from .pricing import FoodRequest, ServiceRequest


class ServiceRequestSerializer(serializers.Serializer):
    service_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, default=1)
    service_date = serializers.DateField(required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class FoodRequestSerializer(serializers.Serializer):
    food_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, default=1)
    feeding_date = serializers.DateField(required=False, allow_null=True)
    meal_time = serializers.ChoiceField(
        choices=BookingFoodLine.MealTime.choices,
        default=BookingFoodLine.MealTime.BREAKFAST,
    )
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class BookingCreateSerializer(serializers.Serializer):
    """Booking request from a customer (or an admin on their behalf)."""

    cat_id = serializers.IntegerField(min_value=1)
    room_id = serializers.IntegerField(min_value=1)
    check_in_date = serializers.DateField()
    check_out_date = serializers.DateField()
    services = ServiceRequestSerializer(many=True, required=False, default=list)
    foods = FoodRequestSerializer(many=True, required=False, default=list)
    special_requests = serializers.CharField(required=False, allow_blank=True, default="")

    def to_command(self, actor: Actor) -> CreateBookingCommand:
        data = self.validated_data
        return CreateBookingCommand(
            actor=actor,
            cat_id=data["cat_id"],
            room_id=data["room_id"],
            check_in=data["check_in_date"],
            check_out=data["check_out_date"],
            service_requests=[ServiceRequest(**line) for line in data.get("services", [])],
            food_requests=[FoodRequest(**line) for line in data.get("foods", [])],
            special_requests=data.get("special_requests", ""),
        )


class BookingTransitionSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Booking.Status.choices)
    reason = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)


class BookingCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)


class BookingServiceLineSerializer(serializers.ModelSerializer):
    service_name = serializers.ReadOnlyField(source="service.name")

    class Meta:
        model = BookingServiceLine
        fields = [
            "id",
            "service_id",
            "service_name",
            "quantity",
            "unit_price",
            "price",
            "service_date",
            "notes",
        ]
        read_only_fields = fields


class BookingFoodLineSerializer(serializers.ModelSerializer):
    food_name = serializers.ReadOnlyField(source="food.name")

    class Meta:
        model = BookingFoodLine
        fields = [
            "id",
            "food_id",
            "food_name",
            "quantity",
            "unit_price",
            "price",
            "feeding_date",
            "meal_time",
            "notes",
        ]
        read_only_fields = fields


class BookingSerializer(serializers.ModelSerializer):
    """Persisted booking record with its priced lines."""

    user_id = serializers.ReadOnlyField(source="user.id")
    cat_id = serializers.ReadOnlyField(source="cat.id")
    room_id = serializers.ReadOnlyField(source="room.id")
    cat_name = serializers.ReadOnlyField(source="cat.name")
    room_name = serializers.ReadOnlyField(source="room.name")
    services = BookingServiceLineSerializer(source="service_lines", many=True, read_only=True)
    foods = BookingFoodLineSerializer(source="food_lines", many=True, read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "user_id",
            "cat_id",
            "cat_name",
            "room_id",
            "room_name",
            "check_in_date",
            "check_out_date",
            "total_days",
            "room_price",
            "services_price",
            "food_price",
            "total_price",
            "status",
            "special_requests",
            "cancelled_at",
            "cancellation_reason",
            "created_at",
            "updated_at",
            "services",
            "foods",
        ]
        read_only_fields = fields
