"""Serializers for the finance domain (payments)."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from .models import Payment


class PaymentSerializer(serializers.ModelSerializer):
    booking_id = serializers.ReadOnlyField(source="booking.id")
    booking_total = serializers.ReadOnlyField(source="booking.total_price")
    user_id = serializers.ReadOnlyField(source="user.id")

    class Meta:
        model = Payment
        fields = [
            "id",
            "booking_id",
            "booking_total",
            "user_id",
            "method",
            "status",
            "amount",
            "currency",
            "transaction_id",
            "paid_at",
            "refunded_at",
            "notes",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class PaymentCreateSerializer(serializers.Serializer):
    """Payment submitted for a pending booking."""

    booking_id = serializers.IntegerField(min_value=1)
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0.00"))
    payment_method = serializers.ChoiceField(choices=Payment.Method.choices)
    transaction_id = serializers.CharField(max_length=100, required=False, allow_blank=True, default="")
    notes = serializers.CharField(required=False, allow_blank=True, default="")


class PaymentStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Payment.Status.choices)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
