"""Admin registration for payments."""

from __future__ import annotations

from django.contrib import admin

from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ("id", "booking", "user", "method", "status", "amount", "paid_at", "created_at")
    list_filter = ("status", "method")
    search_fields = ("transaction_id", "user__email")
    readonly_fields = ("booking", "user", "amount", "currency", "paid_at", "refunded_at", "created_at", "updated_at")
