"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking, BookingFoodLine, BookingServiceLine


class BookingServiceLineInline(admin.TabularInline):
    model = BookingServiceLine
    extra = 0
    can_delete = False
    fields = ("service", "quantity", "unit_price", "price", "service_date", "notes")
    readonly_fields = ("service", "quantity", "unit_price", "price")

    def has_add_permission(self, request, obj=None):  # type: ignore
        return False


class BookingFoodLineInline(admin.TabularInline):
    model = BookingFoodLine
    extra = 0
    can_delete = False
    fields = ("food", "quantity", "unit_price", "price", "feeding_date", "meal_time", "notes")
    readonly_fields = ("food", "quantity", "unit_price", "price")

    def has_add_permission(self, request, obj=None):  # type: ignore
        return False


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    """Staff view of the ledger.

    Status, dates and prices are read-only here: they change only through
    the booking API so that conflicts are re-checked under the room lock.
    """

    list_display = (
        "id",
        "room",
        "cat",
        "user",
        "status",
        "check_in_date",
        "check_out_date",
        "total_price",
        "created_at",
    )
    list_filter = ("status", "room__room_type", "check_in_date", "check_out_date")
    search_fields = ("cat__name", "room__name", "user__email")
    inlines = [BookingServiceLineInline, BookingFoodLineInline]
    readonly_fields = (
        "user",
        "cat",
        "room",
        "check_in_date",
        "check_out_date",
        "total_days",
        "room_price",
        "services_price",
        "food_price",
        "total_price",
        "status",
        "cancelled_at",
        "cancellation_reason",
        "created_at",
        "updated_at",
    )

    def has_add_permission(self, request):  # type: ignore
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore
        return False
