"""Booking ledger models for the cat hotel."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import DateRange


class Booking(models.Model):
    """A reservation of one room for one cat over a half-open date range.

    Rows are created only by the booking orchestrator and change only
    through ledger status transitions. Cancelling is a status, the row
    itself is never deleted.
    """

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        CONFIRMED = "confirmed", _("Confirmed")
        CHECKED_IN = "checked_in", _("Checked in")
        CHECKED_OUT = "checked_out", _("Checked out")
        CANCELLED = "cancelled", _("Cancelled")

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    cat = models.ForeignKey(
        "cats.Cat",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    room = models.ForeignKey(
        "catalog.Room",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    check_in_date = models.DateField()
    check_out_date = models.DateField(help_text=_("Exclusive: the cat leaves on this day."))
    total_days = models.PositiveIntegerField()
    room_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    services_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    food_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    total_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    special_requests = models.TextField(blank=True)
    notes = models.TextField(blank=True, help_text=_("Internal notes from staff."))
    cancelled_at = models.DateTimeField(null=True, blank=True)
    cancellation_reason = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out_date__gt=models.F("check_in_date")),
                name="booking_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "check_in_date", "check_out_date"], name="booking_room_dates_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
            models.Index(fields=["user", "status"], name="booking_user_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} room={self.room_id} {self.check_in_date}..{self.check_out_date}"

    @property
    def dates(self) -> DateRange:
        return DateRange(self.check_in_date, self.check_out_date)

    @property
    def is_terminal(self) -> bool:
        return self.status in (self.Status.CHECKED_OUT, self.Status.CANCELLED)


class BookingServiceLine(models.Model):
    """Care service ordered with a booking; prices are a snapshot."""

    booking = models.ForeignKey(Booking, on_delete=models.CASCADE, related_name="service_lines")
    service = models.ForeignKey("catalog.Service", on_delete=models.PROTECT, related_name="booking_lines")
    quantity = models.PositiveSmallIntegerField(default=1, validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text=_("unit_price x quantity, captured when the booking was made."),
    )
    service_date = models.DateField()
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Booked service")
        verbose_name_plural = _("Booked services")
        ordering = ["service_date", "id"]
        constraints = [
            models.CheckConstraint(condition=models.Q(quantity__gte=1), name="booking_service_quantity_positive"),
        ]

    def __str__(self) -> str:
        return f"{self.service_id} x{self.quantity} for booking {self.booking_id}"


class BookingFoodLine(models.Model):
    """Food ordered with a booking; prices are a snapshot."""

    class MealTime(models.TextChoices):
        BREAKFAST = "breakfast", _("Breakfast")
        LUNCH = "lunch", _("Lunch")
        DINNER = "dinner", _("Dinner")
        SNACK = "snack", _("Snack")

    booking = models.ForeignKey(Booking, on_delete=models.CASCADE, related_name="food_lines")
    food = models.ForeignKey("catalog.Food", on_delete=models.PROTECT, related_name="booking_lines")
    quantity = models.PositiveSmallIntegerField(default=1, validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        help_text=_("unit_price x quantity, captured when the booking was made."),
    )
    feeding_date = models.DateField()
    meal_time = models.CharField(max_length=20, choices=MealTime.choices, default=MealTime.BREAKFAST)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Booked food")
        verbose_name_plural = _("Booked food")
        ordering = ["feeding_date", "meal_time", "id"]
        constraints = [
            models.CheckConstraint(condition=models.Q(quantity__gte=1), name="booking_food_quantity_positive"),
        ]

    def __str__(self) -> str:
        return f"{self.food_id} x{self.quantity} ({self.meal_time}) for booking {self.booking_id}"
