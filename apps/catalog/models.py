"""Catalog models: rooms, care services and food items."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Room(models.Model):
    """A room cats stay in, priced per night."""

    class RoomType(models.TextChoices):
        STANDARD = "standard", _("Standard")
        DELUXE = "deluxe", _("Deluxe")
        PREMIUM = "premium", _("Premium")
        VIP = "vip", _("VIP")

    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    room_type = models.CharField(
        max_length=20,
        choices=RoomType.choices,
        default=RoomType.STANDARD,
    )
    capacity = models.PositiveSmallIntegerField(
        default=1,
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    price_per_day = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    size_sqm = models.DecimalField(max_digits=6, decimal_places=2, null=True, blank=True)
    amenities = models.JSONField(default=list, blank=True)
    is_available = models.BooleanField(
        default=True,
        help_text=_("Admin switch; independent of existing bookings."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.get_room_type_display()})"


class Service(models.Model):
    """Optional care service (grooming, vet check, play time...)."""

    class Category(models.TextChoices):
        GROOMING = "grooming", _("Grooming")
        HEALTH = "health", _("Health")
        PLAY = "play", _("Play")
        OTHER = "other", _("Other")

    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=20, choices=Category.choices, default=Category.OTHER)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    duration_minutes = models.PositiveIntegerField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Service")
        verbose_name_plural = _("Services")
        ordering = ["category", "name"]

    def __str__(self) -> str:
        return self.name


class Food(models.Model):
    """Food item served per portion."""

    class Category(models.TextChoices):
        DRY = "dry", _("Dry food")
        WET = "wet", _("Wet food")
        TREAT = "treat", _("Treat")
        SPECIAL = "special", _("Special diet")

    name = models.CharField(max_length=100)
    brand = models.CharField(max_length=100, blank=True)
    description = models.TextField(blank=True)
    category = models.CharField(max_length=20, choices=Category.choices, default=Category.DRY)
    price_per_serving = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    ingredients = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Food")
        verbose_name_plural = _("Foods")
        ordering = ["category", "name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.brand})" if self.brand else self.name
