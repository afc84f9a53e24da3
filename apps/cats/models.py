"""Cat profiles owned by customers."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Cat(models.Model):
    """A cat that can be booked into a room."""

    class Gender(models.TextChoices):
        MALE = "male", _("Male")
        FEMALE = "female", _("Female")

    class VaccinationStatus(models.TextChoices):
        NONE = "none", _("Not vaccinated")
        PARTIAL = "partial", _("Partially vaccinated")
        COMPLETE = "complete", _("Fully vaccinated")

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="cats",
    )
    name = models.CharField(max_length=100)
    breed = models.CharField(max_length=100, blank=True)
    age = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MaxValueValidator(30)],
    )
    weight = models.DecimalField(
        max_digits=4,
        decimal_places=1,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal("0.1")), MaxValueValidator(Decimal("20.0"))],
    )
    gender = models.CharField(max_length=10, choices=Gender.choices)
    color = models.CharField(max_length=50, blank=True)
    medical_notes = models.TextField(blank=True)
    special_requirements = models.TextField(blank=True)
    vaccination_status = models.CharField(
        max_length=20,
        choices=VaccinationStatus.choices,
        default=VaccinationStatus.NONE,
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Cat")
        verbose_name_plural = _("Cats")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["owner", "is_active"], name="cats_cat_owner_active_idx"),
        ]

    def __str__(self) -> str:
        return self.name

    def deactivate(self) -> None:
        if self.is_active:
            self.is_active = False
            self.save(update_fields=["is_active", "updated_at"])
