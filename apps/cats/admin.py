"""Admin registration for cats."""

from __future__ import annotations

from django.contrib import admin

from .models import Cat


@admin.register(Cat)
class CatAdmin(admin.ModelAdmin):
    list_display = ("name", "owner", "breed", "gender", "vaccination_status", "is_active")
    list_filter = ("gender", "vaccination_status", "is_active")
    search_fields = ("name", "breed", "owner__email")
    readonly_fields = ("created_at", "updated_at")
