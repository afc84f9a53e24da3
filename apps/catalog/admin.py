"""Admin registrations for the catalog."""

from __future__ import annotations

from django.contrib import admin

from .models import Food, Room, Service


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("name", "room_type", "capacity", "price_per_day", "is_available", "updated_at")
    list_filter = ("room_type", "is_available")
    list_editable = ("is_available",)
    search_fields = ("name", "description")
    readonly_fields = ("created_at", "updated_at")


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "price", "duration_minutes", "is_active")
    list_filter = ("category", "is_active")
    search_fields = ("name",)
    readonly_fields = ("created_at", "updated_at")


@admin.register(Food)
class FoodAdmin(admin.ModelAdmin):
    list_display = ("name", "brand", "category", "price_per_serving", "is_active")
    list_filter = ("category", "is_active")
    search_fields = ("name", "brand")
    readonly_fields = ("created_at", "updated_at")
