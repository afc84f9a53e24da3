"""Serializers for cat profiles."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Cat


class CatSerializer(serializers.ModelSerializer):
    owner_id = serializers.ReadOnlyField(source="owner.id")

    class Meta:
        model = Cat
        fields = [
            "id",
            "owner_id",
            "name",
            "breed",
            "age",
            "weight",
            "gender",
            "color",
            "medical_notes",
            "special_requirements",
            "vaccination_status",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "owner_id", "is_active", "created_at", "updated_at"]
