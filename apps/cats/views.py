"""API views for cat profiles."""

from __future__ import annotations

from rest_framework import permissions, viewsets  # type: ignore

from apps.users.permissions import is_admin_user

from .models import Cat
from .serializers import CatSerializer


class CatViewSet(viewsets.ModelViewSet):
    """Customers manage their own cats; admins see every cat."""

    serializer_class = CatSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):  # type: ignore
        qs = Cat.objects.select_related("owner").filter(is_active=True)
        user = self.request.user
        if is_admin_user(user):
            return qs
        return qs.filter(owner=user)

    def perform_create(self, serializer):  # type: ignore
        serializer.save(owner=self.request.user)

    def perform_destroy(self, instance: Cat):  # type: ignore
        # Bookings keep pointing at the cat, so it is only deactivated
        instance.deactivate()
