"""URL routing for the catalog domain."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import FoodViewSet, RoomViewSet, ServiceViewSet

router = DefaultRouter()
router.register(r"rooms", RoomViewSet, basename="room")
router.register(r"services", ServiceViewSet, basename="service")
router.register(r"foods", FoodViewSet, basename="food")

urlpatterns = [
    path("", include(router.urls)),
]
