"""URL routing for cat profiles."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import CatViewSet

router = DefaultRouter()
router.register(r"", CatViewSet, basename="cat")

urlpatterns = [
    path("", include(router.urls)),
]
