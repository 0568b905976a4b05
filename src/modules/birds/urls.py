"""Bird URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.birds.views import BirdViewSet

router = DefaultRouter(trailing_slash=True)
router.register("birds", BirdViewSet, basename="bird")

urlpatterns = router.urls
