"""App configuration for the core Django app."""

from __future__ import annotations

from django.apps import AppConfig
from django.conf import settings


class CoreConfig(AppConfig):
    """Configuration for the `core` app."""

    name = "core"

    def ready(self) -> None:
        """Render the gallery previews once at startup."""

        from core.charting.configs import CHART_TYPES
        from core.charting.previews import PREVIEWS

        PREVIEWS.populate(CHART_TYPES, height=settings.CHARTS_PREVIEW_HEIGHT)
