"""Template context processors for the charts gallery."""

from __future__ import annotations

from django.http import HttpRequest

from core.charting.configs import CHART_TYPES
from core.charting.schema import ChartTypeSpec


def gallery_navigation(request: HttpRequest) -> dict[str, tuple[ChartTypeSpec, ...]]:
    """Expose the chart catalog to all templates (for the navigation list).

    Args:
        request: Current request object.

    Returns:
        Context dict with `nav_chart_types`.
    """

    return {"nav_chart_types": CHART_TYPES}
