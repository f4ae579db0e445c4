"""Built-in chart types listed by the gallery."""

from __future__ import annotations

from typing import Final

from .schema import ChartCategory, ChartTypeSpec
from .validator import validate_chart_types

TIME_SHEET_BAR: Final[str] = "time-sheet-bar"
SINGLE_BAR_THRESHOLD: Final[str] = "single-bar-threshold"


CHART_TYPES: Final[tuple[ChartTypeSpec, ...]] = (
    ChartTypeSpec(
        id=SINGLE_BAR_THRESHOLD,
        title="Single Bar with Threshold Rule Mark",
        category=ChartCategory.bar,
        description="Daily sales colored by whether they clear an adjustable threshold.",
        order=1,
    ),
    ChartTypeSpec(
        id=TIME_SHEET_BAR,
        title="Time Sheet Bar",
        category=ChartCategory.bar,
        description="Clock-in/clock-out intervals per department; tap a bar for details.",
        order=2,
    ),
)

validate_chart_types(CHART_TYPES)

CHART_TYPE_BY_ID: Final[dict[str, ChartTypeSpec]] = {spec.id: spec for spec in CHART_TYPES}


def displayed_categories(filter_category: ChartCategory = ChartCategory.all) -> tuple[ChartCategory, ...]:
    """Return the categories to show for a filter selection.

    `all` expands to every concrete category; any other value shows only
    itself. Categories without registered chart types are omitted.
    """

    if filter_category is ChartCategory.all:
        candidates = [category for category in ChartCategory if category is not ChartCategory.all]
    else:
        candidates = [filter_category]
    return tuple(category for category in candidates if chart_types_in(category))


def chart_types_in(category: ChartCategory) -> tuple[ChartTypeSpec, ...]:
    """Return the chart types in a category, ordered for display."""

    return tuple(sorted((spec for spec in CHART_TYPES if spec.category is category), key=lambda s: (s.order, s.id)))
