"""Schema types for the gallery's chart catalog.

The gallery is driven by `ChartTypeSpec` entries rather than bespoke view
logic: the index page, the preview cache, and the detail routing all iterate
the same catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ChartCategory(StrEnum):
    """Gallery grouping for chart types.

    `all` is a filter value only; no chart type is registered under it.
    """

    all = "all"
    apple = "apple"
    line = "line"
    bar = "bar"
    area = "area"
    range = "range"
    heat_map = "heat_map"
    point = "point"

    @property
    def label(self) -> str:
        """Human-readable section header."""

        return self.value.replace("_", " ").capitalize()


@dataclass(frozen=True, slots=True)
class ChartTypeSpec:
    """A chart type listed in the gallery.

    Args:
        id: Stable, unique slug used in URLs and as the preview cache key.
        title: Title displayed in the list and the detail page.
        category: Gallery section the chart belongs to.
        description: Optional one-line description shown under the title.
        order: Sort key within the category.
    """

    id: str
    title: str
    category: ChartCategory
    description: str | None = None
    order: int = 999
