"""Startup-populated cache of gallery preview charts.

Previews are rendered once when the app is ready and reused by every index
request. The cache is never invalidated; sample data only changes with a
deploy.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .gallery import render_preview
from .render import RenderedChart
from .schema import ChartTypeSpec

logger = logging.getLogger(__name__)


class PreviewCache:
    """Mapping of chart type id -> rendered overview chart."""

    def __init__(self) -> None:
        self._previews: dict[str, RenderedChart] = {}
        self._populated = False

    @property
    def populated(self) -> bool:
        return self._populated

    def populate(self, specs: Iterable[ChartTypeSpec], *, height: int) -> int:
        """Render previews for all chart types; subsequent calls are no-ops.

        Returns:
            Number of previews held by the cache.
        """

        if self._populated:
            return len(self._previews)
        for spec in specs:
            self._previews[spec.id] = render_preview(spec, height=height)
        self._populated = True
        logger.info("Rendered %d gallery previews at height=%dpx", len(self._previews), height)
        return len(self._previews)

    def get(self, chart_id: str) -> RenderedChart | None:
        return self._previews.get(chart_id)

    def as_mapping(self) -> Mapping[str, RenderedChart]:
        """Read-only view of the cached previews."""

        return MappingProxyType(self._previews)


PREVIEWS = PreviewCache()
