"""Unit tests for the gallery preview cache."""

from __future__ import annotations

import logging

import pytest

from core.charting.configs import CHART_TYPES, SINGLE_BAR_THRESHOLD, TIME_SHEET_BAR
from core.charting.gallery import render_chart_type
from core.charting.previews import PreviewCache
from core.charting.schema import ChartCategory, ChartTypeSpec

pytestmark = pytest.mark.unit


def test_populate_renders_every_chart_type_once(caplog: pytest.LogCaptureFixture) -> None:
    """Previews are rendered on the first populate only."""

    cache = PreviewCache()
    assert not cache.populated

    with caplog.at_level(logging.INFO, logger="core.charting.previews"):
        assert cache.populate(CHART_TYPES, height=100) == 2
    assert "Rendered 2 gallery previews" in caplog.text

    first = cache.get(TIME_SHEET_BAR)
    assert cache.populate(CHART_TYPES[:1], height=50) == 2
    assert cache.get(TIME_SHEET_BAR) is first
    assert cache.populated


def test_previews_hide_axes() -> None:
    """Overview renders disable axes and tooltips."""

    cache = PreviewCache()
    cache.populate(CHART_TYPES, height=100)
    preview = cache.get(SINGLE_BAR_THRESHOLD)

    assert preview is not None
    assert preview.height == 100
    assert preview.payload["options"]["scales"]["x"]["display"] is False
    assert preview.payload["options"]["plugins"]["tooltip"]["enabled"] is False
    assert cache.get("missing") is None


def test_as_mapping_is_read_only() -> None:
    """Callers cannot mutate the shared cache."""

    cache = PreviewCache()
    cache.populate(CHART_TYPES, height=100)
    mapping = cache.as_mapping()
    assert set(mapping) == {TIME_SHEET_BAR, SINGLE_BAR_THRESHOLD}
    with pytest.raises(TypeError):
        mapping["other"] = mapping[TIME_SHEET_BAR]  # type: ignore[index]


def test_render_chart_type_rejects_unknown_ids() -> None:
    """Chart types without a renderer raise KeyError."""

    spec = ChartTypeSpec(id="scatter", title="Scatter", category=ChartCategory.point)
    with pytest.raises(KeyError, match="scatter"):
        render_chart_type(spec, height=100)
