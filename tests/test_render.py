"""Unit tests for Chart.js payload serialization."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from analysis.sales import ThresholdSettings
from analysis.timeline import Event, TimeDomain
from core.charting.event_timeline import EventTimelineChart
from core.charting.gallery import render_threshold, render_time_sheet, section_heading, time_sheet_charts
from core.charting.render import bar_accessibility, overlay_payload, timeline_payload

pytestmark = pytest.mark.unit


def _ms(hour: int) -> int:
    return int(datetime(2022, 6, 13, hour, 0, tzinfo=UTC).timestamp() * 1000)


def test_timeline_payload_uses_floating_bars(bread: Event, butchery: Event, opening_hours: TimeDomain) -> None:
    """Each event becomes an [start, end] bar in its lane on a time axis."""

    chart = EventTimelineChart([bread, butchery], domain=opening_hours)
    payload = timeline_payload(chart.render(340.0), domain=opening_hours)

    assert payload["type"] == "bar"
    assert payload["options"]["indexAxis"] == "y"
    assert payload["data"]["labels"] == ["Bread", "Butchery"]
    dataset = payload["data"]["datasets"][0]
    assert dataset["data"][0] == {"x": [_ms(8), _ms(14)], "y": "Bread"}
    assert dataset["backgroundColor"] == ["#FFCC00", "#FF3B30"]
    x_scale = payload["options"]["scales"]["x"]
    assert (x_scale["type"], x_scale["min"], x_scale["max"]) == ("time", _ms(5), _ms(22))
    assert x_scale["adapters"] == {"date": {"zone": "UTC"}}
    assert dataset["minBarLength"] == 1


def test_overlay_payload_serializes_rule_and_annotation(
    bread: Event, butchery: Event, opening_hours: TimeDomain
) -> None:
    """Overlays become plain dicts tagged by kind."""

    chart = EventTimelineChart([bread, butchery], domain=opening_hours)
    chart.select_at(100.0, 340.0)
    rule, annotation = overlay_payload(chart.render_overlay(340.0))

    assert rule["kind"] == "rule"
    assert rule["position"] == pytest.approx(120.0)
    assert rule["value"] == "2022-06-13T11:00:00+00:00"
    assert annotation["kind"] == "annotation"
    assert annotation["lines"][-1] == {"text": "Duration: 6h 00m", "style": "body_bold"}


def test_threshold_payload_adds_a_rule_line() -> None:
    """The threshold is drawn as a flat line dataset over the bars."""

    rendered = render_threshold(ThresholdSettings(threshold=120), height=300)
    bars, line = rendered.payload["data"]["datasets"]

    assert len(bars["data"]) == 30
    assert line["type"] == "line"
    assert set(line["data"]) == {120.0}
    assert rendered.overlays[1]["lines"][0]["text"] == "120"


def test_render_time_sheet_carries_header_and_geometry() -> None:
    """Time-sheet renders keep their total header and the layout width."""

    rendered = render_time_sheet(time_sheet_charts()["day"], height=300, plot_width=500.0)
    assert rendered.title == "Day total: 28h 30m"
    assert rendered.plot_width == 500.0
    assert rendered.overlays == ()


def test_section_headings() -> None:
    """Day sections show the weekday and date; week sections the ISO week."""

    charts = time_sheet_charts()
    assert section_heading("day", charts["day"]) == "Monday Jun 13, 2022"
    assert section_heading("week", charts["week"]) == "Week 24 - 2022"
    assert charts["week"].header_title == "Week total: 57h 30m"


def test_time_sheet_charts_are_independent() -> None:
    """Selecting in one section leaves the other untouched."""

    charts = time_sheet_charts()
    charts["day"].select_at(100.0, 340.0)
    assert charts["day"].selected_event is not None
    assert charts["week"].selected_event is None


def test_bar_accessibility_pairs(bread: Event, opening_hours: TimeDomain) -> None:
    """Label/value pairs come straight from the bar marks."""

    drawing = EventTimelineChart([bread], domain=opening_hours).render(340.0)
    assert bar_accessibility(drawing.bars) == [
        {"label": "Department: Bread", "value": "Clock in: Jun 13, 2022 at 8:00 AM, Clock out: Jun 13, 2022 at 2:00 PM"}
    ]
