"""Serialization of Drawings into Chart.js payloads.

Layout is computed in Python; the browser script only hands these payloads to
Chart.js and positions the overlay callouts it is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypedDict

from analysis.timeline import TimeDomain

from .marks import Annotation, BarMark, Drawing, RuleMark


class ChartDataset(TypedDict, total=False):
    """A Chart.js dataset payload."""

    type: str
    label: str
    data: list[Any]
    backgroundColor: str | list[str]
    borderColor: str
    borderWidth: int | float
    borderRadius: int
    borderSkipped: bool
    borderDash: list[float]
    minBarLength: float
    pointRadius: int


class ChartData(TypedDict):
    """Labels plus datasets."""

    labels: list[str]
    datasets: list[ChartDataset]


class ChartPayload(TypedDict):
    """The full `new Chart(ctx, payload)` argument."""

    type: str
    data: ChartData
    options: dict[str, Any]


@dataclass(frozen=True, slots=True)
class RenderedChart:
    """A chart ready for the template.

    Attributes:
        chart_id: Gallery chart type id.
        payload: Chart.js payload.
        overlays: JSON-ready overlay commands (rules and annotations).
        height: Frame height in pixels.
        plot_width: Plot width the overlay geometry was computed for (0 when
            the chart has no pixel-anchored overlays).
        title: Optional header above the chart.
    """

    chart_id: str
    payload: ChartPayload
    overlays: tuple[dict[str, Any], ...]
    height: int
    plot_width: float = 0.0
    title: str | None = None


def timeline_payload(drawing: Drawing, *, domain: TimeDomain) -> ChartPayload:
    """Serialize an interval-bar Drawing (one floating bar per event)."""

    dataset: ChartDataset = {
        "label": "Events",
        "data": [{"x": [_epoch_ms(bar.value_start), _epoch_ms(bar.value_end)], "y": bar.lane_label} for bar in drawing.bars],
        "backgroundColor": [bar.color for bar in drawing.bars],
        "borderRadius": max((bar.corner_radius for bar in drawing.bars), default=0),
        "borderSkipped": False,
        "minBarLength": 1,
    }
    return {
        "type": "bar",
        "data": {"labels": list(drawing.lanes), "datasets": [dataset]},
        "options": {
            **_base_options(drawing),
            "indexAxis": "y",
            "scales": {
                "x": {
                    "type": "time",
                    "adapters": {"date": {"zone": "UTC"}},
                    "min": _epoch_ms(domain.start),
                    "max": _epoch_ms(domain.end),
                    "display": drawing.show_axes,
                },
                "y": {"display": drawing.show_axes},
            },
        },
    }


def column_payload(drawing: Drawing, *, rule: RuleMark | None = None) -> ChartPayload:
    """Serialize a column Drawing, optionally with a horizontal rule as a line dataset."""

    datasets: list[ChartDataset] = [
        {
            "type": "bar",
            "label": "Sales",
            "data": [_number(bar.value_end) for bar in drawing.bars],
            "backgroundColor": [bar.color for bar in drawing.bars],
        }
    ]
    if rule is not None:
        datasets.append(
            {
                "type": "line",
                "label": "Threshold",
                "data": [_number(rule.value)] * len(drawing.bars),
                "borderColor": rule.color,
                "borderWidth": rule.line_width,
                "borderDash": list(rule.dash),
                "pointRadius": 0,
            }
        )
    return {
        "type": "bar",
        "data": {"labels": list(drawing.lanes), "datasets": datasets},
        "options": {
            **_base_options(drawing),
            "scales": {
                "x": {"display": drawing.show_axes},
                "y": {"display": drawing.show_axes, "beginAtZero": True},
            },
        },
    }


def overlay_payload(overlays: tuple[RuleMark | Annotation, ...]) -> tuple[dict[str, Any], ...]:
    """Serialize overlay commands for the browser script."""

    out: list[dict[str, Any]] = []
    for overlay in overlays:
        if isinstance(overlay, RuleMark):
            out.append(
                {
                    "kind": "rule",
                    "orientation": overlay.orientation,
                    "value": _jsonable_value(overlay.value),
                    "position": round(overlay.position, 3),
                    "color": overlay.color,
                    "lineWidth": overlay.line_width,
                    "dash": list(overlay.dash),
                }
            )
        else:
            out.append(
                {
                    "kind": "annotation",
                    "anchor": round(overlay.anchor, 3),
                    "position": overlay.position,
                    "alignment": overlay.alignment,
                    "lines": [{"text": line.text, "style": line.style} for line in overlay.lines],
                    "accessibilityLabel": overlay.accessibility_label,
                }
            )
    return tuple(out)


def bar_accessibility(bars: tuple[BarMark, ...]) -> list[dict[str, str]]:
    """Return per-bar accessibility label/value pairs."""

    return [{"label": bar.accessibility_label, "value": bar.accessibility_value} for bar in bars]


def _base_options(drawing: Drawing) -> dict[str, Any]:
    return {
        "responsive": True,
        "maintainAspectRatio": False,
        "animation": False,
        "plugins": {"legend": {"display": False}, "tooltip": {"enabled": drawing.show_axes}},
    }


def _epoch_ms(value: datetime | float) -> int:
    if not isinstance(value, datetime):
        raise TypeError(f"Expected a datetime, got {type(value).__name__}.")
    return int(value.timestamp() * 1000)


def _number(value: datetime | float) -> float:
    if isinstance(value, datetime):
        raise TypeError("Expected a numeric value, got a datetime.")
    return float(value)


def _jsonable_value(value: datetime | float) -> str | float:
    if isinstance(value, datetime):
        return value.isoformat()
    return float(value)
