"""Session-backed memory of time-sheet selections.

A chart widget lives for a single request, so the last tap for each section is
stored in the session and replayed through `select_at` on the next render.
Replaying the tap (instead of storing the selected event) keeps `select_at`
the only way a selection is made. A tap recorded against a different event
list or domain is discarded.
"""

from __future__ import annotations

from typing import Any, Final

from django.http import HttpRequest

from analysis.timeline import Event
from core.charting.event_timeline import EventTimelineChart

SELECTION_SESSION_KEY: Final[str] = "charts_timesheet_taps"


def record_tap(request: HttpRequest, *, section: str, chart: EventTimelineChart, x: float, plot_width: float) -> None:
    """Remember a tap for a section, bound to the chart's current content."""

    taps: dict[str, Any] = dict(request.session.get(SELECTION_SESSION_KEY) or {})
    taps[section] = {"fingerprint": chart.fingerprint, "x": float(x), "plot_width": float(plot_width)}
    request.session[SELECTION_SESSION_KEY] = taps
    request.session.modified = True


def restore_selection(request: HttpRequest, *, section: str, chart: EventTimelineChart) -> Event | None:
    """Replay the remembered tap for a section onto a freshly built chart.

    Returns:
        The selected event, or None when nothing was remembered, the tap
        missed, or the chart content changed since the tap was recorded.
    """

    taps: dict[str, Any] = dict(request.session.get(SELECTION_SESSION_KEY) or {})
    tap = taps.get(section)
    if not isinstance(tap, dict):
        return None
    if tap.get("fingerprint") != chart.fingerprint:
        taps.pop(section, None)
        request.session[SELECTION_SESSION_KEY] = taps
        request.session.modified = True
        return None
    try:
        return chart.select_at(float(tap["x"]), float(tap["plot_width"]))
    except (KeyError, TypeError, ValueError):
        taps.pop(section, None)
        request.session[SELECTION_SESSION_KEY] = taps
        request.session.modified = True
        return None
