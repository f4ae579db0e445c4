"""Assembly of gallery charts from sample data.

Views call into this module to obtain ready-to-render charts; it wires the
sample data, the chart widgets, and the Chart.js serializers together.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final, Literal

from analysis.durations import format_abbreviated_date, total_duration
from analysis.sales import Sale, ThresholdSettings

from .configs import SINGLE_BAR_THRESHOLD, TIME_SHEET_BAR
from .event_timeline import EventTimelineChart
from .marks import RuleMark
from .render import RenderedChart, column_payload, overlay_payload, timeline_payload
from .sample_data import TimeSheetData, load_sales_data, load_timesheet_data
from .schema import ChartTypeSpec
from .threshold import render_single_bar_threshold

TimeSheetSectionName = Literal["day", "week"]

TIME_SHEET_SECTIONS: Final[tuple[TimeSheetSectionName, ...]] = ("day", "week")

# Geometry width used for server-side layout; the browser reports its real
# plot width with each tap.
DEFAULT_PLOT_WIDTH: Final[float] = 600.0


def time_sheet_charts(data: TimeSheetData | None = None) -> dict[TimeSheetSectionName, EventTimelineChart]:
    """Build the day and week time-sheet charts, each with its own selection state."""

    data = data or load_timesheet_data()
    return {
        "day": EventTimelineChart(
            data.last_day.events,
            domain=data.last_day.domain,
            header_title=f"Day total: {total_duration(data.last_day.events)}",
        ),
        "week": EventTimelineChart(
            data.last_week.events,
            domain=data.last_week.domain,
            header_title=f"Week total: {total_duration(data.last_week.events)}",
        ),
    }


def section_heading(section: TimeSheetSectionName, chart: EventTimelineChart) -> str:
    """Return the list-section heading for a time-sheet chart."""

    if section == "day":
        first = chart.events[0].start if chart.events else chart.domain.start
        return f"{first:%A} {format_abbreviated_date(first)}"
    year, week, _ = chart.domain.start.isocalendar()
    return f"Week {week} - {year}"


def render_time_sheet(
    chart: EventTimelineChart,
    *,
    height: int,
    show_axes: bool = True,
    plot_width: float = DEFAULT_PLOT_WIDTH,
) -> RenderedChart:
    """Render a time-sheet chart (bars plus any selection overlay)."""

    drawing = chart.render(plot_width, height=height, show_axes=show_axes)
    return RenderedChart(
        chart_id=TIME_SHEET_BAR,
        payload=timeline_payload(drawing, domain=chart.domain),
        overlays=overlay_payload(drawing.overlays),
        height=height,
        plot_width=plot_width,
        title=drawing.title,
    )


def render_threshold(
    settings: ThresholdSettings,
    *,
    height: int,
    show_axes: bool = True,
    sales: tuple[Sale, ...] | None = None,
) -> RenderedChart:
    """Render the single bar threshold chart."""

    drawing = render_single_bar_threshold(
        sales if sales is not None else load_sales_data(),
        settings=settings,
        height=height,
        show_axes=show_axes,
    )
    rule = next((overlay for overlay in drawing.overlays if isinstance(overlay, RuleMark)), None)
    return RenderedChart(
        chart_id=SINGLE_BAR_THRESHOLD,
        payload=column_payload(drawing, rule=rule),
        overlays=overlay_payload(drawing.overlays),
        height=height,
    )


def _default_time_sheet(height: int, show_axes: bool) -> RenderedChart:
    return render_time_sheet(time_sheet_charts()["day"], height=height, show_axes=show_axes)


def _default_threshold(height: int, show_axes: bool) -> RenderedChart:
    return render_threshold(ThresholdSettings(), height=height, show_axes=show_axes)


CHART_RENDERERS: Final[dict[str, Callable[[int, bool], RenderedChart]]] = {
    TIME_SHEET_BAR: _default_time_sheet,
    SINGLE_BAR_THRESHOLD: _default_threshold,
}


def render_chart_type(spec: ChartTypeSpec, *, height: int, show_axes: bool = True) -> RenderedChart:
    """Render a chart type with its default data and settings.

    Raises:
        KeyError: When no renderer is registered for the chart type.
    """

    try:
        renderer = CHART_RENDERERS[spec.id]
    except KeyError:
        raise KeyError(f"No renderer registered for chart type {spec.id!r}.") from None
    return renderer(height, show_axes)


def render_preview(spec: ChartTypeSpec, *, height: int) -> RenderedChart:
    """Render the overview (axes hidden) version of a chart type."""

    return render_chart_type(spec, height=height, show_axes=False)
