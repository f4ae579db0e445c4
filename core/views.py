"""Views for the charts gallery: index, chart details, and tap selection."""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.http import Http404, HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.urls import reverse
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_GET, require_POST

from analysis.durations import total_duration
from analysis.sales import ThresholdSettings
from analysis.timeline import Event
from core.charting.accessibility import sales_descriptor, timesheet_descriptor
from core.charting.configs import (
    CHART_TYPE_BY_ID,
    SINGLE_BAR_THRESHOLD,
    TIME_SHEET_BAR,
    chart_types_in,
    displayed_categories,
)
from core.charting.gallery import (
    DEFAULT_PLOT_WIDTH,
    TIME_SHEET_SECTIONS,
    render_threshold,
    render_time_sheet,
    section_heading,
    time_sheet_charts,
)
from core.charting.previews import PREVIEWS
from core.charting.render import bar_accessibility, overlay_payload
from core.charting.sample_data import load_sales_data
from core.charting.schema import ChartCategory, ChartTypeSpec
from core.forms import GalleryFilterForm, TapForm, ThresholdForm
from core.selection import record_tap, restore_selection

logger = logging.getLogger(__name__)


@require_GET
def gallery(request: HttpRequest) -> HttpResponse:
    """Render the chart list grouped by category, with an optional filter."""

    filter_form = GalleryFilterForm(request.GET or None)
    category = filter_form.selected_category() if filter_form.is_bound else ChartCategory.all
    sections = [
        {
            "category": section_category,
            "charts": [
                {"spec": spec, "preview": PREVIEWS.get(spec.id), "dom_id": f"preview-{spec.id}"}
                for spec in chart_types_in(section_category)
            ],
        }
        for section_category in displayed_categories(category)
    ]
    return render(
        request,
        "core/gallery.html",
        {
            "filter_form": filter_form,
            "selected_category": category,
            "sections": sections,
        },
    )


@require_GET
@ensure_csrf_cookie
def chart_detail(request: HttpRequest, chart_id: str) -> HttpResponse:
    """Render the detail page for a chart type."""

    spec = CHART_TYPE_BY_ID.get(chart_id)
    if spec is None:
        raise Http404(f"Unknown chart type: {chart_id!r}")
    if spec.id == TIME_SHEET_BAR:
        return _time_sheet_detail(request, spec)
    if spec.id == SINGLE_BAR_THRESHOLD:
        return _threshold_detail(request, spec)
    raise Http404(f"No detail view for chart type: {chart_id!r}")


@require_POST
def select_event(request: HttpRequest, section: str) -> JsonResponse:
    """Resolve a tap on a time-sheet chart and return only the overlay.

    The request carries `pixel_x` (relative to the plot area's left edge) and
    `plot_width`. A tap on empty space clears the selection.
    """

    if section not in TIME_SHEET_SECTIONS:
        raise Http404(f"Unknown time-sheet section: {section!r}")

    form = TapForm(request.POST)
    if not form.is_valid():
        logger.warning("Rejected tap for section=%s: %s", section, form.errors.as_json())
        return JsonResponse({"errors": form.errors.get_json_data()}, status=400)

    pixel_x = form.cleaned_data["pixel_x"]
    plot_width = form.cleaned_data["plot_width"]
    chart = time_sheet_charts()[section]  # type: ignore[index]
    event = chart.select_at(pixel_x, plot_width)
    record_tap(request, section=section, chart=chart, x=pixel_x, plot_width=plot_width)
    return JsonResponse(
        {
            "section": section,
            "selected": _event_json(event),
            "overlays": list(overlay_payload(chart.render_overlay(plot_width))),
        }
    )


def _time_sheet_detail(request: HttpRequest, spec: ChartTypeSpec) -> HttpResponse:
    height: int = settings.CHARTS_DETAIL_HEIGHT
    sections: list[dict[str, Any]] = []
    for name, chart in time_sheet_charts().items():
        restore_selection(request, section=name, chart=chart)
        drawing = chart.render(DEFAULT_PLOT_WIDTH, height=height)
        sections.append(
            {
                "name": name,
                "heading": section_heading(name, chart),
                "chart": render_time_sheet(chart, height=height),
                "dom_id": f"chart-{name}",
                "select_url": reverse("core:select_event", args=[name]),
                "selected": _event_json(chart.selected_event),
                "descriptor": timesheet_descriptor(chart.events),
                "bar_labels": bar_accessibility(drawing.bars),
            }
        )
    return render(request, "core/time_sheet_bar.html", {"spec": spec, "sections": sections})


def _threshold_detail(request: HttpRequest, spec: ChartTypeSpec) -> HttpResponse:
    form = ThresholdForm(request.GET or None)
    threshold_settings = ThresholdSettings()
    if form.is_bound and form.is_valid():
        threshold_settings = form.settings()
    height: int = settings.CHARTS_DETAIL_HEIGHT
    sales = load_sales_data()
    return render(
        request,
        "core/single_bar_threshold.html",
        {
            "spec": spec,
            "form": form,
            "threshold": threshold_settings,
            "chart": render_threshold(threshold_settings, height=height, sales=sales),
            "dom_id": "chart-threshold",
            "descriptor": sales_descriptor(sales, threshold=threshold_settings.threshold),
        },
    )


def _event_json(event: Event | None) -> dict[str, str] | None:
    if event is None:
        return None
    return {
        "category": event.category,
        "start": event.start.isoformat(),
        "end": event.end.isoformat(),
        "duration": total_duration([event]),
    }
