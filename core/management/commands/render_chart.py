"""Print the Chart.js payload of a gallery chart type."""

from __future__ import annotations

import json

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from core.charting.configs import CHART_TYPE_BY_ID, TIME_SHEET_BAR
from core.charting.gallery import TIME_SHEET_SECTIONS, render_chart_type, render_time_sheet, time_sheet_charts


class Command(BaseCommand):
    """Render a chart type and write its payload as JSON."""

    help = "Render a gallery chart type and print its Chart.js payload and overlays as JSON."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("chart_id", help=f"Chart type id (one of: {', '.join(sorted(CHART_TYPE_BY_ID))}).")
        parser.add_argument(
            "--overview",
            action="store_true",
            help="Render the overview (preview) variant with axes hidden.",
        )
        parser.add_argument(
            "--section",
            choices=TIME_SHEET_SECTIONS,
            default="day",
            help="Time-sheet section to render in detail mode (default: day).",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        chart_id: str = options["chart_id"]
        spec = CHART_TYPE_BY_ID.get(chart_id)
        if spec is None:
            raise CommandError(f"Unknown chart type: {chart_id!r}")

        if options["overview"]:
            rendered = render_chart_type(spec, height=settings.CHARTS_PREVIEW_HEIGHT, show_axes=False)
        elif spec.id != TIME_SHEET_BAR:
            rendered = render_chart_type(spec, height=settings.CHARTS_DETAIL_HEIGHT)
        else:
            chart = time_sheet_charts()[options["section"]]
            rendered = render_time_sheet(chart, height=settings.CHARTS_DETAIL_HEIGHT)

        self.stdout.write(
            json.dumps({"chart": rendered.chart_id, "payload": rendered.payload, "overlays": rendered.overlays}, indent=2)
        )
        return None
