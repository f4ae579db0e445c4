"""Single bar chart with a movable threshold rule.

Each day's bar is colored by whether its sales exceed the threshold; a red
horizontal rule marks the threshold itself with its value as a label.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from analysis.durations import format_full_date
from analysis.sales import Sale, ThresholdSettings

from .marks import Annotation, AnnotationLine, BarMark, Drawing, RuleMark

THRESHOLD_RULE_COLOR: Final[str] = "#FF3B30"


def render_single_bar_threshold(
    sales: Sequence[Sale],
    *,
    settings: ThresholdSettings,
    height: int,
    show_axes: bool = True,
) -> Drawing:
    """Render daily sales bars and the threshold rule.

    Args:
        sales: Sales in day order.
        settings: Threshold value and bar colors.
        height: Frame height in pixels; used to place the rule vertically.
        show_axes: False in overview mode.

    Returns:
        Drawing whose `lanes` are ISO day labels.
    """

    bars = tuple(
        BarMark(
            lane=idx,
            lane_label=sale.day.isoformat(),
            color=settings.color_for(sale),
            value_start=0.0,
            value_end=float(sale.sales),
            category_value=sale.day,
            accessibility_label=format_full_date(sale.day),
            accessibility_value=(
                f"{sale.sales} sold. {'Above' if sale.is_above(settings.threshold) else 'Below'} threshold"
            ),
        )
        for idx, sale in enumerate(sales)
    )

    y_max = max([float(sale.sales) for sale in sales] + [settings.threshold, 1.0])
    rule_y = height - (settings.threshold / y_max) * height
    rule = RuleMark(
        orientation="horizontal",
        value=settings.threshold,
        position=rule_y,
        color=THRESHOLD_RULE_COLOR,
        line_width=2,
    )
    label = Annotation(
        anchor=rule_y,
        position="top",
        alignment="leading",
        lines=(AnnotationLine(f"{settings.threshold:.0f}", style="title_bold"),),
        accessibility_label=f"Sale threshold: {int(settings.threshold)}",
    )
    return Drawing(
        bars=bars,
        overlays=(rule, label),
        lanes=tuple(bar.lane_label for bar in bars),
        height=height,
        show_axes=show_axes,
    )
