"""Accessibility descriptors for gallery charts.

A descriptor summarizes a chart for assistive technology: its title, the two
axes, and one data point per mark with a spoken label. Templates render it as
a visually hidden table next to the canvas.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from analysis.durations import format_clock_time, format_duration, format_full_date
from analysis.sales import Sale
from analysis.timeline import Event


@dataclass(frozen=True, slots=True)
class AxisDescriptor:
    """One chart axis.

    Categorical axes set `categories`; numeric axes set `lower`/`upper`.
    """

    title: str
    categories: tuple[str, ...] = ()
    lower: float | None = None
    upper: float | None = None
    lower_label: str = ""
    upper_label: str = ""


@dataclass(frozen=True, slots=True)
class DataPointDescriptor:
    x: str
    y: float
    label: str


@dataclass(frozen=True, slots=True)
class ChartDescriptor:
    title: str
    x_axis: AxisDescriptor
    y_axis: AxisDescriptor
    series_name: str
    data_points: tuple[DataPointDescriptor, ...]
    summary: str | None = None


def timesheet_descriptor(events: Sequence[Event]) -> ChartDescriptor:
    """Describe a time-sheet chart by department and shift duration."""

    durations = [event.duration.total_seconds() for event in events]
    lower = min(durations, default=0.0)
    upper = max(durations, default=0.0)
    return ChartDescriptor(
        title="Timesheet by department",
        x_axis=AxisDescriptor(title="Department", categories=tuple(event.category for event in events)),
        y_axis=AxisDescriptor(
            title="Duration",
            lower=lower,
            upper=upper,
            lower_label=format_duration(lower),
            upper_label=format_duration(upper),
        ),
        series_name="Timesheet Example",
        data_points=tuple(
            DataPointDescriptor(
                x=event.category,
                y=seconds,
                label=f"Clock in: {format_clock_time(event.start)}, Clock out: {format_clock_time(event.end)}",
            )
            for event, seconds in zip(events, durations, strict=True)
        ),
    )


def sales_descriptor(sales: Sequence[Sale], *, threshold: float) -> ChartDescriptor:
    """Describe the daily sales chart relative to a threshold."""

    values = [float(sale.sales) for sale in sales]
    above = sum(1 for sale in sales if sale.is_above(threshold))
    return ChartDescriptor(
        title="Daily sales",
        x_axis=AxisDescriptor(title="Date", categories=tuple(sale.day.isoformat() for sale in sales)),
        y_axis=AxisDescriptor(
            title="Sales",
            lower=min(values, default=0.0),
            upper=max(values, default=0.0),
            lower_label=f"{min(values, default=0.0):.0f}",
            upper_label=f"{max(values, default=0.0):.0f}",
        ),
        series_name="Sales",
        data_points=tuple(
            DataPointDescriptor(
                x=format_full_date(sale.day),
                y=float(sale.sales),
                label=f"{sale.sales} sold. {'Above' if sale.is_above(threshold) else 'Below'} threshold",
            )
            for sale in sales
        ),
        summary=f"{above} of {len(sales)} days above the threshold of {int(threshold)}.",
    )
