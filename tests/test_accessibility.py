"""Unit tests for chart accessibility descriptors."""

from __future__ import annotations

from datetime import date

import pytest

from analysis.sales import Sale
from analysis.timeline import Event
from core.charting.accessibility import sales_descriptor, timesheet_descriptor
from core.charting.sample_data import load_sales_data

pytestmark = pytest.mark.unit


def test_timesheet_descriptor_lists_each_shift(bread: Event, butchery: Event) -> None:
    """Departments on x, shift durations on y."""

    descriptor = timesheet_descriptor([bread, butchery])

    assert descriptor.title == "Timesheet by department"
    assert descriptor.series_name == "Timesheet Example"
    assert descriptor.x_axis.categories == ("Bread", "Butchery")
    assert (descriptor.y_axis.lower, descriptor.y_axis.upper) == (21600.0, 28800.0)
    assert (descriptor.y_axis.lower_label, descriptor.y_axis.upper_label) == ("6h 00m", "8h 00m")
    assert descriptor.data_points[0].label == "Clock in: 8:00 AM, Clock out: 2:00 PM"


def test_timesheet_descriptor_handles_no_events() -> None:
    """An empty chart describes a zero-length axis."""

    descriptor = timesheet_descriptor([])
    assert descriptor.data_points == ()
    assert descriptor.y_axis.upper_label == "0h 00m"


def test_sales_descriptor_summarizes_days_above_threshold() -> None:
    """The summary counts days strictly above the threshold."""

    descriptor = sales_descriptor(load_sales_data(), threshold=150)
    assert descriptor.summary == "17 of 30 days above the threshold of 150."
    assert descriptor.x_axis.categories[0] == "2022-05-01"
    assert descriptor.data_points[0].x == "Sunday, May 1, 2022"


def test_sales_descriptor_point_labels() -> None:
    """Each point says whether it is above or below the threshold."""

    sales = [Sale(day=date(2022, 5, 1), sales=90), Sale(day=date(2022, 5, 2), sales=210)]
    descriptor = sales_descriptor(sales, threshold=100.5)
    assert [point.label for point in descriptor.data_points] == ["90 sold. Below threshold", "210 sold. Above threshold"]
    assert (descriptor.y_axis.lower_label, descriptor.y_axis.upper_label) == ("90", "210")
    assert descriptor.summary == "1 of 2 days above the threshold of 100."
