"""Unit tests for the chart catalog and its validation."""

from __future__ import annotations

import pytest

from core.charting.configs import (
    CHART_TYPE_BY_ID,
    CHART_TYPES,
    SINGLE_BAR_THRESHOLD,
    TIME_SHEET_BAR,
    chart_types_in,
    displayed_categories,
)
from core.charting.schema import ChartCategory, ChartTypeSpec
from core.charting.validator import ChartRegistryError, validate_chart_type, validate_chart_types

pytestmark = pytest.mark.unit


def test_catalog_lists_both_bar_charts_in_order() -> None:
    """The bar category shows the threshold chart before the time sheet."""

    assert [spec.id for spec in chart_types_in(ChartCategory.bar)] == [SINGLE_BAR_THRESHOLD, TIME_SHEET_BAR]
    assert CHART_TYPE_BY_ID[TIME_SHEET_BAR].title == "Time Sheet Bar"
    assert len(CHART_TYPE_BY_ID) == len(CHART_TYPES)


def test_displayed_categories_skip_empty_categories() -> None:
    """Only categories with chart types are listed."""

    assert displayed_categories() == (ChartCategory.bar,)
    assert displayed_categories(ChartCategory.bar) == (ChartCategory.bar,)
    assert displayed_categories(ChartCategory.line) == ()


def test_category_labels() -> None:
    """Labels are human-readable."""

    assert ChartCategory.bar.label == "Bar"
    assert ChartCategory.heat_map.label == "Heat map"


def test_validate_chart_type_reports_each_problem() -> None:
    """Bad ids, blank titles, and the `all` filter category are rejected."""

    errors = validate_chart_type(ChartTypeSpec(id="Bad Id", title=" ", category=ChartCategory.all))
    assert len(errors) == 3


def test_validate_chart_types_rejects_duplicates() -> None:
    """Ids must be unique across the catalog."""

    spec = ChartTypeSpec(id="time-sheet-bar", title="Time Sheet Bar", category=ChartCategory.bar)
    with pytest.raises(ChartRegistryError) as excinfo:
        validate_chart_types([spec, spec])
    assert excinfo.value.errors == ("Duplicate ChartTypeSpec.id: 'time-sheet-bar'.",)
    assert isinstance(excinfo.value, ValueError)


def test_validate_chart_types_accepts_the_builtin_catalog() -> None:
    """The shipped catalog is valid."""

    validate_chart_types(CHART_TYPES)
