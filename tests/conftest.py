"""Pytest fixtures shared across the gallery test suite."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

import pytest

from analysis.timeline import Event, TimeDomain


def at(hour: int, minute: int = 0, *, day: int = 13) -> datetime:
    """Return a UTC timestamp on June `day`, 2022."""

    return datetime(2022, 6, day, hour, minute, tzinfo=UTC)


@pytest.fixture
def bread() -> Event:
    """Bread shift, 08:00-14:00."""

    return Event(category="Bread", start=at(8), end=at(14))


@pytest.fixture
def butchery() -> Event:
    """Butchery shift, 09:00-17:00."""

    return Event(category="Butchery", start=at(9), end=at(17))


@pytest.fixture
def opening_hours() -> TimeDomain:
    """Store opening hours, 05:00-22:00 (17 hours)."""

    return TimeDomain(start=at(5), end=at(22))


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no Django request cycle.
    - `integration`: tests touching views, commands, or app startup.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
