"""Sample data sets shown by the gallery charts.

The data lives in YAML fixtures next to this module so that it can be edited
without touching chart code. Loading is strict: a malformed fixture fails fast
with a `ValueError` naming the offending entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime
from functools import cache
from pathlib import Path
from typing import Any, Final

import yaml

from analysis.sales import Sale
from analysis.timeline import Event, TimeDomain

DATA_DIR: Final[Path] = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True, slots=True)
class TimeSheetSection:
    """Events plus the axis window they are shown against."""

    events: tuple[Event, ...]
    domain: TimeDomain


@dataclass(frozen=True, slots=True)
class TimeSheetData:
    """The day and week time-sheet data sets."""

    last_day: TimeSheetSection
    last_week: TimeSheetSection


@cache
def load_timesheet_data(path: Path = DATA_DIR / "timesheet.yaml") -> TimeSheetData:
    """Load the time-sheet fixture.

    Args:
        path: YAML file with `day` and `week` sections.

    Returns:
        Parsed TimeSheetData (cached per path).
    """

    raw = _load_yaml(path)
    return TimeSheetData(
        last_day=_parse_section(raw.get("day"), name="day"),
        last_week=_parse_section(raw.get("week"), name="week"),
    )


@cache
def load_sales_data(path: Path = DATA_DIR / "sales.yaml") -> tuple[Sale, ...]:
    """Load the daily sales fixture (cached per path)."""

    raw = _load_yaml(path)
    entries = raw.get("days")
    if not isinstance(entries, list) or not entries:
        raise ValueError(f"{path.name}: 'days' must be a non-empty list.")
    sales: list[Sale] = []
    for idx, entry in enumerate(entries):
        try:
            sales.append(Sale(day=_parse_date(entry["day"]), sales=int(entry["sales"])))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"{path.name}: days[{idx}] is invalid: {exc}") from exc
    return tuple(sales)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a mapping at the top level.")
    return raw


def _parse_section(raw: object, *, name: str) -> TimeSheetSection:
    if not isinstance(raw, dict):
        raise ValueError(f"timesheet section {name!r} is missing.")
    domain_raw = raw.get("domain") or {}
    domain = TimeDomain(start=_parse_timestamp(domain_raw.get("start")), end=_parse_timestamp(domain_raw.get("end")))
    events: list[Event] = []
    for idx, entry in enumerate(raw.get("events") or ()):
        try:
            events.append(
                Event(
                    category=str(entry["department"]),
                    start=_parse_timestamp(entry["clock_in"]),
                    end=_parse_timestamp(entry["clock_out"]),
                )
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"timesheet section {name!r}: events[{idx}] is invalid: {exc}") from exc
    return TimeSheetSection(events=tuple(events), domain=domain)


def _parse_timestamp(value: object) -> datetime:
    """Parse an ISO timestamp, treating naive values as UTC."""

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value)
    else:
        raise ValueError(f"Expected an ISO timestamp, got {value!r}.")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _parse_date(value: object) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))
