"""Duration and timestamp formatting helpers.

Durations are always rendered as `<H>h <MM>m`: hours are never rolled into
days and minutes are zero-padded, so a week of shifts reads `41h 30m` rather
than `1d 17h 30m`. Sub-minute remainders are truncated.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from .timeline import Event


def format_duration(seconds: float) -> str:
    """Format a duration in seconds as `<H>h <MM>m`.

    Args:
        seconds: Non-negative duration in seconds.

    Returns:
        Formatted duration such as `6h 00m` or `0h 45m`.

    Raises:
        ValueError: When `seconds` is negative.
    """

    if seconds < 0:
        raise ValueError(f"Duration must be non-negative, got {seconds!r} seconds.")
    total_minutes = int(seconds // 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes:02d}m"


def total_duration_seconds(events: Iterable[Event]) -> float:
    """Return the summed duration of all events in seconds."""

    total = timedelta(0)
    for event in events:
        total += event.duration
    return total.total_seconds()


def total_duration(events: Iterable[Event]) -> str:
    """Return the summed duration of all events, formatted as `<H>h <MM>m`."""

    return format_duration(total_duration_seconds(events))


def format_clock_time(moment: datetime) -> str:
    """Format a time of day in the short 12-hour style (e.g. `8:00 AM`)."""

    hour = moment.hour % 12 or 12
    return f"{hour}:{moment.minute:02d} {'AM' if moment.hour < 12 else 'PM'}"


def format_abbreviated_date(moment: date) -> str:
    """Format a date in the abbreviated style (e.g. `Jun 13, 2022`)."""

    return f"{moment:%b} {moment.day}, {moment.year}"


def format_timestamp(moment: datetime) -> str:
    """Format an abbreviated date plus short time (e.g. `Jun 13, 2022 at 8:00 AM`)."""

    return f"{format_abbreviated_date(moment)} at {format_clock_time(moment)}"


def format_full_date(moment: date) -> str:
    """Format a complete date (e.g. `Monday, June 13, 2022`)."""

    return f"{moment:%A}, {moment:%B} {moment.day}, {moment.year}"
