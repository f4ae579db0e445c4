"""Time-interval helpers for event timeline charts.

This module maps timestamps onto a horizontal plot area and back, and performs
the hit-testing used by tap-to-select. It is pure (no Django imports) so it can
be reused by the renderer, the views, and the tests alike.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta


class TimelineValidationError(ValueError):
    """Raised when an Event or TimeDomain is constructed with inverted bounds."""

    def __init__(self, *, kind: str, start: datetime, end: datetime, strict: bool) -> None:
        """Initialize the error.

        Args:
            kind: Name of the value being constructed ("Event" or "TimeDomain").
            start: Offending start timestamp.
            end: Offending end timestamp.
            strict: True when `start` must be strictly before `end`.
        """

        relation = "<" if strict else "<="
        super().__init__(f"{kind} requires start {relation} end, got start={start.isoformat()} end={end.isoformat()}.")
        self.kind = kind
        self.start = start
        self.end = end


@dataclass(frozen=True, slots=True)
class Event:
    """A named time interval rendered as one bar.

    Attributes:
        category: Lane/category name (e.g. a department).
        start: Inclusive interval start (clock in).
        end: Inclusive interval end (clock out).
    """

    category: str
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise TimelineValidationError(kind="Event", start=self.start, end=self.end, strict=False)

    @property
    def duration(self) -> timedelta:
        """Return the interval length."""

        return self.end - self.start

    def contains(self, moment: datetime) -> bool:
        """Return True when `moment` falls inside the inclusive interval."""

        return self.start <= moment <= self.end


@dataclass(frozen=True, slots=True)
class TimeDomain:
    """The visible time axis window.

    Attributes:
        start: Left edge of the axis.
        end: Right edge of the axis (strictly after `start`).
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise TimelineValidationError(kind="TimeDomain", start=self.start, end=self.end, strict=True)

    @property
    def span(self) -> timedelta:
        """Return the window length."""

        return self.end - self.start


def pixel_x(moment: datetime, *, domain: TimeDomain, plot_width: float, plot_origin: float = 0.0) -> float:
    """Map a timestamp to a horizontal pixel offset.

    Args:
        moment: Timestamp to place on the axis.
        domain: Visible time window.
        plot_width: Width of the plot area in pixels.
        plot_origin: Pixel offset of the plot area's left edge.

    Returns:
        Pixel offset; values outside `[plot_origin, plot_origin + plot_width]`
        mean the timestamp lies outside the domain.
    """

    fraction = (moment - domain.start) / domain.span
    return plot_origin + fraction * plot_width


def time_at(x: float, *, domain: TimeDomain, plot_width: float, plot_origin: float = 0.0) -> datetime:
    """Map a horizontal pixel offset back to a timestamp (inverse of `pixel_x`).

    Raises:
        ValueError: When `plot_width` is not positive.
    """

    if plot_width <= 0:
        raise ValueError(f"plot_width must be positive, got {plot_width!r}.")
    fraction = (x - plot_origin) / plot_width
    return domain.start + domain.span * fraction


def event_midpoint(event: Event) -> datetime:
    """Return the timestamp halfway between an event's start and end."""

    return event.start + (event.end - event.start) / 2


def first_event_containing(events: Iterable[Event], moment: datetime) -> Event | None:
    """Return the first event (in input order) whose interval contains `moment`.

    Overlapping intervals are resolved strictly by input order; the earliest
    declared event wins even when a later one is a tighter fit.
    """

    for event in events:
        if event.contains(moment):
            return event
    return None


def lane_order(events: Iterable[Event], *, explicit: Sequence[str] | None = None) -> tuple[str, ...]:
    """Return the lane (category) order for a set of events.

    Args:
        events: Events in input order.
        explicit: Optional caller-supplied category order. Categories present in
            `events` but missing here are appended in first-seen order.

    Returns:
        Tuple of distinct category names.
    """

    lanes: list[str] = []
    for name in explicit or ():
        if name not in lanes:
            lanes.append(name)
    for event in events:
        if event.category not in lanes:
            lanes.append(event.category)
    return tuple(lanes)
