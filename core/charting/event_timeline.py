"""Selectable event timeline chart (time-sheet style interval bars).

`EventTimelineChart` draws one horizontal bar per event against a shared time
axis, one lane per category, and supports selecting a single event by tapping
the plot. The selected event is described by a floating annotation anchored at
the middle of its interval.

Selection is a two-state machine:

- `NoSelection` (initial)
- `Selected(event)`

`select_at` moves to `Selected` on a hit and back to `NoSelection` on a miss;
`replace_events` always forces `NoSelection`. Nothing else mutates it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from hashlib import sha256
from types import MappingProxyType
from typing import Final

from analysis.durations import format_timestamp, total_duration
from analysis.timeline import Event, TimeDomain, event_midpoint, first_event_containing, lane_order, pixel_x, time_at

from .marks import Annotation, AnnotationLine, BarMark, Drawing, RuleMark

logger = logging.getLogger(__name__)

TIMESHEET_COLORS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "Bread": "#FFCC00",
        "Butchery": "#FF3B30",
        "Counter": "#000000",
        "Vegetables": "#34C759",
    }
)
DEFAULT_COLOR: Final[str] = "#8E8E93"
RULE_COLOR: Final[str] = "#1C1C1E"
BAR_CORNER_RADIUS: Final[int] = 8
MIN_BAR_WIDTH: Final[float] = 1.0


@dataclass(frozen=True, slots=True)
class SelectionState:
    """The currently selected event, if any."""

    selected: Event | None = None

    @property
    def has_selection(self) -> bool:
        """Return True in the `Selected` state."""

        return self.selected is not None


NO_SELECTION: Final[SelectionState] = SelectionState()

SelectionListener = Callable[[SelectionState], None]


class EventTimelineChart:
    """Interval bar chart with tap-to-select and a detail annotation.

    Args:
        events: Events in lane/row order. Events outside `domain` are kept.
        domain: Visible time window.
        colors: Category -> color map; unknown categories use `default_color`.
        default_color: Fallback color for unmapped categories.
        category_order: Optional explicit lane order.
        header_title: Optional title drawn above the plot.
        plot_origin: Pixel offset of the plot area's left edge.
    """

    def __init__(
        self,
        events: Sequence[Event],
        *,
        domain: TimeDomain,
        colors: Mapping[str, str] = TIMESHEET_COLORS,
        default_color: str = DEFAULT_COLOR,
        category_order: Sequence[str] | None = None,
        header_title: str | None = None,
        plot_origin: float = 0.0,
    ) -> None:
        self._events: tuple[Event, ...] = tuple(events)
        self._domain = domain
        self._colors = colors
        self._default_color = default_color
        self._category_order = tuple(category_order) if category_order is not None else None
        self._plot_origin = plot_origin
        self._selection = NO_SELECTION
        self._listeners: list[SelectionListener] = []
        self.header_title = header_title

    @property
    def events(self) -> tuple[Event, ...]:
        return self._events

    @property
    def domain(self) -> TimeDomain:
        return self._domain

    @property
    def selection(self) -> SelectionState:
        """Read-only view of the selection state."""

        return self._selection

    @property
    def selected_event(self) -> Event | None:
        return self._selection.selected

    @property
    def lanes(self) -> tuple[str, ...]:
        return lane_order(self._events, explicit=self._category_order)

    @property
    def fingerprint(self) -> str:
        """Content hash of the events and domain.

        Two charts with equal fingerprints show the same bars, so a selection
        recorded against one can be replayed against the other.
        """

        payload = {
            "domain": [self._domain.start.isoformat(), self._domain.end.isoformat()],
            "events": [[e.category, e.start.isoformat(), e.end.isoformat()] for e in self._events],
        }
        return sha256(json.dumps(payload, sort_keys=True).encode("utf-8")).hexdigest()

    def color_for(self, category: str) -> str:
        """Return the display color for a category."""

        return self._colors.get(category, self._default_color)

    def add_selection_listener(self, listener: SelectionListener) -> None:
        """Register a callback invoked whenever the selection state changes."""

        self._listeners.append(listener)

    def replace_events(self, events: Sequence[Event], *, domain: TimeDomain | None = None) -> None:
        """Swap in a new event list (and optionally a new domain).

        The selection always resets to `NoSelection`, even when the new list
        happens to contain the previously selected event.
        """

        self._events = tuple(events)
        if domain is not None:
            self._domain = domain
        self._set_selection(NO_SELECTION)

    def select_at(self, x: float, plot_width: float) -> Event | None:
        """Select the event under a tap location.

        Args:
            x: Tap location in pixels, in the same coordinate space as
                `plot_origin`.
            plot_width: Width of the plot area in pixels.

        Returns:
            The first event (input order) whose inclusive interval contains the
            tapped timestamp, or None. A miss clears the selection, and so does
            a tap outside `[plot_origin, plot_origin + plot_width]`.

        Raises:
            ValueError: When `plot_width` is not positive.
        """

        if plot_width <= 0:
            raise ValueError(f"plot_width must be positive, got {plot_width!r}.")
        if not self._plot_origin <= x <= self._plot_origin + plot_width:
            logger.debug("Tap at x=%.1f/%.1f is outside the plot", x, plot_width)
            self._set_selection(NO_SELECTION)
            return None
        moment = time_at(x, domain=self._domain, plot_width=plot_width, plot_origin=self._plot_origin)
        hit = first_event_containing(self._events, moment)
        logger.debug("Tap at x=%.1f/%.1f resolved to %s -> %s", x, plot_width, moment.isoformat(), hit)
        self._set_selection(SelectionState(selected=hit))
        return hit

    def render(self, plot_width: float, *, height: int = 0, show_axes: bool = True) -> Drawing:
        """Render bars plus the selection overlay for a plot width."""

        lanes = self.lanes
        lane_index = {name: idx for idx, name in enumerate(lanes)}
        bars = tuple(self._bar(event, lane=lane_index[event.category], plot_width=plot_width) for event in self._events)
        return Drawing(
            bars=bars,
            overlays=self.render_overlay(plot_width),
            lanes=lanes,
            plot_width=plot_width,
            height=height,
            show_axes=show_axes,
            title=self.header_title,
        )

    def render_overlay(self, plot_width: float) -> tuple[RuleMark | Annotation, ...]:
        """Render only the selection overlay (rule + annotation).

        Returns an empty tuple in the `NoSelection` state.
        """

        event = self._selection.selected
        if event is None:
            return ()

        middle = event_midpoint(event)
        anchor = pixel_x(middle, domain=self._domain, plot_width=plot_width, plot_origin=self._plot_origin)
        rule = RuleMark(
            orientation="vertical",
            value=middle,
            position=anchor,
            color=RULE_COLOR,
            line_width=2,
            dash=(2,),
        )
        duration = total_duration([event])
        annotation = Annotation(
            anchor=anchor,
            position="top",
            alignment="center",
            lines=(
                AnnotationLine(f"Clocked in {format_timestamp(event.start)}"),
                AnnotationLine(f"Clocked out {format_timestamp(event.end)}"),
                AnnotationLine(f"Duration: {duration}", style="body_bold"),
            ),
            accessibility_label=f"{event.category}: {duration}",
        )
        return (rule, annotation)

    def _bar(self, event: Event, *, lane: int, plot_width: float) -> BarMark:
        start_x = pixel_x(event.start, domain=self._domain, plot_width=plot_width, plot_origin=self._plot_origin)
        end_x = pixel_x(event.end, domain=self._domain, plot_width=plot_width, plot_origin=self._plot_origin)
        return BarMark(
            lane=lane,
            lane_label=event.category,
            color=self.color_for(event.category),
            value_start=event.start,
            value_end=event.end,
            x=start_x,
            width=max(end_x - start_x, MIN_BAR_WIDTH),
            corner_radius=BAR_CORNER_RADIUS,
            accessibility_label=f"Department: {event.category}",
            accessibility_value=(
                f"Clock in: {format_timestamp(event.start)}, Clock out: {format_timestamp(event.end)}"
            ),
        )

    def _set_selection(self, state: SelectionState) -> None:
        if state == self._selection:
            return
        self._selection = state
        for listener in self._listeners:
            listener(state)
