"""Draw commands produced by chart render passes.

A render pass is a pure function from inputs to a `Drawing`. Marks carry
pixel geometry (for hit-testing and overlay placement) alongside the data
values they were computed from (for serialization to Chart.js).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

RuleOrientation = Literal["vertical", "horizontal"]
AnnotationPosition = Literal["top", "bottom"]
AnnotationAlignment = Literal["center", "leading"]
TextStyle = Literal["caption", "body_bold", "title_bold"]


@dataclass(frozen=True, slots=True)
class BarMark:
    """A single bar.

    For horizontal (interval) bars `x`/`width` are pixel geometry and `lane`
    is the row index. That geometry is not serialized: Chart.js places bars
    from the value bounds, so `x`/`width` serve layout checks and tests only.
    `value_start`/`value_end` hold the interval bounds. For vertical bars
    `category_value` is the x category and `value_end` the bar height in data
    units.
    """

    lane: int
    lane_label: str
    color: str
    value_start: datetime | float
    value_end: datetime | float
    x: float = 0.0
    width: float = 0.0
    category_value: date | str | None = None
    corner_radius: int = 0
    accessibility_label: str = ""
    accessibility_value: str = ""


@dataclass(frozen=True, slots=True)
class RuleMark:
    """A straight reference line across the plot."""

    orientation: RuleOrientation
    value: datetime | float
    position: float
    color: str
    line_width: float = 1.0
    dash: tuple[float, ...] = ()


@dataclass(frozen=True, slots=True)
class AnnotationLine:
    """One line of text inside an annotation callout."""

    text: str
    style: TextStyle = "caption"


@dataclass(frozen=True, slots=True)
class Annotation:
    """A floating label anchored to a rule."""

    anchor: float
    position: AnnotationPosition
    alignment: AnnotationAlignment
    lines: tuple[AnnotationLine, ...]
    accessibility_label: str = ""


@dataclass(frozen=True, slots=True)
class Drawing:
    """The complete output of a render pass.

    Attributes:
        bars: Bars in input order.
        overlays: Rules and annotations drawn above the bars.
        lanes: Row labels (interval charts) or x categories (column charts).
        plot_width: Plot width the geometry was computed for.
        height: Requested frame height in pixels.
        show_axes: Whether axes are drawn (hidden in overview mode).
        title: Optional header shown above the plot.
    """

    bars: tuple[BarMark, ...]
    overlays: tuple[RuleMark | Annotation, ...] = ()
    lanes: tuple[str, ...] = ()
    plot_width: float = 0.0
    height: int = 0
    show_axes: bool = True
    title: str | None = None
