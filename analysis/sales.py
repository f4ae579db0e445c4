"""Daily sales values and threshold classification."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Final

THRESHOLD_MIN: Final[float] = 0.0
THRESHOLD_MAX: Final[float] = 275.0
DEFAULT_THRESHOLD: Final[float] = 150.0
DEFAULT_BELOW_COLOR: Final[str] = "#007AFF"
DEFAULT_ABOVE_COLOR: Final[str] = "#FF9500"

_HEX_COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}")


@dataclass(frozen=True, slots=True)
class Sale:
    """Units sold on a single day."""

    day: date
    sales: int

    def is_above(self, threshold: float) -> bool:
        """Return True when sales exceed the threshold truncated to an integer."""

        return self.sales > int(threshold)


@dataclass(frozen=True, slots=True)
class ThresholdSettings:
    """User-adjustable settings for the threshold bar chart.

    Args:
        threshold: Threshold value, within `[THRESHOLD_MIN, THRESHOLD_MAX]`.
        below_color: Hex color (`#RRGGBB`) for bars at or below the threshold.
        above_color: Hex color (`#RRGGBB`) for bars above the threshold.
    """

    threshold: float = DEFAULT_THRESHOLD
    below_color: str = DEFAULT_BELOW_COLOR
    above_color: str = DEFAULT_ABOVE_COLOR

    def __post_init__(self) -> None:
        if not THRESHOLD_MIN <= self.threshold <= THRESHOLD_MAX:
            raise ValueError(
                f"threshold must be within [{THRESHOLD_MIN:.0f}, {THRESHOLD_MAX:.0f}], got {self.threshold!r}."
            )
        for name in ("below_color", "above_color"):
            value = getattr(self, name)
            if not is_hex_color(value):
                raise ValueError(f"{name} must be a #RRGGBB color, got {value!r}.")

    def color_for(self, sale: Sale) -> str:
        """Return the bar color for a sale under these settings."""

        return self.above_color if sale.is_above(self.threshold) else self.below_color


def is_hex_color(value: str) -> bool:
    """Return True for `#RRGGBB` color strings."""

    return bool(_HEX_COLOR_RE.fullmatch(value))
