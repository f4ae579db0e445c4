"""Pure helpers for the charts gallery.

This package contains deterministic, testable computations (timeline
transforms, hit-testing, duration formatting, threshold classification). It
must not import Django.
"""

from .durations import format_duration, total_duration
from .timeline import Event, TimeDomain, TimelineValidationError

__all__ = ["Event", "TimeDomain", "TimelineValidationError", "format_duration", "total_duration"]
