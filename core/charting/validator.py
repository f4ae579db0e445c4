"""Validation for the gallery chart catalog.

The catalog is validated when `configs` is imported, so a bad entry fails the
application at startup rather than producing a broken page later.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .schema import ChartCategory, ChartTypeSpec

_SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class ChartRegistryError(ValueError):
    """Raised when the chart catalog contains invalid entries."""

    def __init__(self, errors: Iterable[str]) -> None:
        """Initialize the error.

        Args:
            errors: Human-readable problems found in the catalog.
        """

        self.errors = tuple(errors)
        super().__init__("Invalid chart catalog:\n" + "\n".join(f"- {err}" for err in self.errors))


def validate_chart_type(spec: ChartTypeSpec) -> tuple[str, ...]:
    """Validate a single ChartTypeSpec.

    Returns:
        Tuple of error strings; empty when valid.
    """

    errors: list[str] = []
    if not _SLUG_RE.match(spec.id):
        errors.append(f"ChartTypeSpec.id must be a lowercase slug, got {spec.id!r}.")
    if not spec.title.strip():
        errors.append(f"ChartTypeSpec[{spec.id}].title must be a non-empty string.")
    if not isinstance(spec.category, ChartCategory):
        errors.append(f"ChartTypeSpec[{spec.id}].category is not a supported value: {spec.category!r}.")
    elif spec.category is ChartCategory.all:
        errors.append(f"ChartTypeSpec[{spec.id}].category cannot be 'all' (filter value only).")
    return tuple(errors)


def validate_chart_types(specs: Iterable[ChartTypeSpec]) -> None:
    """Validate the whole catalog, including id uniqueness.

    Raises:
        ChartRegistryError: When any entry is invalid.
    """

    errors: list[str] = []
    seen: set[str] = set()
    for spec in specs:
        errors.extend(validate_chart_type(spec))
        if spec.id in seen:
            errors.append(f"Duplicate ChartTypeSpec.id: {spec.id!r}.")
        seen.add(spec.id)
    if errors:
        raise ChartRegistryError(errors)
