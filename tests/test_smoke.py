"""Minimal smoke tests for project wiring."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration


def test_analysis_package_exports() -> None:
    """The analysis package exposes the timeline primitives."""

    from analysis import Event, TimeDomain, format_duration, total_duration

    assert callable(format_duration)
    assert callable(total_duration)
    assert Event and TimeDomain


def test_django_project_loads() -> None:
    """Django settings load and the app populates previews at startup."""

    from django.conf import settings

    from core.charting.previews import PREVIEWS

    assert "core.apps.CoreConfig" in settings.INSTALLED_APPS
    assert settings.DATABASES == {}
    assert settings.CHARTS_PREVIEW_HEIGHT == 100
    assert PREVIEWS.populated
