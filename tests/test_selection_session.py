"""Integration tests for session-backed selection replay."""

from __future__ import annotations

import pytest
from django.contrib.sessions.backends.signed_cookies import SessionStore
from django.test import RequestFactory

from analysis.timeline import Event, TimeDomain
from core.charting.event_timeline import EventTimelineChart
from core.selection import SELECTION_SESSION_KEY, record_tap, restore_selection

pytestmark = pytest.mark.integration


@pytest.fixture
def request_with_session(rf: RequestFactory):
    request = rf.get("/")
    request.session = SessionStore()
    return request


def test_restore_replays_the_recorded_tap(
    request_with_session, bread: Event, butchery: Event, opening_hours: TimeDomain
) -> None:
    """A fresh chart with the same content gets the same selection."""

    record_tap(
        request_with_session,
        section="day",
        chart=EventTimelineChart([bread, butchery], domain=opening_hours),
        x=100.0,
        plot_width=340.0,
    )
    fresh = EventTimelineChart([bread, butchery], domain=opening_hours)

    assert restore_selection(request_with_session, section="day", chart=fresh) == bread
    assert fresh.selected_event == bread


def test_restore_discards_taps_for_changed_content(
    request_with_session, bread: Event, butchery: Event, opening_hours: TimeDomain
) -> None:
    """A new event list starts unselected and forgets the old tap."""

    record_tap(
        request_with_session,
        section="day",
        chart=EventTimelineChart([bread, butchery], domain=opening_hours),
        x=100.0,
        plot_width=340.0,
    )
    changed = EventTimelineChart([butchery], domain=opening_hours)

    assert restore_selection(request_with_session, section="day", chart=changed) is None
    assert changed.selected_event is None
    assert "day" not in request_with_session.session[SELECTION_SESSION_KEY]


def test_restore_without_a_tap_is_a_no_op(request_with_session, bread: Event, opening_hours: TimeDomain) -> None:
    """Nothing recorded means nothing selected."""

    chart = EventTimelineChart([bread], domain=opening_hours)
    assert restore_selection(request_with_session, section="week", chart=chart) is None
    assert chart.selected_event is None


def test_restore_drops_corrupt_entries(request_with_session, bread: Event, opening_hours: TimeDomain) -> None:
    """Unusable stored taps are removed instead of raising."""

    chart = EventTimelineChart([bread], domain=opening_hours)
    request_with_session.session[SELECTION_SESSION_KEY] = {
        "day": {"fingerprint": chart.fingerprint, "x": 10.0, "plot_width": 0.0},
    }

    assert restore_selection(request_with_session, section="day", chart=chart) is None
    assert request_with_session.session[SELECTION_SESSION_KEY] == {}
