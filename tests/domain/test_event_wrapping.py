from __future__ import annotations

import logging

import pytest

from domain.models import Event
from domain.services.event_wrapping import correct_event_wrapping


def test_overshooting_event_is_split_in_place() -> None:
    before = Event(start_time=0, duration=100, color="blue")
    wrapping = Event(start_time=900, duration=200, color="red")
    after = Event(start_time=300, duration=50, color="green")

    corrected = correct_event_wrapping([before, wrapping, after], 1000)

    assert [(e.start_time, e.duration, e.color) for e in corrected] == [
        (0, 100, "blue"),
        (900, 100, "red"),
        (0, 100, "red"),
        (300, 50, "green"),
    ]


@pytest.mark.parametrize(
    ("start", "duration", "max_time"),
    [(900, 200, 1000), (1200, 305, 1380), (1, 999, 999), (0.5, 9.75, 10)],
)
def test_split_preserves_duration_and_color(start: float, duration: float, max_time: float) -> None:
    event = Event(start_time=start, duration=duration, color="gold")

    corrected = correct_event_wrapping([event], max_time)

    assert len(corrected) == 2
    assert sum(piece.duration for piece in corrected) == pytest.approx(duration)
    assert all(piece.start_time + piece.duration <= max_time for piece in corrected)
    assert [piece.color for piece in corrected] == ["gold", "gold"]


def test_fitting_events_pass_through_unchanged() -> None:
    events = [
        Event(start_time=0, duration=100, color="red"),
        Event(start_time=900, duration=100, color="lime"),
        Event(start_time=450, duration=10, color="navy"),
    ]

    corrected = correct_event_wrapping(events, 1000)

    assert corrected == events
    assert all(a is b for a, b in zip(corrected, events))


def test_start_at_boundary_yields_zero_length_fragment() -> None:
    corrected = correct_event_wrapping([Event(start_time=1000, duration=100, color="red")], 1000)

    assert [(e.start_time, e.duration) for e in corrected] == [(1000, 0), (0, 100)]


def test_event_longer_than_cycle_is_clamped(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        corrected = correct_event_wrapping([Event(start_time=500, duration=2500, color="red")], 1000)

    assert [(e.start_time, e.duration) for e in corrected] == [(500, 500), (0, 500)]
    assert "longer than the cycle" in caplog.text


def test_event_past_cycle_is_folded(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        corrected = correct_event_wrapping([Event(start_time=1250, duration=100, color="red")], 1000)

    assert [(e.start_time, e.duration) for e in corrected] == [(250, 100)]
    assert "starts after the end of the cycle" in caplog.text


def test_input_list_is_not_mutated() -> None:
    events = [Event(start_time=900, duration=200, color="red")]
    correct_event_wrapping(events, 1000)
    assert len(events) == 1
