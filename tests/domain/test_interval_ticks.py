from __future__ import annotations

import logging

import pytest

from domain.services.interval_ticks import format_time, interval_ticks, tick_count


def test_evenly_divided_interval_places_regular_and_final_ticks() -> None:
    ticks = interval_ticks(max_time=1000, interval_time=100, bar_length=1000, bar_left_offset=100)

    regular = [tick for tick in ticks if not tick.is_final]
    assert len(regular) == 10
    assert [tick.x for tick in regular] == [100 + k * 100 for k in range(10)]
    assert [tick.time for tick in regular] == [k * 100 for k in range(10)]

    final = ticks[-1]
    assert final.is_final
    assert final.x == 1100
    assert final.time == 1000
    assert format_time(final.time) == "1000"


def test_ticks_scale_to_bar_length() -> None:
    ticks = interval_ticks(max_time=1380, interval_time=138, bar_length=690, bar_left_offset=0)
    assert [tick.x for tick in ticks] == pytest.approx([k * 69 for k in range(11)])


def test_uneven_interval_truncates_and_warns(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        ticks = interval_ticks(max_time=1000, interval_time=300, bar_length=900, bar_left_offset=0)

    assert [tick.x for tick in ticks] == [0, 300, 600, 900]
    assert [tick.time for tick in ticks[:-1]] == pytest.approx([0, 1000 / 3, 2000 / 3])
    assert ticks[-1].time == 1000
    assert "does not divide" in caplog.text


def test_interval_longer_than_cycle_only_draws_final_tick() -> None:
    ticks = interval_ticks(max_time=100, interval_time=250, bar_length=500, bar_left_offset=20)
    assert len(ticks) == 1
    assert ticks[0].is_final
    assert ticks[0].x == 520


def test_tick_count_tolerates_float_noise(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        assert tick_count(0.3, 0.1) == 3
    assert caplog.text == ""


@pytest.mark.parametrize(("value", "expected"), [(1000.0, "1000"), (0, "0"), (12.5, "12.5"), (100 / 3, "33.3333")])
def test_format_time(value: float, expected: str) -> None:
    assert format_time(value) == expected
