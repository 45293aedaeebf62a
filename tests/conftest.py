from __future__ import annotations

import os
from collections.abc import Callable, Generator

import pytest

from domain.models import Bar, Chart, Event, Group
from domain.style import ChartStyle
from tests.helpers.recording_surface import RecordingSurface


def _clear_timeline_env() -> None:
    for key in list(os.environ):
        if key.startswith("TIMELINE_"):
            os.environ.pop(key, None)


_clear_timeline_env()


@pytest.fixture(autouse=True)
def clear_timeline_env() -> Generator[None, None, None]:
    _clear_timeline_env()
    yield
    _clear_timeline_env()


@pytest.fixture
def style() -> ChartStyle:
    return ChartStyle()


@pytest.fixture
def style_factory(style: ChartStyle) -> Callable[..., ChartStyle]:
    def _factory(**overrides: object) -> ChartStyle:
        return style.with_overrides(**overrides)

    return _factory


@pytest.fixture
def two_bar_chart() -> Chart:
    chart = Chart(name="TestChart", max_time=1000)
    group = Group(name="TestGroup1")
    bar1 = Bar(name="Bar1")
    bar1.add_event(Event(start_time=0, duration=100, color="red"))
    group.add_bar(bar1)
    bar2 = Bar(name="Bar2")
    bar2.add_event(Event(start_time=100, duration=200, color="blue"))
    group.add_bar(bar2)
    chart.add_group(group)
    return chart


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
