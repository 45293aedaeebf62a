from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from domain.models import AppendResult, Bar, Chart, Event, Group


def test_event_rejects_negative_start_and_empty_duration() -> None:
    with pytest.raises(ValidationError):
        Event(start_time=-1, duration=10, color="red")
    with pytest.raises(ValidationError):
        Event(start_time=0, duration=0, color="red")


def test_event_is_immutable() -> None:
    event = Event(start_time=0, duration=10, color="red")
    with pytest.raises(ValidationError):
        event.start_time = 5  # type: ignore[misc]


def test_interval_time_defaults_to_max_time() -> None:
    assert Chart(name="c", max_time=1380).interval_time == 1380
    assert Chart(name="c", max_time=1000, interval_time=100).interval_time == 100


def test_chart_requires_positive_max_time() -> None:
    with pytest.raises(ValidationError):
        Chart(name="c", max_time=0)


def test_valid_appends_succeed() -> None:
    bar = Bar(name="Bar1")
    group = Group(name="G")
    chart = Chart(name="C", max_time=100)

    assert bar.add_event(Event(start_time=0, duration=10, color="red"))
    assert group.add_bar(bar)
    assert chart.add_group(group)
    assert chart.group_list == [group]
    assert group.bar_list == [bar]
    assert len(bar.event_list) == 1


@pytest.mark.parametrize(
    ("collection", "method", "value"),
    [
        (Bar(name="b"), "add_event", {"start_time": 0, "duration": 1, "color": "red"}),
        (Bar(name="b"), "add_event", Group(name="g")),
        (Group(name="g"), "add_bar", Event(start_time=0, duration=1, color="red")),
        (Group(name="g"), "add_bar", "Bar1"),
        (Chart(name="c", max_time=10), "add_group", Bar(name="b")),
        (Chart(name="c", max_time=10), "add_group", None),
    ],
)
def test_append_rejects_wrong_type(
    collection: object, method: str, value: object, caplog: pytest.LogCaptureFixture
) -> None:
    items = {"add_event": "event_list", "add_bar": "bar_list", "add_group": "group_list"}[method]
    before = len(getattr(collection, items))

    with caplog.at_level(logging.WARNING, logger="domain.models"):
        result = getattr(collection, method)(value)

    assert isinstance(result, AppendResult)
    assert not result
    assert result.reason
    assert len(getattr(collection, items)) == before
    assert any("Invalid" in record.getMessage() for record in caplog.records)


def test_same_bar_cannot_be_appended_twice() -> None:
    bar = Bar(name="repeated")
    group = Group(name="g")

    assert group.add_bar(bar)
    result = group.add_bar(bar)

    assert not result
    assert group.bar_list == [bar]


def test_same_group_cannot_be_appended_twice() -> None:
    group = Group(name="g")
    chart = Chart(name="c", max_time=10)

    assert chart.add_group(group)
    assert not chart.add_group(group)
    assert chart.group_list == [group]


def test_name_and_icon_may_be_overwritten() -> None:
    bar = Bar(name="Ball 0")
    bar.name = "Red Ball"
    bar.icon_link = "icons/redBall.svg"
    assert bar.name == "Red Ball"
    assert bar.icon_link == "icons/redBall.svg"


def test_chart_validates_from_nested_payload() -> None:
    chart = Chart.model_validate(
        {
            "name": "C",
            "max_time": 600,
            "group_list": [
                {"name": "G", "bar_list": [{"name": "B", "event_list": [{"start_time": 0, "duration": 100, "color": "red"}]}]}
            ],
        }
    )
    assert chart.bar_count() == 1
    assert chart.group_list[0].bar_list[0].event_list[0].color == "red"
