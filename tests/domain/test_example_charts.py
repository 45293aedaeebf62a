from __future__ import annotations

import logging

import pytest

from domain.services.example_charts import EXAMPLES, custom_31_chart, get_example, recorded_cascade_chart
from domain.style import ChartStyle


@pytest.mark.parametrize("name", sorted(EXAMPLES))
def test_examples_build_consistent_charts(name: str, caplog: pytest.LogCaptureFixture) -> None:
    example = EXAMPLES[name]
    with caplog.at_level(logging.WARNING):
        chart = example.build()

    assert "Invalid quintuple" not in caplog.text
    assert chart.group_list
    ChartStyle().with_overrides(**example.style_overrides)


def test_recorded_cascade_has_icons_and_ticks() -> None:
    chart = recorded_cascade_chart()
    balls, hands = chart.group_list
    assert [bar.name for bar in balls.bar_list] == ["Red Ball", "Green Ball", "Blue Ball"]
    assert [bar.name for bar in hands.bar_list] == ["Left Hand", "Right Hand"]
    assert all(bar.icon_link and bar.icon_link.startswith("icons/") for bar in balls.bar_list + hands.bar_list)
    assert chart.interval_time == 100
    assert chart.max_time == 1380


def test_custom_31_chart_is_hand_built() -> None:
    chart = custom_31_chart()
    assert chart.max_time == 600
    assert chart.bar_count() == 4
    assert [e.start_time for e in chart.group_list[0].bar_list[1].event_list] == [100, 500]


def test_unknown_example_lists_known_names() -> None:
    with pytest.raises(KeyError, match="recorded-3"):
        get_example("nope")
