from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Dict

from domain.models import Bar, Chart, Event, Group
from domain.services.shannon_pattern import generate_shannon_chart

ICON_DIR = "icons"


@dataclass(frozen=True)
class ExampleChart:
    name: str
    description: str
    build: Callable[[], Chart]
    style_overrides: Dict[str, Any] = field(default_factory=dict)


def _pattern(title: str, flight: float, dwell: float, vacant: float, balls: int, hands: int) -> Callable[[], Chart]:
    def _build() -> Chart:
        return generate_shannon_chart(flight, dwell, vacant, balls, hands, title=title)

    return _build


def recorded_cascade_chart() -> Chart:
    """3 ball cascade using timings measured from a recording, with icons."""
    chart = generate_shannon_chart(385, 305, 155, 3, 2, title="3 Ball Cascade")
    balls, hands = chart.group_list
    for bar, (name, icon) in zip(
        balls.bar_list,
        [("Red Ball", "redBall.svg"), ("Green Ball", "greenBall.svg"), ("Blue Ball", "blueBall.svg")],
    ):
        bar.name = name
        bar.icon_link = f"{ICON_DIR}/{icon}"
    for bar, (name, icon) in zip(
        hands.bar_list, [("Left Hand", "leftHand.svg"), ("Right Hand", "rightHand.svg")]
    ):
        bar.name = name
        bar.icon_link = f"{ICON_DIR}/{icon}"
    chart.interval_time = 100
    return chart


def custom_31_chart() -> Chart:
    """Hand-built '31' pattern, without the generator."""
    chart = Chart(name="Hypothetical '31' Pattern Timeline", max_time=600)

    balls = Group(name="Balls")
    red = Bar(name="Red Ball", icon_link=f"{ICON_DIR}/redBall.svg")
    red.add_event(Event(start_time=0, duration=100, color="red"))
    red.add_event(Event(start_time=200, duration=100, color="red"))
    balls.add_bar(red)
    green = Bar(name="Green Ball", icon_link=f"{ICON_DIR}/greenBall.svg")
    green.add_event(Event(start_time=100, duration=100, color="lime"))
    green.add_event(Event(start_time=500, duration=100, color="lime"))
    balls.add_bar(green)
    chart.add_group(balls)

    hands = Group(name="Hands")
    left = Bar(name="Left Hand", icon_link=f"{ICON_DIR}/leftHand.svg")
    left.add_event(Event(start_time=0, duration=100, color="red"))
    left.add_event(Event(start_time=500, duration=100, color="lime"))
    hands.add_bar(left)
    right = Bar(name="Right Hand", icon_link=f"{ICON_DIR}/rightHand.svg")
    right.add_event(Event(start_time=100, duration=100, color="lime"))
    right.add_event(Event(start_time=200, duration=100, color="red"))
    hands.add_bar(right)
    chart.add_group(hands)
    return chart


EXAMPLES: Dict[str, ExampleChart] = {
    example.name: example
    for example in (
        ExampleChart(
            "long-flight-3",
            "3 ball cascade with long flight times",
            _pattern("3 Ball Cascade (Long Flight Times)", 1100, 250, 650, 3, 2),
        ),
        ExampleChart(
            "long-dwell-3",
            "3 ball cascade with long dwell times",
            _pattern("3 Ball Cascade (Long Dwell Times)", 400, 500, 100, 3, 2),
        ),
        ExampleChart("40", "2 balls in 1 hand", _pattern("'40' Pattern", 400, 300, 50, 2, 1)),
        ExampleChart("1", "1 ball between 2 hands", _pattern("'1' Pattern", 200, 100, 500, 1, 2)),
        ExampleChart("cascade-5", "5 ball cascade", _pattern("5 Ball Cascade", 1500, 300, 420, 5, 2)),
        ExampleChart(
            "unrealistic-4",
            "4 ball cascade, not physically juggleable",
            _pattern("Unrealistic 4 Ball Cascade", 400, 200, 100, 4, 2),
        ),
        ExampleChart(
            "recorded-3",
            "3 ball cascade timed from a recording, with icons and 100 ms ticks",
            recorded_cascade_chart,
            {"bar_left_offset": 120, "should_draw_intervals": True},
        ),
        ExampleChart(
            "custom-31",
            "hand-built '31' pattern",
            custom_31_chart,
            {"bar_length": 600, "bar_height": 25, "bar_left_offset": 120, "should_draw_intervals": False},
        ),
    )
}


def get_example(name: str) -> ExampleChart:
    try:
        return EXAMPLES[name]
    except KeyError as exc:
        known = ", ".join(sorted(EXAMPLES))
        msg = f"Unknown example chart {name!r}; expected one of: {known}"
        raise KeyError(msg) from exc
