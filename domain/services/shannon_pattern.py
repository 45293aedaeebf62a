from __future__ import annotations

import logging
import math

from pydantic import BaseModel, ConfigDict, Field

from domain.models import Bar, Chart, Event, Group
from domain.services.event_wrapping import correct_event_wrapping

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Shannon's Juggling Theorem"

BALL_COLOURS = (
    "red",
    "lime",
    "deepskyblue",
    "darkorange",
    "gold",
    "blueviolet",
    "magenta",
    "tan",
    "navy",
)


class PatternParameters(BaseModel):
    """Timing of a cascade-like pattern, in any consistent time unit."""

    model_config = ConfigDict(frozen=True)

    flight: float = Field(..., gt=0)
    dwell: float = Field(..., gt=0)
    vacant: float = Field(..., gt=0)
    balls: int = Field(..., ge=1)
    hands: int = Field(..., ge=1)

    @property
    def max_time(self) -> float:
        return (self.dwell + self.flight) * self.hands

    def is_consistent(self) -> bool:
        return math.isclose(
            (self.dwell + self.flight) * self.hands,
            (self.dwell + self.vacant) * self.balls,
        )


def ball_colour(index: int) -> str:
    return BALL_COLOURS[index % len(BALL_COLOURS)]


def generate_shannon_chart(
    flight: float,
    dwell: float,
    vacant: float,
    balls: int,
    hands: int,
    title: str = DEFAULT_TITLE,
) -> Chart:
    """Build a chart where each ball cycles through every hand in turn.

    The result has a "Balls" group (when each ball dwells) and a "Hands" group
    (which ball each hand holds). Patterns with an even number of balls are
    not realistic with this scheme, but are still generated.
    """
    params = PatternParameters(flight=flight, dwell=dwell, vacant=vacant, balls=balls, hands=hands)
    if not params.is_consistent():
        logger.warning(
            "Invalid quintuple! flight=%s dwell=%s vacant=%s balls=%s hands=%s",
            params.flight,
            params.dwell,
            params.vacant,
            params.balls,
            params.hands,
        )

    max_time = params.max_time
    chart = Chart(name=title, max_time=max_time)

    ball_group = Group(name="Balls")
    for ball in range(params.balls):
        ball_offset = ball * (params.dwell + params.vacant)
        events = [
            Event(
                start_time=(ball_offset + hand * (params.flight + params.dwell)) % max_time,
                duration=params.dwell,
                color=ball_colour(ball),
            )
            for hand in range(params.hands)
        ]
        bar = Bar(name=f"Ball {ball}")
        bar.event_list = correct_event_wrapping(events, max_time)
        ball_group.add_bar(bar)
    chart.add_group(ball_group)

    hand_group = Group(name="Hands")
    for hand in range(params.hands):
        hand_offset = hand * (params.dwell + params.flight)
        events = [
            Event(
                start_time=(hand_offset + ball * (params.vacant + params.dwell)) % max_time,
                duration=params.dwell,
                color=ball_colour(ball),
            )
            for ball in range(params.balls)
        ]
        bar = Bar(name=f"Hand {hand}")
        bar.event_list = correct_event_wrapping(events, max_time)
        hand_group.add_bar(bar)
    chart.add_group(hand_group)

    return chart


# Solvers for (F + D) * H = (V + D) * B.


def solve_hands(flight: float, dwell: float, vacant: float, balls: float) -> float:
    hands = (vacant + dwell) * balls / (flight + dwell)
    if not float(hands).is_integer():
        logger.warning("Hand solution %s is not an integer", hands)
    return hands


def solve_balls(flight: float, dwell: float, vacant: float, hands: float) -> float:
    balls = (flight + dwell) * hands / (vacant + dwell)
    if not float(balls).is_integer():
        logger.warning("Ball solution %s is not an integer", balls)
    return balls


def solve_flight(dwell: float, vacant: float, balls: float, hands: float) -> float:
    return ((vacant * balls) + (dwell * balls) - (dwell * hands)) / hands


def solve_vacant(flight: float, dwell: float, balls: float, hands: float) -> float:
    return ((flight * hands) + (dwell * hands) - (dwell * balls)) / balls


def solve_dwell(flight: float, vacant: float, balls: float, hands: float) -> float:
    if hands == balls:
        logger.warning("Dwell is undetermined when hands == balls (%s)", hands)
        return math.nan
    return ((vacant * balls) - (flight * hands)) / (hands - balls)
