from __future__ import annotations

import logging
import math

from domain.models import IntervalTick

logger = logging.getLogger(__name__)


def tick_count(max_time: float, interval_time: float) -> int:
    ratio = max_time / interval_time
    count = math.floor(ratio)
    if not math.isclose(ratio, round(ratio)):
        logger.warning(
            "Interval %s does not divide max time %s evenly; drawing %d regular ticks",
            interval_time,
            max_time,
            count,
        )
    else:
        count = round(ratio)
    return count


def interval_ticks(
    max_time: float,
    interval_time: float,
    bar_length: float,
    bar_left_offset: float,
) -> list[IntervalTick]:
    """Evenly spaced time markers across a bar, plus one at its right edge.

    The final tick always marks ``max_time`` at ``bar_left_offset + bar_length``
    whether or not it lines up with the regular spacing.
    """
    count = tick_count(max_time, interval_time)
    ticks: list[IntervalTick] = []
    if count > 0:
        spacing = bar_length / count
        time_step = max_time / count
        for index in range(count):
            ticks.append(
                IntervalTick(index=index, x=bar_left_offset + index * spacing, time=index * time_step)
            )
    ticks.append(
        IntervalTick(index=count, x=bar_left_offset + bar_length, time=max_time, is_final=True)
    )
    return ticks


def format_time(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"
