from __future__ import annotations

import logging
from collections.abc import Iterable

from domain.models import Event

logger = logging.getLogger(__name__)


def correct_event_wrapping(events: Iterable[Event], max_time: float) -> list[Event]:
    """Split events that run past the end of the cycle.

    The part beyond ``max_time`` wraps around to the start of the bar, so an
    overshooting event becomes two adjacent events in the position of the
    original. Events that fit are passed through untouched.

    An event longer than the cycle is clamped to ``max_time`` and an event that
    starts after the end of the cycle is folded back into it, so every fragment
    ends at or before ``max_time``. A start exactly at ``max_time`` is left as
    is and yields a zero-duration first fragment.
    """
    corrected: list[Event] = []
    for event in events:
        event = _normalize(event, max_time)
        if event.start_time + event.duration <= max_time:
            corrected.append(event)
            continue
        overshoot = (event.start_time + event.duration) - max_time
        # Zero-length when the event starts exactly at max_time.
        corrected.append(
            Event.model_construct(
                start_time=event.start_time,
                duration=event.duration - overshoot,
                color=event.color,
            )
        )
        corrected.append(Event(start_time=0, duration=overshoot, color=event.color))
    return corrected


def _normalize(event: Event, max_time: float) -> Event:
    start_time = event.start_time
    duration = event.duration
    if duration > max_time:
        logger.warning(
            "Event %r is longer than the cycle (%s > %s); clamping to one cycle",
            event,
            duration,
            max_time,
        )
        duration = max_time
    if start_time > max_time:
        logger.warning(
            "Event %r starts after the end of the cycle (%s > %s); folding into the cycle",
            event,
            start_time,
            max_time,
        )
        start_time = start_time % max_time
    if start_time == event.start_time and duration == event.duration:
        return event
    return Event(start_time=start_time, duration=duration, color=event.color)
