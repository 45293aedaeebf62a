from __future__ import annotations

import logging
from typing import Any

from domain.models import BarPlacement, Chart, TimelinePlan
from domain.ports.drawing import DrawingSurface
from domain.ports.layout import LayoutEngine
from domain.style import ChartStyle

logger = logging.getLogger(__name__)

Meta = dict[str, Any]


class TimelineRenderer:
    """Projects a chart onto a drawing surface.

    Emission order: canvas, title, then per group a group marker followed by,
    per bar, its outline, name label, interval ticks, event rectangles
    (z-order follows list order) and icon.
    """

    def __init__(self, layout_engine: LayoutEngine) -> None:
        self.layout_engine = layout_engine

    def render(self, chart: Chart, style: ChartStyle, surface: DrawingSurface) -> TimelinePlan:
        plan = self.layout_engine.build_plan(chart, style)
        logger.debug("1 time unit = %spx", plan.scale_factor)

        surface.create_canvas(plan.canvas)
        surface.add_text(
            "title",
            plan.title.text,
            plan.title.position,
            plan.title.font_size,
            meta={"role": "title"},
        )
        for group in plan.groups:
            logger.debug("Drawing group%d (%s)", group.group_index, group.name)
            surface.begin_group(
                f"group{group.group_index}",
                group.name,
                meta={"group_index": group.group_index, "role": "group"},
            )
            for bar in group.bars:
                self._draw_bar(bar, style, surface)
        return plan

    def _draw_bar(self, bar: BarPlacement, style: ChartStyle, surface: DrawingSurface) -> None:
        bar_id = self._bar_id(bar.group_index, bar.bar_index)
        logger.debug("Drawing %s (%s)", bar_id, bar.name)
        bar_meta: Meta = {"group_index": bar.group_index, "bar_index": bar.bar_index}

        surface.add_rectangle(
            f"{bar_id}outline",
            bar.position,
            bar.size,
            meta={**bar_meta, "role": "bar_outline"},
            fill=None,
            stroke=style.outline_color,
        )
        surface.add_text(
            f"{bar_id}label",
            bar.name,
            bar.label_position,
            style.bar_font_size,
            meta={**bar_meta, "role": "bar_label"},
        )

        for tick in bar.ticks:
            tick_id = f"{bar_id}tick{tick.tick.index}"
            tick_meta = {**bar_meta, "tick_index": tick.tick.index, "time": tick.tick.time}
            surface.add_line(
                tick_id,
                tick.top,
                tick.bottom,
                meta={**tick_meta, "role": "interval_tick"},
                stroke=style.interval_tick_color,
            )
            if tick.label is not None:
                surface.add_text(
                    f"{tick_id}label",
                    tick.label,
                    tick.label_position or tick.top,
                    style.interval_label_font_size,
                    meta={**tick_meta, "role": "interval_label"},
                    fill=style.interval_tick_color,
                    anchor=tick.label_anchor,
                )

        # No overlap checks: later events paint over earlier ones.
        for event in bar.events:
            surface.add_rectangle(
                f"{bar_id}event{event.event_index}",
                event.position,
                event.size,
                meta={**bar_meta, "event_index": event.event_index, "role": "event"},
                fill=event.color,
                stroke=style.outline_color,
            )

        if bar.icon is not None:
            surface.add_image(
                f"{bar_id}icon",
                bar.icon.href,
                bar.icon.position,
                bar.icon.size,
                meta={**bar_meta, "role": "bar_icon"},
            )

    @staticmethod
    def _bar_id(group_index: int, bar_index: int) -> str:
        return f"group{group_index}bar{bar_index}"
