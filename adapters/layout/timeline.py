from __future__ import annotations

from typing import List, Tuple

from domain.models import (
    Bar,
    BarPlacement,
    Chart,
    Event,
    EventPlacement,
    Group,
    GroupPlacement,
    IconPlacement,
    IntervalTick,
    Point,
    Size,
    TickPlacement,
    TimelinePlan,
    TitlePlacement,
)
from domain.ports.layout import LayoutEngine
from domain.services.event_wrapping import correct_event_wrapping
from domain.services.interval_ticks import format_time, interval_ticks
from domain.style import ChartStyle

TICK_LABEL_INSET = 2.0


def compute_canvas_size(chart: Chart, style: ChartStyle) -> Size:
    height = style.title_y_space
    for group in chart.group_list:
        height += len(group.bar_list) * _bar_pitch(style)
    height += len(chart.group_list) * style.group_vertical_space
    width = style.bar_left_offset + style.bar_length + style.chart_right_pad
    return Size(width, height)


def layout_groups(chart: Chart, style: ChartStyle) -> List[Tuple[Group, float]]:
    offsets: List[Tuple[Group, float]] = []
    consumed = style.title_y_space
    for group in chart.group_list:
        offsets.append((group, consumed))
        consumed += len(group.bar_list) * _bar_pitch(style) + style.group_vertical_space
    return offsets


def layout_bars(group: Group, y_offset: float, style: ChartStyle) -> List[Tuple[Bar, float]]:
    # Event count never changes a bar's height.
    return [(bar, y_offset + idx * _bar_pitch(style)) for idx, bar in enumerate(group.bar_list)]


def scale_factor(chart: Chart, style: ChartStyle) -> float:
    return style.bar_length / chart.max_time


def event_rect(event: Event, bar_y: float, factor: float, style: ChartStyle) -> Tuple[Point, Size]:
    position = Point(style.bar_left_offset + event.start_time * factor, bar_y)
    return position, Size(event.duration * factor, style.bar_height)


def _bar_pitch(style: ChartStyle) -> float:
    return style.bar_height + style.bar_vertical_space


class TimelineLayoutEngine(LayoutEngine):
    def build_plan(self, chart: Chart, style: ChartStyle) -> TimelinePlan:
        factor = scale_factor(chart, style)
        title = TitlePlacement(
            text=chart.name,
            position=Point(0.0, style.title_font_size),
            font_size=style.title_font_size,
        )
        groups: List[GroupPlacement] = []
        for group_idx, (group, group_y) in enumerate(layout_groups(chart, style)):
            bars = [
                self._place_bar(chart, style, factor, group_idx, bar_idx, bar, bar_y)
                for bar_idx, (bar, bar_y) in enumerate(layout_bars(group, group_y, style))
            ]
            groups.append(
                GroupPlacement(group_index=group_idx, name=group.name, y_offset=group_y, bars=bars)
            )
        return TimelinePlan(
            canvas=compute_canvas_size(chart, style),
            title=title,
            scale_factor=factor,
            groups=groups,
        )

    def _place_bar(
        self,
        chart: Chart,
        style: ChartStyle,
        factor: float,
        group_idx: int,
        bar_idx: int,
        bar: Bar,
        bar_y: float,
    ) -> BarPlacement:
        events: List[EventPlacement] = []
        for event_idx, event in enumerate(correct_event_wrapping(bar.event_list, chart.max_time)):
            position, size = event_rect(event, bar_y, factor, style)
            events.append(
                EventPlacement(
                    group_index=group_idx,
                    bar_index=bar_idx,
                    event_index=event_idx,
                    position=position,
                    size=size,
                    color=event.color,
                )
            )

        ticks: List[TickPlacement] = []
        if style.should_draw_intervals:
            for tick in interval_ticks(
                chart.max_time,
                chart.interval_time or chart.max_time,
                style.bar_length,
                style.bar_left_offset,
            ):
                ticks.append(self._place_tick(style, group_idx, bar_idx, tick, bar_y))

        icon = None
        if bar.icon_link:
            icon_side = style.bar_height
            icon = IconPlacement(
                group_index=group_idx,
                bar_index=bar_idx,
                href=bar.icon_link,
                position=Point(
                    style.bar_left_offset - style.icon_distance_from_bar - icon_side, bar_y
                ),
                size=Size(icon_side, icon_side),
            )

        return BarPlacement(
            group_index=group_idx,
            bar_index=bar_idx,
            name=bar.name,
            position=Point(style.bar_left_offset, bar_y),
            size=Size(style.bar_length, style.bar_height),
            label_position=Point(0.0, bar_y + style.bar_height / 2 + style.bar_font_size / 2),
            ticks=ticks,
            events=events,
            icon=icon,
        )

    def _place_tick(
        self, style: ChartStyle, group_idx: int, bar_idx: int, tick: IntervalTick, bar_y: float
    ) -> TickPlacement:
        label = format_time(tick.time) if style.should_label_intervals else None
        label_position = None
        label_anchor = "start"
        if label is not None:
            # Inside the bar under its top edge; the last label hangs left of its tick.
            baseline = bar_y + min(style.interval_label_font_size, style.bar_height)
            if tick.is_final:
                label_position = Point(tick.x - TICK_LABEL_INSET, baseline)
                label_anchor = "end"
            else:
                label_position = Point(tick.x + TICK_LABEL_INSET, baseline)
        return TickPlacement(
            group_index=group_idx,
            bar_index=bar_idx,
            tick=tick,
            top=Point(tick.x, bar_y),
            bottom=Point(tick.x, bar_y + style.bar_height),
            label=label,
            label_position=label_position,
            label_anchor=label_anchor,
        )
