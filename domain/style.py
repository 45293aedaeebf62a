from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChartStyle(BaseModel):
    """Visual constants for one render call.

    Instances are frozen; derive variants with ``style.with_overrides(...)``,
    which validates the merged values.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bar_length: float = Field(default=1000, gt=0)
    bar_height: float = Field(default=30, gt=0)
    bar_vertical_space: float = Field(default=10, ge=0)
    bar_left_offset: float = Field(default=100, ge=0)
    chart_right_pad: float = Field(default=10, ge=0)
    group_vertical_space: float = Field(default=20, ge=0)
    title_y_space: float = Field(default=30, ge=0)
    title_font_size: float = Field(default=24, gt=0)
    bar_font_size: float = Field(default=18, gt=0)
    outline_color: str = "black"
    should_draw_intervals: bool = False
    should_label_intervals: bool = True
    interval_label_font_size: float = Field(default=12, gt=0)
    interval_tick_color: str = "grey"
    icon_distance_from_bar: float = Field(default=5, ge=0)

    def with_overrides(self, **overrides: object) -> ChartStyle:
        if not overrides:
            return self
        return self.model_validate({**self.model_dump(), **overrides})
