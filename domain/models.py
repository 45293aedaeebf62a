from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)

METADATA_SCHEMA_VERSION = "1.0"
CUSTOM_DATA_KEY = "timeline"


@dataclass(frozen=True)
class AppendResult:
    ok: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def accepted(cls) -> AppendResult:
        return cls(ok=True)

    @classmethod
    def rejected(cls, reason: str) -> AppendResult:
        return cls(ok=False, reason=reason)


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_time: float = Field(..., ge=0)
    duration: float = Field(..., gt=0)
    color: str = Field(..., min_length=1)

    @property
    def end_time(self) -> float:
        return self.start_time + self.duration


class Bar(BaseModel):
    name: str
    icon_link: str | None = None
    event_list: List[Event] = Field(default_factory=list)

    def add_event(self, event: object) -> AppendResult:
        if not isinstance(event, Event):
            logger.warning("Invalid event: %r", event)
            return AppendResult.rejected(f"expected Event, got {type(event).__name__}")
        self.event_list.append(event)
        return AppendResult.accepted()


class Group(BaseModel):
    name: str
    bar_list: List[Bar] = Field(default_factory=list)

    def add_bar(self, bar: object) -> AppendResult:
        if not isinstance(bar, Bar):
            logger.warning("Invalid bar: %r", bar)
            return AppendResult.rejected(f"expected Bar, got {type(bar).__name__}")
        if any(existing is bar for existing in self.bar_list):
            logger.warning("Invalid bar: %r (already in group %r)", bar.name, self.name)
            return AppendResult.rejected("Bar is already in this group")
        self.bar_list.append(bar)
        return AppendResult.accepted()


class Chart(BaseModel):
    name: str
    max_time: float = Field(..., gt=0)
    interval_time: float | None = Field(default=None, gt=0)
    group_list: List[Group] = Field(default_factory=list)

    @model_validator(mode="after")
    def default_interval_time(self) -> Chart:
        if self.interval_time is None:
            self.interval_time = self.max_time
        return self

    def add_group(self, group: object) -> AppendResult:
        if not isinstance(group, Group):
            logger.warning("Invalid group: %r", group)
            return AppendResult.rejected(f"expected Group, got {type(group).__name__}")
        if any(existing is group for existing in self.group_list):
            logger.warning("Invalid group: %r (already in chart %r)", group.name, self.name)
            return AppendResult.rejected("Group is already in this chart")
        self.group_list.append(group)
        return AppendResult.accepted()

    def bar_count(self) -> int:
        return sum(len(group.bar_list) for group in self.group_list)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class TitlePlacement:
    text: str
    position: Point
    font_size: float


@dataclass(frozen=True)
class IntervalTick:
    index: int
    x: float
    time: float
    is_final: bool = False


@dataclass(frozen=True)
class TickPlacement:
    group_index: int
    bar_index: int
    tick: IntervalTick
    top: Point
    bottom: Point
    label: str | None
    label_position: Point | None = None
    label_anchor: str = "start"


@dataclass(frozen=True)
class EventPlacement:
    group_index: int
    bar_index: int
    event_index: int
    position: Point
    size: Size
    color: str


@dataclass(frozen=True)
class IconPlacement:
    group_index: int
    bar_index: int
    href: str
    position: Point
    size: Size


@dataclass(frozen=True)
class BarPlacement:
    group_index: int
    bar_index: int
    name: str
    position: Point
    size: Size
    label_position: Point
    ticks: List[TickPlacement]
    events: List[EventPlacement]
    icon: IconPlacement | None = None


@dataclass(frozen=True)
class GroupPlacement:
    group_index: int
    name: str
    y_offset: float
    bars: List[BarPlacement]


@dataclass(frozen=True)
class TimelinePlan:
    canvas: Size
    title: TitlePlacement
    scale_factor: float
    groups: List[GroupPlacement]


@dataclass(frozen=True)
class ExcalidrawDocument:
    elements: List[dict]
    app_state: dict
    files: dict

    def scene(self) -> dict:
        """Just the drawing: what an Excalidraw link fragment carries."""
        return {"elements": self.elements, "appState": self.app_state, "files": self.files}

    def to_dict(self) -> dict:
        return {
            "type": "excalidraw",
            "version": 2,
            "source": "dwell-timeline",
            "elements": self.elements,
            "appState": self.app_state,
            "files": self.files,
        }
