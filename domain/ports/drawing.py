from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from domain.models import Point, Size

ElementMeta = Mapping[str, Any]


class DrawingSurface(Protocol):
    """Write-only 2D target the timeline renderer draws onto.

    ``element_id`` is stable for a given chart position and ``meta`` carries the
    element role plus its group, bar and event indices.
    """

    def create_canvas(self, size: Size) -> None: ...

    def begin_group(self, element_id: str, name: str, meta: ElementMeta) -> None: ...

    def add_rectangle(
        self,
        element_id: str,
        position: Point,
        size: Size,
        meta: ElementMeta,
        fill: str | None = None,
        stroke: str | None = None,
    ) -> None: ...

    def add_text(
        self,
        element_id: str,
        text: str,
        position: Point,
        font_size: float,
        meta: ElementMeta,
        fill: str | None = None,
        anchor: str = "start",
    ) -> None: ...

    def add_line(
        self,
        element_id: str,
        start: Point,
        end: Point,
        meta: ElementMeta,
        stroke: str | None = None,
    ) -> None: ...

    def add_image(
        self,
        element_id: str,
        href: str,
        position: Point,
        size: Size,
        meta: ElementMeta,
    ) -> None: ...
