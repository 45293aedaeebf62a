from __future__ import annotations

import html
from typing import List, Tuple

from domain.models import Point, Size
from domain.ports.drawing import DrawingSurface, ElementMeta

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

_CLASS_BY_ROLE = {
    "bar_outline": "barOutline",
    "bar_label": "barLabel",
    "interval_tick": "intervalTick",
    "interval_label": "intervalLabel",
    "event": "event",
    "bar_icon": "barIcon",
    "title": "title",
}


def _num(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


def _attr(value: object) -> str:
    return html.escape(str(value), quote=True)


class SvgSurface(DrawingSurface):
    """Collects draw calls into an SVG document.

    Elements of one bar are wrapped in ``<g class="bar" id="group{g}bar{b}">``
    nested inside ``<g class="group" id="group{g}">``; every group opened with
    ``begin_group`` gets its wrapper even when it has no bars.
    """

    def __init__(self) -> None:
        self.size: Size | None = None
        self._lines: List[str] = []
        self._open_group: object | None = None
        self._open_bar: Tuple[int, int] | None = None

    def create_canvas(self, size: Size) -> None:
        self.size = size
        self._lines = []
        self._open_group = None
        self._open_bar = None

    def begin_group(self, element_id: str, name: str, meta: ElementMeta) -> None:
        self._close_open()
        self._lines.append(
            f'  <g class="group" id="{_attr(element_id)}" data-name="{_attr(name)}">'
        )
        self._open_group = meta.get("group_index", element_id)

    def add_rectangle(
        self,
        element_id: str,
        position: Point,
        size: Size,
        meta: ElementMeta,
        fill: str | None = None,
        stroke: str | None = None,
    ) -> None:
        self._enter(meta)
        self._emit(
            f'<rect class="{self._class(meta)}" id="{_attr(element_id)}" '
            f'x="{_num(position.x)}" y="{_num(position.y)}" '
            f'width="{_num(size.width)}" height="{_num(size.height)}" '
            f'fill="{_attr(fill or "none")}" stroke="{_attr(stroke or "none")}"/>'
        )

    def add_text(
        self,
        element_id: str,
        text: str,
        position: Point,
        font_size: float,
        meta: ElementMeta,
        fill: str | None = None,
        anchor: str = "start",
    ) -> None:
        self._enter(meta)
        fill_attr = f' fill="{_attr(fill)}"' if fill else ""
        anchor_attr = f' text-anchor="{_attr(anchor)}"' if anchor != "start" else ""
        self._emit(
            f'<text class="{self._class(meta)}" id="{_attr(element_id)}" '
            f'x="{_num(position.x)}" y="{_num(position.y)}" '
            f'font-size="{_num(font_size)}"{fill_attr}{anchor_attr}>'
            f"{html.escape(text, quote=False)}</text>"
        )

    def add_line(
        self,
        element_id: str,
        start: Point,
        end: Point,
        meta: ElementMeta,
        stroke: str | None = None,
    ) -> None:
        self._enter(meta)
        self._emit(
            f'<line class="{self._class(meta)}" id="{_attr(element_id)}" '
            f'x1="{_num(start.x)}" y1="{_num(start.y)}" x2="{_num(end.x)}" y2="{_num(end.y)}" '
            f'stroke="{_attr(stroke or "black")}"/>'
        )

    def add_image(
        self,
        element_id: str,
        href: str,
        position: Point,
        size: Size,
        meta: ElementMeta,
    ) -> None:
        self._enter(meta)
        self._emit(
            f'<image class="{self._class(meta)}" id="{_attr(element_id)}" '
            f'href="{_attr(href)}" xlink:href="{_attr(href)}" '
            f'x="{_num(position.x)}" y="{_num(position.y)}" '
            f'width="{_num(size.width)}" height="{_num(size.height)}"/>'
        )

    def to_string(self) -> str:
        if self.size is None:
            raise RuntimeError("create_canvas() must be called before to_string()")
        body = list(self._lines)
        if self._open_bar is not None:
            body.append("    </g>")
        if self._open_group is not None:
            body.append("  </g>")
        header = (
            f'<svg xmlns="{SVG_NAMESPACE}" xmlns:xlink="{XLINK_NAMESPACE}" class="chart" id="canvas" '
            f'width="{_num(self.size.width)}" height="{_num(self.size.height)}">'
        )
        return "\n".join([header, *body, "</svg>"]) + "\n"

    def _enter(self, meta: ElementMeta) -> None:
        group_index = meta.get("group_index")
        bar_index = meta.get("bar_index")
        if group_index is None or bar_index is None:
            return
        if self._open_bar == (group_index, bar_index):
            return
        if self._open_group != group_index:
            self._close_open()
            self._lines.append(f'  <g class="group" id="group{group_index}">')
            self._open_group = group_index
        else:
            self._close_bar()
        self._lines.append(f'    <g class="bar" id="group{group_index}bar{bar_index}">')
        self._open_bar = (group_index, bar_index)

    def _close_bar(self) -> None:
        if self._open_bar is not None:
            self._lines.append("    </g>")
            self._open_bar = None

    def _close_open(self) -> None:
        self._close_bar()
        if self._open_group is not None:
            self._lines.append("  </g>")
            self._open_group = None

    def _emit(self, element: str) -> None:
        indent = "      " if self._open_bar is not None else "  "
        self._lines.append(f"{indent}{element}")

    def _class(self, meta: ElementMeta) -> str:
        role = str(meta.get("role", ""))
        return _CLASS_BY_ROLE.get(role, role)
