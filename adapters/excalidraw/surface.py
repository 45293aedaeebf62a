from __future__ import annotations

import base64
import logging
import mimetypes
import random
import uuid
from pathlib import Path
from typing import Dict, List

from domain.models import CUSTOM_DATA_KEY, METADATA_SCHEMA_VERSION, ExcalidrawDocument, Point, Size
from domain.ports.drawing import DrawingSurface, ElementMeta

logger = logging.getLogger(__name__)

STROKE_COLOR = "#1e1e1e"
FONT_FAMILY = 1


class ExcalidrawSurface(DrawingSurface):
    """Builds an Excalidraw scene out of draw calls.

    Icons are embedded as data URLs: ``data:`` links are used as is, other
    links are read from disk relative to ``asset_root``. Unreadable icons still
    produce an image element whose file is missing from the scene.
    """

    def __init__(self, asset_root: Path | None = None, scene_name: str = "timeline") -> None:
        self.asset_root = asset_root
        self.namespace = uuid.uuid5(uuid.NAMESPACE_DNS, "dwell-timeline")
        self.scene_name = scene_name
        self.canvas: Size | None = None
        self.elements: List[dict] = []
        self.files: Dict[str, dict] = {}

    def create_canvas(self, size: Size) -> None:
        self.canvas = size
        self.elements = []
        self.files = {}

    def begin_group(self, element_id: str, name: str, meta: ElementMeta) -> None:
        # Excalidraw has no group element; members carry the group id in groupIds.
        return None

    def add_rectangle(
        self,
        element_id: str,
        position: Point,
        size: Size,
        meta: ElementMeta,
        fill: str | None = None,
        stroke: str | None = None,
    ) -> None:
        self.elements.append(
            self._base_shape(
                element_id=element_id,
                type_name="rectangle",
                position=position,
                width=size.width,
                height=size.height,
                meta=meta,
                extra={
                    "strokeColor": stroke or STROKE_COLOR,
                    "backgroundColor": fill or "transparent",
                    "fillStyle": "solid",
                },
            )
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
        # Excalidraw anchors text at its top-left corner, SVG at the baseline.
        width = max(1.0, len(text) * font_size * 0.6)
        height = font_size * 1.25
        x = position.x
        if anchor == "middle":
            x -= width / 2
        elif anchor == "end":
            x -= width
        self.elements.append(
            self._base_shape(
                element_id=element_id,
                type_name="text",
                position=Point(x, position.y - font_size),
                width=width,
                height=height,
                meta=meta,
                extra={
                    "strokeColor": fill or STROKE_COLOR,
                    "backgroundColor": "transparent",
                    "fillStyle": "solid",
                    "text": text,
                    "originalText": text,
                    "fontSize": font_size,
                    "fontFamily": FONT_FAMILY,
                    "textAlign": {"middle": "center", "end": "right"}.get(anchor, "left"),
                    "verticalAlign": "top",
                    "baseline": font_size,
                    "containerId": None,
                    "lineHeight": 1.25,
                },
            )
        )

    def add_line(
        self,
        element_id: str,
        start: Point,
        end: Point,
        meta: ElementMeta,
        stroke: str | None = None,
    ) -> None:
        dx = end.x - start.x
        dy = end.y - start.y
        self.elements.append(
            self._base_shape(
                element_id=element_id,
                type_name="line",
                position=start,
                width=abs(dx),
                height=abs(dy),
                meta=meta,
                extra={
                    "strokeColor": stroke or STROKE_COLOR,
                    "backgroundColor": "transparent",
                    "fillStyle": "solid",
                    "points": [[0, 0], [dx, dy]],
                    "startBinding": None,
                    "endBinding": None,
                    "startArrowhead": None,
                    "endArrowhead": None,
                },
            )
        )

    def add_image(
        self,
        element_id: str,
        href: str,
        position: Point,
        size: Size,
        meta: ElementMeta,
    ) -> None:
        file_id = self._stable_id("file", href)
        data_url = self._data_url(href)
        if data_url is not None and file_id not in self.files:
            self.files[file_id] = {
                "id": file_id,
                "mimeType": data_url.split(";", 1)[0].removeprefix("data:"),
                "dataURL": data_url,
                "created": 0,
            }
        self.elements.append(
            self._base_shape(
                element_id=element_id,
                type_name="image",
                position=position,
                width=size.width,
                height=size.height,
                meta={**meta, "href": href},
                extra={
                    "strokeColor": "transparent",
                    "backgroundColor": "transparent",
                    "fillStyle": "solid",
                    "fileId": file_id,
                    "status": "saved",
                    "scale": [1, 1],
                },
            )
        )

    def document(self) -> ExcalidrawDocument:
        app_state = {
            "viewBackgroundColor": "#ffffff",
            "gridSize": None,
            "currentItemFontFamily": FONT_FAMILY,
            "currentItemStrokeColor": STROKE_COLOR,
            "name": self.scene_name,
        }
        if self.canvas is not None:
            app_state["width"] = self.canvas.width
            app_state["height"] = self.canvas.height
        return ExcalidrawDocument(
            elements=list(self.elements), app_state=app_state, files=dict(self.files)
        )

    def _data_url(self, href: str) -> str | None:
        if href.startswith("data:"):
            return href
        path = Path(href)
        if not path.is_absolute() and self.asset_root is not None:
            path = self.asset_root / path
        try:
            payload = path.read_bytes()
        except OSError as exc:
            logger.warning("Icon %s could not be read: %s", href, exc)
            return None
        mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        encoded = base64.b64encode(payload).decode("ascii")
        return f"data:{mime_type};base64,{encoded}"

    def _base_shape(
        self,
        element_id: str,
        type_name: str,
        position: Point,
        width: float,
        height: float,
        meta: ElementMeta,
        extra: dict | None = None,
    ) -> dict:
        metadata = {"schema_version": METADATA_SCHEMA_VERSION, "element": element_id, **meta}
        group_ids: List[str] = []
        if "group_index" in meta:
            group_ids.append(self._stable_id("group", str(meta["group_index"])))
            if "bar_index" in meta:
                group_ids.insert(
                    0, self._stable_id("bar", str(meta["group_index"]), str(meta["bar_index"]))
                )
        return {
            "id": self._stable_id(self.scene_name, element_id),
            "type": type_name,
            "x": position.x,
            "y": position.y,
            "width": width,
            "height": height,
            "angle": 0,
            "strokeWidth": 1,
            "strokeStyle": "solid",
            "roughness": 0,
            "opacity": 100,
            "groupIds": group_ids,
            "frameId": None,
            "roundness": None,
            "seed": self._rand_seed(),
            "version": 1,
            "versionNonce": self._rand_seed(),
            "isDeleted": False,
            "boundElements": [],
            "locked": False,
            "customData": {CUSTOM_DATA_KEY: metadata},
            **(extra or {}),
        }

    def _stable_id(self, *parts: str) -> str:
        return str(uuid.uuid5(self.namespace, "|".join(parts)))

    def _rand_seed(self) -> int:
        return random.randint(1, 2**31 - 1)
