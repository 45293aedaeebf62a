from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from adapters.excalidraw.surface import ExcalidrawSurface
from adapters.layout.timeline import TimelineLayoutEngine
from adapters.svg.surface import SvgSurface
from app.config import OutputFormat
from domain.models import Chart
from domain.ports.drawing import DrawingSurface
from domain.services.render_timeline import TimelineRenderer
from domain.style import ChartStyle

SurfaceT = TypeVar("SurfaceT", bound=DrawingSurface)


def build_renderer() -> TimelineRenderer:
    return TimelineRenderer(TimelineLayoutEngine())


def build_surface(
    output_format: OutputFormat, asset_root: Path | None = None, scene_name: str = "timeline"
) -> DrawingSurface:
    if output_format == "excalidraw":
        return ExcalidrawSurface(asset_root=asset_root, scene_name=scene_name)
    if output_format == "svg":
        return SvgSurface()
    msg = f"Unsupported output format: {output_format}"
    raise ValueError(msg)


def render(
    chart: Chart, style: ChartStyle | None = None, surface: SurfaceT | None = None
) -> SurfaceT | SvgSurface:
    """Render ``chart`` and return the surface it was drawn on.

    Without an explicit surface a fresh ``SvgSurface`` is used.
    """
    target: SurfaceT | SvgSurface = surface if surface is not None else SvgSurface()
    build_renderer().render(chart, style or ChartStyle(), target)
    return target
