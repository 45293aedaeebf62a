from __future__ import annotations

import argparse
import logging
from pathlib import Path

from adapters.excalidraw.surface import ExcalidrawSurface
from adapters.filesystem.scene_repository import FileSystemSceneRepository
from adapters.svg.surface import SvgSurface
from app.wiring import build_renderer, build_surface
from domain.services.example_charts import EXAMPLES
from domain.style import ChartStyle


def main() -> None:
    parser = argparse.ArgumentParser(description="Render every example chart.")
    parser.add_argument("--output-dir", type=Path, default=Path("data/charts/examples"))
    parser.add_argument("--format", choices=("svg", "excalidraw"), default="svg")
    parser.add_argument("--asset-root", type=Path, default=Path("."))
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    renderer = build_renderer()
    scenes = FileSystemSceneRepository()
    for name, example in EXAMPLES.items():
        chart = example.build()
        style = ChartStyle().with_overrides(**example.style_overrides)
        surface = build_surface(args.format, args.asset_root, scene_name=chart.name)
        renderer.render(chart, style, surface)
        target = args.output_dir / f"{name}.{args.format}"
        if isinstance(surface, ExcalidrawSurface):
            scenes.save_excalidraw(surface.document(), target)
        elif isinstance(surface, SvgSurface):
            scenes.save_svg(surface.to_string(), target)
        print(f"Wrote {target}")


if __name__ == "__main__":
    main()
