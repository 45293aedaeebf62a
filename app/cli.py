from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from adapters.excalidraw.share import build_excalidraw_url
from adapters.excalidraw.surface import ExcalidrawSurface
from adapters.filesystem.chart_repository import FileSystemChartRepository
from adapters.filesystem.scene_repository import FileSystemSceneRepository
from adapters.svg.surface import SvgSurface
from app.config import AppSettings, OutputFormat, load_settings
from app.wiring import build_renderer, build_surface
from domain.models import Chart
from domain.services import shannon_pattern
from domain.services.example_charts import EXAMPLES, get_example
from domain.services.shannon_pattern import DEFAULT_TITLE, generate_shannon_chart
from domain.style import ChartStyle

app = typer.Typer(no_args_is_help=True)
render_app = typer.Typer(no_args_is_help=True)
solve_app = typer.Typer(no_args_is_help=True)
app.add_typer(render_app, name="render")
app.add_typer(solve_app, name="solve")
console = Console()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_config_option = typer.Option(None, "--config", help="YAML settings file.")
_format_option = typer.Option(None, "--format", "-f", help="Output format: svg or excalidraw.")
_output_option = typer.Option(None, "--output", "-o", help="Target file (defaults to the output dir).")
_share_option = typer.Option(False, "--share-url", help="Print an Excalidraw link for the chart.")
_intervals_option = typer.Option(None, "--intervals/--no-intervals", help="Draw interval ticks.")


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
) -> None:
    level = log_level.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"expected one of {', '.join(LOG_LEVELS)}", param_hint="--log-level")
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_settings(config: Optional[Path]) -> AppSettings:
    try:
        return load_settings(config)
    except (ValidationError, FileNotFoundError) as exc:
        console.print(f"[red]Invalid settings:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _slug(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "chart"


def _emit(
    chart: Chart,
    settings: AppSettings,
    style: ChartStyle,
    output_format: Optional[str],
    output: Optional[Path],
    share_url: bool,
) -> None:
    fmt = (output_format or settings.output.default_format).lower()
    if fmt not in ("svg", "excalidraw"):
        console.print(f"[red]Unsupported format:[/] {fmt}")
        raise typer.Exit(code=1)
    resolved_format: OutputFormat = "excalidraw" if fmt == "excalidraw" else "svg"
    if share_url:
        resolved_format = "excalidraw"

    surface = build_surface(resolved_format, settings.output.asset_root, scene_name=chart.name)
    build_renderer().render(chart, style, surface)

    target = output or settings.output.output_dir / f"{_slug(chart.name)}.{resolved_format}"
    scenes = FileSystemSceneRepository()
    if isinstance(surface, ExcalidrawSurface):
        document = surface.document()
        scenes.save_excalidraw(document, target)
        if share_url:
            url = build_excalidraw_url(settings.output.excalidraw_base_url, document)
            console.print(url, markup=False, highlight=False, soft_wrap=True)
    elif isinstance(surface, SvgSurface):
        scenes.save_svg(surface.to_string(), target)
    console.print(f"[green]Wrote[/] {target}")


def _style(settings: AppSettings, intervals: Optional[bool], **overrides: object) -> ChartStyle:
    if intervals is not None:
        overrides["should_draw_intervals"] = intervals
    return settings.style.with_overrides(**overrides)


@render_app.command("pattern")
def render_pattern(
    flight: float = typer.Argument(..., help="Flight time."),
    dwell: float = typer.Argument(..., help="Dwell time."),
    vacant: float = typer.Argument(..., help="Vacant time."),
    balls: int = typer.Argument(..., help="Number of balls."),
    hands: int = typer.Argument(..., help="Number of hands."),
    title: str = typer.Option(DEFAULT_TITLE, help="Chart title."),
    interval: Optional[float] = typer.Option(None, help="Tick spacing in time units."),
    intervals: Optional[bool] = _intervals_option,
    output_format: Optional[str] = _format_option,
    output: Optional[Path] = _output_option,
    share_url: bool = _share_option,
    config: Optional[Path] = _config_option,
) -> None:
    settings = _load_settings(config)
    try:
        chart = generate_shannon_chart(flight, dwell, vacant, balls, hands, title=title)
    except ValidationError as exc:
        console.print(f"[red]Invalid pattern parameters:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    if interval is not None:
        if interval <= 0:
            raise typer.BadParameter("must be positive", param_hint="--interval")
        chart.interval_time = interval
    _emit(chart, settings, _style(settings, intervals), output_format, output, share_url)


@render_app.command("example")
def render_example(
    name: str = typer.Argument(..., help="Example chart name (see `examples`)."),
    intervals: Optional[bool] = _intervals_option,
    output_format: Optional[str] = _format_option,
    output: Optional[Path] = _output_option,
    share_url: bool = _share_option,
    config: Optional[Path] = _config_option,
) -> None:
    settings = _load_settings(config)
    try:
        example = get_example(name)
    except KeyError as exc:
        console.print(f"[red]{escape(str(exc.args[0]))}[/]")
        raise typer.Exit(code=1) from exc
    style = _style(settings, intervals, **example.style_overrides)
    _emit(example.build(), settings, style, output_format, output, share_url)


@render_app.command("file")
def render_file(
    input_path: Path = typer.Argument(..., help="Chart JSON file."),
    intervals: Optional[bool] = _intervals_option,
    output_format: Optional[str] = _format_option,
    output: Optional[Path] = _output_option,
    share_url: bool = _share_option,
    config: Optional[Path] = _config_option,
) -> None:
    settings = _load_settings(config)
    if not input_path.exists():
        console.print(f"[red]File not found:[/] {input_path}")
        raise typer.Exit(code=1)
    try:
        chart = FileSystemChartRepository().load_by_path(input_path)
    except (ValueError, ValidationError) as exc:
        console.print(f"[red]Invalid chart file:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    _emit(chart, settings, _style(settings, intervals), output_format, output, share_url)


@app.command("examples")
def list_examples() -> None:
    table = Table("name", "description")
    for name, example in EXAMPLES.items():
        table.add_row(name, example.description)
    console.print(table)


@app.command("validate")
def validate(input_path: Path = typer.Argument(..., help="Chart JSON file to validate.")) -> None:
    if not input_path.exists():
        console.print(f"[red]File not found:[/] {input_path}")
        raise typer.Exit(code=1)
    try:
        Chart.model_validate(json.loads(input_path.read_text(encoding="utf-8")))
    except (ValueError, ValidationError) as exc:
        console.print(f"[red]Validation failed:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    console.print(f"[green]Valid chart file:[/] {input_path}")


@solve_app.command("hands")
def solve_hands(
    flight: float = typer.Option(...), dwell: float = typer.Option(...),
    vacant: float = typer.Option(...), balls: float = typer.Option(...),
) -> None:
    console.print(shannon_pattern.solve_hands(flight, dwell, vacant, balls))


@solve_app.command("balls")
def solve_balls(
    flight: float = typer.Option(...), dwell: float = typer.Option(...),
    vacant: float = typer.Option(...), hands: float = typer.Option(...),
) -> None:
    console.print(shannon_pattern.solve_balls(flight, dwell, vacant, hands))


@solve_app.command("flight")
def solve_flight(
    dwell: float = typer.Option(...), vacant: float = typer.Option(...),
    balls: float = typer.Option(...), hands: float = typer.Option(...),
) -> None:
    console.print(shannon_pattern.solve_flight(dwell, vacant, balls, hands))


@solve_app.command("vacant")
def solve_vacant(
    flight: float = typer.Option(...), dwell: float = typer.Option(...),
    balls: float = typer.Option(...), hands: float = typer.Option(...),
) -> None:
    console.print(shannon_pattern.solve_vacant(flight, dwell, balls, hands))


@solve_app.command("dwell")
def solve_dwell(
    flight: float = typer.Option(...), vacant: float = typer.Option(...),
    balls: float = typer.Option(...), hands: float = typer.Option(...),
) -> None:
    console.print(shannon_pattern.solve_dwell(flight, vacant, balls, hands))


if __name__ == "__main__":
    app()
