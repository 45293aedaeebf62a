from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from adapters.filesystem.chart_repository import FileSystemChartRepository
from domain.models import Chart


@lru_cache(maxsize=1)
def repo_root() -> Path:
    for parent in Path(__file__).resolve().parents:
        if (parent / "pyproject.toml").exists():
            return parent
    raise RuntimeError("Repository root not found")


def chart_fixture_path(name: str) -> Path:
    return repo_root() / "examples" / "charts" / name


def load_chart_fixture(name: str) -> Chart:
    return FileSystemChartRepository().load_by_path(chart_fixture_path(name))
