from __future__ import annotations

from pathlib import Path
from typing import List

from adapters.filesystem.json_utils import read_json, write_json
from domain.models import Chart
from domain.ports.repositories import ChartRepository


class FileSystemChartRepository(ChartRepository):
    def load_all_with_paths(self, directory: Path) -> List[tuple[Path, Chart]]:
        return [(path, self.load_by_path(path)) for path in sorted(directory.glob("*.json"))]

    def load_by_path(self, path: Path) -> Chart:
        return Chart.model_validate(read_json(path))

    def save(self, chart: Chart, path: Path) -> None:
        write_json(path, chart.model_dump(mode="json"))
