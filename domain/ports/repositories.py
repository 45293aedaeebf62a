from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from domain.models import Chart, ExcalidrawDocument


class ChartRepository(Protocol):
    def load_all_with_paths(self, directory: Path) -> Sequence[tuple[Path, Chart]]: ...

    def load_by_path(self, path: Path) -> Chart: ...

    def save(self, chart: Chart, path: Path) -> None: ...


class SceneRepository(Protocol):
    def save_excalidraw(self, document: ExcalidrawDocument, path: Path) -> None: ...

    def save_svg(self, svg: str, path: Path) -> None: ...
