from __future__ import annotations

from pathlib import Path

from filelock import FileLock

from adapters.filesystem.json_utils import write_atomic, write_json
from domain.models import ExcalidrawDocument
from domain.ports.repositories import SceneRepository


class FileSystemSceneRepository(SceneRepository):
    def save_excalidraw(self, document: ExcalidrawDocument, path: Path) -> None:
        with FileLock(str(self._lock_path(path))):
            write_json(path, document.to_dict())

    def save_svg(self, svg: str, path: Path) -> None:
        with FileLock(str(self._lock_path(path))):
            write_atomic(path, svg.encode("utf-8"))

    def _lock_path(self, path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        return path.with_suffix(f"{path.suffix}.lock")
