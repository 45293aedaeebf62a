from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson


def read_json(path: Path) -> Any:
    return orjson.loads(path.read_bytes())


def write_atomic(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    staged = path.with_name(f".{path.name}.partial")
    staged.write_bytes(data)
    staged.replace(path)


def write_json(path: Path, payload: Any) -> None:
    write_atomic(path, orjson.dumps(payload, option=orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE))
