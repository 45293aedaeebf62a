from __future__ import annotations

from typing import cast

import orjson
from lzstring import LZString  # type: ignore[import-untyped]

from domain.models import ExcalidrawDocument


def build_excalidraw_url(base_url: str, document: ExcalidrawDocument) -> str:
    """Link that opens ``document`` in Excalidraw from the URL fragment alone."""
    payload = orjson.dumps(document.scene()).decode("utf-8")
    fragment = cast(str, LZString().compressToEncodedURIComponent(payload))
    return f"{base_url.split('#', 1)[0]}#json={fragment}"
