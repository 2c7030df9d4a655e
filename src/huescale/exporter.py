from __future__ import annotations

"""Exporting generated palettes as JSON.

:func:`to_jsonable` turns API results into plain dicts; exporters write
(or capture) the pretty-printed JSON.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any, List, Protocol, Union

from util.paths import ensure_parent_dir

from .api import BatchResult, GeneratedPaletteOutput
from .color_types import OKLCHColor
from .errors import ExportError

logger = logging.getLogger(__name__)

JSON_INDENT = 2

ExportableData = Union[GeneratedPaletteOutput, BatchResult]


class Exporter(Protocol):
    """Destination for generated results."""

    def export(self, data: ExportableData) -> None: ...


class JsonFileExporter:
    """Write results to a JSON file, creating parent directories."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def export(self, data: ExportableData) -> None:
        try:
            out = ensure_parent_dir(self.path)
            out.write_text(serialize(data) + "\n", encoding="utf-8")
        except OSError as exc:
            raise ExportError(str(self.path), str(exc)) from exc
        logger.info("exported %s to %s", type(data).__name__, out)


class MemoryExporter:
    """Capture serialized results in memory (tests, previews)."""

    def __init__(self) -> None:
        self.captured: List[str] = []

    def export(self, data: ExportableData) -> None:
        self.captured.append(serialize(data))


def serialize(data: ExportableData) -> str:
    return json.dumps(to_jsonable(data), indent=JSON_INDENT, ensure_ascii=False)


def to_jsonable(data: ExportableData) -> dict[str, Any]:
    """Convert a palette output or batch result into JSON-compatible dicts."""
    if isinstance(data, GeneratedPaletteOutput):
        return {
            "name": data.name,
            "anchorStop": data.anchor_stop,
            "inputColor": data.input_color,
            "outputFormat": data.output_format.value,
            "stops": [
                {"position": s.position, "value": s.value, "color": _color_dict(s.color)} for s in data.stops
            ],
        }
    if isinstance(data, BatchResult):
        return {
            "groupName": data.group_name,
            "outputFormat": data.output_format.value,
            "generatedAt": data.generated_at,
            "partial": data.partial,
            "palettes": [to_jsonable(p) for p in data.palettes],
            "failures": [
                {
                    "index": f.index,
                    "inputColor": f.input_color,
                    "anchorStop": _plain(f.anchor_stop),
                    "reason": f.reason,
                }
                for f in data.failures
            ],
        }
    raise ExportError("<json>", f"cannot export {type(data).__name__}")


def _plain(value: object) -> int | str | None:
    if value is None or isinstance(value, (int, str)):
        return value  # type: ignore[return-value]
    return str(value)


def _color_dict(color: OKLCHColor) -> dict[str, float | None]:
    return {
        "l": color.l,
        "c": color.c,
        "h": None if math.isnan(color.h) else color.h,
        "alpha": color.alpha,
    }


__all__ = [
    "Exporter",
    "JsonFileExporter",
    "MemoryExporter",
    "serialize",
    "to_jsonable",
]
