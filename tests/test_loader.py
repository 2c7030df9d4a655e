from __future__ import annotations

import json
from pathlib import Path

import pytest

from common import settings
from huescale.errors import PatternLoadError
from huescale.loader import (
    DEFAULT_PATTERN_PATH,
    FilePatternLoader,
    MemoryPatternLoader,
    load_palette_file,
    load_pattern,
    palette_from_dict,
    resolve_pattern_source,
)
from huescale.pattern import TransformationPattern

BLUE_STOPS = [
    {"position": 100, "hex": "#E5EEFB"},
    {"position": 500, "hex": "#2D72D2"},
    {"position": 1000, "color": "oklch(25% 0.07 260)"},
]


def _write(tmp_path: Path, data, name: str = "palette.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
    return path


def test_bundled_default_pattern() -> None:
    pattern = load_pattern()
    assert pattern.name == "default-blue-smoothed"
    assert pattern.is_complete
    assert resolve_pattern_source() == str(DEFAULT_PATTERN_PATH)


def test_load_from_file_fills_gaps(tmp_path: Path) -> None:
    path = _write(tmp_path, {"name": "sparse", "stops": BLUE_STOPS})
    pattern = FilePatternLoader().load(str(path))
    assert pattern.name == "sparse-smoothed"
    assert pattern.is_complete


def test_file_loader_caches_by_path(tmp_path: Path) -> None:
    path = _write(tmp_path, {"name": "cached", "stops": BLUE_STOPS})
    loader = FilePatternLoader()
    first = loader.load(str(path))
    assert loader.load(str(path)) is first

    loader.clear_cache()
    assert loader.load(str(path)) is not first

    uncached = FilePatternLoader(cache=False)
    assert uncached.load(str(path)) is not uncached.load(str(path))


def test_cache_setting_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HUESCALE_PATTERN_CACHE", "false")
    settings.reload_from_env()
    path = _write(tmp_path, {"name": "cached", "stops": BLUE_STOPS})
    loader = FilePatternLoader()
    assert loader.load(str(path)) is not loader.load(str(path))


def test_pattern_source_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = _write(tmp_path, {"name": "env-palette", "stops": BLUE_STOPS})
    monkeypatch.setenv("HUESCALE_PATTERN_SOURCE", str(path))
    settings.reload_from_env()
    assert resolve_pattern_source() == str(path)
    assert resolve_pattern_source("explicit.json") == "explicit.json"
    assert load_pattern(loader=FilePatternLoader(cache=False)).name == "env-palette-smoothed"


def test_palette_from_dict_accepts_color_key() -> None:
    palette = palette_from_dict({"name": "p", "stops": BLUE_STOPS})
    assert [s.position for s in palette.stops] == [100, 500, 1000]
    assert palette.color_at(1000).l == pytest.approx(0.25)  # type: ignore[union-attr]


@pytest.mark.parametrize(
    "data, match",
    [
        ([], "JSON object"),
        ({"stops": BLUE_STOPS}, "name"),
        ({"name": "p", "stops": []}, "stops"),
        ({"name": "p", "stops": ["#fff"]}, "must be an object"),
        ({"name": "p", "stops": [{"hex": "#fff"}]}, "position"),
        ({"name": "p", "stops": [{"position": True, "hex": "#fff"}]}, "position"),
        ({"name": "p", "stops": [{"position": 500}]}, "'hex' or 'color'"),
        ({"name": "p", "stops": [{"position": 500, "hex": "nope"}]}, "stop 500"),
    ],
)
def test_palette_from_dict_errors(data, match: str) -> None:
    with pytest.raises(PatternLoadError, match=match):
        palette_from_dict(data, source="inline")


def test_file_errors(tmp_path: Path) -> None:
    with pytest.raises(PatternLoadError, match="cannot read"):
        load_palette_file(tmp_path / "missing.json")
    with pytest.raises(PatternLoadError, match="invalid JSON"):
        load_palette_file(_write(tmp_path, "{not json", name="broken.json"))


def test_palette_without_reference_stop(tmp_path: Path) -> None:
    path = _write(tmp_path, {"name": "no-ref", "stops": [{"position": 100, "hex": "#eee"}]})
    with pytest.raises(PatternLoadError) as ei:
        FilePatternLoader(cache=False).load(str(path))
    assert ei.value.source == str(path)


def test_memory_loader(blue_pattern: TransformationPattern) -> None:
    loader = MemoryPatternLoader({"blue": blue_pattern})
    assert load_pattern("blue", loader=loader) is blue_pattern
    with pytest.raises(PatternLoadError, match="not found"):
        loader.load("red")
