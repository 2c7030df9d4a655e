from __future__ import annotations

import json
from pathlib import Path

import pytest

from huescale.cli import main
from huescale.exporter import MemoryExporter

pytestmark = pytest.mark.integration


def test_single_palette(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["#2D72D2", "--stop", "500"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("generated (anchor 500: #2D72D2)")
    assert "   500  #2d72d2" in out
    assert len(out.strip().splitlines()) == 11


def test_default_stop_and_format(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["#2D72D2", "--format", "oklch", "--name", "brand"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("brand (anchor 500: #2D72D2)")
    assert out.count("oklch(") == 10


def test_batch_with_partial_failure(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    target = tmp_path / "batch.json"
    code = main(["--batch", "#2D72D2::500, not-a-color::600, #5C7CFA::400", "--json", str(target)])
    assert code == 0
    captured = capsys.readouterr()
    assert "batch-#2D72D2" in captured.out
    assert "batch-#5C7CFA" in captured.out
    assert "not-a-color" in captured.err

    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["partial"] is True
    assert len(data["palettes"]) == 2


def test_batch_all_failed(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--batch", "nope::500"]) == 1
    assert "nope" in capsys.readouterr().err


def test_transform_then_generate(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    target = tmp_path / "green.json"
    assert main(["--transform", "#2D72D2>#238551::500", "--json", str(target)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("#238551 -> #")
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["name"] == "generated-#238551"
    assert data["anchorStop"] == 500


def test_transform_many_targets(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    target = tmp_path / "many.json"
    assert main(["--transform", "#2D72D2>(red, lime)::600", "--name", "set", "--json", str(target)]) == 0
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["groupName"] == "set"
    assert [p["name"] for p in data["palettes"]] == ["set-red", "set-lime"]


def test_injected_exporter_receives_the_result(capsys: pytest.CaptureFixture[str]) -> None:
    sink = MemoryExporter()
    assert main(["--transform", "#2D72D2>(red, lime)::600", "--name", "set"], exporter=sink) == 0
    assert len(sink.captured) == 1
    data = json.loads(sink.captured[0])
    assert data["groupName"] == "set"
    assert [p["anchorStop"] for p in data["palettes"]] == [600, 600]


def test_transform_without_stop_prints_colors_only(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    target = tmp_path / "none.json"
    assert main(["--transform", "#2D72D2>red", "--format", "oklch", "--json", str(target)]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert len(out) == 1
    assert out[0].startswith("red -> oklch(")
    assert not target.exists()


@pytest.mark.parametrize(
    "argv, message",
    [
        (["nope"], "error: Invalid color 'nope'"),
        (["#2D72D2", "--stop", "550"], "error: Invalid stop"),
        (["--transform", "#2D72D2"], "error: Invalid input"),
        (["#2D72D2", "--pattern", "/nonexistent/palette.json"], "error: Could not load pattern"),
    ],
)
def test_errors_exit_with_1(capsys: pytest.CaptureFixture[str], argv, message: str) -> None:
    assert main(argv) == 1
    assert capsys.readouterr().err.startswith(message)


def test_usage_errors_exit_with_2() -> None:
    with pytest.raises(SystemExit) as ei:
        main([])
    assert ei.value.code == 2
    with pytest.raises(SystemExit) as ei:
        main(["#2D72D2", "--batch", "red::500"])
    assert ei.value.code == 2


def test_preview_png(tmp_path: Path) -> None:
    target = tmp_path / "swatches" / "blue.png"
    assert main(["#2D72D2", "--preview", str(target)]) == 0
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
