from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_int, env_str


def test_env_int_fallbacks(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HUESCALE_TEST_INT", raising=False)
    assert env_int("HUESCALE_TEST_INT", 7) == 7
    monkeypatch.setenv("HUESCALE_TEST_INT", "abc")
    assert env_int("HUESCALE_TEST_INT", 7) == 7
    monkeypatch.setenv("HUESCALE_TEST_INT", " 5 ")
    assert env_int("HUESCALE_TEST_INT", 7) == 5
    monkeypatch.setenv("HUESCALE_TEST_INT", "-3")
    assert env_int("HUESCALE_TEST_INT", 7, min_value=1) == 1


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("yes", True), ("off", False), ("TRUE", True), ("maybe", True)],
)
def test_env_bool(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("HUESCALE_TEST_BOOL", raw)
    assert env_bool("HUESCALE_TEST_BOOL", True) is expected


def test_env_str_blank_is_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUESCALE_TEST_STR", "   ")
    assert env_str("HUESCALE_TEST_STR", "fallback") == "fallback"
    monkeypatch.setenv("HUESCALE_TEST_STR", " value ")
    assert env_str("HUESCALE_TEST_STR") == "value"


def test_settings_defaults() -> None:
    cfg = settings.get()
    assert cfg.PATTERN_SOURCE is None
    assert cfg.PATTERN_CACHE_ENABLED is True
    assert cfg.DEFAULT_OUTPUT_FORMAT == "hex"
    assert cfg.DEFAULT_PALETTE_NAME == "generated"
    assert cfg.DEFAULT_BATCH_NAME == "batch"
    assert cfg.MAX_CONCURRENCY == 3
    assert cfg.LOG_LEVEL == "INFO"


def test_settings_reload_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUESCALE_PATTERN_SOURCE", "/tmp/palette.json")
    monkeypatch.setenv("HUESCALE_DEFAULT_OUTPUT_FORMAT", "OKLCH")
    monkeypatch.setenv("HUESCALE_MAX_CONCURRENCY", "0")
    monkeypatch.setenv("HUESCALE_PATTERN_CACHE", "0")
    monkeypatch.setenv("HUESCALE_LOG_LEVEL", "debug")
    settings.reload_from_env()

    cfg = settings.get()
    assert cfg.PATTERN_SOURCE == "/tmp/palette.json"
    assert cfg.DEFAULT_OUTPUT_FORMAT == "oklch"
    assert cfg.MAX_CONCURRENCY == 1
    assert cfg.PATTERN_CACHE_ENABLED is False
    assert cfg.LOG_LEVEL == "DEBUG"


def test_unknown_output_format_falls_back_to_hex(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUESCALE_DEFAULT_OUTPUT_FORMAT", "cmyk")
    settings.reload_from_env()
    assert settings.get().DEFAULT_OUTPUT_FORMAT == "hex"


def test_resolve_level(monkeypatch: pytest.MonkeyPatch) -> None:
    from common.logging import resolve_level

    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" Warning ") == logging.WARNING
    assert resolve_level("loud") == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level(None) == logging.INFO

    monkeypatch.setenv("HUESCALE_LOG_LEVEL", "error")
    settings.reload_from_env()
    assert resolve_level(None) == logging.ERROR


def test_setup_default_logging_quiets_matplotlib() -> None:
    from common.logging import setup_default_logging

    assert setup_default_logging("DEBUG") == logging.DEBUG
    assert logging.getLogger("huescale").level == logging.DEBUG
    assert logging.getLogger("matplotlib").level == logging.WARNING
    setup_default_logging("INFO")
