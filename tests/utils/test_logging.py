from __future__ import annotations

from pathlib import Path

import pytest

from commandbar.utils.logging import (
    LoggingOptions,
    configure_logging,
    get_logger,
    log_file_path,
)


def test_configure_logging_writes_structured_events(tmp_path: Path) -> None:
    log_path = tmp_path / "palette.log"
    configured = configure_logging(LoggingOptions(level="DEBUG", log_path=log_path))

    assert configured == log_path
    assert log_file_path() == log_path

    get_logger("tests.logging").info("Palette opened", query_length=0)

    content = log_path.read_text(encoding="utf-8")
    assert "Palette opened" in content
    assert "query_length" in content


def test_user_text_fields_are_sanitised(tmp_path: Path) -> None:
    log_path = tmp_path / "palette.log"
    configure_logging(LoggingOptions(log_path=log_path))

    get_logger("tests.logging").warning(
        "Suggestion provider failed",
        query="rm\x1b[2J" + "x" * 200,
        title="Fix\x00 Grammar",
    )

    content = log_path.read_text(encoding="utf-8")
    assert "\x1b" not in content
    assert "\x00" not in content
    assert "Fix Grammar" in content
    assert "x" * 121 not in content
    assert "…" in content


def test_file_sink_keeps_debug_events_below_console_level(tmp_path: Path) -> None:
    log_path = tmp_path / "palette.log"
    configure_logging(LoggingOptions(level="WARNING", log_path=log_path))

    get_logger("tests.logging").debug("Palette filtered", matched=2)

    assert "Palette filtered" in log_path.read_text(encoding="utf-8")


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMMANDBAR_LOG_LEVEL", "warning")
    assert LoggingOptions.from_env().level == "WARNING"

    monkeypatch.setenv("COMMANDBAR_LOG_LEVEL", "chatty")
    assert LoggingOptions.from_env().level == "INFO"
