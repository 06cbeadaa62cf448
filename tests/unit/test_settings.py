from __future__ import annotations

import pytest
import structlog

from blockclassifier.config.settings import get_settings
from blockclassifier.observability.logger import configure_logging, get_logger


def test_settings_defaults() -> None:
    s = get_settings()
    assert s.log_level == "INFO"
    assert s.service_name
    assert get_settings() is s


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SERVICE_NAME", "classifier-test")
    s = get_settings()
    assert s.log_level == "debug"
    assert s.service_name == "classifier-test"


def test_settings_reject_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValueError):
        get_settings()


def test_configure_logging_renders_json(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    configure_logging()

    assert structlog.is_configured()
    log = get_logger("test")
    log.info("dropped_below_level")
    log.warning("kept_event", blocks=3)

    out = capsys.readouterr().out
    assert "dropped_below_level" not in out
    assert '"event": "kept_event"' in out
    assert '"blocks": 3' in out
    assert '"service_name"' in out
