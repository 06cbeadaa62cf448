from __future__ import annotations

import pytest
import structlog

from blockclassifier.config.settings import reset_settings


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging():
    reset_settings()
    yield
    reset_settings()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
