"""
Shared fixtures for the okerr test suite.

Settings are cached process-wide and structlog configuration is global, so
both are reset around every test.
"""

from __future__ import annotations

import pytest
import structlog

from okerr import adapter
from okerr.config import get_settings
from okerr.log import set_capture_logging


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default settings and default structlog config."""
    for name in ("OKERR_LOG_CAPTURES", "OKERR_LOG_LEVEL", "OKERR_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    set_capture_logging(False)
    # A fresh proxy, so a logger cached by an earlier configure_logging() does not leak.
    monkeypatch.setattr(adapter, "log", structlog.get_logger("okerr"))
    yield
    get_settings.cache_clear()
    set_capture_logging(False)
    structlog.reset_defaults()


@pytest.fixture()
def log_captures_enabled() -> None:
    """Turn on adapter capture logging without reconfiguring structlog."""
    set_capture_logging(True)
