"""
structlog setup for applications that want okerr's diagnostic events.

okerr never configures logging on import; call configure_logging() once
from your composition root, or configure structlog yourself.
"""

from __future__ import annotations

import logging

import structlog

from okerr.config import OkerrSettings, get_settings

_capture_logging = False


def capture_logging_enabled() -> bool:
    """True once configure_logging() ran with log_captures enabled."""
    return _capture_logging


def set_capture_logging(enabled: bool) -> None:
    """Switch adapter capture events on or off without touching structlog."""
    global _capture_logging
    _capture_logging = enabled


def configure_logging(settings: OkerrSettings | None = None) -> None:
    """
    Configure structlog with the level and renderer from settings.

    In production: JSON lines to stdout (log_format="json").
    In development: colored, human-readable console output.

    Settings are resolved here, once, so an invalid OKERR_ variable fails
    at startup and never inside trycatch()/settle().
    """
    settings = settings or get_settings()
    set_capture_logging(settings.log_captures)
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
