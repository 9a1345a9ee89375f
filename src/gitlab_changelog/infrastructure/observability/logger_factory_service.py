"""Stdlib logging routed through structlog's ProcessorFormatter.

Provides:
- configure_logging(): one-shot handler setup, writing to stderr
- LoggerFactoryService: facade handing out stdlib loggers

Standard output is reserved for the changelog itself, so every handler
configured here writes to standard error.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from gitlab_changelog.infrastructure.observability.redaction_service import RedactionFilter, redaction_processor

# Third-party loggers that print request URLs, which carry the private token.
HTTP_LOGGERS = ("httpx", "httpcore")

_CONFIGURED = False
_REDACTION_FILTER = RedactionFilter()


def configure_logging(level: str | None = None) -> None:
    """One-shot stdlib configuration with a structlog renderer.

    Safe to call multiple times; only the first invocation installs handlers,
    later calls only adjust the level. Renderer is selected by LOG_FORMAT env
    (json|console).
    """
    global _CONFIGURED  # noqa: PLW0603
    root = logging.getLogger()
    if _CONFIGURED:
        if level:
            root.setLevel(_resolve_level(level))
        return
    _CONFIGURED = True

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            redaction_processor,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _select_renderer(),
        ],
    )
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.addFilter(_REDACTION_FILTER)
    root.addHandler(handler)
    root.setLevel(_resolve_level(level or os.environ.get("LOG_LEVEL", "INFO")))

    # Records are rewritten where they are created, so handlers added later see masked text too.
    for name in HTTP_LOGGERS:
        logging.getLogger(name).addFilter(_REDACTION_FILTER)


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _select_renderer() -> Any:
    """Choose renderer based on LOG_FORMAT env."""
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


class LoggerFactoryService:
    """Facade used by every module to obtain its logger."""

    @staticmethod
    def configure_root_logger(level: str | None = None) -> None:
        configure_logging(level)

    @staticmethod
    def build_logger(name: str) -> logging.Logger:
        """Return a stdlib logger (rendered through structlog via ProcessorFormatter)."""
        configure_logging()
        logger = logging.getLogger(name)
        logger.addFilter(_REDACTION_FILTER)
        return logger
