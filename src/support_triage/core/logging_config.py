"""Logging for support-triage.

Pipeline modules log through ``logging.getLogger(__name__)``.  ``setup_logging``
routes those records through structlog so a terminal gets readable lines and
a pipe gets one JSON object per record.  ``TRIAGE_OBSERVABILITY_LOG_FORMAT``
forces either renderer.  Fields bound with ``structlog.contextvars`` (the
runner binds ``query_chars``) are merged into every record.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from support_triage.core.config import ObservabilityConfig

PACKAGE_LOGGER = "support_triage"


def _shared_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def _renderer(config: ObservabilityConfig):
    if config.log_format == "json":
        return structlog.processors.JSONRenderer()
    if config.log_format == "console" or sys.stderr.isatty():
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def build_formatter(config: ObservabilityConfig) -> structlog.stdlib.ProcessorFormatter:
    """Formatter that renders stdlib records with the configured renderer."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(config),
        ],
    )


def setup_logging(config: ObservabilityConfig) -> None:
    """Install a single stderr handler on the root logger."""
    level = _resolve_level(config.log_level)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(config))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
