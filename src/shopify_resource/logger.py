"""Logging for repository operations.

Repositories log through :func:`get_logger` unless a logger is injected.
Events carry the resource name plus ``id`` or ``since_id``::

    {"resource": "orders", "since_id": 1, "event": "fetching page", "level": "info", ...}

Call :func:`configure_logging` once at startup to choose the level and the
renderer; without it structlog's defaults apply.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from .config import LogConfig

LOGGER_NAME = "shopify_resource"


def configure_logging(config: LogConfig | None = None, stream: TextIO | None = None) -> None:
    """Route structlog events through stdlib logging to ``stream``.

    Args:
        config: level and format ("json" or "text"); defaults to LogConfig()
        stream: output stream, stdout when omitted
    """
    config = config or LogConfig()
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=getattr(logging, config.level.upper(), logging.INFO),
        force=True,
    )

    renderer: structlog.types.Processor
    if config.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # repositories hold their logger for their lifetime; reconfiguring must reach them
        cache_logger_on_first_use=False,
    )


def get_logger() -> structlog.stdlib.BoundLogger:
    """Return the library logger used by repositories without an injected one."""
    return structlog.stdlib.get_logger(LOGGER_NAME)
