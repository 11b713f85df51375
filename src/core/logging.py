"""Centralized logging configuration.

structlog on top of the stdlib `logging` module. Records are rendered by the
structlog console renderer on stderr, so stdout only ever carries the HTTP
response.

Usage:
    from core.logging import get_logger, setup_logging

    setup_logging("DEBUG")
    logger = get_logger(__name__)
    logger.debug("request sent", method="GET", url=url)
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor


def setup_logging(level: str = "WARNING", *, colors: bool | None = None) -> None:
    """Configure structlog and the root logger.

    Safe to call more than once; previous root handlers are replaced.
    """

    log_level = getattr(logging, level.upper())
    if colors is None:
        colors = sys.stderr.isatty()

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=colors),
        foreign_pre_chain=shared_processors,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # httpx/httpcore are chatty at DEBUG; keep them one notch below ours.
    library_level = max(log_level, logging.INFO)
    logging.getLogger("httpx").setLevel(library_level)
    logging.getLogger("httpcore").setLevel(max(log_level, logging.WARNING))


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to `name`."""

    return structlog.get_logger(name)
