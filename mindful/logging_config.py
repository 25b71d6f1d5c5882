"""
Structured logging configuration using structlog wrapping stdlib.

Library modules log through logging.getLogger(__name__); the dashboard
entry point and the CLI call setup_logging() once. Output goes to stderr
so the CLI's JSON results on stdout stay machine-readable.

Environment:
    MINDFUL_LOG_LEVEL   DEBUG, INFO (default), WARNING, ...
    MINDFUL_LOG_FORMAT  "json" for one JSON object per line, console otherwise

Usage:
    from mindful.logging_config import setup_logging
    setup_logging()
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional

import structlog

# Per-request chatter from the HTTP stack and the Anthropic SDK
NOISY_LOGGERS = ("httpx", "httpcore", "anthropic", "uvicorn.access")


def setup_logging(
    level: str | None = None,
    json_output: bool | None = None,
    stream: Optional[IO[str]] = None,
) -> None:
    if level is None:
        level = os.environ.get("MINDFUL_LOG_LEVEL", "INFO")

    if json_output is None:
        json_output = os.environ.get("MINDFUL_LOG_FORMAT", "").lower() == "json"

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    noisy_level = numeric_level if numeric_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


__all__ = ["NOISY_LOGGERS", "get_logger", "setup_logging"]
