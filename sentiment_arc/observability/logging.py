"""
Structured logging for sentiment-arc.

Log lines are JSON in production and colored key=value pairs otherwise.
Every event carries the service name; events emitted while an API request
is in flight also carry its ``request_id`` (see ``bind_context``).

Passages can be long and may hold user content, so log fields never carry
a full text: use ``text_preview`` instead.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from sentiment_arc.config.settings import get_settings

SERVICE_NAME = "sentiment-arc"
TEXT_PREVIEW_CHARS = 60

# Third-party loggers kept at WARNING whatever the configured level
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "asyncio")


def _add_service(_: Any, __: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def setup_logging() -> None:
    """
    Configure structlog and route stdlib logging through it.

    Safe to call more than once: the CLI calls it on every invocation,
    after ``--debug`` may have changed ``LOG_LEVEL``.

    Usage:
        setup_logging()
        logger = structlog.get_logger(__name__)
        logger.info("Text analyzed", analyzer="contextual", label="positive")
    """
    settings = get_settings()
    level = getattr(logging, settings.log_level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        _add_service,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if settings.is_production:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # basicConfig is a no-op once the root logger has handlers; the level
    # is set separately so a later --debug still takes effect
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger().setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind fields (e.g. ``request_id``) to every event logged in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop all fields bound with ``bind_context``."""
    structlog.contextvars.clear_contextvars()


def text_preview(text: str, limit: int = TEXT_PREVIEW_CHARS) -> str:
    """Single-line passage prefix for log fields, with an ellipsis when cut."""
    flat = " ".join(text.split())
    if len(flat) <= limit:
        return flat
    return flat[: limit - 1] + "…"
