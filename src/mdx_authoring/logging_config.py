"""
Logging for the editing engine.

Every editing operation reports what it changed (citation keys replaced,
locators written, paragraphs re-sorted) as a structlog event. The CLI
writes edited documents to stdout, so log records always go to stderr.
"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings


def setup_logging() -> None:
    """
    Configure structlog for the mdx-edit commands.

    Events are rendered as JSON when ``MDX_LOG_JSON`` is set and as
    console lines otherwise; ``MDX_LOG_LEVEL`` filters them. Values bound
    with bind_edit_context() are merged into every event.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.processors.JSONRenderer()
                if settings.log_json
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def bind_edit_context(command: str, path: Optional[str] = None) -> None:
    """
    Tag subsequent events with the command being run and the document it edits.

    Replaces whatever a previous command bound.
    """
    structlog.contextvars.clear_contextvars()
    if path is None:
        structlog.contextvars.bind_contextvars(command=command)
    else:
        structlog.contextvars.bind_contextvars(command=command, document=str(path))


def get_logger(name: str) -> structlog.BoundLogger:
    """Logger for an engine module; pass ``__name__``."""
    return structlog.get_logger(name)
