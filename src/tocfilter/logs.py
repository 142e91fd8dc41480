"""Logger plumbing for a library that runs inside someone else's process.

Module loggers are structlog front-ends over stdlib ``logging.getLogger``
under the ``tocfilter`` namespace. They never touch the global structlog
configuration: events are filtered by the stdlib level and handed to
whatever handlers the host has attached. With nothing attached, debug and
info events go nowhere and nothing reaches stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Literal

import structlog

if TYPE_CHECKING:
    from tocfilter.config import LoggingSettings

LOGGER_NAMESPACE = "tocfilter"
_HANDLER_NAME = "tocfilter-structlog"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger *name*."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            # event -> msg, remaining keys -> LogRecord extras
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def _renderer(fmt: Literal["json", "text"]) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(settings: LoggingSettings) -> logging.Handler:
    """Attach a structlog-formatted stderr handler to the ``tocfilter`` logger.

    Only the package's own logger is touched, never the root logger or
    ``structlog.configure``. Calling it again replaces the earlier handler.
    """
    logger = logging.getLogger(LOGGER_NAMESPACE)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(settings.format),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.setLevel(settings.level)
    # Our handler renders the events; the host's root handlers would print them twice.
    logger.propagate = False
    return handler
