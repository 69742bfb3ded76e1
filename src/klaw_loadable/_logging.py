"""Structured logging for klaw-loadable.

The value operations are pure and never log; only the adapters around them
(for example ``klaw_loadable.keyed``) emit events, through stdlib loggers under
the ``klaw_loadable`` namespace.

As a library we never touch the root logger or the global structlog
configuration. Until ``configure_logging`` runs, the namespace carries only a
``NullHandler`` and records propagate to whatever the host application set up.
``configure_logging`` gives the namespace its own handler and level and stops
propagation, so our records render once, as JSON or console lines.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = ['LOGGER_NAME', 'configure_logging', 'get_logger']

LOGGER_NAME = 'klaw_loadable'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

# Handler installed by configure_logging, replaced on reconfiguration
_handler: logging.Handler | None = None


def _pre_chain() -> list[Any]:
    """Processors that enrich an event before it reaches the formatter."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route ``klaw_loadable`` records to stderr through a structlog formatter.

    Only the ``klaw_loadable`` logger is changed. Calling this again swaps the
    handler instead of stacking a second one.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.
    """
    global _handler  # noqa: PLW0603

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    _handler = handler


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Get a structlog logger bound to a stdlib logger of the same name.

    The processor chain is attached to the returned logger itself, so it works
    whatever the host's global structlog configuration is.

    Args:
        name: Logger name, normally a module under ``klaw_loadable``.

    Returns:
        A structlog stdlib BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
