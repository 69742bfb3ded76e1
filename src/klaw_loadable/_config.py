"""Library configuration: LoadableConfig, init, get_config.

The value types never read configuration. Its only effect is on logging, and
only once the host calls ``init()``: importing the package does not read
``KLAW_LOADABLE_LOG_LEVEL`` or ``KLAW_LOADABLE_LOG_JSON``. ``get_config()`` is
for hosts that want to inspect what was applied (it calls ``init()`` with the
environment defaults when nothing was set yet).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_loadable._logging import configure_logging

__all__ = [
    'LoadableConfig',
    'get_config',
    'init',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_TRUTHY = ('1', 'true', 'yes')
_FALSY = ('0', 'false', 'no')


@dataclass(frozen=True)
class LoadableConfig:
    """Configuration for klaw-loadable.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON (True) or for the console (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: LoadableConfig | None = None


def _detect_log_level() -> str | None:
    """Read KLAW_LOADABLE_LOG_LEVEL, ignoring empty values."""
    level = os.environ.get('KLAW_LOADABLE_LOG_LEVEL', '').strip()
    return level or None


def _detect_json_output() -> bool:
    """Read KLAW_LOADABLE_LOG_JSON, defaulting to JSON output."""
    raw = os.environ.get('KLAW_LOADABLE_LOG_JSON', '').strip().lower()
    if raw in _FALSY:
        return False
    if raw and raw not in _TRUTHY:
        logging.warning("Unknown KLAW_LOADABLE_LOG_JSON value '%s', defaulting to JSON", raw)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> LoadableConfig:
    """Initialize klaw-loadable with the given configuration.

    Unset arguments are read from the environment:
    ``KLAW_LOADABLE_LOG_LEVEL`` and ``KLAW_LOADABLE_LOG_JSON``.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: Emit JSON logs when True, console logs when False.

    Returns:
        The LoadableConfig that was set.

    Raises:
        ValueError: If the log level is not a known level name.
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    if resolved_level is not None:
        resolved_level = resolved_level.upper()
        if resolved_level not in _LEVELS:
            raise ValueError(f'Unknown log level: {resolved_level!r} (expected one of {_LEVELS})')

    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = LoadableConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> LoadableConfig:
    """Get the current configuration, initializing from the environment if needed."""
    if _config is None:
        return init()
    return _config


def _reset() -> None:
    """Forget the global configuration. Test helper."""
    global _config  # noqa: PLW0603
    _config = None
