"""Library configuration: AwaitkitConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from awaitkit._logging import configure_logging
from awaitkit.errors import NotInitializedError

__all__ = [
    'AwaitkitConfig',
    'current_config',
    'get_config',
    'init',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class AwaitkitConfig:
    """Configuration for awaitkit.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_output: Render logs as JSON (True) or colored console lines (False).
        trace_settlements: Emit a debug event for every entry the keyed
            combinators observe settling.
    """

    log_level: str | None = None
    json_output: bool = True
    trace_settlements: bool = False


_config: AwaitkitConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable, warning on unrecognised values."""
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logging.warning("Unknown %s value '%s', defaulting to %s", name, raw, default)
    return default


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    trace_settlements: bool | None = None,
) -> AwaitkitConfig:
    """Initialize awaitkit with the given configuration.

    Arguments left as None are read from the environment:
    ``AWAITKIT_LOG_LEVEL``, ``AWAITKIT_LOG_JSON`` and ``AWAITKIT_TRACE``.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: JSON log rendering instead of console rendering.
        trace_settlements: Log every settlement seen by the keyed combinators.

    Returns:
        The AwaitkitConfig that was set.

    Example:
        ```python
        import awaitkit

        awaitkit.init(log_level='DEBUG', trace_settlements=True)
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is None:
        log_level = os.environ.get('AWAITKIT_LOG_LEVEL') or None
    if json_output is None:
        json_output = _env_flag('AWAITKIT_LOG_JSON', default=True)
    if trace_settlements is None:
        trace_settlements = _env_flag('AWAITKIT_TRACE', default=False)

    _config = AwaitkitConfig(
        log_level=log_level.upper() if log_level else None,
        json_output=json_output,
        trace_settlements=trace_settlements,
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> AwaitkitConfig:
    """Get the current configuration.

    Raises:
        NotInitializedError: If init() has not been called.
    """
    if _config is None:
        raise NotInitializedError
    return _config


def current_config() -> AwaitkitConfig:
    """Get the current configuration, or the defaults if init() was never called."""
    return _config if _config is not None else AwaitkitConfig()


def reset() -> None:
    """Forget the current configuration. Intended for tests."""
    global _config  # noqa: PLW0603
    _config = None
