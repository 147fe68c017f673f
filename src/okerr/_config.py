"""Package configuration: OkerrConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any

from okerr._logging import configure_logging

__all__ = [
    'OkerrConfig',
    'get_config',
    'init',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class OkerrConfig:
    """Configuration for okerr.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON rather than console output.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: OkerrConfig | None = None


def _detect_log_level() -> str | None:
    """Read OKERR_LOG_LEVEL; unset means logging is left alone."""
    env_level = os.environ.get('OKERR_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown OKERR_LOG_LEVEL value '%s', defaulting to INFO", env_level)
        return 'INFO'
    return env_level


def _detect_json_logs() -> bool:
    return os.environ.get('OKERR_LOG_JSON', '1').lower() not in ('0', 'false', 'no')


def _from_env() -> OkerrConfig:
    return OkerrConfig(
        log_level=_detect_log_level(),
        json_logs=_detect_json_logs(),
    )


def init(config: OkerrConfig | None = None, **overrides: Any) -> OkerrConfig:
    """Initialize okerr configuration.

    Starts from ``config`` (or the environment when omitted), applies keyword
    overrides, stores the result globally and configures logging if a level
    is set.

    Args:
        config: Explicit configuration. Read from the environment if None.
        **overrides: Field values replacing those of the base configuration.

    Returns:
        The active OkerrConfig.

    Example:
        ```python
        import okerr

        okerr.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    base = config if config is not None else _from_env()
    if overrides:
        base = replace(base, **overrides)

    if base.log_level is not None:
        configure_logging(base.log_level, json_output=base.json_logs)

    _config = base
    return base


def get_config() -> OkerrConfig:
    """Return the active configuration, or one read from the environment if init() was never called."""
    if _config is None:
        return _from_env()
    return _config
