"""Library configuration: Config, init and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from resultant._logging import configure_logging

__all__ = [
    'Config',
    'get_config',
    'init',
    'reset',
]

_TRUE = frozenset({'1', 'true', 'yes', 'on'})
_FALSE = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class Config:
    """Configuration for resultant.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None leaves logging untouched.
        json_output: Render logs as JSON (True) or colored console lines (False).
        clone_payloads: Deep-copy mutable payloads in `ok()`.
        warn_on_clone_failure: Log a warning when a payload cannot be copied.
    """

    log_level: str | None = None
    json_output: bool = True
    clone_payloads: bool = True
    warn_on_clone_failure: bool = True


_config: Config | None = None


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    logging.warning("Unknown %s value '%s', using %s", name, raw, default)
    return default


def _detect_log_level() -> str | None:
    """Read RESULTANT_LOG_LEVEL; empty means logging is left unconfigured."""
    level = os.environ.get('RESULTANT_LOG_LEVEL', '').strip().upper()
    return level or None


def _resolve(
    log_level: str | None = None,
    json_output: bool | None = None,
    clone_payloads: bool | None = None,
    warn_on_clone_failure: bool | None = None,
) -> Config:
    """Build a Config, reading anything left as None from the environment."""
    return Config(
        log_level=log_level if log_level is not None else _detect_log_level(),
        json_output=json_output if json_output is not None else _env_flag('RESULTANT_JSON_LOGS', True),
        clone_payloads=clone_payloads if clone_payloads is not None else _env_flag('RESULTANT_CLONE', True),
        warn_on_clone_failure=(
            warn_on_clone_failure
            if warn_on_clone_failure is not None
            else _env_flag('RESULTANT_CLONE_WARNINGS', True)
        ),
    )


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    clone_payloads: bool | None = None,
    warn_on_clone_failure: bool | None = None,
) -> Config:
    """Initialize resultant with the given configuration.

    Anything left as None is read from the environment:
    RESULTANT_LOG_LEVEL, RESULTANT_JSON_LOGS, RESULTANT_CLONE and
    RESULTANT_CLONE_WARNINGS. When a log level is set, logging is configured
    with `configure_logging`, which replaces the root logger's handlers.

    Returns:
        The Config that was set.

    Example:
        ```python
        from resultant import init

        init(log_level='DEBUG', json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = _resolve(log_level, json_output, clone_payloads, warn_on_clone_failure)

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_output)

    return _config


def get_config() -> Config:
    """Get the active configuration.

    Without a prior `init()`, the configuration is read from the environment
    on first use. Logging is left untouched in that case; only an explicit
    `init()` configures it.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _resolve()
    return _config


def reset() -> None:
    """Forget the active configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
