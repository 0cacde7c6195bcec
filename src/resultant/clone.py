"""Best-effort deep copy of payload values."""

from __future__ import annotations

import copy

from resultant._config import get_config
from resultant._logging import get_logger, log

__all__ = ['try_clone']


def try_clone[T](value: T, warn: bool | None = None) -> T:
    """Return a deep copy of value, or value itself if it cannot be copied.

    Some objects refuse deep copies (locks, open files, generators, sockets,
    objects whose __deepcopy__ raises). For those the original reference is
    returned, so callers must not assume the result is independent of the
    input.

    Args:
        value: The value to copy.
        warn: Log a warning when copying fails. Defaults to the configured
            `warn_on_clone_failure`.

    Returns:
        A copy of value, or value itself when copying is not possible.
    """
    try:
        return copy.deepcopy(value)
    except Exception as exc:
        if warn is None:
            warn = get_config().warn_on_clone_failure
        if warn:
            log(
                f'could not clone {type(value).__name__} value ({exc}); keeping the original reference',
                sink=get_logger().warning,
            )
        return value
