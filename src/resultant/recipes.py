"""Recipes built from the public combinators.

Nothing here adds scheduling to the core: a retry is just `task` followed by
`catch` with a recovery step that sleeps and starts a new task.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import anyio

from resultant._logging import get_logger
from resultant.async_.pending import Pending
from resultant.compose.flow import task
from resultant.result import Result

__all__ = ['retry']


def retry(
    fn: Callable[..., Awaitable[Any]],
    /,
    *args: Any,
    attempts: int = 3,
    delay: float = 0.1,
    backoff: float = 2.0,
    **kwargs: Any,
) -> Pending:
    """Call an async function until it succeeds or attempts run out.

    Each failed attempt (Err) schedules the next one after `delay` seconds,
    multiplying the delay by `backoff` every time. Nil and Ok end the loop.

    Args:
        fn: Async function to call with *args and **kwargs.
        attempts: Total number of calls, at least 1.
        delay: Seconds to wait before the second attempt.
        backoff: Multiplier applied to the delay after each failure.

    Returns:
        A Pending settling to the first non-Err outcome, or the last Err.

    Raises:
        ValueError: If attempts is less than 1.

    Example:
        ```python
        body = await retry(fetch, 'https://example.com', attempts=5, delay=0.5)
        ```
    """
    if attempts < 1:
        msg = f'attempts must be at least 1, got {attempts}'
        raise ValueError(msg)

    def attempt(remaining: int, wait: float) -> Pending:
        pending = task(fn, *args, **kwargs)
        if remaining <= 1:
            return pending

        async def again(error: BaseException) -> Result:
            get_logger().info(
                'retrying',
                function=getattr(fn, '__name__', repr(fn)),
                attempts_left=remaining - 1,
                delay=wait,
                error=repr(error),
            )
            await anyio.sleep(wait)
            return await attempt(remaining - 1, wait * backoff)

        return pending.catch(again)

    return attempt(attempts, delay)
