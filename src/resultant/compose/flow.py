"""Entry points that lift plain and async functions into Results.

- `result(fn)`: run a function that may raise.
- `task(fn)`: run an async function that may raise, as a Pending.
- `flow(value, *steps)`: thread a value through sync and async steps.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from resultant.async_.pending import Pending, settle
from resultant.guards import is_async_function
from resultant.normalize import wrap
from resultant.result import Err, Ok, Result

__all__ = ['flow', 'result', 'task']


def result(fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Result:
    """Call fn now and capture its outcome.

    Returns:
        fn's return value normalized with `wrap`, or Err if fn raised.

    Example:
        ```python
        result(json.loads, '{"a": 1}')  # Ok(value={'a': 1})
        result(json.loads, 'invalid')   # Err(error=JSONDecodeError(...))
        ```
    """
    try:
        return wrap(fn(*args, **kwargs))
    except Exception as exc:
        return Err(exc)


def task(fn: Callable[..., Awaitable[Any]], /, *args: Any, **kwargs: Any) -> Pending:
    """Lift an async function call into a Pending result.

    fn runs when the Pending is awaited. A fulfilled value is normalized with
    `wrap`; an exception (raised or rejected) becomes Err.

    Example:
        ```python
        async def fetch(url: str) -> bytes: ...

        body = await task(fetch, 'https://example.com').map(len)
        ```
    """
    return Pending(settle(fn, *args, **kwargs))


def flow(initial: Any, *steps: Callable[[Any], Any]) -> Result | Pending:
    """Thread a value through a sequence of steps.

    The initial value is normalized with `wrap`. Each step receives the
    previous Ok payload; its return value is normalized with `wrap`, so a
    step may return a raw value, None (Nil), an exception (Err) or a Result.
    The first Nil or Err stops the pipeline and later steps are not called.
    A step that raises turns the pipeline into Err at that point.

    If any step is an async function the pipeline returns a Pending;
    otherwise it runs immediately and returns a Result. A sync step that
    returns an awaitable also switches the rest of the pipeline to Pending.

    Example:
        ```python
        flow(10, lambda x: x * 2, lambda x: x + 1)  # Ok(value=21)
        await flow(1, fetch_user, lambda user: user['name'])
        ```
    """
    if any(is_async_function(step) for step in steps):
        return Pending(_run_async(wrap(initial), steps))

    current = wrap(initial)
    for index, step in enumerate(steps):
        if not isinstance(current, Ok):
            return current
        try:
            outcome = step(current.value)
        except Exception as exc:
            return Err(exc)
        if inspect.isawaitable(outcome):
            return Pending(_run_async(outcome, steps[index + 1 :]))
        current = wrap(outcome)
    return current


async def _run_async(start: Result | Awaitable[Any], steps: Sequence[Callable[[Any], Any]]) -> Result:
    """Run the remaining steps of a pipeline, awaiting each outcome in turn."""
    current = await settle(lambda: start)
    for step in steps:
        if not isinstance(current, Ok):
            return current
        current = await settle(step, current.value)
    return current
