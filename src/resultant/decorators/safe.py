"""@safe and @safe_async decorators: functions that return Results."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, overload

import wrapt

from resultant.async_.pending import Pending
from resultant.normalize import wrap
from resultant.result import Err, Result

__all__ = ['safe', 'safe_async']

P = ParamSpec('P')


@overload
def safe[**P](func: Callable[P, Any]) -> Callable[P, Result]: ...


@overload
def safe(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Any]], Callable[P, Result]]: ...


def safe[**P](
    func: Callable[P, Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator turning a raising function into one that returns a Result.

    The return value is normalized with `wrap` (None gives Nil, a Result is
    passed through); a caught exception gives Err.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Defaults to (Exception,).
            Other exceptions propagate.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)  # Ok(value=5.0)
        divide(10, 0)  # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result:
        try:
            value = wrapped(*args, **kwargs)
        except catch as e:
            return Err(e)
        return wrap(value)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P](func: Callable[P, Awaitable[Any]]) -> Callable[P, Pending]: ...


@overload
def safe_async(
    func: None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[Any]]], Callable[P, Pending]]: ...


def safe_async[**P](
    func: Callable[P, Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async variant of @safe: calls return a Pending.

    The wrapped coroutine starts when the Pending is awaited. Exceptions not
    listed in `exceptions` propagate out of the await.

    Example:
        ```python
        @safe_async
        async def fetch(url: str) -> bytes:
            return await http_get(url)

        size = await fetch('https://example.com').map(len)
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Pending:
        async def _call() -> Result:
            try:
                value = await wrapped(*args, **kwargs)
            except catch as e:
                return Err(e)
            return wrap(value)

        return Pending(_call())

    if func is not None:
        return wrapper(func)
    return wrapper
