"""Pending: a Result that is still being computed.

Pending wraps an awaitable that produces a Result and offers the same
combinators as Result. Each combinator returns a new Pending, so a chain can
be built up front and only runs when awaited.

Example:
    ```python
    async def fetch_user(id: int) -> dict:
        ...

    async def main():
        name = await (
            task(fetch_user, 1)
            .map(lambda user: user['name'])
            .catch(lambda e: ok('anonymous'))
        )
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any, TypeIs

from resultant.normalize import wrap
from resultant.result import Err, Ok, Result

__all__ = ['Pending', 'settle']


async def settle(fn: Callable[..., Any], /, *args: Any, **kwargs: Any) -> Result:
    """Call fn, await its outcome if needed, and normalize it into a Result.

    An exception raised by fn, or by the awaitable it returns, becomes Err.
    """
    try:
        outcome = fn(*args, **kwargs)
        if inspect.isawaitable(outcome):
            outcome = await outcome
    except Exception as exc:
        return Err(exc)
    return wrap(outcome)


class Pending:
    """Awaitable Result with chainable combinators.

    `await pending` gives the settled Result; whatever the wrapped awaitable
    produces is normalized with `wrap`. Pendings built by `task`, `flow` and
    the combinators capture user exceptions as Err. An awaitable passed to
    the constructor directly is awaited as is, so its exceptions propagate.

    Note:
        A Pending built over a coroutine is single-shot: coroutines can only
        be awaited once. A Pending from `Pending.resolved` holds its Result
        directly and can be awaited any number of times.
    """

    __slots__ = ('_awaitable', '_settled')

    def __init__(self, awaitable: Awaitable[Any]) -> None:
        """Create a Pending from an awaitable producing a Result (or a raw value)."""
        self._awaitable: Awaitable[Any] | None = awaitable
        self._settled: Result | None = None

    async def _outcome(self) -> Result:
        if self._settled is not None:
            return self._settled
        return wrap(await self._awaitable)

    def __await__(self) -> Generator[Any, Any, Result]:
        return self._outcome().__await__()

    @classmethod
    def resolved(cls, result: Result) -> Pending:
        """Create a reusable Pending that settles immediately to result."""
        pending = cls.__new__(cls)
        pending._awaitable = None
        pending._settled = result
        return pending

    def map(self, f: Callable[[Any], Any]) -> Pending:
        """Transform the Ok value once settled. See `Result.map`."""

        async def _mapped() -> Result:
            return (await self).map(f)

        return Pending(_mapped())

    def chain(self, f: Callable[[Any], Any]) -> Pending:
        """Chain a function returning a Result, a raw value, or an awaitable of either."""

        async def _chained() -> Result:
            result = await self
            match result:
                case Ok(value):
                    return await settle(f, value)
                case _:
                    return result

        return Pending(_chained())

    def await_chain(self, f: Callable[[Any], Awaitable[Any]]) -> Pending:
        """Chain an async Result-returning function. See `Result.await_chain`."""
        return self.chain(f)

    def filter(self, pred: Callable[[Any], object]) -> Pending:
        """Filter the settled result. See `Result.filter`."""

        async def _filtered() -> Result:
            return (await self).filter(pred)

        return Pending(_filtered())

    def guard[U](self, pred: Callable[[Any], TypeIs[U]]) -> Pending:
        """Filter with a narrowing predicate. See `Result.guard`."""
        return self.filter(pred)

    def or_(self, f: Callable[[], Any]) -> Pending:
        """Fallback for Nil or Err. See `Result.or_`."""

        async def _fallback() -> Result:
            return (await self).or_(f)

        return Pending(_fallback())

    def catch(self, f: Callable[[BaseException], Any]) -> Pending:
        """Recover from Err with a sync or async function.

        f may return a Result, a raw value, or an awaitable of either; this is
        how delayed retries are composed (see `resultant.recipes.retry`).
        """

        async def _recovered() -> Result:
            result = await self
            match result:
                case Err(error):
                    return await settle(f, error)
                case _:
                    return result

        return Pending(_recovered())

    def match[R](
        self,
        *,
        ok: Callable[[Any], R] | None = None,
        nil: Callable[[], R] | None = None,
        err: Callable[[BaseException], R] | None = None,
    ) -> Coroutine[Any, Any, R | None]:
        """Dispatch on the settled variant. Async handlers are awaited."""

        async def _matched() -> R | None:
            outcome = (await self).match(ok=ok, nil=nil, err=err)
            if inspect.isawaitable(outcome):
                return await outcome
            return outcome

        return _matched()

    def get(self) -> Coroutine[Any, Any, Any]:
        """Settle and retrieve the payload. See `Result.get`."""

        async def _get() -> Any:
            return (await self).get()

        return _get()

    def __repr__(self) -> str:
        if self._settled is not None:
            return f'Pending.resolved({self._settled!r})'
        return f'Pending({self._awaitable!r})'
