"""Result algebra: Ok[T] | Err[E] | Nil.

A Result is exactly one of three variants:

- `Ok(value)`: a value is present.
- `Nil`: the value is absent. Not an error.
- `Err(error)`: the operation failed with an exception.

Combinators live once on the `Result` base and switch over the variant, so
the set stays closed. Failure and absence pass through untouched unless a
combinator exists to deal with them (`or_`, `catch`, `filter`, `match`).
Every user function handed to a combinator runs inside a local error
boundary: an `Exception` it raises becomes an `Err` instead of escaping.

Example:
    ```python
    from resultant import ok

    ok(5).map(lambda x: x * 2).filter(lambda x: x > 5).match(
        ok=lambda v: v,
        nil=lambda: 'none',
        err=lambda e: str(e),
    )
    # 10
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar, TypeIs

import msgspec

from resultant._config import get_config
from resultant.clone import try_clone
from resultant.errors import ConsumedError, Failure
from resultant.guards import is_defined, is_error, is_mutable

if TYPE_CHECKING:
    from resultant.async_.pending import Pending

__all__ = [
    'Err',
    'Nil',
    'NilType',
    'Ok',
    'Result',
    'Tag',
    'err',
    'maybe',
    'ok',
]


class Tag(StrEnum):
    """Discriminant carried by every Result variant."""

    OK = 'ok'
    ERR = 'err'
    NIL = 'nil'


class _Latch:
    """Once-only retrieval flag stored beside an Ok payload.

    Latches never take part in equality, hashing or repr, so two Ok values
    holding equal payloads compare equal whether or not either was consumed.
    """

    __slots__ = ('taken',)

    def __init__(self) -> None:
        self.taken = False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Latch)

    def __hash__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return '<gone>' if self.taken else '<fresh>'


class Result(msgspec.Struct, frozen=True):
    """Base of the three result variants. Do not instantiate directly."""

    kind: ClassVar[Tag]

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return True if this is Ok."""
        return self.kind is Tag.OK

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return True if this is Err."""
        return self.kind is Tag.ERR

    def is_nil(self) -> TypeIs[NilType]:
        """Return True if this is Nil."""
        return self.kind is Tag.NIL

    @property
    def is_gone(self) -> bool:
        """True once get() has retrieved an Ok value. Always False for Nil and Err."""
        match self:
            case Ok(_, latch):
                return latch.taken
            case _:
                return False

    def map(self, f: Callable[[Any], Any]) -> Result:
        """Transform an Ok value.

        Args:
            f: Function applied to the Ok value. Its return value goes through
                `ok()`, so None becomes Nil and mutable values are copied.

        Returns:
            The new result, Err if f raised, or self for Nil and Err.
        """
        match self:
            case Ok(value):
                try:
                    mapped = f(value)
                except Exception as exc:
                    return Err(exc)
                return ok(mapped)
            case _:
                return self

    def chain(self, f: Callable[[Any], Any]) -> Result:
        """Apply a Result-returning function to an Ok value (flatmap / bind).

        A plain return value is normalized with `wrap`, so returning a raw
        value, None or an exception is also accepted.
        """
        from resultant.normalize import wrap

        match self:
            case Ok(value):
                try:
                    return wrap(f(value))
                except Exception as exc:
                    return Err(exc)
            case _:
                return self

    def await_chain(self, f: Callable[[Any], Awaitable[Any]]) -> Pending:
        """Chain an async Result-returning function onto an Ok value.

        Returns:
            A Pending that settles to f's outcome for Ok, or to self for
            Nil and Err without calling f.
        """
        from resultant.async_.pending import Pending, settle

        match self:
            case Ok(value):
                return Pending(settle(f, value))
            case _:
                return Pending.resolved(self)

    def filter(self, pred: Callable[[Any], object]) -> Result:
        """Keep an Ok value only if pred accepts it.

        Err always becomes Nil, without calling pred. Use `catch` before
        filtering to keep the error.

        Returns:
            self if pred(value) is truthy, Nil if not, Err if pred raised.
        """
        match self:
            case Ok(value):
                try:
                    keep = pred(value)
                except Exception as exc:
                    return Err(exc)
                return self if keep else Nil
            case Err():
                return Nil
            case _:
                return self

    def guard[U](self, pred: Callable[[Any], TypeIs[U]]) -> Result:
        """Same as filter, with a narrowing predicate (e.g. `is_instance_of(str)`)."""
        return self.filter(pred)

    def or_(self, f: Callable[[], Any]) -> Result:
        """Supply a fallback value for Nil or Err.

        Returns:
            self for Ok; otherwise `ok(f())`, which is Nil when f returns None,
            or Err if f raised.
        """
        match self:
            case Ok():
                return self
            case _:
                try:
                    fallback = f()
                except Exception as exc:
                    return Err(exc)
                return ok(fallback)

    def catch(self, f: Callable[[BaseException], Any]) -> Result:
        """Recover from an Err.

        Args:
            f: Receives the error and returns a Result (plain values are
                normalized with `wrap`).

        Returns:
            f's result for Err, Err if f raised, self for Ok and Nil.
        """
        from resultant.normalize import wrap

        match self:
            case Err(error):
                try:
                    return wrap(f(error))
                except Exception as exc:
                    return Err(exc)
            case _:
                return self

    def match[R](
        self,
        *,
        ok: Callable[[Any], R] | None = None,
        nil: Callable[[], R] | None = None,
        err: Callable[[BaseException], R] | None = None,
    ) -> R | None:
        """Dispatch on the variant.

        Only the handler for the current variant is called. A missing handler
        is skipped and None is returned. Handler exceptions propagate.
        """
        match self:
            case Ok(value):
                return ok(value) if ok is not None else None
            case Err(error):
                return err(error) if err is not None else None
            case _:
                return nil() if nil is not None else None

    def get(self) -> Any:
        """Retrieve the payload.

        Returns:
            The Ok value on the first call, None for Nil.

        Raises:
            ConsumedError: On the second and later calls on the same Ok.
            BaseException: The contained error, for Err.
        """
        match self:
            case Ok(value, latch):
                if latch.taken:
                    raise ConsumedError()
                latch.taken = True
                return value
            case Err(error):
                raise error
            case _:
                return None


class Ok[T](Result, frozen=True):
    """A present value.

    Attributes:
        value: The payload. Construct through `ok()` to get a private copy of
            mutable payloads; `Ok(...)` stores the reference as given.
        latch: Once-only retrieval flag used by `get()`.
    """

    kind: ClassVar[Tag] = Tag.OK

    value: T
    latch: _Latch = msgspec.field(default_factory=_Latch)

    def __repr__(self) -> str:
        return f'Ok(value={self.value!r})'


class Err[E: BaseException](Result, frozen=True):
    """A failed computation.

    Attributes:
        error: The exception describing the failure.
    """

    kind: ClassVar[Tag] = Tag.ERR

    error: E


class NilType(Result, frozen=True):
    """An absent value.

    All instances are equal; use the `Nil` constant.
    """

    kind: ClassVar[Tag] = Tag.NIL

    def __repr__(self) -> str:
        return 'Nil'


Nil = NilType()


def ok(value: Any) -> Result:
    """Build an Ok whose payload the caller can no longer mutate.

    - None gives Nil.
    - Mutable values (see `is_mutable`) are deep-copied with `try_clone`.
      When the copy fails (locks, generators, open files, ...) the original
      reference is stored and a warning is logged: in that case immutability
      is NOT guaranteed.
    - Everything else is stored as is.

    Copying can be turned off globally with `init(clone_payloads=False)`.
    """
    if not is_defined(value):
        return Nil
    if is_mutable(value) and get_config().clone_payloads:
        return Ok(try_clone(value))
    return Ok(value)


def maybe(value: Any) -> Result:
    """Ok(value) if value is not None, else Nil. No copy is made."""
    if not is_defined(value):
        return Nil
    return Ok(value)


def err(error: BaseException | object, cause: BaseException | None = None) -> Err[BaseException]:
    """Build an Err from an exception or a message.

    Args:
        error: An exception, or any other value which becomes a `Failure`
            carrying `str(error)` as its message.
        cause: Optional underlying exception, attached as `__cause__`.
    """
    exc = error if is_error(error) else Failure(str(error))
    if cause is not None:
        exc.__cause__ = cause
    return Err(exc)
