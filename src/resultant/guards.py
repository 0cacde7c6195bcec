"""Type predicates used by the result algebra and exported for general use.

Every predicate is a plain function returning a bool (or, for
`is_instance_of`, a predicate). None of them raise.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Callable
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, TypeIs

__all__ = [
    'is_async_function',
    'is_defined',
    'is_error',
    'is_function',
    'is_instance_of',
    'is_mutable',
]

_IMMUTABLE_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    range,
    frozenset,
    Decimal,
    Fraction,
    Enum,
    type,
)


def is_function(value: object) -> TypeIs[Callable[..., Any]]:
    """Return True if value can be called (functions, methods, lambdas, callables)."""
    return callable(value) and not isinstance(value, type)


def is_async_function(value: object) -> bool:
    """Return True if calling value produces a coroutine.

    Recognises `async def` functions, bound async methods, `functools.partial`
    over them and instances whose `__call__` is `async def`.
    """
    if inspect.iscoroutinefunction(value):
        return True
    if isinstance(value, type) or not callable(value):
        return False
    return inspect.iscoroutinefunction(getattr(value, '__call__', None))


def is_defined(value: object) -> bool:
    """Return True unless value is None."""
    return value is not None


def is_mutable(value: object) -> bool:
    """Return True if value is a structure that can be changed in place.

    Scalars, strings, bytes, enums, classes and callables are immutable.
    Tuples and frozensets count as immutable only when nothing inside them is
    mutable. Frozen dataclasses and frozen msgspec structs are immutable.
    """
    if isinstance(value, _IMMUTABLE_TYPES) or callable(value):
        return False
    if isinstance(value, tuple):
        return any(is_mutable(item) for item in value)
    if dataclasses.is_dataclass(value):
        return not value.__dataclass_params__.frozen  # type: ignore[union-attr]
    config = getattr(type(value), '__struct_config__', None)
    if config is not None:
        return not config.frozen
    return True


def is_instance_of[T](cls: type[T] | tuple[type[T], ...]) -> Callable[[object], TypeIs[T]]:
    """Build a predicate that checks isinstance against cls.

    Example:
        ```python
        is_str = is_instance_of(str)
        is_str('a')  # True
        ok(3).guard(is_instance_of(int))  # Ok(value=3)
        ```
    """

    def check(value: object) -> TypeIs[T]:
        return isinstance(value, cls)

    check.__name__ = f'is_instance_of_{getattr(cls, "__name__", "types")}'
    return check


def is_error(value: object) -> TypeIs[BaseException]:
    """Return True if value is an exception instance."""
    return isinstance(value, BaseException)
