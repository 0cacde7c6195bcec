"""wrap / unwrap: convert between raw values and Results."""

from __future__ import annotations

from typing import Any, TypeIs

from resultant.guards import is_defined, is_error
from resultant.result import Err, Nil, Ok, Result

__all__ = ['is_result', 'unwrap', 'wrap']


def is_result(value: object) -> TypeIs[Result]:
    """Check if a value is already one of the Result variants."""
    return isinstance(value, Result)


def wrap(value: Any) -> Result:
    """Normalize any value into a Result.

    - A Result is returned unchanged (no double wrapping).
    - An exception becomes Err.
    - None becomes Nil.
    - Anything else becomes Ok, without the copy `ok()` makes.

    Example:
        ```python
        wrap(5)               # Ok(value=5)
        wrap(wrap(5))         # Ok(value=5)
        wrap(None)            # Nil
        wrap(ValueError('x')) # Err(error=ValueError('x'))
        ```
    """
    if is_result(value):
        return value
    if is_error(value):
        return Err(value)
    if not is_defined(value):
        return Nil
    return Ok(value)


def unwrap(value: Any) -> Any:
    """Project a Result back to a plain value.

    Ok gives its payload (without consuming it), Err its exception, Nil gives
    None. Values that are not Results pass through.
    """
    match value:
        case Ok(payload):
            return payload
        case Err(error):
            return error
        case Result():
            return None
        case _:
            return value
