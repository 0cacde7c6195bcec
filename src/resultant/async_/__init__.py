"""Async support: Pending results.

Examples:
    >>> from resultant.async_ import Pending
    >>>
    >>> async def main():
    ...     result = await Pending.resolved(ok(5)).map(lambda x: x * 2)
"""

from resultant.async_.pending import Pending, settle

__all__ = [
    'Pending',
    'settle',
]
