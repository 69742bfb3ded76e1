"""Result type: Ok[T] | Err[E], the input of ``from_result``.

Both variants are plain records; ``from_result`` pattern-matches on them.
"""

from __future__ import annotations

import msgspec

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42)
        Ok(value=42)
    """

    value: T


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> Err('boom')
        Err(error='boom')
    """

    error: E


type Result[T, E = Exception] = Ok[T] | Err[E]
