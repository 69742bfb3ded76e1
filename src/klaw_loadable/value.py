"""Content variants of a Loadable: Empty | Failed[E] | Succeeded[A]."""

from __future__ import annotations

import msgspec

__all__ = ['Empty', 'Failed', 'Succeeded', 'Value']


class Empty(msgspec.Struct, frozen=True, gc=False, tag=True):
    """No data and no error yet.

    Examples:
        >>> Empty() == Empty()
        True
    """


class Failed[E](msgspec.Struct, frozen=True, gc=False, tag=True):
    """The last fetch failed with an error of type E.

    Attributes:
        error: The error payload.
    """

    error: E


class Succeeded[A](msgspec.Struct, frozen=True, gc=False, tag=True):
    """The last fetch produced a value of type A.

    Attributes:
        value: The success payload.
    """

    value: A


type Value[E, A] = Empty | Failed[E] | Succeeded[A]
"""Content projection of a Loadable, meant for ``match`` statements."""
