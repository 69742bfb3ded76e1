"""Option type: Some[T] | Nothing, the input of ``from_maybe`` and output of ``to_maybe``."""

from __future__ import annotations

from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Presence of a value of type T.

    Examples:
        >>> Some(42).unwrap()
        42
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Absence of a value.

    Use the ``Nothing`` constant instead of instantiating directly.
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError('Called unwrap on Nothing')


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType
