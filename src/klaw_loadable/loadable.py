"""Loadable[E, A]: re-fetchable data that keeps stale content while refreshing.

A Loadable is the product of two independent fields:

- ``content``: exactly one of ``Empty()``, ``Failed(error)`` or ``Succeeded(value)``.
- ``refreshing``: whether a fetch is currently in flight.

All six combinations are valid, so a view can keep showing the last success or
error while a background refetch runs, and only needs one ``match`` on the
content plus one boolean check on ``is_loading()``.

Example:
    ```python
    from klaw_loadable import Failed, Succeeded, loading, succeed

    state = loading()                     # first fetch in flight
    state = succeed([1, 2, 3])            # response arrived
    state = state.to_loading()            # background refresh, data still shown

    match state.value():
        case Succeeded(value=items):
            render(items, spinner=state.is_loading())
        case Failed(error=err):
            render_error(err)
        case _:
            render_placeholder()
    ```

Values are immutable: every operation returns a new Loadable. Errors are data
(``Failed``), never exceptions; only exceptions raised by caller-supplied
callbacks escape, unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, NoReturn

import msgspec

from klaw_loadable.option import Nothing, NothingType, Option, Some
from klaw_loadable.result import Err, Ok, Result
from klaw_loadable.value import Empty, Failed, Succeeded, Value

__all__ = [
    'Loadable',
    'Unwrapped',
    'combine',
    'combine_map',
    'combine_map_with',
    'combine_with',
    'fail',
    'from_maybe',
    'from_result',
    'loading',
    'map2',
    'not_asked',
    'succeed',
]

_EMPTY = Empty()


class Unwrapped[E, A](msgspec.Struct, frozen=True, gc=False):
    """Both fields of a Loadable as a plain record, for generic code.

    Attributes:
        content: The Empty / Failed / Succeeded content.
        refreshing: Whether a fetch is in flight.
    """

    content: Value[E, A]
    refreshing: bool


class Loadable[E, A](msgspec.Struct, frozen=True, gc=False):
    """Content (Empty | Failed[E] | Succeeded[A]) plus an independent refreshing flag.

    Build values with the module-level constructors (``not_asked``, ``loading``,
    ``succeed``, ``fail``, ``from_result``, ``from_maybe``) rather than directly.

    Examples:
        >>> succeed(1).map(lambda x: x + 1)
        Loadable(content=Succeeded(value=2), refreshing=False)
        >>> fail('boom').to_loading().is_loading()
        True
    """

    content: Value[E, A]
    refreshing: bool = False

    # --- Refreshing transitions ---

    def to_loading(self) -> Loadable[E, A]:
        """Mark a fetch as in flight, keeping the current content."""
        if self.refreshing:
            return self
        return Loadable(self.content, True)

    def to_not_loading(self) -> Loadable[E, A]:
        """Mark the fetch as finished, keeping the current content."""
        if not self.refreshing:
            return self
        return Loadable(self.content, False)

    # --- Functor ---

    def map[B](self, f: Callable[[A], B]) -> Loadable[E, B]:
        """Apply ``f`` to the success payload.

        Empty and Failed pass through untouched, refreshing flag included.

        Args:
            f: Function applied to the Succeeded value.

        Returns:
            A Loadable with the transformed payload and the same refreshing flag.
        """
        match self.content:
            case Succeeded(value=a):
                return Loadable(Succeeded(f(a)), self.refreshing)
            case _:
                return self  # type: ignore[return-value]

    def map_err[F](self, f: Callable[[E], F]) -> Loadable[F, A]:
        """Apply ``f`` to the error payload; Empty and Succeeded pass through."""
        match self.content:
            case Failed(error=e):
                return Loadable(Failed(f(e)), self.refreshing)
            case _:
                return self  # type: ignore[return-value]

    # --- Monad ---

    def and_then[B](self, f: Callable[[A], Loadable[E, B]]) -> Loadable[E, B]:
        """Sequence a Loadable-returning step after a success.

        Also known as flatmap or bind.

        - Succeeded(a): the content of ``f(a)``, refreshing if either step is.
        - Failed / Empty: short-circuits, ``f`` is never called and the
          receiver is returned as is (refreshing flag preserved).

        Args:
            f: Function that takes the success payload and returns a Loadable.

        Returns:
            The sequenced Loadable.
        """
        match self.content:
            case Succeeded(value=a):
                nxt = f(a)
                return Loadable(nxt.content, self.refreshing or nxt.refreshing)
            case _:
                return self  # type: ignore[return-value]

    # --- Applicative ---

    def and_map[B, C](
        self: Loadable[E, Callable[[B], C]], ma: Loadable[E, B]
    ) -> Loadable[E, C]:
        """Apply the function held by this Loadable to the payload of ``ma``.

        The receiver is the function side and is inspected first: when it is
        Failed or Empty, that state is returned and ``ma`` is ignored entirely,
        including its refreshing flag.

        Examples:
            >>> succeed(lambda x: x * 2).and_map(succeed(21))
            Loadable(content=Succeeded(value=42), refreshing=False)
            >>> fail('f').and_map(fail('a'))
            Loadable(content=Failed(error='f'), refreshing=False)
        """
        return self.and_then(ma.map)

    def and_map_with[B, C](
        self: Loadable[E, Callable[[B], C]],
        combine: Callable[[E, E], E],
        ma: Loadable[E, B],
    ) -> Loadable[E, C]:
        """Like ``and_map`` but accumulates errors from both sides.

        Content, by (receiver, ``ma``):

        - Succeeded(f), Succeeded(a): Succeeded(f(a))
        - Failed(e1), Failed(e2): Failed(combine(e1, e2))
        - Failed(e), anything: Failed(e)
        - anything, Failed(e): Failed(e)
        - otherwise (an Empty on either side): Empty

        The result is refreshing if either operand is. In a pipeline
        ``succeed(f).and_map_with(c, a1).and_map_with(c, a2)`` the error
        accumulated so far is always the first argument of ``combine``, so
        errors fold in pipeline order.

        Examples:
            >>> fail('a').and_map_with(lambda x, y: x + y, fail('b'))
            Loadable(content=Failed(error='ab'), refreshing=False)
        """
        refreshing = self.refreshing or ma.refreshing
        match self.content, ma.content:
            case Succeeded(value=f), Succeeded(value=a):
                content: Value[E, C] = Succeeded(f(a))
            case Failed(error=e1), Failed(error=e2):
                content = Failed(combine(e1, e2))
            case Failed(), _:
                content = self.content  # type: ignore[assignment]
            case _, Failed():
                content = ma.content  # type: ignore[assignment]
            case _:
                content = _EMPTY
        return Loadable(content, refreshing)

    # --- Destructors ---

    def with_default(self, default: A) -> A:
        """Return the success payload, else ``default``. Ignores refreshing."""
        match self.content:
            case Succeeded(value=a):
                return a
            case _:
                return default

    def to_maybe(self) -> Option[A]:
        """Some(payload) when Succeeded, else Nothing."""
        match self.content:
            case Succeeded(value=a):
                return Some(a)
            case _:
                return Nothing

    def to_maybe_error(self) -> Option[E]:
        """Some(error) when Failed, else Nothing."""
        match self.content:
            case Failed(error=e):
                return Some(e)
            case _:
                return Nothing

    def value(self) -> Value[E, A]:
        """The content, for pattern matching."""
        return self.content

    def is_loading(self) -> bool:
        """Whether a fetch is currently in flight."""
        return self.refreshing

    def unwrap(self) -> Unwrapped[E, A]:
        """Expose both fields as a plain record."""
        return Unwrapped(self.content, self.refreshing)


# ---------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------


def not_asked() -> Loadable[Any, Any]:
    """Nothing fetched yet and nothing in flight."""
    return Loadable(_EMPTY, False)


def loading() -> Loadable[Any, Any]:
    """First fetch in flight, no content yet."""
    return Loadable(_EMPTY, True)


def succeed[A](a: A) -> Loadable[Any, A]:
    """A settled success."""
    return Loadable(Succeeded(a), False)


def fail[E](e: E) -> Loadable[E, Any]:
    """A settled failure."""
    return Loadable(Failed(e), False)


def _unexpected(kind: str, obj: object) -> NoReturn:
    raise TypeError(f'Expected {kind}, got {type(obj).__name__}: {obj!r}')


def from_result[E, A](r: Result[A, E]) -> Loadable[E, A]:
    """Ok(a) becomes ``succeed(a)``, Err(e) becomes ``fail(e)``.

    Raises:
        TypeError: If ``r`` is neither Ok nor Err.
    """
    match r:
        case Ok(value=a):
            return succeed(a)
        case Err(error=e):
            return fail(e)
        case _:
            _unexpected('Ok or Err', r)


def from_maybe[A](m: Option[A]) -> Loadable[Any, A]:
    """Some(a) becomes ``succeed(a)``, Nothing becomes ``not_asked()``.

    Raises:
        TypeError: If ``m`` is neither Some nor Nothing.
    """
    match m:
        case Some(value=a):
            return succeed(a)
        case NothingType():
            return not_asked()
        case _:
            _unexpected('Some or Nothing', m)


# ---------------------------------------------------------------------
# Lifting and traversal
# ---------------------------------------------------------------------


def map2[E, A, B, C](
    f: Callable[[A, B], C], la: Loadable[E, A], lb: Loadable[E, B]
) -> Loadable[E, C]:
    """Combine two Loadables with a binary function, short-circuiting like ``and_map``."""
    return la.map(lambda a: lambda b: f(a, b)).and_map(lb)


type _Chain[B] = tuple[B, _Chain[B]] | None


def _cons[B](head: B) -> Callable[[_Chain[B]], _Chain[B]]:
    return lambda tail: (head, tail)


def _to_list[B](chain: _Chain[B]) -> list[B]:
    out: list[B] = []
    while chain is not None:
        head, chain = chain
        out.append(head)
    return out


def combine_map[E, A, B](
    f: Callable[[A], Loadable[E, B]], items: Sequence[A]
) -> Loadable[E, list[B]]:
    """Map each item to a Loadable and collect the payloads into a list.

    Right fold over ``items`` seeded with an empty success: each step is
    ``f(item).map(cons).and_map(acc)``. ``f`` is called for every item,
    last item first. Since each step checks its own item before the folded
    tail, the error that surfaces is the one of the leftmost non-success item.
    The fold builds a cons chain, flattened into a list once at the end.

    Examples:
        >>> combine_map(succeed, [1, 2, 3])
        Loadable(content=Succeeded(value=[1, 2, 3]), refreshing=False)
    """
    acc: Loadable[E, _Chain[B]] = succeed(None)
    for item in reversed(items):
        acc = f(item).map(_cons).and_map(acc)
    return acc.map(_to_list)


def combine_map_with[E, A, B](
    combine: Callable[[E, E], E],
    f: Callable[[A], Loadable[E, B]],
    items: Sequence[A],
) -> Loadable[E, list[B]]:
    """Like ``combine_map`` but accumulates every failure with ``combine``.

    Uses ``and_map_with`` for each fold step, so the error of an item is the
    first argument and the errors accumulated from the items after it the
    second. The result reads left to right:

    Examples:
        >>> def fail_if_odd(n):
        ...     return fail(str(n)) if n % 2 else succeed(n)
        >>> combine_map_with(lambda a, b: a + b, fail_if_odd, [1, 2, 3])
        Loadable(content=Failed(error='13'), refreshing=False)
    """
    acc: Loadable[E, _Chain[B]] = succeed(None)
    for item in reversed(items):
        acc = f(item).map(_cons).and_map_with(combine, acc)
    return acc.map(_to_list)


def combine[E, A](items: Sequence[Loadable[E, A]]) -> Loadable[E, list[A]]:
    """Turn a sequence of Loadables into a Loadable of a list."""
    return combine_map(_identity, items)


def combine_with[E, A](
    combine: Callable[[E, E], E], items: Sequence[Loadable[E, A]]
) -> Loadable[E, list[A]]:
    """Turn a sequence of Loadables into a Loadable of a list, accumulating errors."""
    return combine_map_with(combine, _identity, items)


def _identity[T](x: T) -> T:
    return x
