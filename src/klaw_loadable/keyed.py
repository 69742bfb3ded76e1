"""Keyed-collection helpers: Loadable entries stored in a mapping.

Both helpers treat the mapping as immutable and return new values.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any

from klaw_loadable._logging import get_logger
from klaw_loadable.loadable import Loadable, loading, not_asked

__all__ = ['get', 'to_loading']

logger = get_logger(__name__)


def get[K: Hashable, E, A](mapping: Mapping[K, Loadable[E, A]], key: K) -> Loadable[E, A]:
    """Return the entry at ``key``, or ``not_asked()`` when absent."""
    entry = mapping.get(key)
    if entry is None:
        return not_asked()
    return entry


def to_loading[K: Hashable, E, A](
    mapping: Mapping[K, Loadable[E, A]], key: K
) -> dict[K, Loadable[E, A]]:
    """Return a copy of ``mapping`` with the entry at ``key`` marked as loading.

    An absent key gets a fresh ``loading()`` entry. Other entries are shared,
    not copied.

    Args:
        mapping: The current entries. Never mutated.
        key: The entry about to be fetched.

    Returns:
        A new dict with the transitioned entry.
    """
    updated: dict[K, Any] = dict(mapping)
    entry = mapping.get(key)
    if entry is None:
        logger.debug('Inserting loading entry', key=key)
        updated[key] = loading()
    else:
        logger.debug('Marking entry as loading', key=key, was_loading=entry.is_loading())
        updated[key] = entry.to_loading()
    return updated
