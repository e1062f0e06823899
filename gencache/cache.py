"""Generational cache: bounded, approximate LRU with optional TTL.

Entries live in one of two insertion-ordered generations. New keys go into
``active``; once ``active`` has received ``capacity`` distinct keys the cache
*rotates*: everything still in ``previous`` is evicted, ``active`` becomes
``previous`` and a fresh ``active`` starts filling. Reading a key that sits in
``previous`` promotes it back into ``active`` so it survives the next
rotation.

This trades exact recency ordering for O(1) promotion: an entry accessed just
before a rotation is protected, while one that is not touched again before
the following rotation is evicted even if something less recently used in
``active`` survives.

TTL expiry is lazy. Any operation or traversal that touches an expired entry
removes it and reports it to ``on_eviction``. Explicit ``delete`` and
``clear`` never call ``on_eviction``.

The cache is not thread-safe; serialise access externally.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Hashable
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from .errors import InvalidArgumentError
from .models import CacheEntry, Generation
from .utils.durations import TTL, expiry_for, is_positive, to_seconds

if TYPE_CHECKING:  # pragma: no cover
    from .config.models import CacheConfig

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING: Any = object()


def _validate_capacity(capacity: Any, name: str = "capacity") -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise InvalidArgumentError(
            f"`{name}` must be an integer greater than 0, got {capacity!r}"
        )
    return capacity


def _validate_default_ttl(default_ttl: Optional[TTL]) -> float:
    if default_ttl is None:
        return math.inf
    try:
        seconds = to_seconds(default_ttl)
    except TypeError as exc:
        raise InvalidArgumentError(str(exc)) from exc
    if not is_positive(seconds):
        raise InvalidArgumentError(
            f"`default_ttl` must be greater than 0, got {default_ttl!r}"
        )
    return seconds


class GenerationalCache(Generic[K, V]):
    """Bounded in-memory cache with two-generation approximate LRU eviction.

    Parameters
    ----------
    capacity: int
        Maximum number of live entries. Must be an ``int`` greater than 0;
        floats (including ``math.inf``) and ``bool`` are rejected, so every
        cache is bounded.
    default_ttl: float | timedelta | None
        TTL applied by :meth:`set` when no per-call TTL is given. ``None`` or
        ``math.inf`` means entries never expire. Zero is rejected.
    on_eviction: Callable[[K, V], None], optional
        Called synchronously with ``(key, value)`` whenever an entry is
        discarded automatically (rotation, resize or lazy expiry). Exceptions
        raised by the callback propagate to the caller.
    clock: Callable[[], float], optional
        Source of the current instant in seconds. Defaults to
        :func:`time.monotonic`.

    Raises
    ------
    InvalidArgumentError
        For a non-positive capacity or a zero/non-positive default TTL.
    """

    def __init__(
        self,
        capacity: int,
        default_ttl: Optional[TTL] = None,
        on_eviction: Optional[Callable[[K, V], None]] = None,
        *,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._capacity = _validate_capacity(capacity)
        self._default_ttl = _validate_default_ttl(default_ttl)
        self._on_eviction = on_eviction
        self._clock = clock or time.monotonic
        self._active: Generation[K, V] = {}
        self._previous: Generation[K, V] = {}
        self._active_insert_count = 0
        logger.debug(
            "generational_cache.created",
            extra={
                "capacity": self._capacity,
                "default_ttl_seconds": self._default_ttl,
            },
        )

    @classmethod
    def from_config(
        cls,
        config: "CacheConfig",
        on_eviction: Optional[Callable[[K, V], None]] = None,
        *,
        clock: Optional[Callable[[], float]] = None,
    ) -> "GenerationalCache[K, V]":
        """Build a cache from a validated :class:`CacheConfig`."""
        return cls(
            config.capacity,
            config.default_ttl_seconds,
            on_eviction,
            clock=clock,
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def default_ttl(self) -> float:
        """Default TTL in seconds; ``math.inf`` when entries never expire."""
        return self._default_ttl

    @property
    def on_eviction(self) -> Optional[Callable[[K, V], None]]:
        return self._on_eviction

    # ---------------- Internal helpers ----------------

    def _emit_eviction(self, key: K, value: V) -> None:
        if self._on_eviction is not None:
            self._on_eviction(key, value)

    def _delete_if_expired(self, key: K, entry: CacheEntry[V]) -> bool:
        """Evict ``key`` if ``entry`` has expired. Return True when evicted."""
        if entry.expiry is None or not entry.is_expired(self._clock()):
            return False
        self._emit_eviction(key, entry.value)
        self.delete(key)
        return True

    def _insert(self, key: K, entry: CacheEntry[V]) -> None:
        # Caller guarantees ``key`` is not already in ``active``.
        self._active[key] = entry
        self._active_insert_count += 1
        if self._active_insert_count >= self._capacity:
            self._rotate()

    def _rotate(self) -> None:
        retired = self._previous
        survivors = self._active
        self._previous = survivors
        self._active = {}
        self._active_insert_count = 0

        evicted = 0
        for key, entry in retired.items():
            # Shadowed copies are superseded by the survivor's entry.
            if key in survivors:
                continue
            self._emit_eviction(key, entry.value)
            evicted += 1

        logger.debug(
            "generational_cache.rotated",
            extra={"evicted": evicted, "retained": len(survivors)},
        )

    def _lookup(self, key: K) -> Optional[CacheEntry[V]]:
        """Find ``key`` without promoting it; expired entries are evicted."""
        entry = self._active.get(key)
        if entry is None:
            entry = self._previous.get(key)
        if entry is None or self._delete_if_expired(key, entry):
            return None
        return entry

    def _iter_entries_ascending(self) -> Iterator[Tuple[K, CacheEntry[V]]]:
        previous = self._previous
        for key in list(previous):
            entry = previous.get(key)
            if entry is None or key in self._active:
                continue
            if not self._delete_if_expired(key, entry):
                yield key, entry

        active = self._active
        for key in list(active):
            entry = active.get(key)
            if entry is None:
                continue
            if not self._delete_if_expired(key, entry):
                yield key, entry

    # ---------------- Public API ----------------

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value for ``key`` or ``default``.

        A hit in ``previous`` promotes the entry into ``active``, which may
        trigger a rotation.
        """
        entry = self._active.get(key)
        if entry is not None:
            if self._delete_if_expired(key, entry):
                return default
            return entry.value

        entry = self._previous.get(key)
        if entry is not None:
            if self._delete_if_expired(key, entry):
                return default
            del self._previous[key]
            self._insert(key, entry)
            return entry.value

        return default

    def set(self, key: K, value: V, ttl: Optional[TTL] = None) -> None:
        """Insert or overwrite ``key``.

        ``ttl`` defaults to the cache's default TTL; ``math.inf`` stores the
        entry without expiry. A non-positive or NaN ``ttl`` stores an entry
        that is expired on its next touch. Overwriting a key already in
        ``active`` keeps its position and does not count towards rotation. A
        copy of ``key`` left in ``previous`` stays shadowed until the next
        rotation drops it.
        """
        seconds = self._default_ttl if ttl is None else to_seconds(ttl)
        entry = CacheEntry(value, expiry_for(seconds, self._clock()))
        if key in self._active:
            self._active[key] = entry
        else:
            self._insert(key, entry)

    def has(self, key: K) -> bool:
        """Return True if ``key`` is live. Never promotes."""
        return self._lookup(key) is not None

    def peek(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Return the value for ``key`` without promoting it."""
        entry = self._lookup(key)
        if entry is None:
            return default
        return entry.value

    def delete(self, key: K) -> bool:
        """Remove ``key`` from both generations. Never calls ``on_eviction``."""
        deleted = self._active.pop(key, None) is not None
        if deleted:
            self._active_insert_count -= 1
        return self._previous.pop(key, None) is not None or deleted

    def clear(self) -> None:
        """Remove every entry. Never calls ``on_eviction``."""
        self._active.clear()
        self._previous.clear()
        self._active_insert_count = 0

    def resize(self, new_capacity: int) -> None:
        """Change the capacity, evicting the oldest live entries if needed.

        Evictions are reported to ``on_eviction`` oldest first.

        Raises
        ------
        InvalidArgumentError
            If ``new_capacity`` is not a positive integer. Nothing is
            modified in that case.
        """
        _validate_capacity(new_capacity, "new_capacity")

        items: List[Tuple[K, CacheEntry[V]]] = list(self._iter_entries_ascending())
        remove_count = len(items) - new_capacity
        evicted: List[Tuple[K, CacheEntry[V]]] = []
        if remove_count < 0:
            self._active = dict(items)
            self._previous = {}
            self._active_insert_count = len(items)
        else:
            evicted = items[:remove_count]
            self._previous = dict(items[remove_count:])
            self._active = {}
            self._active_insert_count = 0

        old_capacity = self._capacity
        self._capacity = new_capacity

        for key, entry in evicted:
            self._emit_eviction(key, entry.value)

        logger.debug(
            "generational_cache.resized",
            extra={
                "old_capacity": old_capacity,
                "new_capacity": new_capacity,
                "evicted": len(evicted),
            },
        )

    @property
    def size(self) -> int:
        """Number of entries, never more than ``capacity``.

        Computed in O(len(previous)) so keys present in both generations are
        counted once. Expired entries not yet touched are still counted.
        """
        if not self._active_insert_count:
            return len(self._previous)

        previous_only = sum(1 for key in self._previous if key not in self._active)
        return min(self._active_insert_count + previous_only, self._capacity)

    def entries_ascending(self) -> Iterator[Tuple[K, V]]:
        """Yield ``(key, value)`` pairs, oldest inserted first.

        Walks ``previous`` (skipping keys shadowed by ``active``) and then
        ``active``. Advancing the iterator may evict an expired entry and call
        ``on_eviction`` before the next live pair is produced. Entries removed
        while iterating are skipped; keys added to a generation after its
        traversal has started are not visited.
        """
        for key, entry in self._iter_entries_ascending():
            yield key, entry.value

    def entries_descending(self) -> Iterator[Tuple[K, V]]:
        """Yield ``(key, value)`` pairs, newest inserted first.

        Each generation is snapshotted when its traversal starts, so
        evictions triggered while iterating do not disturb the walk. Expired
        entries are evicted and reported to ``on_eviction`` as they are
        reached.
        """
        for key, entry in reversed(list(self._active.items())):
            if not self._delete_if_expired(key, entry):
                yield key, entry.value

        for key, entry in reversed(list(self._previous.items())):
            if key in self._active:
                continue
            if not self._delete_if_expired(key, entry):
                yield key, entry.value

    def items(self) -> Iterator[Tuple[K, V]]:
        """Alias of :meth:`entries_ascending`."""
        return self.entries_ascending()

    def keys(self) -> Iterator[K]:
        for key, _ in self.entries_ascending():
            yield key

    def values(self) -> Iterator[V]:
        for _, value in self.entries_ascending():
            yield value

    def for_each(self, callback: Callable[[V, K], Any]) -> None:
        """Call ``callback(value, key)`` for every live entry, oldest first."""
        for key, value in self.entries_ascending():
            callback(value, key)

    # ---------------- Mapping protocol ----------------

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __getitem__(self, key: K) -> V:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.delete(key):
            raise KeyError(key)

    def __repr__(self) -> str:
        # Listing the entries applies lazy expiry like any other traversal.
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"entries={list(self.entries_ascending())!r})"
        )
