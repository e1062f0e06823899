"""Data models for the generational cache.

A generation is a plain ``dict``: Python dicts keep insertion order, which is
exactly the oldest-inserted-first traversal the engine relies on.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Dict, Generic, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(slots=True)
class CacheEntry(Generic[V]):
    """A cached value and the instant after which it is treated as absent.

    Attributes
    ----------
    value: V
        The stored value.
    expiry: Optional[float]
        Absolute instant on the cache clock, or ``None`` for "never expires".
    """

    value: V
    expiry: Optional[float] = None

    def is_expired(self, now: float) -> bool:
        """Return True once ``now`` has reached the expiry instant."""
        return self.expiry is not None and self.expiry <= now


Generation = Dict[K, CacheEntry[V]]
