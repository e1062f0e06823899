"""
Generational cache package.

A bounded in-memory cache with two-generation approximate LRU eviction,
optional per-entry TTL and an eviction callback. See README.md for usage.
"""

from .__version__ import __version__
from .cache import GenerationalCache
from .config.models import CacheConfig
from .errors import InvalidArgumentError
from .models import CacheEntry

__all__ = [
    "__version__",
    "CacheConfig",
    "CacheEntry",
    "GenerationalCache",
    "InvalidArgumentError",
]
