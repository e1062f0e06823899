"""
Shared utilities for the cache engine.

Modules
-------
durations
    TTL normalisation (seconds, timedelta, infinite) and expiry computation
"""

__all__ = []
