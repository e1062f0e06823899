"""Exceptions raised by the generational cache.

Missing or expired keys are never errors; they are reported as ordinary
absence values by the lookup methods.
"""


class InvalidArgumentError(ValueError):
    """Raised for a non-positive capacity or a zero/non-positive default TTL."""
