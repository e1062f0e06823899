"""
TTL normalisation utilities.

TTLs are accepted as seconds (``int``/``float``) or :class:`datetime.timedelta`
and normalised to float seconds. ``math.inf`` is the explicit "never expires"
value; ``None`` is reserved by callers to mean "use the default".
"""

import math
from datetime import timedelta
from typing import Optional, Union

TTL = Union[int, float, timedelta]


def to_seconds(value: TTL) -> float:
    """
    Convert a TTL to float seconds.

    Parameters
    ----------
    value : int, float or timedelta
        The duration to convert

    Returns
    -------
    float
        Duration in seconds; ``math.inf`` is passed through unchanged

    Raises
    ------
    TypeError
        If ``value`` is not a number or a timedelta (``bool`` is rejected)

    Examples
    --------
    >>> to_seconds(1.5)
    1.5
    >>> to_seconds(timedelta(milliseconds=10))
    0.01
    """
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"TTL must be seconds or a timedelta, got {value!r}")
    return float(value)


def is_infinite(seconds: float) -> bool:
    """Return True for the "never expires" TTL."""
    return seconds == math.inf


def is_positive(seconds: float) -> bool:
    """Return True for a usable TTL: strictly positive and not NaN."""
    return not math.isnan(seconds) and seconds > 0


def expiry_for(ttl_seconds: float, now: float) -> Optional[float]:
    """
    Compute the absolute expiry instant for an entry written at ``now``.

    Returns ``None`` for an infinite TTL. A NaN TTL is treated like a
    non-positive one: the entry is already expired at ``now``.

    Examples
    --------
    >>> expiry_for(10.0, now=100.0)
    110.0
    >>> expiry_for(math.inf, now=100.0) is None
    True
    >>> expiry_for(float("nan"), now=100.0)
    100.0
    """
    if is_infinite(ttl_seconds):
        return None
    if math.isnan(ttl_seconds):
        return now
    return now + ttl_seconds
