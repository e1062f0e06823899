"""
Tests for GenerationalCache.resize.
"""

import math

import pytest

from gencache import GenerationalCache, InvalidArgumentError


def _filled(capacity, keys, **kwargs):
    cache = GenerationalCache(capacity, **kwargs)
    for i, key in enumerate(keys):
        cache.set(key, i)
    return cache


@pytest.mark.parametrize("new_capacity", [0, -1, 2.0, math.inf, None])
def test_resize_rejects_invalid_capacity_without_mutation(new_capacity, evictions):
    cache = _filled(5, "abc", on_eviction=evictions)

    with pytest.raises(InvalidArgumentError):
        cache.resize(new_capacity)

    assert cache.capacity == 5
    assert list(cache.items()) == [("a", 0), ("b", 1), ("c", 2)]
    assert evictions.calls == []


def test_shrink_evicts_oldest_first(evictions):
    cache = _filled(10, "abcde", on_eviction=evictions)

    cache.resize(2)

    assert evictions.calls == [("a", 0), ("b", 1), ("c", 2)]
    assert cache.size == 2
    assert cache.capacity == 2
    assert cache.get("d") == 3
    assert cache.get("e") == 4


def test_shrink_spans_both_generations(evictions):
    cache = _filled(3, "abcd", on_eviction=evictions)

    cache.resize(2)

    assert evictions.keys == ["a", "b"]
    assert list(cache.keys()) == ["c", "d"]
    assert cache.size == 2


def test_grow_preserves_everything(evictions):
    cache = _filled(3, "ab", on_eviction=evictions)

    cache.resize(10)

    assert evictions.calls == []
    assert cache.capacity == 10
    assert list(cache.items()) == [("a", 0), ("b", 1)]
    assert cache.size == 2

    # The new capacity governs the next rotation
    for key in "cdefghij":
        cache.set(key, key)
    assert evictions.calls == []
    cache.set("k", "k")
    assert cache.size == 10


def test_resize_to_live_count_evicts_nothing(evictions):
    cache = _filled(10, "abc", on_eviction=evictions)

    cache.resize(3)

    assert evictions.calls == []
    assert cache.size == 3
    assert [cache.peek(k) for k in "abc"] == [0, 1, 2]


def test_resize_skips_and_reports_expired_entries(clock, evictions):
    cache = GenerationalCache(5, on_eviction=evictions, clock=clock)
    cache.set("short", 1, ttl=1)
    cache.set("long", 2)
    clock.advance(2)

    cache.resize(1)

    assert evictions.calls == [("short", 1)]
    assert list(cache.items()) == [("long", 2)]


def test_resize_keeps_active_copy_of_shadowed_key(evictions):
    cache = GenerationalCache(2, on_eviction=evictions)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("a", 3)

    cache.resize(5)

    assert cache.get("a") == 3
    assert list(cache.items()) == [("b", 2), ("a", 3)]
    assert evictions.calls == []
