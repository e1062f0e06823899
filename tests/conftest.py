"""Pytest configuration for test suite.

Ensures the project root is on ``sys.path`` so ``import gencache`` resolves
regardless of the working directory pytest chooses, and provides a manual
clock and an eviction recorder shared by the cache tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_syspath() -> None:
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        # Prepend to prefer local sources over site-packages
        sys.path.insert(0, project_root_str)


_ensure_project_root_on_syspath()


class FakeClock:
    """Manually advanced clock in seconds."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class EvictionRecorder:
    """``on_eviction`` callback that remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[object, object]] = []

    def __call__(self, key, value) -> None:
        self.calls.append((key, value))

    @property
    def keys(self) -> list[object]:
        return [key for key, _ in self.calls]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def evictions() -> EvictionRecorder:
    return EvictionRecorder()
