"""Shared fixtures for selector tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from sweetdraw import Pivot, Range, Selector


@dataclass(eq=False)
class Loot:
    """Minimal selectable candidate; compares by identity."""

    name: str
    weight: float


@pytest.fixture
def make_loot():
    def _make(*weights: float) -> list[Loot]:
        return [Loot(f"item{i}", w) for i, w in enumerate(weights)]
    return _make


@pytest.fixture
def loot(make_loot):
    """Three candidates weighted 10 / 20 / 70."""
    return make_loot(10, 20, 70)


@pytest.fixture
def selector():
    return Selector.seeded(1234)


@pytest.fixture
def flattening_selector():
    return Selector(Pivot.MEAN, Range.ALL, seed=99)
