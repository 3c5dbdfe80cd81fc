"""Random sources — ambient process-wide randomness or a seeded generator."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod


class RandomSource(ABC):
    """Produces uniform floats in ``[0, 1)``."""

    deterministic: bool = False

    @abstractmethod
    def random(self) -> float:
        ...

    def uniform_below(self, upper: float) -> float:
        """Uniform value in ``[0, upper)``."""
        return self.random() * upper


class AmbientRandomSource(RandomSource):
    """Shares the interpreter-wide ``random`` module state."""

    def random(self) -> float:
        return random.random()


class SeededRandomSource(RandomSource):
    """Owns a private ``random.Random`` so sequences are reproducible.

    Each draw advances the generator, so an instance must not be shared
    between selectors.
    """

    deterministic = True

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()


def make_source(seed: int | None = None) -> RandomSource:
    """Seeded source when *seed* is given, ambient otherwise."""
    if seed is None:
        return AmbientRandomSource()
    return SeededRandomSource(seed)
