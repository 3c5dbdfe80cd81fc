"""Base selection mode ABC and registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from sweetdraw.selector import Selector

_REGISTRY: dict[str, type[BaseMode]] = {}


class BaseMode(ABC):
    """Abstract base for the ways a selector can draw from a pool."""

    name: str
    description: str = ""

    @abstractmethod
    def draw(self, selector: Selector, candidates: Sequence[Any], count: int = 1, bonus: float = 0.0) -> list[Any]:
        """Draw from *candidates* using *selector*.

        Returns a list even for one pick. *count* is how many picks a mode
        makes: ``single`` ignores it, ``multiple`` draws it with replacement
        and ``distinct`` draws it without. Errors from the selector propagate
        unchanged.
        """


def register_mode(cls: type[BaseMode]) -> type[BaseMode]:
    """Class decorator to register a selection mode."""
    _REGISTRY[cls.name] = cls
    return cls


def get_mode(name: str) -> BaseMode:
    """Instantiate a registered mode by name."""
    if name not in _REGISTRY:
        raise KeyError(f"Unknown mode: {name!r}. Available: {list(_REGISTRY)}")
    return _REGISTRY[name]()


def list_modes() -> dict[str, type[BaseMode]]:
    """Return all registered modes."""
    return dict(_REGISTRY)
