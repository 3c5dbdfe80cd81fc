"""Multiple draws with replacement."""

from __future__ import annotations

from typing import Any, Sequence

from sweetdraw.modes.base import BaseMode, register_mode
from sweetdraw.selector import Selector


@register_mode
class MultipleMode(BaseMode):
    name = "multiple"
    description = "Draw COUNT candidates with replacement (repeats allowed)"

    def draw(self, selector: Selector, candidates: Sequence[Any], count: int = 1, bonus: float = 0.0) -> list[Any]:
        return selector.select_multiple(candidates, count, bonus)
