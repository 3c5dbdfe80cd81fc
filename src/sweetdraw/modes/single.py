"""Single draw — one candidate, whatever the requested count."""

from __future__ import annotations

from typing import Any, Sequence

from sweetdraw.modes.base import BaseMode, register_mode
from sweetdraw.selector import Selector


@register_mode
class SingleMode(BaseMode):
    name = "single"
    description = "Draw exactly one candidate"

    def draw(self, selector: Selector, candidates: Sequence[Any], count: int = 1, bonus: float = 0.0) -> list[Any]:
        return [selector.select_single(candidates, bonus)]
