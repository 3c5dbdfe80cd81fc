"""Distinct draws — weighted sampling without replacement."""

from __future__ import annotations

from typing import Any, Sequence

from sweetdraw.modes.base import BaseMode, register_mode
from sweetdraw.selector import Selector


@register_mode
class DistinctMode(BaseMode):
    name = "distinct"
    description = "Draw COUNT different candidates, renormalizing after each pick"

    def draw(self, selector: Selector, candidates: Sequence[Any], count: int = 1, bonus: float = 0.0) -> list[Any]:
        return selector.select_distinct(candidates, count, bonus)
