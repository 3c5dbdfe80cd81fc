"""Selector configuration — pivot/range enums and the frozen config model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Pivot(str, Enum):
    """Statistic that adjusted weights are pulled toward."""

    MEAN = "mean"
    MEDIAN = "median"


class Range(str, Enum):
    """Which candidates, relative to the pivot, receive adjustment."""

    BELOW_PIVOT = "below"
    ABOVE_PIVOT = "above"
    ALL = "all"


class SelectorConfig(BaseModel):
    """Immutable selector settings, fixed at construction time."""

    model_config = ConfigDict(frozen=True)

    pivot: Pivot = Pivot.MEAN
    range: Range = Range.ALL
    seed: int | None = None
    history_capacity: int = Field(default=0, ge=0)
    strict: bool = True
