"""Cumulative-weight construction and O(log n) draw-and-map sampling."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from sweetdraw.errors import InvalidWeightsError
from sweetdraw.random_source import RandomSource


def cumulative_weights(weights: Sequence[float]) -> np.ndarray:
    """Prefix sums over ``max(0, w)``.

    For weights ``[10, 20, 30]`` this is ``[10, 30, 60]``. Raises
    :class:`InvalidWeightsError` when the total is not positive.
    """
    clamped = np.maximum(np.asarray(weights, dtype=float), 0.0)
    clamped = np.nan_to_num(clamped, nan=0.0)
    cumulative = np.cumsum(clamped)
    if cumulative.size == 0 or not cumulative[-1] > 0.0:
        raise InvalidWeightsError("At least one candidate must have a positive weight")
    return cumulative


def draw_index(cumulative: np.ndarray, source: RandomSource) -> int:
    """Map a uniform draw in ``[0, total)`` to a candidate index.

    ``side="right"`` yields the first index whose cumulative value exceeds
    the draw, so a candidate owns the half-open interval ``[C[i-1], C[i])``
    and zero-weight candidates are never hit.
    """
    total = float(cumulative[-1])
    value = source.uniform_below(total)
    index = int(np.searchsorted(cumulative, value, side="right"))
    return min(max(index, 0), len(cumulative) - 1)
