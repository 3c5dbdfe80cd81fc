"""Bonus adjustment — pull normalized weights toward a mean or median pivot.

The step applied to each weight is ``target * bonus / (bonus + 100)``: zero
at ``bonus == 0`` and approaching ``target`` as the bonus grows. A step never
carries a weight past the target, so with a large bonus every adjusted weight
converges on the pivot from its own side.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np

from sweetdraw.config import Pivot, Range
from sweetdraw.errors import InvalidWeightsError, UnsupportedConfigurationError
from sweetdraw.selectable import WeightedCandidate

logger = logging.getLogger(__name__)

BONUS_SCALE = 100.0


def normalize(weights: Sequence[float]) -> np.ndarray:
    """Scale clamped weights so they sum to 1."""
    clamped = np.maximum(np.asarray(weights, dtype=float), 0.0)
    total = float(clamped.sum())
    if not total > 0.0:
        raise InvalidWeightsError("At least one candidate must have a positive weight")
    return clamped / total


def median(values: Sequence[float]) -> float:
    """Middle value; mean of the two central values for even counts."""
    if len(values) == 0:
        return 0.0
    return float(np.median(np.asarray(values, dtype=float)))


def pivot_target(weights: Sequence[float], pivot: Any) -> float:
    """Return the mean or median of *weights* according to *pivot*."""
    if pivot == Pivot.MEAN:
        return float(np.mean(weights)) if len(weights) else 0.0
    if pivot == Pivot.MEDIAN:
        return median(weights)
    raise UnsupportedConfigurationError(f"Unknown pivot: {pivot!r}")


def adjustment_amount(target: float, bonus: float) -> float:
    """``target * bonus / (bonus + 100)``."""
    if bonus <= 0.0:
        return 0.0
    return target * (bonus / (bonus + BONUS_SCALE))


def adjust_weight(
    weight: float,
    adjustment: float,
    target: float,
    range_: Any,
    strict: bool = True,
) -> float:
    """Move a single weight toward *target* per the range policy.

    Unknown range values raise :class:`UnsupportedConfigurationError` when
    *strict*, otherwise they are logged and the weight comes back unchanged.
    """
    raise_low = range_ in (Range.BELOW_PIVOT, Range.ALL)
    lower_high = range_ in (Range.ABOVE_PIVOT, Range.ALL)
    if not (raise_low or lower_high):
        if strict:
            raise UnsupportedConfigurationError(f"Unknown range: {range_!r}")
        logger.error("Unknown range %r, weight not adjusted", range_)
        return max(0.0, weight)

    if raise_low and weight < target:
        weight = min(weight + adjustment, target)
    elif lower_high and weight > target:
        weight = max(weight - adjustment, target)
    return max(0.0, weight)


def apply_bonus(
    items: Sequence[Any],
    weights: Sequence[float],
    bonus: float,
    pivot: Any = Pivot.MEAN,
    range_: Any = Range.ALL,
    strict: bool = True,
) -> list[WeightedCandidate]:
    """Pair each item with its bonus-adjusted, normalized weight.

    *weights* are the raw weights of *items* in the same order; neither the
    items nor their ``weight`` attributes are modified. An unknown *pivot*
    raises when *strict*; otherwise it is logged and the normalized weights
    come back unadjusted.
    """
    normalized = normalize(weights)
    try:
        target = pivot_target(normalized, pivot)
    except UnsupportedConfigurationError:
        if strict:
            raise
        logger.error("Unknown pivot %r, weights not adjusted", pivot)
        return [WeightedCandidate(item, float(w)) for item, w in zip(items, normalized)]
    adjustment = adjustment_amount(target, bonus)
    logger.debug(
        "Adjusting %d weights toward %s=%.6f by up to %.6f",
        len(normalized), getattr(pivot, "value", pivot), target, adjustment,
    )
    return [
        WeightedCandidate(item, adjust_weight(float(w), adjustment, target, range_, strict))
        for item, w in zip(items, normalized)
    ]
