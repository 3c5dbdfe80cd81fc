"""Weight model — the capability every candidate must expose."""

from __future__ import annotations

import math
from typing import Any, NamedTuple, Protocol, runtime_checkable

from sweetdraw.errors import InvalidInputError


@runtime_checkable
class Selectable(Protocol):
    """Anything with a mutable, numeric selection weight."""

    weight: float


class WeightedCandidate(NamedTuple):
    """A candidate paired with an adjusted weight for a single call."""

    item: Any
    weight: float


def effective_weight(candidate: Any) -> float:
    """Return ``max(0, candidate.weight)``; NaN counts as zero."""
    try:
        weight = float(candidate.weight)
    except (AttributeError, TypeError, ValueError) as exc:
        raise InvalidInputError(
            f"Candidate {candidate!r} does not expose a numeric 'weight'"
        ) from exc
    if math.isnan(weight):
        return 0.0
    return max(0.0, weight)
