"""Selector — weighted random selection with optional bonus equalization."""

from __future__ import annotations

import logging
import math
from collections import OrderedDict
from typing import Any, Callable, Iterable, NamedTuple

import numpy as np
from pydantic import ValidationError

from sweetdraw.adjust import apply_bonus
from sweetdraw.config import Pivot, Range, SelectorConfig
from sweetdraw.cumulative import cumulative_weights, draw_index
from sweetdraw.errors import InvalidInputError, InvalidWeightsError, SelectionError
from sweetdraw.history import SelectionHistory
from sweetdraw.random_source import RandomSource, make_source
from sweetdraw.selectable import effective_weight

logger = logging.getLogger(__name__)

CACHE_SIZE = 128


class Attempt(NamedTuple):
    """Outcome of a ``try_*`` call: ``ok, value = selector.try_select_single(...)``."""

    ok: bool
    value: Any = None


class Selector:
    """Picks candidates with probability proportional to their weight.

    A positive ``bonus`` pulls normalized weights toward the configured
    pivot before drawing, flattening the distribution without touching the
    candidates themselves. Instances are not thread-safe.
    """

    def __init__(
        self,
        pivot: Pivot = Pivot.MEAN,
        range: Range = Range.ALL,
        *,
        seed: int | None = None,
        history_capacity: int = 0,
        strict: bool = True,
    ):
        try:
            self._config = SelectorConfig(
                pivot=pivot, range=range, seed=seed,
                history_capacity=history_capacity, strict=strict,
            )
        except ValidationError as exc:
            raise InvalidInputError(f"Invalid selector configuration: {exc}") from exc
        self._source: RandomSource = make_source(self._config.seed)
        self._history = SelectionHistory(self._config.history_capacity)
        self._cache: OrderedDict[tuple[float, ...], np.ndarray] = OrderedDict()

    @classmethod
    def seeded(cls, seed: int, pivot: Pivot = Pivot.MEAN, range: Range = Range.ALL) -> Selector:
        """Deterministic selector: same seed and calls, same results."""
        return cls(pivot, range, seed=seed)

    @classmethod
    def from_config(cls, config: SelectorConfig) -> Selector:
        return cls(
            config.pivot, config.range, seed=config.seed,
            history_capacity=config.history_capacity, strict=config.strict,
        )

    @staticmethod
    def builder() -> SelectorBuilder:
        return SelectorBuilder()

    # ── Properties ────────────────────────────────────────

    @property
    def config(self) -> SelectorConfig:
        return self._config

    @property
    def pivot(self) -> Pivot:
        return self._config.pivot

    @property
    def range(self) -> Range:
        return self._config.range

    @property
    def is_seeded(self) -> bool:
        return self._source.deterministic

    @property
    def history_capacity(self) -> int:
        return self._config.history_capacity

    @property
    def history_count(self) -> int:
        return len(self._history)

    def __repr__(self) -> str:
        return (
            f"Selector(pivot={self.pivot.value}, range={self.range.value}, "
            f"seeded={self.is_seeded}, history_capacity={self.history_capacity})"
        )

    # ── Selection ─────────────────────────────────────────

    def select_single(self, candidates: Iterable[Any], bonus: float = 0.0) -> Any:
        """Draw one candidate."""
        items, weights, bonus = self._prepare(candidates, bonus)
        return self._select_with_replacement(items, weights, bonus, 1)[0]

    def select_multiple(self, candidates: Iterable[Any], count: int, bonus: float = 0.0) -> list[Any]:
        """Draw *count* candidates with replacement; duplicates are expected."""
        items, weights, bonus = self._prepare(candidates, bonus)
        count = self._check_count(count)
        return self._select_with_replacement(items, weights, bonus, count)

    def select_distinct(self, candidates: Iterable[Any], count: int, bonus: float = 0.0) -> list[Any]:
        """Draw *count* pairwise-distinct candidates (sampling without replacement).

        Every draw removes the winner and renormalizes over what is left;
        with a positive bonus the adjustment is recomputed for each shrinking
        pool. Once only zero-weight candidates remain they are drawn uniformly.
        Distinctness is by position, so equal-valued candidates are still
        separate entries.
        """
        items, weights, bonus = self._prepare(candidates, bonus)
        count = self._check_count(count)
        if count > len(items):
            raise InvalidInputError(
                f"count: cannot select {count} distinct candidates from a pool of {len(items)}"
            )

        if len(items) > 1 and not sum(weights) > 0.0:
            raise InvalidWeightsError("candidates: at least one candidate must have a positive weight")

        remaining_items = list(items)
        remaining_weights = list(weights)
        selected: list[Any] = []
        for _ in range(count):
            if len(remaining_items) > 1 and not sum(remaining_weights) > 0.0:
                # only zero-weight candidates left: each is equally likely
                index = min(int(self._source.uniform_below(len(remaining_items))), len(remaining_items) - 1)
            else:
                index = self._draw(self._distribution(remaining_items, remaining_weights, bonus))
            selected.append(remaining_items.pop(index))
            remaining_weights.pop(index)

        self._history.record(selected)
        logger.debug("Selected %d distinct of %d candidates", count, len(items))
        return selected

    def try_select_single(self, candidates: Iterable[Any], bonus: float = 0.0) -> Attempt:
        return self._attempt(self.select_single, candidates, bonus)

    def try_select_multiple(self, candidates: Iterable[Any], count: int, bonus: float = 0.0) -> Attempt:
        return self._attempt(self.select_multiple, candidates, count, bonus)

    def try_select_distinct(self, candidates: Iterable[Any], count: int, bonus: float = 0.0) -> Attempt:
        return self._attempt(self.select_distinct, candidates, count, bonus)

    # ── Probability & diagnostics ─────────────────────────

    def probabilities(self, candidates: Iterable[Any], bonus: float = 0.0) -> list[float]:
        """Selection probability of each candidate, in input order; sums to 1."""
        values = np.asarray(self.adjusted_weights(candidates, bonus), dtype=float)
        return (values / values.sum()).tolist()

    def adjusted_weights(self, candidates: Iterable[Any], bonus: float = 0.0) -> list[float]:
        """Weights the draw would use, in input order.

        With ``bonus == 0`` these are the clamped raw weights. Otherwise they
        are the adjusted values on the normalized scale (raw weights divided
        by their total before adjustment).
        """
        items, weights, bonus = self._prepare(candidates, bonus)
        if not sum(weights) > 0.0:
            raise InvalidWeightsError("candidates: at least one candidate must have a positive weight")
        if bonus <= 0.0:
            return list(weights)
        return [c.weight for c in self._adjust(items, weights, bonus)]

    def try_probabilities(self, candidates: Iterable[Any], bonus: float = 0.0) -> Attempt:
        return self._attempt(self.probabilities, candidates, bonus)

    def try_adjusted_weights(self, candidates: Iterable[Any], bonus: float = 0.0) -> Attempt:
        return self._attempt(self.adjusted_weights, candidates, bonus)

    # ── History ───────────────────────────────────────────

    def history(self, of_type: type | None = None) -> list[Any]:
        """Recorded selections, oldest first, optionally filtered by type."""
        return self._history.snapshot(of_type)

    def last(self, n: int) -> list[Any]:
        return self._history.last(n)

    def was_recently_selected(self, item: Any) -> bool:
        return item in self._history

    def clear_history(self) -> None:
        self._history.clear()

    def clear_cache(self) -> None:
        self._cache.clear()

    # ── Internals ─────────────────────────────────────────

    def _prepare(self, candidates: Iterable[Any], bonus: float) -> tuple[list[Any], list[float], float]:
        if candidates is None:
            raise InvalidInputError("candidates: collection cannot be None")
        try:
            items = list(candidates)
        except TypeError as exc:
            raise InvalidInputError(f"candidates: expected an iterable, got {type(candidates).__name__}") from exc
        if not items:
            raise InvalidInputError("candidates: collection cannot be empty")
        try:
            bonus = float(bonus)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"bonus: expected a number, got {bonus!r}") from exc
        if math.isnan(bonus) or bonus < 0.0:
            raise InvalidInputError(f"bonus: cannot be negative, got {bonus}")
        return items, [effective_weight(c) for c in items], bonus

    @staticmethod
    def _check_count(count: int) -> int:
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidInputError(f"count: expected an integer, got {count!r}")
        if count < 1:
            raise InvalidInputError(f"count: must be at least 1, got {count}")
        return count

    def _select_with_replacement(
        self, items: list[Any], weights: list[float], bonus: float, count: int,
    ) -> list[Any]:
        cumulative = self._distribution(items, weights, bonus)
        selected = [items[self._draw(cumulative)] for _ in range(count)]
        self._history.record(selected)
        logger.debug("Selected %d of %d candidates (bonus=%s)", count, len(items), bonus)
        return selected

    def _distribution(self, items: list[Any], weights: list[float], bonus: float) -> np.ndarray | None:
        """Cumulative array for *items*, or ``None`` for a single candidate."""
        if len(items) == 1:
            return None
        if bonus > 0.0:
            return cumulative_weights([c.weight for c in self._adjust(items, weights, bonus)])
        return self._cached_cumulative(weights)

    def _draw(self, cumulative: np.ndarray | None) -> int:
        if cumulative is None:
            return 0
        return draw_index(cumulative, self._source)

    def _adjust(self, items: list[Any], weights: list[float], bonus: float):
        return apply_bonus(
            items, weights, bonus,
            pivot=self._config.pivot, range_=self._config.range, strict=self._config.strict,
        )

    def _cached_cumulative(self, weights: list[float]) -> np.ndarray:
        key = tuple(weights)
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            logger.debug("Cumulative weights cache hit (%d candidates)", len(key))
            return cached
        cumulative = cumulative_weights(weights)
        self._cache[key] = cumulative
        if len(self._cache) > CACHE_SIZE:
            self._cache.popitem(last=False)
        return cumulative

    def _attempt(self, fn: Callable[..., Any], *args: Any) -> Attempt:
        try:
            return Attempt(True, fn(*args))
        except SelectionError as exc:
            logger.debug("%s failed: %s", fn.__name__, exc)
            return Attempt(False, None)


class SelectorBuilder:
    """Fluent construction: ``Selector.builder().with_seed(7).build()``."""

    def __init__(self):
        self._pivot = Pivot.MEAN
        self._range = Range.ALL
        self._seed: int | None = None
        self._history_capacity = 0
        self._strict = True

    def with_pivot(self, pivot: Pivot) -> SelectorBuilder:
        self._pivot = pivot
        return self

    def with_range(self, range: Range) -> SelectorBuilder:
        self._range = range
        return self

    def with_seed(self, seed: int) -> SelectorBuilder:
        self._seed = seed
        return self

    def with_history_capacity(self, capacity: int) -> SelectorBuilder:
        """Negative capacities are treated as 0 (history disabled)."""
        self._history_capacity = max(0, capacity)
        return self

    def with_strict(self, strict: bool = True) -> SelectorBuilder:
        self._strict = strict
        return self

    def build(self) -> Selector:
        return Selector(
            self._pivot, self._range, seed=self._seed,
            history_capacity=self._history_capacity, strict=self._strict,
        )
