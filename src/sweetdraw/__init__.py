"""Weighted random selection with bonus-driven equalization."""

from sweetdraw.config import Pivot, Range, SelectorConfig  # noqa: F401
from sweetdraw.errors import (  # noqa: F401
    InvalidInputError,
    InvalidWeightsError,
    SelectionError,
    UnsupportedConfigurationError,
)
from sweetdraw.selectable import Selectable, WeightedCandidate  # noqa: F401
from sweetdraw.selector import Attempt, Selector, SelectorBuilder  # noqa: F401

__version__ = "0.1.0"
