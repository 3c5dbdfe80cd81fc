"""Exception hierarchy for the selection engine."""

from __future__ import annotations


class SelectionError(Exception):
    """Base class for every error raised by the selector."""


class InvalidInputError(SelectionError, ValueError):
    """Candidates, bonus or count violate a precondition."""


class InvalidWeightsError(SelectionError, ValueError):
    """No candidate has a positive effective weight."""


class UnsupportedConfigurationError(SelectionError):
    """An unknown pivot or range reached the adjustment step."""
