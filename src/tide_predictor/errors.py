"""
Exceptions raised by the tide prediction engine.

Input errors subclass :class:`ValueError` so callers that already guard
against bad arguments keep working.
"""
from __future__ import annotations


class TidePredictorError(Exception):
    """Base class for all tide_predictor errors."""


class CompoundParseError(TidePredictorError, ValueError):
    """A compound constituent name could not be parsed."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(
            f'Unable to parse compound constituent "{name}": {reason}'
        )


class UnknownStrategyError(TidePredictorError, ValueError):
    """Requested nodal correction strategy does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Unknown nodeCorrections strategy: {name}')


class InvalidTimeSpanError(TidePredictorError, ValueError):
    """Prediction span end is not after its start."""


class RegistryError(TidePredictorError):
    """The constituent dataset is inconsistent (bad code, member cycle)."""
