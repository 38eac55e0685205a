"""
Calculation errors.

Everything derives from ValueError so callers that already translate
ValueError into a 400-style response keep working.
"""


class MortgageEngineError(ValueError):
    """Base class for all engine errors."""


class InvalidArgumentError(MortgageEngineError):
    """An input was rejected before any computation ran."""

    def __init__(self, name: str, value, requirement: str):
        self.name = name
        self.value = value
        self.requirement = requirement
        super().__init__(f"{name} must be {requirement} (got {value!r})")


class NumericOverflowError(MortgageEngineError):
    """An intermediate result was not a finite number."""
