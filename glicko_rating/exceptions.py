"""Errors raised by the rating engine."""
from __future__ import annotations


class RatingError(Exception):
    """Base class for rating engine failures."""


class PreconditionViolation(RatingError):
    """A rating was used on the wrong scale.

    Impact and expectation are only defined on the internal scale; passing an
    external-scale rating is a bug in the calling code.
    """


class NumericNonConvergence(RatingError):
    """The volatility solver did not converge within its iteration cap."""

    def __init__(self, stage: str, iterations: int) -> None:
        super().__init__(
            f"volatility solver did not converge during {stage} after {iterations} iterations"
        )
        self.stage = stage
        self.iterations = iterations
