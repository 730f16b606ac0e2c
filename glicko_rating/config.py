"""Method constants and tuning configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from glicko_rating.data.rating import Rating


MU = 1500.0
PHI = 350.0
SIGMA = 0.006
TAU = 1.3

# Ratio between the public scale and the Glicko-2 internal scale.
RATIO = 173.7178
EPSILON = 0.0000001

WIN = 1.0
DRAW = 0.5
LOSS = 0.0

VARIANCE_FLOOR = 0.0001
MAX_ITERATIONS = 100


@dataclass(frozen=True)
class Tuning:
    """Defaults for new ratings plus the volatility-change constraint (tau)."""

    skill: float = MU
    uncertainty: float = PHI
    volatility: float = SIGMA
    volatility_constraint: float = TAU

    def __post_init__(self) -> None:
        if self.uncertainty <= 0:
            raise ValueError(f"uncertainty must be positive, got {self.uncertainty}")
        if self.volatility <= 0:
            raise ValueError(f"volatility must be positive, got {self.volatility}")
        if self.volatility_constraint <= 0:
            raise ValueError(
                f"volatility_constraint must be positive, got {self.volatility_constraint}"
            )

    def new_rating(self) -> Rating:
        from glicko_rating.data.rating import Rating

        return Rating(
            skill=self.skill,
            uncertainty=self.uncertainty,
            volatility=self.volatility,
            baseline=self.skill,
        )


@dataclass(frozen=True)
class SolverConfig:
    epsilon: float = EPSILON
    max_iterations: int = MAX_ITERATIONS
    variance_floor: float = VARIANCE_FLOOR


DEFAULT_TUNING = Tuning()
DEFAULT_SOLVER = SolverConfig()
