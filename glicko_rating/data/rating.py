"""Rating records, game outcomes and the scale transforms between them."""
from __future__ import annotations

import math
from contextlib import contextmanager
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator

from glicko_rating import config
from glicko_rating.config import DEFAULT_TUNING, MU, PHI, RATIO, SIGMA, Tuning


class Outcome(Enum):
    WIN = config.WIN
    DRAW = config.DRAW
    LOSS = config.LOSS

    @classmethod
    def parse(cls, label: str) -> Outcome:
        key = label.strip().lower()
        aliases = {"w": "win", "d": "draw", "l": "loss"}
        key = aliases.get(key, key)
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"unknown outcome: {label!r}") from None


def outcome_value(outcome: Outcome) -> float:
    return outcome.value


@dataclass
class Rating:
    """A competitor's skill (mu), uncertainty (phi) and volatility (sigma).

    Values are on the public scale unless ``on_internal_scale`` is set.
    ``baseline`` is the default skill of the tuning the rating came from and
    is the centre of the internal scale.
    """

    skill: float = MU
    uncertainty: float = PHI
    volatility: float = SIGMA
    on_internal_scale: bool = False
    baseline: float = MU

    def __post_init__(self) -> None:
        if self.uncertainty <= 0:
            raise ValueError(f"uncertainty must be positive, got {self.uncertainty}")
        if self.volatility <= 0:
            raise ValueError(f"volatility must be positive, got {self.volatility}")

    def scale_down(self) -> None:
        if self.on_internal_scale:
            return
        self.skill = (self.skill - self.baseline) / RATIO
        self.uncertainty = self.uncertainty / RATIO
        self.on_internal_scale = True

    def scale_up(self) -> None:
        if not self.on_internal_scale:
            return
        self.skill = self.skill * RATIO + self.baseline
        self.uncertainty = self.uncertainty * RATIO
        self.on_internal_scale = False

    def decay(self) -> None:
        """Inflate uncertainty for a competitor who sat out a rating period."""
        self.scale_down()
        self.uncertainty = math.sqrt(self.uncertainty**2 + self.volatility**2)
        self.scale_up()

    def copy(self) -> Rating:
        return replace(self)

    def as_dict(self) -> dict[str, float]:
        return {
            "skill": self.skill,
            "uncertainty": self.uncertainty,
            "volatility": self.volatility,
        }


def new_rating(tuning: Tuning = DEFAULT_TUNING) -> Rating:
    return tuning.new_rating()


@contextmanager
def internal_scale(*ratings: Rating) -> Iterator[tuple[Rating, ...]]:
    """Hold ratings on the internal scale for the duration of the block.

    Only ratings that were on the public scale on entry are scaled back up on
    exit, whether or not the block raised.
    """
    lowered: list[Rating] = []
    try:
        for rating in ratings:
            if rating.on_internal_scale:
                continue
            rating.scale_down()
            lowered.append(rating)
        yield ratings
    finally:
        for rating in lowered:
            rating.scale_up()
