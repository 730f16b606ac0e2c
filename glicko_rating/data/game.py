"""One-on-one helpers built on top of ``rate``."""
from __future__ import annotations

from glicko_rating.config import DEFAULT_TUNING, Tuning
from glicko_rating.data.algorithm import expect_score, rate, reduce_impact
from glicko_rating.data.rating import Outcome, Rating, internal_scale


def compete(
    rating_a: Rating,
    rating_b: Rating,
    drawn: bool = False,
    tuning: Tuning = DEFAULT_TUNING,
) -> tuple[Rating, Rating]:
    """Update both ratings in place for a single game.

    ``rating_a`` won unless ``drawn`` is set. The second side is rated against
    the first side's already-updated rating.
    """
    if drawn:
        rate(rating_a, [(Outcome.DRAW, rating_b)], tuning)
        rate(rating_b, [(Outcome.DRAW, rating_a)], tuning)
    else:
        rate(rating_a, [(Outcome.WIN, rating_b)], tuning)
        rate(rating_b, [(Outcome.LOSS, rating_a)], tuning)
    return rating_a, rating_b


def odds(rating_a: Rating, rating_b: Rating) -> float:
    """Probability-like expected score of ``rating_a`` over ``rating_b``."""
    with internal_scale(rating_a, rating_b):
        return expect_score(rating_a, rating_b, reduce_impact(rating_a, rating_b))


def quality(rating_a: Rating, rating_b: Rating) -> float:
    """Matchup balance in [0, 1]; 1.0 is an even match."""
    advantage = odds(rating_a, rating_b) - odds(rating_b, rating_a)
    return 1.0 - abs(advantage)
