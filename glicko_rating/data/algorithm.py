"""Glicko-2 rating update.

All functions here work on the internal (Glicko-2) scale. ``rate`` moves the
subject and each opponent onto that scale for the duration of the call and
restores them afterwards.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable

from glicko_rating.config import DEFAULT_SOLVER, DEFAULT_TUNING, SolverConfig, Tuning
from glicko_rating.data.rating import Outcome, Rating, internal_scale
from glicko_rating.exceptions import NumericNonConvergence, PreconditionViolation

logger = logging.getLogger(__name__)


def _require_internal(caller: str, *ratings: Rating) -> None:
    if not all(r.on_internal_scale for r in ratings):
        raise PreconditionViolation(f"unscaled ratings passed to {caller}")


def reduce_impact(rating: Rating, other: Rating) -> float:
    """Weight in (0, 1] that discounts games against uncertain opponents."""
    _require_internal("reduce_impact", rating, other)
    phi_sq = rating.uncertainty**2 + other.uncertainty**2
    return 1.0 / math.sqrt(1.0 + 3.0 * phi_sq / math.pi**2)


def expect_score(rating: Rating, other: Rating, impact: float) -> float:
    """Logistic expected score of ``rating`` against ``other``."""
    _require_internal("expect_score", rating, other)
    z = impact * (rating.skill - other.skill)
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    ez = math.exp(z)
    return ez / (1.0 + ez)


def determine_volatility(
    uncertainty: float,
    volatility: float,
    difference: float,
    variance: float,
    tau: float,
    config: SolverConfig = DEFAULT_SOLVER,
) -> float:
    """Solve for the new volatility with the Illinois variant of regula falsi."""
    phi_sq = uncertainty**2
    diff_sq = difference**2
    alpha = math.log(volatility**2)

    def f(x: float) -> float:
        ex = math.exp(x)
        tmp = phi_sq + variance + ex
        # tmp * tmp saturates to inf instead of raising.
        return ex * (diff_sq - tmp) / (2.0 * tmp * tmp) - (x - alpha) / tau**2

    a = alpha
    if diff_sq > phi_sq + variance:
        b = math.log(diff_sq - phi_sq - variance)
    else:
        k = 1
        while f(alpha - k * tau) < 0:
            k += 1
            if k > config.max_iterations:
                raise NumericNonConvergence("bracketing", k)
        b = alpha - k * tau

    f_a = f(a)
    f_b = f(b)
    iterations = 0
    while abs(b - a) > config.epsilon:
        iterations += 1
        if iterations > config.max_iterations:
            raise NumericNonConvergence("iteration", config.max_iterations)
        c = a + (a - b) * f_a / (f_b - f_a)
        if c == b:
            # The step no longer moves B, so B is the root to working precision.
            a = b
            break
        f_c = f(c)
        # f_c == 0 is the root itself.
        if f_c * f_b <= 0:
            a, f_a = b, f_b
        else:
            f_a /= 2.0
        b, f_b = c, f_c

    logger.debug("volatility solver converged after %s iterations", iterations)
    return math.exp(a / 2.0)


def rate(
    rating: Rating,
    games: Iterable[tuple[Outcome, Rating]],
    tuning: Tuning = DEFAULT_TUNING,
    config: SolverConfig = DEFAULT_SOLVER,
) -> None:
    """Update ``rating`` in place from one rating period of games.

    ``games`` holds ``(outcome, opponent)`` pairs from the subject's point of
    view. Opponents are read, never changed. Pass a copy of the subject if the
    pre-period rating is still needed.
    """
    rating.scale_down()
    try:
        variance_inv = 0.0
        difference = 0.0
        played = 0
        for outcome, other in games:
            with internal_scale(other):
                impact = reduce_impact(rating, other)
                expected = expect_score(rating, other, impact)
            variance_inv += impact**2 * expected * (1.0 - expected)
            difference += impact * (outcome.value - expected)
            played += 1

        if variance_inv == 0.0 or math.isinf(1.0 / variance_inv):
            # No usable information this period: treat as idle.
            logger.debug("no informative games (%s played), decaying rating", played)
            rating.uncertainty = math.sqrt(rating.uncertainty**2 + rating.volatility**2)
            return

        difference /= max(variance_inv, config.variance_floor)
        variance = 1.0 / variance_inv

        sigma = determine_volatility(
            rating.uncertainty,
            rating.volatility,
            difference,
            variance,
            tuning.volatility_constraint,
            config,
        )
        phi_star = math.sqrt(rating.uncertainty**2 + sigma**2)
        phi = 1.0 / math.sqrt(1.0 / phi_star**2 + 1.0 / variance)
        mu = rating.skill + phi**2 * (difference / variance)

        rating.skill = mu
        rating.uncertainty = phi
        rating.volatility = sigma
        logger.debug("rated %s games: skill=%s uncertainty=%s", played, mu, phi)
    finally:
        rating.scale_up()
