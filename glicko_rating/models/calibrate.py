"""Calibration of pre-game odds against observed win rates."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np
from sklearn.calibration import calibration_curve

from glicko_rating.data.rating import Outcome, Rating
from glicko_rating.models.evaluate import collect_predictions


@dataclass
class CalibrationData:
    observed: np.ndarray
    predicted: np.ndarray
    bin_counts: np.ndarray


def compute_calibration(
    games: Iterable[tuple[Rating, Rating, Outcome]], n_bins: int = 10
) -> CalibrationData:
    """Observed win rate against mean predicted odds, per non-empty odds bin."""
    preds = collect_predictions(games)
    observed, predicted = calibration_curve(
        preds.y_true, preds.y_proba, n_bins=n_bins, strategy="uniform"
    )

    # calibration_curve drops empty bins; count over the same edges and do the same.
    edges = np.linspace(0.0, 1.0, n_bins + 1)
    bin_ids = np.searchsorted(edges[1:-1], preds.y_proba)
    counts = np.bincount(bin_ids, minlength=n_bins)
    return CalibrationData(observed=observed, predicted=predicted, bin_counts=counts[counts > 0])
