"""How well pre-game odds forecast decisive results."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

import numpy as np
from sklearn.metrics import accuracy_score, brier_score_loss, log_loss, roc_auc_score

from glicko_rating.data.game import odds
from glicko_rating.data.rating import Outcome, Rating

logger = logging.getLogger(__name__)


@dataclass
class PredictionMetrics:
    games: int
    draws: int
    accuracy: float
    roc_auc: float
    log_loss: float
    brier: float


@dataclass
class DecisivePredictions:
    y_true: np.ndarray
    y_proba: np.ndarray
    games: int
    draws: int


def collect_predictions(games: Iterable[tuple[Rating, Rating, Outcome]]) -> DecisivePredictions:
    """Pre-game odds of the first side and whether it won, draws skipped."""
    y_true = []
    y_proba = []
    total = 0
    draws = 0
    for rating_a, rating_b, outcome in games:
        total += 1
        if outcome is Outcome.DRAW:
            draws += 1
            continue
        y_true.append(int(outcome is Outcome.WIN))
        y_proba.append(odds(rating_a, rating_b))

    if not y_true:
        raise ValueError("no decisive games to score")
    return DecisivePredictions(
        y_true=np.asarray(y_true, dtype=int),
        y_proba=np.asarray(y_proba, dtype=float),
        games=total,
        draws=draws,
    )


def score_predictions(games: Iterable[tuple[Rating, Rating, Outcome]]) -> PredictionMetrics:
    preds = collect_predictions(games)
    y_true, y_proba = preds.y_true, preds.y_proba

    if len(np.unique(y_true)) < 2:
        logger.warning("only one outcome class among %s decisive games; roc_auc undefined", len(y_true))
        roc_auc = float("nan")
    else:
        roc_auc = float(roc_auc_score(y_true, y_proba))

    return PredictionMetrics(
        games=preds.games,
        draws=preds.draws,
        accuracy=float(accuracy_score(y_true, y_proba >= 0.5)),
        roc_auc=roc_auc,
        log_loss=float(log_loss(y_true, y_proba, labels=[0, 1])),
        brier=float(brier_score_loss(y_true, y_proba, pos_label=1)),
    )
