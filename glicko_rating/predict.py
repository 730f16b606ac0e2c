"""Prediction helpers for the CLI."""
from __future__ import annotations

from itertools import permutations
from typing import Mapping

import pandas as pd

from glicko_rating.data.game import odds, quality
from glicko_rating.data.rating import Rating


def predict_matchup(rating_a: Rating, rating_b: Rating, name_a: str = "a", name_b: str = "b") -> dict:
    odds_a = odds(rating_a, rating_b)
    odds_b = odds(rating_b, rating_a)
    if odds_a > odds_b:
        favourite = name_a
    elif odds_b > odds_a:
        favourite = name_b
    else:
        favourite = None

    return {
        "competitor_a": name_a,
        "competitor_b": name_b,
        "odds_a": odds_a,
        "odds_b": odds_b,
        "quality": quality(rating_a, rating_b),
        "favourite": favourite,
    }


def matchup_table(ratings: Mapping[str, Rating]) -> pd.DataFrame:
    """Pairwise odds and quality for every ordered pair of competitors."""
    rows = []
    for name, other_name in permutations(ratings, 2):
        rating = ratings[name]
        other = ratings[other_name]
        rows.append(
            {
                "competitor": name,
                "opponent": other_name,
                "odds": odds(rating, other),
                "quality": quality(rating, other),
            }
        )

    df = pd.DataFrame(rows, columns=["competitor", "opponent", "odds", "quality"])
    return df.sort_values(["competitor", "opponent"]).reset_index(drop=True)
