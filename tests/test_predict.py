import pytest

from glicko_rating.data.rating import Rating
from glicko_rating.predict import matchup_table, predict_matchup


def test_predict_matchup():
    result = predict_matchup(Rating(skill=1700.0), Rating(skill=1500.0), name_a="alpha", name_b="beta")
    assert result["competitor_a"] == "alpha"
    assert result["favourite"] == "alpha"
    assert result["odds_a"] > 0.5
    assert result["odds_a"] + result["odds_b"] == pytest.approx(1.0)
    assert 0.0 < result["quality"] < 1.0


def test_predict_matchup_even():
    result = predict_matchup(Rating(), Rating())
    assert result["favourite"] is None
    assert result["quality"] == pytest.approx(1.0)


def test_matchup_table():
    ratings = {
        "carol": Rating(skill=1600.0, uncertainty=80.0),
        "alice": Rating(skill=1500.0),
        "bob": Rating(skill=1400.0, uncertainty=120.0),
    }
    table = matchup_table(ratings)
    assert list(table.columns) == ["competitor", "opponent", "odds", "quality"]
    assert len(table) == 6
    assert table.iloc[0]["competitor"] == "alice"
    assert table.iloc[0]["opponent"] == "bob"

    indexed = table.set_index(["competitor", "opponent"])
    forward = indexed.loc[("carol", "bob")]
    backward = indexed.loc[("bob", "carol")]
    assert forward["odds"] + backward["odds"] == pytest.approx(1.0)
    assert forward["quality"] == pytest.approx(backward["quality"])
    assert forward["odds"] > 0.5

    for rating in ratings.values():
        assert not rating.on_internal_scale


def test_matchup_table_empty():
    table = matchup_table({})
    assert table.empty
    assert list(table.columns) == ["competitor", "opponent", "odds", "quality"]
