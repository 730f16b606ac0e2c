import pytest

from glicko_rating.data.game import compete, odds, quality
from glicko_rating.data.rating import Rating


def _opponent() -> Rating:
    return Rating(skill=1450.0, uncertainty=200.0, volatility=0.0059)


def test_compete_win():
    rating_a, rating_b = compete(Rating(), _opponent())
    assert rating_a.skill == pytest.approx(1643.2406803139988, abs=1e-6)
    assert rating_a.uncertainty == pytest.approx(297.7383025722689, abs=1e-6)
    assert rating_b.skill < 1450.0
    assert rating_b.uncertainty < 200.0
    assert not rating_a.on_internal_scale
    assert not rating_b.on_internal_scale


def test_compete_draw():
    rating_a, rating_b = compete(Rating(), _opponent(), drawn=True)
    assert rating_a.skill == pytest.approx(1486.1105693882885, abs=1e-6)
    assert rating_a.volatility == pytest.approx(0.0059999938227804145, rel=1e-8)
    assert rating_b.skill > 1450.0


def test_odds_after_compete():
    rating_a, rating_b = compete(Rating(), Rating())
    assert odds(rating_a, rating_b) == pytest.approx(0.7086337899806349, abs=1e-9)
    assert not rating_a.on_internal_scale
    assert not rating_b.on_internal_scale


def test_odds_of_equal_ratings():
    assert odds(Rating(), Rating()) == pytest.approx(0.5)
    rating = Rating()
    assert odds(rating, rating) == pytest.approx(0.5)
    assert not rating.on_internal_scale


def test_quality():
    assert quality(Rating(), _opponent()) == pytest.approx(0.9116055444116669, abs=1e-12)
    assert quality(_opponent(), Rating()) == pytest.approx(0.9116055444116669, abs=1e-12)
    assert quality(Rating(), Rating()) == pytest.approx(1.0)


def test_quality_symmetry():
    pairs = [
        (Rating(skill=2100.0, uncertainty=60.0), Rating(skill=1300.0, uncertainty=250.0)),
        (Rating(skill=1490.0), Rating(skill=1510.0, uncertainty=90.0)),
    ]
    for rating_a, rating_b in pairs:
        q = quality(rating_a, rating_b)
        assert 0.0 <= q <= 1.0
        assert q == pytest.approx(quality(rating_b, rating_a), abs=1e-12)
