"""Command line interface for rating updates and matchup predictions."""
from __future__ import annotations

import argparse
import json
import logging

from glicko_rating.config import MU, TAU, Tuning
from glicko_rating.data.algorithm import rate
from glicko_rating.data.game import compete, odds
from glicko_rating.data.rating import Outcome, Rating
from glicko_rating.exceptions import RatingError
from glicko_rating.predict import predict_matchup

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    parser = argparse.ArgumentParser(description="Glicko-2 rating calculator")
    parser.add_argument("--baseline", type=float, default=MU, help="Centre of the public rating scale")
    parser.add_argument("--tau", type=float, default=TAU, help="Volatility-change constraint")
    sub = parser.add_subparsers(dest="command", required=True)

    rate_p = sub.add_parser("rate", help="Rate one competitor over a period of games")
    rate_p.add_argument("--subject", required=True, help="skill,uncertainty,volatility")
    rate_p.add_argument(
        "--game",
        action="append",
        required=True,
        help="outcome:skill,uncertainty,volatility (repeatable)",
    )

    compete_p = sub.add_parser("compete", help="Rate both sides of a single game, A won")
    compete_p.add_argument("--a", required=True)
    compete_p.add_argument("--b", required=True)
    compete_p.add_argument("--draw", action="store_true")

    for name, help_text in [
        ("odds", "Expected score of A over B"),
        ("quality", "Matchup quality of A and B"),
    ]:
        p = sub.add_parser(name, help=help_text)
        p.add_argument("--a", required=True)
        p.add_argument("--b", required=True)

    decay_p = sub.add_parser("decay", help="Inflate uncertainty after an idle period")
    decay_p.add_argument("--rating", required=True)

    args = parser.parse_args(argv)

    try:
        tuning = Tuning(skill=args.baseline, volatility_constraint=args.tau)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        if args.command == "rate":
            result = rate_command(args, tuning)
        elif args.command == "compete":
            result = compete_command(args, tuning)
        elif args.command == "odds":
            result = {"odds": odds(_parse_rating(args.a, tuning), _parse_rating(args.b, tuning))}
        elif args.command == "quality":
            result = predict_matchup(_parse_rating(args.a, tuning), _parse_rating(args.b, tuning))
        elif args.command == "decay":
            rating = _parse_rating(args.rating, tuning)
            rating.decay()
            result = rating.as_dict()
    except ValueError as exc:
        parser.error(str(exc))
    except RatingError:
        logger.exception("rating update failed")
        raise

    print(json.dumps(result, indent=2))


def rate_command(args: argparse.Namespace, tuning: Tuning) -> dict:
    subject = _parse_rating(args.subject, tuning)
    games = [_parse_game(text, tuning) for text in args.game]
    rate(subject, games, tuning)
    logger.info("Rated subject over %s games", len(games))
    return subject.as_dict()


def compete_command(args: argparse.Namespace, tuning: Tuning) -> dict:
    rating_a = _parse_rating(args.a, tuning)
    rating_b = _parse_rating(args.b, tuning)
    compete(rating_a, rating_b, drawn=args.draw, tuning=tuning)
    return {"a": rating_a.as_dict(), "b": rating_b.as_dict()}


def _parse_rating(text: str, tuning: Tuning) -> Rating:
    parts = text.split(",")
    if len(parts) != 3:
        raise ValueError(f"expected skill,uncertainty,volatility, got {text!r}")
    try:
        skill, uncertainty, volatility = (float(p) for p in parts)
    except ValueError:
        raise ValueError(f"non-numeric rating: {text!r}") from None
    return Rating(skill=skill, uncertainty=uncertainty, volatility=volatility, baseline=tuning.skill)


def _parse_game(text: str, tuning: Tuning) -> tuple[Outcome, Rating]:
    label, sep, rating = text.partition(":")
    if not sep:
        raise ValueError(f"expected outcome:skill,uncertainty,volatility, got {text!r}")
    return Outcome.parse(label), _parse_rating(rating, tuning)


if __name__ == "__main__":
    main()
