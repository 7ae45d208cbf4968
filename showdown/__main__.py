import argparse
import json
import logging
from typing import List, Optional, Sequence

from .cards import parse_cards
from .errors import HandStateError
from .models import PlayerHand, ScoringConfig
from .ranking import compare_hands

LOGGER = logging.getLogger("showdown")


def parse_player_hand(text: str) -> PlayerHand:
    """Parse ``NAME=4c,4d,7h,2c,9s``; ``NAME=`` stands for a player without cards."""
    player_id, sep, labels = text.partition("=")
    player_id = player_id.strip()
    if not sep or not player_id:
        raise argparse.ArgumentTypeError(f"expected NAME=CARDS, got {text!r}")
    labels = labels.strip()
    if not labels:
        return PlayerHand(player_id=player_id, hand=None)
    try:
        cards = parse_cards([label.strip() for label in labels.split(",")])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return PlayerHand(player_id=player_id, hand=cards)


def build_parser() -> argparse.ArgumentParser:
    defaults = ScoringConfig()
    parser = argparse.ArgumentParser(description="Rank showdown hands for a single round")
    parser.add_argument(
        "--hand",
        dest="hands",
        action="append",
        type=parse_player_hand,
        required=True,
        metavar="NAME=CARDS",
        help="Player and five comma separated cards, e.g. alice=4c,4d,7h,2c,9s (repeat per player)",
    )
    parser.add_argument("--json", action="store_true", help="Print the ranking as JSON")
    parser.add_argument("--top-score", type=int, default=defaults.top_score)
    parser.add_argument("--category-step", type=int, default=defaults.category_step)
    parser.add_argument("--fold-score", type=int, default=defaults.fold_score)
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    config = ScoringConfig(
        top_score=args.top_score,
        category_step=args.category_step,
        fold_score=args.fold_score,
    )
    players: List[PlayerHand] = args.hands
    try:
        ranking = compare_hands(players, config)
    except HandStateError as exc:
        LOGGER.error("Cannot rank hands: %s", exc)
        return 1

    if args.json:
        print(json.dumps([result.to_payload() for result in ranking], indent=2))
    else:
        for position, result in enumerate(ranking, start=1):
            print(f"{position}. {result.player.player_id}: {result.category.value} ({result.score})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
