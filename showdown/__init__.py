"""Showdown hand ranking: classify five card hands and order a round's players."""

from .cards import Card, Suit, cards_to_labels, parse_cards, parse_label
from .errors import HandStateError
from .evaluator import build_tally, classify, evaluate, select_category, tiebreak
from .models import DEFAULT_CONFIG, HandCategory, HandScore, PlayerHand, RankedHand, ScoringConfig
from .ranking import compare_hands, player_has_two_cards, rank_hand, table_has_five_cards

__all__ = [
    "Card",
    "Suit",
    "cards_to_labels",
    "parse_cards",
    "parse_label",
    "HandStateError",
    "build_tally",
    "classify",
    "evaluate",
    "select_category",
    "tiebreak",
    "DEFAULT_CONFIG",
    "HandCategory",
    "HandScore",
    "PlayerHand",
    "RankedHand",
    "ScoringConfig",
    "compare_hands",
    "player_has_two_cards",
    "rank_hand",
    "table_has_five_cards",
]
