from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .cards import Card, cards_to_labels


class HandCategory(str, Enum):
    # Declaration order is priority order, strongest first.
    ROYAL_FLUSH = "royal flush"
    STRAIGHT_FLUSH = "straight flush"
    FOUR_OF_A_KIND = "four of a kind"
    FULL_HOUSE = "full house"
    FLUSH = "flush"
    STRAIGHT = "straight"
    THREE_OF_A_KIND = "three of a kind"
    TWO_PAIRS = "two pairs"
    PAIR = "pair"
    HIGH_CARD = "high card"
    WIN_VIA_FOLD = "win via fold"


@dataclass(frozen=True)
class ScoringConfig:
    top_score: int = 1000
    category_step: int = 100
    fold_score: int = 10_000


DEFAULT_CONFIG = ScoringConfig()


@dataclass
class PlayerHand:
    player_id: str
    hand: Optional[List[Card]] = None


@dataclass(frozen=True)
class HandScore:
    category: HandCategory
    score: int


@dataclass(frozen=True)
class RankedHand:
    player: PlayerHand
    category: HandCategory
    score: int

    def to_payload(self) -> Dict[str, object]:
        hand = self.player.hand
        return {
            "player_id": self.player.player_id,
            "hand": cards_to_labels(hand) if hand is not None else None,
            "category": self.category.value,
            "score": self.score,
        }
