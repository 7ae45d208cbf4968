from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .cards import RANK_VALUES, Card, Suit, cards_to_labels
from .errors import HandStateError
from .models import DEFAULT_CONFIG, HandCategory, HandScore, ScoringConfig

LOGGER = logging.getLogger("showdown.evaluator")

HAND_SIZE = 5
ROYAL_ANCHOR = 10


@dataclass(frozen=True)
class Tally:
    # Dense counts: every rank (ascending) and every suit has an entry.
    ranks: Dict[int, int]
    suits: Dict[Suit, int]

    def ranks_with(self, count: int) -> List[int]:
        return [rank for rank, seen in self.ranks.items() if seen == count]

    @property
    def straight_anchor(self) -> Optional[int]:
        singles = self.ranks_with(1)
        return singles[0] if singles else None


def build_tally(hand: Sequence[Card]) -> Tally:
    ranks = {rank: 0 for rank in RANK_VALUES}
    suits = {suit: 0 for suit in Suit}
    for card in hand:
        ranks[card.rank] += 1
        suits[card.suit] += 1
    return Tally(ranks=ranks, suits=suits)


def _is_flush(tally: Tally) -> bool:
    return HAND_SIZE in tally.suits.values()


def _is_straight(tally: Tally) -> bool:
    # Ace only plays high, so A-2-3-4-5 never qualifies.
    anchor = tally.straight_anchor
    if anchor is None:
        return False
    return all(tally.ranks.get(rank) == 1 for rank in range(anchor, anchor + HAND_SIZE))


def _is_straight_flush(tally: Tally) -> bool:
    return _is_flush(tally) and _is_straight(tally)


def _is_royal_flush(tally: Tally) -> bool:
    return _is_straight_flush(tally) and tally.straight_anchor == ROYAL_ANCHOR


def _is_full_house(tally: Tally) -> bool:
    return bool(tally.ranks_with(3)) and bool(tally.ranks_with(2))


# Strongest first; the first matching rule decides the category and base score.
CATEGORY_RULES: List[Tuple[HandCategory, Callable[[Tally], bool]]] = [
    (HandCategory.ROYAL_FLUSH, _is_royal_flush),
    (HandCategory.STRAIGHT_FLUSH, _is_straight_flush),
    (HandCategory.FOUR_OF_A_KIND, lambda tally: bool(tally.ranks_with(4))),
    (HandCategory.FULL_HOUSE, _is_full_house),
    (HandCategory.FLUSH, _is_flush),
    (HandCategory.STRAIGHT, _is_straight),
    (HandCategory.THREE_OF_A_KIND, lambda tally: bool(tally.ranks_with(3))),
    (HandCategory.TWO_PAIRS, lambda tally: len(tally.ranks_with(2)) == 2),
    (HandCategory.PAIR, lambda tally: len(tally.ranks_with(2)) == 1),
    (HandCategory.HIGH_CARD, lambda tally: True),
]

# Categories whose score counts every card in the hand.
WHOLE_HAND_CATEGORIES = frozenset(
    {
        HandCategory.ROYAL_FLUSH,
        HandCategory.STRAIGHT_FLUSH,
        HandCategory.FULL_HOUSE,
        HandCategory.FLUSH,
        HandCategory.STRAIGHT,
    }
)
# Categories scored by their matched group: rank * group size per group.
GROUP_SIZES = {
    HandCategory.FOUR_OF_A_KIND: 4,
    HandCategory.THREE_OF_A_KIND: 3,
    HandCategory.TWO_PAIRS: 2,
    HandCategory.PAIR: 2,
}
KICKER_CATEGORIES = frozenset({HandCategory.TWO_PAIRS, HandCategory.PAIR, HandCategory.HIGH_CARD})


def classify(tally: Tally) -> Dict[HandCategory, bool]:
    """Membership flag for every in-hand category. Never yields a fold win."""
    return {category: rule(tally) for category, rule in CATEGORY_RULES}


def select_category(
    flags: Dict[HandCategory, bool], config: ScoringConfig = DEFAULT_CONFIG
) -> Tuple[HandCategory, int]:
    for index, (category, _) in enumerate(CATEGORY_RULES):
        if flags.get(category):
            return category, config.top_score - config.category_step * index
    raise HandStateError("No hand category matched")


def tiebreak(category: HandCategory, hand: Sequence[Card], tally: Tally) -> int:
    if category in WHOLE_HAND_CATEGORIES:
        value = sum(card.rank for card in hand)
    elif category in GROUP_SIZES:
        size = GROUP_SIZES[category]
        value = sum(rank * size for rank in tally.ranks_with(size))
    else:
        value = 0
    if category in KICKER_CATEGORIES:
        value += max(tally.ranks_with(1), default=0)
    return value


def evaluate(hand: Sequence[Card], config: ScoringConfig = DEFAULT_CONFIG) -> HandScore:
    """Classify a five card hand and score it. Higher is better.

    The score is the category base (``top_score`` for a royal flush, one
    ``category_step`` less per category below it) plus the card values that
    make the category, plus the best unpaired card for two pairs, pair and
    high card.
    """
    if len(hand) != HAND_SIZE:
        raise HandStateError(f"Hand must hold {HAND_SIZE} cards, got {len(hand)}")
    if len(set(hand)) != HAND_SIZE:
        raise HandStateError(f"Hand holds duplicate cards: {cards_to_labels(hand)}")

    tally = build_tally(hand)
    category, score = select_category(classify(tally), config)
    score += tiebreak(category, hand, tally)
    LOGGER.debug("Evaluated %s as %s (%d)", cards_to_labels(hand), category.value, score)
    return HandScore(category=category, score=score)
