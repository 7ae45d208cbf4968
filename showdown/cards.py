from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence


class Suit(str, Enum):
    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"


# Ranks are plain ints; 14 is the ace and there is no low ace.
RANK_VALUES = range(2, 15)
RANK_SYMBOLS = {10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"}
SYMBOL_RANKS = {symbol: rank for rank, symbol in RANK_SYMBOLS.items()}
SUIT_LETTERS = {"c": Suit.CLUBS, "d": Suit.DIAMONDS, "h": Suit.HEARTS, "s": Suit.SPADES}


@dataclass(frozen=True)
class Card:
    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if isinstance(self.rank, bool) or not isinstance(self.rank, int) or self.rank not in RANK_VALUES:
            raise ValueError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{RANK_SYMBOLS.get(self.rank, str(self.rank))}{self.suit.value[0]}"


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    """Parse a short label such as ``"4c"``, ``"Th"`` or ``"10h"``."""
    if len(label) not in (2, 3):
        raise ValueError(f"Invalid card label: {label}")
    rank_text, suit_text = label[:-1].upper(), label[-1].lower()
    if rank_text in SYMBOL_RANKS:
        rank = SYMBOL_RANKS[rank_text]
    elif rank_text.isdigit():
        rank = int(rank_text)
    else:
        raise ValueError(f"Invalid rank: {rank_text}")
    if suit_text not in SUIT_LETTERS:
        raise ValueError(f"Invalid suit: {suit_text}")
    return Card(rank, SUIT_LETTERS[suit_text])


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
