from __future__ import annotations

from typing import Optional

from showdown.cards import parse_cards
from showdown.models import PlayerHand


def hand(*labels: str):
    """Build a hand from short labels, e.g. ``hand("4c", "4d", "7h", "2c", "9s")``."""
    return parse_cards(labels)


def player(player_id: str, labels: Optional[str] = None) -> PlayerHand:
    """Seat a player with a space separated hand, or with no hand at all."""
    cards = parse_cards(labels.split()) if labels is not None else None
    return PlayerHand(player_id=player_id, hand=cards)
