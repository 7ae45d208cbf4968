from __future__ import annotations

import logging
from typing import List, Sequence

from .cards import Card
from .errors import HandStateError
from .evaluator import HAND_SIZE, evaluate
from .models import DEFAULT_CONFIG, HandCategory, PlayerHand, RankedHand, ScoringConfig

LOGGER = logging.getLogger("showdown.ranking")

HOLE_CARD_COUNT = 2

# Showdown ordering for a single round. Dealing, betting and pot splits all
# belong to the round engine; this module only scores and sorts.


def rank_hand(player: PlayerHand, config: ScoringConfig = DEFAULT_CONFIG) -> RankedHand:
    if player.hand is None:
        raise HandStateError(f"Attempting to rank a missing hand for player {player.player_id}")
    result = evaluate(player.hand, config)
    return RankedHand(player=player, category=result.category, score=result.score)


def compare_hands(players: Sequence[PlayerHand], config: ScoringConfig = DEFAULT_CONFIG) -> List[RankedHand]:
    """Return every player's ranked hand, best score first.

    A single player means everyone else folded, so no cards are evaluated and
    the result carries the fold score. Equal scores keep their input order;
    splitting a tied pot is up to the caller.
    """
    if len(players) == 1:
        winner = players[0]
        LOGGER.info("Player %s wins via fold", winner.player_id)
        return [RankedHand(player=winner, category=HandCategory.WIN_VIA_FOLD, score=config.fold_score)]

    ranked = [rank_hand(player, config) for player in players]
    ranked.sort(key=lambda result: result.score, reverse=True)
    LOGGER.debug(
        "Showdown order: %s",
        ", ".join(f"{result.player.player_id}={result.score}" for result in ranked),
    )
    return ranked


def player_has_two_cards(player_cards: Sequence[Card]) -> bool:
    return len(player_cards) == HOLE_CARD_COUNT


def table_has_five_cards(table_cards: Sequence[Card]) -> bool:
    return len(table_cards) == HAND_SIZE
