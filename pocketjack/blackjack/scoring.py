"""
Hand scoring for pocketjack.

Aces start as 11 (or their ``alt_value`` override) and are demoted to 1, one
at a time, while the hand would otherwise bust. Jokers are worth nothing.
"""

from typing import Iterable

from pocketjack.blackjack.constants import (
    ACE_DEMOTION,
    BLACKJACK_TOTAL,
    INITIAL_HAND_SIZE,
    TEN_VALUE_RANKS,
    get_blackjack_value,
)
from pocketjack.common.card import Card, Rank


def calc_score(hand: Iterable[Card]) -> int:
    """
    Calculate the best blackjack total for a hand.

    The result can exceed 21 when even demoting every Ace cannot save the hand.
    """
    total = 0
    ace_count = 0

    for card in hand:
        if card.rank == Rank.ACE:
            ace_count += 1
            total += card.alt_value if card.alt_value is not None else get_blackjack_value(Rank.ACE)
        else:
            total += get_blackjack_value(card.rank)

    while total > BLACKJACK_TOTAL and ace_count > 0:
        total -= ACE_DEMOTION
        ace_count -= 1

    return total


def is_bust(hand: Iterable[Card]) -> bool:
    """True if the hand scores over 21."""
    return calc_score(hand) > BLACKJACK_TOTAL


def is_blackjack(hand) -> bool:
    """
    Determine if the hand is a natural blackjack: exactly two cards, an Ace
    and a ten-valued card, scoring 21.
    """
    cards = list(hand)
    if len(cards) != INITIAL_HAND_SIZE:
        return False

    ranks = {card.rank for card in cards}
    has_ace = Rank.ACE in ranks
    has_ten_value = bool(ranks & TEN_VALUE_RANKS)

    return has_ace and has_ten_value and calc_score(cards) == BLACKJACK_TOTAL
