"""Blackjack-specific constants and value mappings."""

from pocketjack.common.card import Rank

BLACKJACK_TOTAL = 21

# Soft aces count 11 and are demoted to 1 by subtracting this much
ACE_DEMOTION = 10

MIN_PLAYERS = 2
MAX_PLAYERS = 6
DEFAULT_PLAYERS = 2

INITIAL_HAND_SIZE = 2

# Unattended seats stop once their score reaches this
AUTO_STOP_SCORE = 17

BLACKJACK_VALUES = {
    Rank.ACE: 11,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
    Rank.JOKER_B: 0,
    Rank.JOKER_C: 0,
}

TEN_VALUE_RANKS = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING})


def get_blackjack_value(rank: Rank) -> int:
    """Get the default blackjack value for a given rank (Ace counts 11)."""
    return BLACKJACK_VALUES[rank]


def clamp_player_count(count: int) -> int:
    """Clamp a requested player count to the supported table size."""
    return max(MIN_PLAYERS, min(MAX_PLAYERS, int(count)))
