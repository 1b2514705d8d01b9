"""
Pytest fixtures for game logic tests.
"""

import pytest

from pocketjack.blackjack.transitions import StateTransitionEngine
from pocketjack.common.card import Suit


@pytest.fixture
def deal_game(make_cards):
    """
    Deal a game with known hands.

    ``deal_game([("A", "K"), ("5", "6")], rest=("9", "10"))`` gives player 0
    A+K, player 1 5+6, and leaves 9 then 10 in the deck.
    """

    def _deal(hands, rest=()):
        deck = []
        for faces in hands:
            deck.extend(make_cards(*faces))
        deck.extend(make_cards(*rest, suit=Suit.HEARTS))
        return StateTransitionEngine.deal_new_game(deck, len(hands))

    return _deal
