"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by every test package.
"""

import pytest

from pocketjack.common.card import Card, Rank, Suit
from pocketjack.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


def card_from_face(face: str, suit: Suit = Suit.SPADES) -> Card:
    rank = Rank(face)
    return Card(Suit.JOKER if rank.is_joker else suit, rank)


@pytest.fixture
def make_cards():
    """Build a tuple of cards from face strings, e.g. make_cards("A", "K")."""

    def _make(*faces, suit: Suit = Suit.SPADES):
        return tuple(card_from_face(face, suit) for face in faces)

    return _make
