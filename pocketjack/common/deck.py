"""
This module contains the Deck class and the `create_deck` factory.

A pocketjack deck holds the 52 standard cards plus two jokers. Cards are dealt
from the front.

>>> deck = Deck()
>>> deck.size
54
>>> deck.deal()
Card(Suit.SPADES, Rank.ACE)
>>> deck.size
53
"""

import random
from typing import List, Optional, Union

from pocketjack.common.card import (
    JOKER_RANKS,
    STANDARD_RANKS,
    STANDARD_SUITS,
    Card,
    Suit,
)


def build_ordered_deck() -> List[Card]:
    """
    Build the unshuffled deck: every suit in declared order with ranks A..K,
    followed by the two jokers.
    """
    cards = [Card(suit, rank) for suit in STANDARD_SUITS for rank in STANDARD_RANKS]
    cards.extend(Card(Suit.JOKER, rank) for rank in JOKER_RANKS)
    return cards


def create_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """
    Return a freshly shuffled list of all 54 cards.

    :param rng: Random source; pass a seeded ``random.Random`` for a reproducible deck.
    """
    cards = build_ordered_deck()
    (rng or random).shuffle(cards)
    return cards


class Deck:
    """
    A class representing a deck of cards.
    """

    def __init__(
        self,
        cards: Union[List[Card], None] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, an ordered full deck will be constructed.
        :param rng: Random source used by shuffle().
        >>> deck = Deck()
        >>> deck.size
        54
        """
        self.rng = rng
        if cards is None:
            self.cards: List[Card] = build_ordered_deck()
        else:
            self.cards = list(cards)

    def shuffle(self):
        """
        Shuffle the cards in the deck.
        """
        (self.rng or random).shuffle(self.cards)
        return self

    def deal(self, num_cards=1) -> Union[Card, List[Card]]:
        """
        Take n cards from the front of the deck.

        :return: A card instance or a list of card instances.
        :raises IndexError: If the deck runs out.
        """
        if num_cards == 1:
            return self.cards.pop(0)
        return [self.cards.pop(0) for _ in range(num_cards)]

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def reset(self):
        """
        Reset the deck to a full, shuffled set of cards.
        """
        self.cards = create_deck(self.rng)
        return self

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
