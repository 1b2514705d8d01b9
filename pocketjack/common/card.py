"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards (Spades, Hearts, Clubs and Diamonds) plus the suit carried by jokers.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards, Ace through King, plus the two jokers (black and colour).

- `Card`: A class representing a playing card. A card has a suit, a rank and an
optional value override that replaces the Ace's default value when scoring.

This module is part of the `pocketjack` package.
"""

from enum import Enum, unique
from typing import Optional


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    SPADES = "♠"
    HEARTS = "♥"
    CLUBS = "♣"
    DIAMONDS = "◆"
    JOKER = "🃏"

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck. The value is the face shown on the card.
    """

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    JOKER_B = "JOKER-B"
    JOKER_C = "JOKER-C"

    @property
    def is_joker(self) -> bool:
        return self in (Rank.JOKER_B, Rank.JOKER_C)

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def rank_str(self) -> str:
        """A string representation of the rank."""
        return self.value

    def __str__(self) -> str:
        return self.rank_str


STANDARD_SUITS = (Suit.SPADES, Suit.HEARTS, Suit.CLUBS, Suit.DIAMONDS)
STANDARD_RANKS = tuple(rank for rank in Rank if not rank.is_joker)
JOKER_RANKS = (Rank.JOKER_B, Rank.JOKER_C)


class Card:
    """
    Class representing a playing card.

    Suit and rank are fixed once the card is created. ``alt_value`` is a
    scoring override for Aces; nothing in the game sets it.

    >>> card = Card(Suit.HEARTS, Rank.TWO)
    >>> print(card)
    ♥2
    >>> joker = Card(Suit.JOKER, Rank.JOKER_B)
    >>> print(joker)
    🃏JOKER-B
    """

    __slots__ = ("_suit", "_rank", "alt_value")

    def __init__(
        self, suit: Optional[Suit], rank: Rank, alt_value: Optional[int] = None
    ):
        """
        Initialize a Card instance.

        :param suit: Suit of the card (one of the Suit enums; jokers may pass None)
        :param rank: Rank of the card (one of the Rank enums)
        :param alt_value: Optional numeric value that overrides the Ace's default
        """
        if not isinstance(rank, Rank):
            raise TypeError(f"Invalid rank: {rank}")
        match rank:
            case Rank.JOKER_B | Rank.JOKER_C:
                if suit not in (None, Suit.JOKER):
                    raise ValueError(f"Joker cannot have suit {suit}")
                suit = Suit.JOKER
            case _:
                if not isinstance(suit, Suit):
                    raise TypeError(f"Invalid suit: {suit}")
                if suit == Suit.JOKER:
                    raise ValueError(f"{rank.name} cannot carry the joker suit")
        if alt_value is not None and not isinstance(alt_value, int):
            raise TypeError(f"Invalid alt_value: {alt_value!r}")
        self._suit = suit
        self._rank = rank
        self.alt_value = alt_value

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def is_joker(self) -> bool:
        return self._rank.is_joker

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and suit, False otherwise.
        """
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return NotImplemented

    def __hash__(self):
        return hash((self._suit, self._rank))

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        if self.alt_value is not None:
            return (
                f"Card(Suit.{self._suit.name}, Rank.{self._rank.name}, "
                f"alt_value={self.alt_value})"
            )
        return f"Card(Suit.{self._suit.name}, Rank.{self._rank.name})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"{self._suit}{self._rank}"
