"""
Immutable state models for the pocketjack game.

This module provides dataclasses for representing the state of a game in an
immutable manner. These classes are designed to be used with the pure
transition functions in ``pocketjack.blackjack.transitions``, which create new
state instances rather than modifying existing ones.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from enum import Enum, auto
import uuid
import time

from pocketjack.blackjack.constants import BLACKJACK_TOTAL
from pocketjack.blackjack.scoring import calc_score, is_blackjack
from pocketjack.common.card import Card


class GameStage(Enum):
    """Possible stages of a game."""

    DEALING = auto()
    IN_PROGRESS = auto()
    ENDED = auto()


@dataclass(frozen=True)
class PlayerState:
    """
    Immutable representation of a player's seat.

    Attributes:
        name: Display name of the player
        hand: Cards held, in the order they were received
        stopped: Whether the player will take no more cards this round
    """

    name: str = "Player"
    hand: Tuple[Card, ...] = ()
    stopped: bool = False

    @property
    def score(self) -> int:
        return calc_score(self.hand)

    @property
    def is_active(self) -> bool:
        return not self.stopped

    @property
    def is_bust(self) -> bool:
        return self.score > BLACKJACK_TOTAL

    @property
    def is_blackjack(self) -> bool:
        return is_blackjack(self.hand)


@dataclass(frozen=True)
class GameState:
    """
    Immutable representation of a game session.

    Attributes:
        id: Unique identifier for this game
        deck: Undealt cards; the next card dealt is ``deck[0]``
        players: Seats in turn order, fixed for the life of the game
        current_player_index: Seat whose turn it is
        stage: Current stage of the game
        timestamp: Time when this state was created
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    deck: Tuple[Card, ...] = ()
    players: Tuple[PlayerState, ...] = ()
    current_player_index: int = 0
    stage: GameStage = GameStage.DEALING
    timestamp: float = field(default_factory=lambda: time.time())

    @property
    def ended(self) -> bool:
        return self.stage == GameStage.ENDED

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def current_player(self) -> Optional[PlayerState]:
        if 0 <= self.current_player_index < len(self.players):
            return self.players[self.current_player_index]
        return None

    def active_indices(self) -> Tuple[int, ...]:
        """Indices of players who have not stopped."""
        return tuple(i for i, p in enumerate(self.players) if not p.stopped)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the game state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game state
        """
        return {
            "id": self.id,
            "stage": self.stage.name,
            "ended": self.ended,
            "current_player_index": self.current_player_index,
            "deck_cards_remaining": len(self.deck),
            "timestamp": self.timestamp,
            "players": [
                {
                    "name": player.name,
                    "hand": [str(card) for card in player.hand],
                    "score": player.score,
                    "stopped": player.stopped,
                }
                for player in self.players
            ],
        }

    def to_adapter_format(self) -> Dict[str, Any]:
        """
        Convert the game state to a format suitable for platform adapters.

        Returns:
            Dictionary in adapter-friendly format
        """
        return {
            "stage": self.stage.name,
            "ended": self.ended,
            "current_player_index": self.current_player_index,
            "deck_cards_remaining": len(self.deck),
            "players": [
                {
                    "index": i,
                    "name": player.name,
                    "cards": [str(card) for card in player.hand],
                    "score": player.score,
                    "stopped": player.stopped,
                    "is_current": i == self.current_player_index
                    and not self.ended,
                }
                for i, player in enumerate(self.players)
            ],
        }
