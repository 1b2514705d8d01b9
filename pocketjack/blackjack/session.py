"""
The game session: the single object a presentation layer drives.

A session owns the deck and the seats of one table. Each action replaces the
session's immutable ``GameState`` snapshot through ``StateTransitionEngine``;
the read-only properties expose the current snapshot.
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from pocketjack.blackjack.action import Action
from pocketjack.blackjack.constants import DEFAULT_PLAYERS
from pocketjack.blackjack.ranking import PlayerResult, rank_players
from pocketjack.blackjack.state import GameStage, GameState, PlayerState
from pocketjack.blackjack.transitions import StateTransitionEngine
from pocketjack.common.card import Card
from pocketjack.common.deck import Deck

logger = logging.getLogger(__name__)


class GameSession:
    """
    A single table of pocketjack.

    Actions never raise: drawing for a stopped player, drawing from an empty
    deck or naming a seat that does not exist leaves the session unchanged.

    >>> session = GameSession(3, rng=random.Random(7))
    >>> len(session.players), session.current_player_index, session.ended
    (3, 0, False)
    """

    def __init__(
        self,
        player_count: int = DEFAULT_PLAYERS,
        rng: Optional[random.Random] = None,
        names: Optional[Sequence[str]] = None,
    ):
        self.rng = rng
        self.names = list(names) if names else None
        self.state: GameState = GameState()
        self.reset(player_count)

    @property
    def deck(self) -> Tuple[Card, ...]:
        return self.state.deck

    @property
    def players(self) -> Tuple[PlayerState, ...]:
        return self.state.players

    @property
    def current_player_index(self) -> int:
        return self.state.current_player_index

    @property
    def ended(self) -> bool:
        return self.state.ended

    @property
    def stage(self) -> GameStage:
        return self.state.stage

    @property
    def player_count(self) -> int:
        return self.state.player_count

    def draw(self, player_index: int) -> bool:
        """
        Deal the next card to a player.

        Returns:
            True if a card was dealt
        """
        previous = self.state
        self.state = StateTransitionEngine.draw_card(self.state, player_index)
        return self.state is not previous

    def stop(self, player_index: int) -> bool:
        """
        Stop a player for the rest of the round.

        Returns:
            True if the seat exists and the game is still running
        """
        previous = self.state
        self.state = StateTransitionEngine.stop_player(self.state, player_index)
        return self.state is not previous

    def reset(self, player_count: Optional[int] = None) -> GameState:
        """
        Discard the current round and deal a fresh one.

        Args:
            player_count: Number of seats; defaults to the current count

        Returns:
            The new game state
        """
        if player_count is None:
            player_count = self.state.player_count or DEFAULT_PLAYERS
        deck = Deck(rng=self.rng).reset()
        self.state = StateTransitionEngine.deal_new_game(deck, player_count, self.names)
        logger.info("New game %s with %d players", self.state.id, player_count)
        return self.state

    def score(self, player_index: int) -> int:
        return self.state.players[player_index].score

    def scores(self) -> List[int]:
        return [player.score for player in self.state.players]

    def valid_actions(self, player_index: int) -> List[Action]:
        """Actions offered to a seat: only the current, active player may act."""
        if self.ended or player_index != self.current_player_index:
            return []
        if not 0 <= player_index < self.player_count:
            return []
        if self.state.players[player_index].stopped:
            return []
        if self.deck:
            return [Action.DRAW, Action.STOP]
        return [Action.STOP]

    def results(self) -> List[PlayerResult]:
        """Ranking of the table as it stands; final once the game has ended."""
        return rank_players(self.state.players)

    def __repr__(self) -> str:
        return (
            f"GameSession(players={self.player_count}, "
            f"current={self.current_player_index}, stage={self.stage.name})"
        )
