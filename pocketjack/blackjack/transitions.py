"""
State transition functions for the pocketjack game.

This module provides pure functions for transitioning between game states,
without modifying the original state objects. Actions that make no sense in the
current state (a stopped player drawing, drawing from an empty deck, an unknown
seat) return the state unchanged.
"""

import logging
from typing import Optional, Sequence, Union
from dataclasses import replace

from pocketjack.blackjack.constants import BLACKJACK_TOTAL, INITIAL_HAND_SIZE
from pocketjack.blackjack.scoring import calc_score
from pocketjack.blackjack.state import GameStage, GameState, PlayerState
from pocketjack.common.card import Card
from pocketjack.common.deck import Deck
from pocketjack.events import EventBus, EngineEventType

logger = logging.getLogger(__name__)


def default_player_name(index: int) -> str:
    return f"Player {index + 1}"


class StateTransitionEngine:
    """
    Pure functions for state transitions in pocketjack.

    Each method takes a state and returns a new state, without modifying the
    original.
    """

    @staticmethod
    def change_stage(state: GameState, stage: GameStage) -> GameState:
        """
        Change the stage of the game.

        Args:
            state: Current game state
            stage: New stage

        Returns:
            New game state with the stage changed
        """
        if state.stage == stage:
            return state
        logger.debug("Game %s: %s -> %s", state.id, state.stage.name, stage.name)
        return replace(state, stage=stage)

    @staticmethod
    def deal_new_game(
        deck: Union[Deck, Sequence[Card]],
        player_count: int,
        names: Optional[Sequence[str]] = None,
    ) -> GameState:
        """
        Seat ``player_count`` players and deal two cards to each from the front
        of ``deck``. Each player receives both cards before the next player is
        dealt.

        Args:
            deck: Shuffled cards, or a Deck, to deal from; it is not consumed
            player_count: Number of seats
            names: Optional display names, one per seat

        Returns:
            A game state in the IN_PROGRESS stage with player 0 to act

        Raises:
            ValueError: If the deck cannot cover the opening hands
        """
        needed = player_count * INITIAL_HAND_SIZE
        if len(deck) < needed:
            raise ValueError(
                f"Cannot deal {player_count} players from {len(deck)} cards"
            )

        dealer = Deck(deck.cards if isinstance(deck, Deck) else deck)
        players = []
        for i in range(player_count):
            name = names[i] if names and i < len(names) else default_player_name(i)
            hand = tuple(dealer.deal(INITIAL_HAND_SIZE))
            players.append(PlayerState(name=name, hand=hand))

        state = GameState(deck=tuple(dealer.cards), players=tuple(players))

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.GAME_CREATED,
            {
                "game_id": state.id,
                "player_count": player_count,
                "timestamp": state.timestamp,
            },
        )
        for i, player in enumerate(state.players):
            for card in player.hand:
                event_bus.emit(
                    EngineEventType.CARD_DEALT,
                    {
                        "game_id": state.id,
                        "player_index": i,
                        "player_name": player.name,
                        "card": str(card),
                    },
                )

        state = StateTransitionEngine.change_stage(state, GameStage.IN_PROGRESS)
        logger.debug("Dealt game %s to %d players", state.id, player_count)

        event_bus.emit(
            EngineEventType.GAME_STARTED,
            {
                "game_id": state.id,
                "current_player_index": state.current_player_index,
                "timestamp": state.timestamp,
            },
        )
        return state

    @staticmethod
    def draw_card(state: GameState, player_index: int) -> GameState:
        """
        Move the front card of the deck into a player's hand. A player whose
        score goes over 21 is stopped automatically. The turn then advances.

        Args:
            state: Current game state
            player_index: Seat of the player drawing

        Returns:
            New game state, or the original one if the draw is not possible
        """
        if not 0 <= player_index < len(state.players):
            logger.debug("Ignoring draw for unknown seat %d", player_index)
            return state

        player = state.players[player_index]
        if player.stopped:
            logger.debug("Ignoring draw for stopped player %s", player.name)
            return state
        if not state.deck:
            logger.debug("Ignoring draw for %s: deck is empty", player.name)
            return state

        card = state.deck[0]
        hand = player.hand + (card,)
        score = calc_score(hand)
        busted = score > BLACKJACK_TOTAL

        new_player = replace(player, hand=hand, stopped=busted)
        new_players = list(state.players)
        new_players[player_index] = new_player
        new_state = replace(state, deck=state.deck[1:], players=tuple(new_players))

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.PLAYER_ACTION,
            {
                "game_id": state.id,
                "player_index": player_index,
                "player_name": player.name,
                "action_type": "DRAW",
            },
        )
        event_bus.emit(
            EngineEventType.CARD_DEALT,
            {
                "game_id": state.id,
                "player_index": player_index,
                "player_name": player.name,
                "card": str(card),
                "score": score,
            },
        )
        if busted:
            logger.debug("%s busts with %d", player.name, score)
            event_bus.emit(
                EngineEventType.HAND_BUSTED,
                {
                    "game_id": state.id,
                    "player_index": player_index,
                    "player_name": player.name,
                    "score": score,
                },
            )

        return StateTransitionEngine.advance_turn(new_state)

    @staticmethod
    def stop_player(state: GameState, player_index: int) -> GameState:
        """
        Stop a player, then advance the turn.

        Args:
            state: Current game state
            player_index: Seat of the player stopping

        Returns:
            New game state, or the original one for an unknown seat or an
            ended game
        """
        if state.ended:
            logger.debug("Ignoring stop for seat %d: game has ended", player_index)
            return state
        if not 0 <= player_index < len(state.players):
            logger.debug("Ignoring stop for unknown seat %d", player_index)
            return state

        player = state.players[player_index]
        new_players = list(state.players)
        new_players[player_index] = replace(player, stopped=True)
        new_state = replace(state, players=tuple(new_players))

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.PLAYER_ACTION,
            {
                "game_id": state.id,
                "player_index": player_index,
                "player_name": player.name,
                "action_type": "STOP",
            },
        )
        if not player.stopped:
            event_bus.emit(
                EngineEventType.PLAYER_STOPPED,
                {
                    "game_id": state.id,
                    "player_index": player_index,
                    "player_name": player.name,
                    "score": player.score,
                },
            )

        return StateTransitionEngine.advance_turn(new_state)

    @staticmethod
    def advance_turn(state: GameState) -> GameState:
        """
        Pass the turn to the next player who has not stopped, wrapping around
        the table. When nobody is left to act the game ends and the current
        index is left where it was.

        Args:
            state: Current game state

        Returns:
            New game state
        """
        if not state.active_indices():
            if state.ended:
                return state
            new_state = StateTransitionEngine.change_stage(state, GameStage.ENDED)
            logger.debug("Game %s ended", state.id)
            EventBus.get_instance().emit(
                EngineEventType.GAME_ENDED,
                {
                    "game_id": state.id,
                    "scores": [player.score for player in state.players],
                },
            )
            return new_state

        count = len(state.players)
        index = (state.current_player_index + 1) % count
        while state.players[index].stopped:
            index = (index + 1) % count

        new_state = replace(state, current_player_index=index)
        EventBus.get_instance().emit(
            EngineEventType.TURN_CHANGED,
            {
                "game_id": state.id,
                "previous_player_index": state.current_player_index,
                "current_player_index": index,
                "player_name": state.players[index].name,
            },
        )
        return new_state
