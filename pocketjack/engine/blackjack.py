"""
Blackjack engine implementation.

This module provides the BlackjackEngine class, which drives a GameSession
through a platform adapter: it renders the table, asks the current player for
an action, applies it, and shows the results once every player has stopped.
"""

from typing import Any, Dict, List, Optional, Tuple, Union
import logging
import random
import time

from pocketjack.adapters import PlatformAdapter
from pocketjack.blackjack.action import Action
from pocketjack.blackjack.constants import DEFAULT_PLAYERS, clamp_player_count
from pocketjack.blackjack.ranking import PlayerResult
from pocketjack.blackjack.session import GameSession
from pocketjack.blackjack.state import GameState
from pocketjack.engine.base import GameEngine
from pocketjack.events import EngineEventType

logger = logging.getLogger(__name__)


class BlackjackEngine(GameEngine):
    """
    Engine implementation for pocketjack.

    Config keys:
        player_count: Number of seats, clamped to 2..6 (default 2)
        seed: Optional integer seed for reproducible decks
        player_names: Optional list of display names
    """

    def __init__(self, adapter: PlatformAdapter, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the blackjack engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options for the game
        """
        super().__init__(adapter, config)
        self.player_count = clamp_player_count(
            self.config.get("player_count", DEFAULT_PLAYERS)
        )
        seed = self.config.get("seed")
        self.rng = random.Random(seed) if seed is not None else None
        self.player_names = self.config.get("player_names")
        self.session: Optional[GameSession] = None

        # Bus events waiting to be forwarded to the adapter
        self._pending_events: List[Tuple[str, Dict[str, Any]]] = []
        self._unsubscribe = None

    @property
    def state(self) -> Optional[GameState]:
        return self.session.state if self.session else None

    def _subscribe(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self.event_bus.on_any(self._pending_events.append)

    async def _flush_events(self) -> None:
        while self._pending_events:
            event_type, data = self._pending_events.pop(0)
            await self.adapter.notify_game_event(event_type, data)

    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for a game.
        """
        await super().initialize()
        self._subscribe()

        self.event_bus.emit(
            EngineEventType.ENGINE_INIT,
            {
                "engine_type": "blackjack",
                "config": self.config,
                "timestamp": time.time(),
            },
        )
        await self._flush_events()

    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        self.event_bus.emit(EngineEventType.ENGINE_SHUTDOWN, {"timestamp": time.time()})
        await self._flush_events()

        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.event_bus.set_context(None)

        await super().shutdown()

    async def start_game(self) -> None:
        """
        Deal a new game for the configured number of players.
        """
        self._subscribe()
        self.session = GameSession(self.player_count, rng=self.rng, names=self.player_names)
        self.event_bus.set_context(self.session.state.id)
        await self._flush_events()
        await self.render_state()

    async def reset_game(self, player_count: Optional[int] = None) -> None:
        """
        Start over with a fresh deck, optionally with a different table size.

        Args:
            player_count: New number of seats, clamped to 2..6
        """
        if player_count is not None:
            self.player_count = clamp_player_count(player_count)
        if self.session is None:
            await self.start_game()
            return

        self.session.reset(self.player_count)
        self.event_bus.set_context(self.session.state.id)
        await self._flush_events()
        await self.render_state()

    async def execute_player_action(
        self, player_index: int, action: Union[str, Action]
    ) -> bool:
        """
        Execute a player action.

        Args:
            player_index: Seat of the player
            action: Action or action name ("draw" / "stop")

        Returns:
            True if the action changed the game

        Raises:
            ValueError: If no game is running or the action is unknown
        """
        if self.session is None or self.session.ended:
            raise ValueError("No game in progress")

        if not isinstance(action, Action):
            try:
                action = Action[str(action).upper()]
            except KeyError:
                raise ValueError(f"Unknown action: {action}") from None

        if action == Action.DRAW:
            changed = self.session.draw(player_index)
        else:
            changed = self.session.stop(player_index)

        await self._flush_events()
        return changed

    async def play_turn(self) -> None:
        """
        Ask the current player for an action and apply it.
        """
        index = self.session.current_player_index
        player = self.session.players[index]
        valid_actions = self.session.valid_actions(index)

        action = await self.adapter.request_player_action(
            index, player.name, valid_actions
        )
        if action not in valid_actions:
            logger.warning("%s chose invalid action %s, stopping", player.name, action)
            self.event_bus.emit(
                EngineEventType.WARNING,
                {"player_index": index, "message": f"invalid action {action}"},
            )
            action = Action.STOP

        await self.execute_player_action(index, action)

    async def play(self) -> List[PlayerResult]:
        """
        Play the current game to the end, starting one if needed.

        Returns:
            Final results in seat order
        """
        if self.session is None:
            await self.start_game()

        while not self.session.ended:
            await self.render_state()
            await self.play_turn()

        return await self.finish_game()

    async def finish_game(self) -> List[PlayerResult]:
        """
        Publish and render the final results of an ended game.
        """
        results = self.session.results()
        for result in results:
            self.event_bus.emit(EngineEventType.HAND_RESULT, result.to_dict())
        await self._flush_events()

        await self.render_state()
        await self.adapter.render_results([result.to_dict() for result in results])
        return results

    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        if self.session is None:
            return
        await self.adapter.render_game_state(self.session.state.to_adapter_format())
