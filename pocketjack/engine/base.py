"""
Base engine class for pocketjack.

This module provides the abstract base class for game engines. An engine owns
a game, drives it through a platform adapter and publishes its lifecycle on
the event bus.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pocketjack.adapters import PlatformAdapter
from pocketjack.events import EventBus


class GameEngine(ABC):
    """
    Abstract base class for game engines.

    This class defines the common interface for starting games, handling
    player actions and rendering the game state.
    """

    def __init__(self, adapter: PlatformAdapter, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the engine.

        Args:
            adapter: Platform adapter to use for rendering and input
            config: Configuration options for the game
        """
        self.adapter = adapter
        self.config = config or {}
        self.event_bus = EventBus.get_instance()

    @abstractmethod
    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for a game.
        """
        await self.adapter.initialize()

    @abstractmethod
    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        await self.adapter.shutdown()

    @abstractmethod
    async def start_game(self) -> None:
        """
        Start a new game.
        """
        pass

    @abstractmethod
    async def execute_player_action(self, player_index: int, action: Any) -> bool:
        """
        Execute a player action.

        Args:
            player_index: Seat of the player
            action: Action to perform

        Returns:
            True if the action changed the game
        """
        pass

    @abstractmethod
    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        pass
