"""
Base adapter interface for the pocketjack engine.

This module defines the interface that platform-specific adapters must implement
to interact with the pocketjack engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Union
from enum import Enum

from pocketjack.blackjack.action import Action

# Results labels keyed by Outcome value
OUTCOME_LABELS = {
    "blackjack": "🂡 Blackjack!",
    "win": "🏆 Winner!",
    "bust": "💀 Bust!",
    "none": "",
}


def format_result_line(result: Dict[str, Any]) -> str:
    """Render one results entry as ``Player 1: 20 points 🏆 Winner!``."""
    label = OUTCOME_LABELS.get(result.get("outcome", "none"), "")
    line = f"{result.get('name')}: {result.get('score')} points"
    return f"{line} {label}" if label else line


class PlatformAdapter(ABC):
    """
    Base interface for platform-specific adapters.

    Adapters render the game state, collect player actions and announce game
    events and the final results. Implementations bridge the gap between the
    platform-agnostic engine and a concrete front end such as the console.
    """

    @abstractmethod
    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current game state to the platform.

        Args:
            state: The current game state in adapter format
        """
        pass

    @abstractmethod
    async def request_player_action(
        self,
        player_index: int,
        player_name: str,
        valid_actions: List[Action],
    ) -> Action:
        """
        Request an action from a player.

        Args:
            player_index: Seat of the player
            player_name: Display name of the player
            valid_actions: List of valid actions the player can take

        Returns:
            The player's chosen action
        """
        pass

    @abstractmethod
    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the platform of a game event.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        pass

    @abstractmethod
    async def render_results(self, results: List[Dict[str, Any]]) -> None:
        """
        Show the final results of a game.

        Args:
            results: One dict per player with name, score and outcome
        """
        pass

    async def initialize(self) -> None:
        """
        Initialize the adapter.

        This method is called when the adapter is first connected to the engine.
        """
        pass

    async def shutdown(self) -> None:
        """
        Shutdown the adapter.

        This method is called when the engine is shutting down.
        """
        pass
