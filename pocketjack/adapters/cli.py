"""
Command-line interface adapter for the pocketjack engine.

This module provides an adapter for console-based play: every seat shares the
same terminal and takes its turn when prompted.
"""

from typing import Any, Dict, List, Optional, Union
from enum import Enum

from pocketjack.adapters.base import PlatformAdapter, format_result_line
from pocketjack.blackjack.action import Action
from pocketjack.common.io_interface import ConsoleIOInterface, IOInterface


class CLIAdapter(PlatformAdapter):
    """
    Command-line interface adapter for the pocketjack engine.

    This adapter uses an IOInterface (the console by default) for input and
    output, providing a simple text-based interface to the game.
    """

    def __init__(self, io_interface: Optional[IOInterface] = None):
        """
        Initialize the CLI adapter.

        Args:
            io_interface: Optional IOInterface to use for I/O. If None, a
                          console IOInterface is used.
        """
        self.io_interface = io_interface or ConsoleIOInterface()

        # Scores by seat from the last rendered table
        self.scores: Dict[int, int] = {}

    async def _output(self, message: str) -> None:
        output_async = getattr(self.io_interface, "output_async", None)
        if output_async is not None:
            await output_async(message)
        else:
            self.io_interface.output(message)

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current game state to the console.

        Args:
            state: The current game state
        """
        await self._output("\n=== Blackjack ===")

        self.scores = {}
        for i, player in enumerate(state.get("players", [])):
            self.scores[player.get("index", i)] = player.get("score", 0)
            marker = "> " if player.get("is_current") else "  "
            cards = " ".join(player.get("cards", []))
            line = f"{marker}{player.get('name')}: {cards} ({player.get('score', 0)})"
            if player.get("stopped"):
                line += " [stopped]"
            await self._output(line)

        await self._output(f"Cards left: {state.get('deck_cards_remaining', 0)}")
        await self._output("=================\n")

    async def request_player_action(
        self,
        player_index: int,
        player_name: str,
        valid_actions: List[Action],
    ) -> Action:
        """
        Request an action from a player via the IO interface.

        Interactive interfaces show a numbered menu and the player answers
        with the option number or the action name. Non-interactive interfaces
        choose from the player's score on the last rendered table.

        Raises:
            ValueError: If the player keeps answering with invalid choices
        """
        if self.io_interface.interactive:
            await self._output(f"\n{player_name}'s turn. Valid actions:")
            for i, action in enumerate(valid_actions):
                await self._output(f"{i+1}: {action.name}")

        return self.io_interface.get_player_action(
            player_name, valid_actions, self.scores.get(player_index)
        )

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the user of a game event via the console.
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        message = self._format_event_message(event_type, data)
        if message:
            await self._output(message)

    def _format_event_message(
        self, event_type: str, data: Dict[str, Any]
    ) -> Optional[str]:
        """
        Format an event message based on the event type.

        Returns:
            Formatted message string or None if no message needed
        """
        player_name = data.get("player_name", "Unknown Player")

        if event_type == "CARD_DEALT" and "score" in data:
            return f"{player_name} draws {data.get('card')}"

        elif event_type == "HAND_BUSTED":
            return f"{player_name} busts with {data.get('score')}!"

        elif event_type == "PLAYER_STOPPED":
            return f"{player_name} stops at {data.get('score')}"

        elif event_type == "GAME_ENDED":
            return "All players have stopped."

        return None

    async def render_results(self, results: List[Dict[str, Any]]) -> None:
        await self._output("\n🎉 Results 🎉")
        for result in results:
            await self._output(format_result_line(result))
