"""
Dummy adapter for the pocketjack engine, used for testing and simulation.

This module provides a non-interactive adapter that can be used for automated
testing and simulations where no user interaction is needed.
"""

from typing import Any, Callable, Dict, List, Optional, Union
from enum import Enum

from pocketjack.adapters.base import PlatformAdapter
from pocketjack.blackjack.action import Action


class DummyAdapter(PlatformAdapter):
    """
    Dummy adapter for testing and simulation.

    Actions come from a per-seat script, then from an optional strategy
    function, and default to STOP.
    """

    def __init__(
        self,
        auto_actions: Optional[Dict[int, List[Action]]] = None,
        strategy_function: Optional[Callable[[int, List[Action]], Action]] = None,
        verbose: bool = False,
    ):
        """
        Initialize the dummy adapter.

        Args:
            auto_actions: Optional dictionary mapping seat indices to lists of
                          actions to take in sequence
            strategy_function: Optional function that takes (player_index, valid_actions)
                               and returns an action to take
            verbose: Whether to print events to stdout
        """
        self.auto_actions = auto_actions or {}
        self.strategy_function = strategy_function
        self.verbose = verbose

        self.action_index: Dict[int, int] = {}
        self.events = []
        self.rendered_states = []
        self.results: List[Dict[str, Any]] = []

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Store the game state for later inspection.
        """
        self.rendered_states.append(state)

        if self.verbose:
            print("\n=== Game State ===")
            for player in state.get("players", []):
                print(
                    f"{player.get('name')}: {player.get('cards', [])} - {player.get('score', 0)}"
                )
            print("==================\n")

    async def request_player_action(
        self,
        player_index: int,
        player_name: str,
        valid_actions: List[Action],
    ) -> Action:
        """
        Return a scripted action or select one using the strategy function.
        """
        selected_action = None

        script = self.auto_actions.get(player_index)
        if script is not None:
            position = self.action_index.get(player_index, 0)
            if position < len(script):
                selected_action = script[position]
                self.action_index[player_index] = position + 1

        if selected_action is None and self.strategy_function:
            selected_action = self.strategy_function(player_index, valid_actions)

        if selected_action is None or selected_action not in valid_actions:
            selected_action = Action.STOP

        if self.verbose:
            print(f"{player_name} selects {selected_action.name}")

        return selected_action

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Store the event for later inspection.
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        self.events.append((event_type_str, data))

        if self.verbose:
            print(f"Event: {event_type_str}")
            for key, value in data.items():
                print(f"  {key}: {value}")

    async def render_results(self, results: List[Dict[str, Any]]) -> None:
        self.results = list(results)

    def get_events_by_type(self, event_type: Union[str, Enum]) -> List[Dict[str, Any]]:
        """
        Get all events of a specific type.
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        return [data for typ, data in self.events if typ == event_type_str]

    def clear(self) -> None:
        """Clear all stored events, states and results."""
        self.events.clear()
        self.rendered_states.clear()
        self.action_index.clear()
        self.results = []
