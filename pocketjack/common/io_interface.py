"""
This module contains the IOInterface abstract base class and its implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import aiofiles

from pocketjack.blackjack.action import Action
from pocketjack.blackjack.constants import AUTO_STOP_SCORE


def parse_action(answer: str, valid_actions: list[Action]) -> Optional[Action]:
    """
    Match a typed answer against the offered actions.

    Accepts the option number (1-based), the action name or its value, in any
    case. Returns None when nothing matches.
    """
    answer = answer.strip().lower()
    for i, action in enumerate(valid_actions):
        if answer in (str(i + 1), action.name.lower(), action.value):
            return action
    return None


def automatic_action(valid_actions: list[Action], score: Optional[int]) -> Action:
    """
    Pick an action without asking anyone: stop once the score reaches 17,
    otherwise take the first offered action.
    """
    if not valid_actions:
        raise ValueError("No valid actions available.")
    if score is not None and score >= AUTO_STOP_SCORE and Action.STOP in valid_actions:
        return Action.STOP
    return valid_actions[0]


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for text input/output used by the
    console adapter.
    """

    # False for interfaces that pick actions themselves instead of prompting
    interactive = True

    max_attempts = 3

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass

    @abstractmethod
    def get_player_action(
        self,
        player_name: str,
        valid_actions: list[Action],
        score: Optional[int] = None,
    ) -> Action:
        """Retrieve an action from a player."""
        pass

    @abstractmethod
    def check_numeric_response(self, ctx: str) -> int:
        """Check if a response is numeric and return the integer value."""
        pass

    def prompt_for_action(self, player_name: str, valid_actions: list[Action]) -> Action:
        """
        Ask for an action until a valid one is typed.

        Raises:
            ValueError: After ``max_attempts`` invalid answers
        """
        for _ in range(self.max_attempts):
            action = parse_action(self.input("Enter your choice: "), valid_actions)
            if action is not None:
                return action
            self.output("Invalid choice. Please try again.")
        raise ValueError(f"Too many invalid choices from {player_name}")


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.
    """

    interactive = False

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return ""

    def get_player_action(
        self,
        player_name: str,
        valid_actions: list[Action],
        score: Optional[int] = None,
    ) -> Action:
        return automatic_action(valid_actions, score)

    def check_numeric_response(self, ctx: str) -> int:
        """Always returns 2, the smallest table, for simulation."""
        return 2


class TestIOInterface(IOInterface):
    """
    A test IO interface. Collects output messages and replays queued inputs.

    Queued player actions are returned first; after that the player is
    prompted through the queued input responses.
    """

    __test__ = False

    def __init__(self):
        self.sent_messages = []
        self.player_actions = []
        self.input_responses = []

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        if self.input_responses:
            return self.input_responses.pop(0)
        return "test_input"

    def add_player_action(self, action: Action):
        """Add a player action to the queue."""
        self.player_actions.append(action)

    def get_player_action(
        self,
        player_name: str,
        valid_actions: list[Action],
        score: Optional[int] = None,
    ) -> Action:
        if self.player_actions:
            return self.player_actions.pop(0)
        return self.prompt_for_action(player_name, valid_actions)

    def check_numeric_response(self, ctx: str) -> int:
        return int(self.input(ctx))


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)

    def get_player_action(
        self,
        player_name: str,
        valid_actions: list[Action],
        score: Optional[int] = None,
    ) -> Action:
        return self.prompt_for_action(player_name, valid_actions)

    def check_numeric_response(self, ctx: str) -> int:
        attempts = 0
        while attempts < self.max_attempts:
            response = input(ctx)
            try:
                return int(response)
            except ValueError:
                print("Invalid response, please enter a number.")
                attempts += 1
        raise ValueError("Too many invalid responses. Operation aborted.")


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface that records the game transcript to a file.

    Output is appended to the log file, input is simulated and players stop
    once their score reaches 17.
    """

    interactive = False

    def __init__(self, log_file_path: str):
        self.log_file_path = log_file_path

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def input(self, prompt: str) -> str:
        """Log the prompt and return empty string."""
        self.output(f"[INPUT PROMPT] {prompt}")
        return ""

    def get_player_action(
        self,
        player_name: str,
        valid_actions: list[Action],
        score: Optional[int] = None,
    ) -> Action:
        action = automatic_action(valid_actions, score)
        self.output(f"[ACTION] {player_name}: {action.name}")
        return action

    def check_numeric_response(self, ctx: str) -> int:
        self.output(f"[NUMERIC PROMPT] {ctx}")
        return 2

    async def output_async(self, message: str) -> None:
        """Async version of output for use inside the engine loop."""
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")
