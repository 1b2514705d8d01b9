"""Defines the Action enum for the possible actions a player can take on their turn."""
from enum import Enum


class Action(Enum):
    """Enum for the possible actions a player can take in a game of pocketjack."""

    DRAW = "draw"
    STOP = "stop"
