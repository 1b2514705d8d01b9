"""
Core game logic: scoring, state, transitions, ranking and the game session.
"""

from pocketjack.blackjack.action import Action
from pocketjack.blackjack.constants import (
    BLACKJACK_TOTAL,
    DEFAULT_PLAYERS,
    MAX_PLAYERS,
    MIN_PLAYERS,
    clamp_player_count,
)
from pocketjack.blackjack.ranking import Outcome, PlayerResult, rank_players
from pocketjack.blackjack.scoring import calc_score, is_blackjack, is_bust
from pocketjack.blackjack.session import GameSession
from pocketjack.blackjack.state import GameStage, GameState, PlayerState
from pocketjack.blackjack.transitions import StateTransitionEngine

__all__ = [
    "Action",
    "BLACKJACK_TOTAL",
    "DEFAULT_PLAYERS",
    "MAX_PLAYERS",
    "MIN_PLAYERS",
    "clamp_player_count",
    "Outcome",
    "PlayerResult",
    "rank_players",
    "calc_score",
    "is_blackjack",
    "is_bust",
    "GameSession",
    "GameStage",
    "GameState",
    "PlayerState",
    "StateTransitionEngine",
]
