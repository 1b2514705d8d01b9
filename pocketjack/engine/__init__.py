"""
Game engines for pocketjack.
"""

from pocketjack.engine.base import GameEngine
from pocketjack.engine.blackjack import BlackjackEngine

__all__ = ["GameEngine", "BlackjackEngine"]
