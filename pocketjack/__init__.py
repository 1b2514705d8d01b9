"""pocketjack: a pass-and-play multi-player blackjack game."""

__version__ = "0.1.0"
