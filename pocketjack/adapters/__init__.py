"""
Platform adapters for the pocketjack engine.

This package provides adapters that translate between the core game engine
and the platforms it is played on.
"""

from pocketjack.adapters.base import OUTCOME_LABELS, PlatformAdapter, format_result_line
from pocketjack.adapters.cli import CLIAdapter
from pocketjack.adapters.dummy import DummyAdapter

__all__ = [
    "OUTCOME_LABELS",
    "PlatformAdapter",
    "format_result_line",
    "CLIAdapter",
    "DummyAdapter",
]
