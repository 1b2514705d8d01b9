"""
Event system for the pocketjack engine.

This package provides the event bus that game transitions publish to and
presentation layers subscribe to.
"""

from pocketjack.events.emitter import (
    EventEmitter,
    EventBus,
    EventPriority,
    EngineEventType,
)

__all__ = ["EventEmitter", "EventBus", "EventPriority", "EngineEventType"]
