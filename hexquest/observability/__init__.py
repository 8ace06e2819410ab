"""
Observability for HexQuest.

Provides the in-game narrative log consumed by site handlers.
"""

from hexquest.observability.game_log import (
    GameLog,
    LogEntry,
    LogLevel,
    EntryKind,
)

__all__ = [
    "GameLog",
    "LogEntry",
    "LogLevel",
    "EntryKind",
]
