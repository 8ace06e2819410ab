"""
Game Log for HexQuest.

The in-game narrative log shown to the player. Every entry is also
mirrored to Python logging so that sessions can be debugged from the
console.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Optional
import json
import logging

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Severity/colour of a game log entry."""

    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"
    COMBAT = "combat"


class EntryKind(str, Enum):
    """What produced a log entry."""

    MESSAGE = "message"  # Narrative message
    TRANSITION = "transition"  # Site state transition


_PYTHON_LEVELS = {
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


@dataclass
class LogEntry:
    """A single game log entry."""

    message: str
    level: LogLevel = LogLevel.INFO
    kind: EntryKind = EntryKind.MESSAGE
    timestamp: datetime = field(default_factory=datetime.now)
    sequence_number: int = 0
    context: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "message": self.message,
            "level": self.level.value,
            "kind": self.kind.value,
            "timestamp": self.timestamp.isoformat(),
            "sequence_number": self.sequence_number,
            "context": self.context,
        }

    def __str__(self) -> str:
        return f"[{self.sequence_number}] {self.level.value.upper()} {self.message}"


class GameLog:
    """
    Ordered log of game messages.

    Subscribers are called synchronously for every entry. A failing
    subscriber is reported through Python logging and never interrupts
    the action that produced the entry.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []
        self._sequence: int = 0
        self._subscribers: list[Callable[[LogEntry], None]] = []

    def reset(self) -> None:
        """Clear all entries."""
        self._entries = []
        self._sequence = 0
        logger.debug("GameLog reset")

    def subscribe(self, callback: Callable[[LogEntry], None]) -> None:
        """Subscribe to receive entries as they are logged."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[LogEntry], None]) -> None:
        """Unsubscribe from entries."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def _append(self, entry: LogEntry) -> LogEntry:
        self._sequence += 1
        entry.sequence_number = self._sequence
        self._entries.append(entry)

        logger.log(_PYTHON_LEVELS.get(entry.level, logging.INFO), entry.message)

        for subscriber in self._subscribers:
            try:
                subscriber(entry)
            except Exception as e:
                logger.warning(f"Subscriber error: {e}")
        return entry

    def add(
        self,
        message: str,
        level: LogLevel = LogLevel.INFO,
        context: Optional[dict[str, Any]] = None,
    ) -> LogEntry:
        """Add a narrative message."""
        return self._append(
            LogEntry(message=message, level=LogLevel(level), context=context or {})
        )

    def log_transition(
        self,
        subject: str,
        from_state: str,
        to_state: str,
        trigger: str,
    ) -> LogEntry:
        """Record a state transition of a site or other game object."""
        return self._append(
            LogEntry(
                message=f"{subject}: {from_state} -> {to_state} ({trigger})",
                level=LogLevel.INFO,
                kind=EntryKind.TRANSITION,
                context={
                    "subject": subject,
                    "from_state": from_state,
                    "to_state": to_state,
                    "trigger": trigger,
                },
            )
        )

    def get_entries(
        self,
        level: Optional[LogLevel] = None,
        kind: Optional[EntryKind] = None,
    ) -> list[LogEntry]:
        """
        Get logged entries.

        Args:
            level: Filter by level (None = all)
            kind: Filter by entry kind (None = all)
        """
        entries = self._entries
        if level:
            entries = [e for e in entries if e.level == level]
        if kind:
            entries = [e for e in entries if e.kind == kind]
        return list(entries)

    def get_messages(self) -> list[str]:
        return [e.message for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def to_json(self, indent: int = 2) -> str:
        """Serialize the log to JSON."""
        return json.dumps([e.to_dict() for e in self._entries], indent=indent, default=str)

    def format_log(self, max_entries: Optional[int] = None) -> str:
        """Format the log as a human-readable string."""
        entries = self._entries
        if max_entries:
            entries = entries[-max_entries:]
        return "\n".join(str(e) for e in entries)
