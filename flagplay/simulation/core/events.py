"""Play-by-play narration for a simulated play.

The orchestrator narrates the play into an EventLog as it unfolds. The
log keeps every entry for the result and fans each one out to anyone
listening (frame recorders, a UI feed, the debug logger).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class EventType(str, Enum):
    INFO = "info"
    SNAP = "snap"
    MOTION = "motion"
    ROUTE = "route"
    THROW = "throw"
    CATCH = "catch"
    INCOMPLETION = "incompletion"
    INTERCEPTION = "interception"
    SACK = "sack"
    FLAG_PULL = "flag_pull"
    SCRAMBLE = "scramble"
    TOUCHDOWN = "touchdown"


@dataclass(frozen=True)
class SimulationEvent:
    """One line of play-by-play.

    time is seconds since the play was initialized; player_id names the
    player the line is about, when there is one.
    """
    time: float
    type: EventType
    message: str
    player_id: Optional[str] = None

    def __str__(self) -> str:
        who = f" ({self.player_id})" if self.player_id else ""
        return f"[{self.time:.2f}s] {self.type.value}{who} - {self.message}"

    def to_dict(self) -> dict:
        return {
            "time": round(self.time, 3),
            "type": self.type.value,
            "message": self.message,
            "player_id": self.player_id,
        }


EventHandler = Callable[[SimulationEvent], None]


class EventLog:
    """Ordered narration with per-type and catch-all listeners.

    Typed listeners run before catch-all ones. An empty log is still
    truthy so `if sim.event_log:` checks for presence, not content.
    """

    def __init__(self) -> None:
        # None keys the catch-all listeners
        self._listeners: dict[Optional[EventType], list[EventHandler]] = {}
        self._entries: list[SimulationEvent] = []

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        self._listeners.setdefault(event_type, []).append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        self._listeners.setdefault(None, []).append(handler)

    def unsubscribe_all(self, handler: EventHandler) -> None:
        catch_all = self._listeners.get(None, [])
        if handler in catch_all:
            catch_all.remove(handler)

    def emit(self, event: SimulationEvent) -> None:
        self._entries.append(event)
        logger.debug("%s", event)
        for key in (event.type, None):
            for handler in list(self._listeners.get(key, ())):
                handler(event)

    def emit_simple(
        self,
        event_type: EventType,
        time: float,
        message: str,
        player_id: Optional[str] = None,
    ) -> SimulationEvent:
        event = SimulationEvent(time, event_type, message, player_id)
        self.emit(event)
        return event

    @property
    def history(self) -> list[SimulationEvent]:
        """Oldest first. Mutating the returned list does not touch the log."""
        return list(self._entries)

    def clear(self) -> None:
        """Drop recorded entries; listeners stay attached."""
        self._entries.clear()

    def get_events_by_type(self, event_type: EventType) -> list[SimulationEvent]:
        return [e for e in self._entries if e.type == event_type]

    def get_events_for_player(self, player_id: str) -> list[SimulationEvent]:
        return [e for e in self._entries if e.player_id == player_id]

    def last(self) -> Optional[SimulationEvent]:
        return self._entries[-1] if self._entries else None

    def format_history(self, last_n: Optional[int] = None) -> str:
        """One line per entry, optionally only the last_n."""
        entries = self._entries[-last_n:] if last_n else self._entries
        return "\n".join(str(e) for e in entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return True
