"""Thread-safe event log and the line-sink type the engines write to."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import Callable

LogSink = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class SimEvent:
    """A single simulation event for the API event feed."""

    t: float
    category: str
    message: str
    entity_ids: tuple[int, ...] = ()  # IDs of entities involved in this event


class EventLog:
    """Bounded event log. Writers append; readers snapshot a slice.

    Thread-safe via a simple lock; the API reads while the session writes.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int | None = 2000) -> None:
        self._buffer: deque[SimEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def append(self, event: SimEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def sink(self, category: str, t: float, entity_ids: tuple[int, ...] = ()) -> LogSink:
        """Return a line sink that records each line as one event."""

        def _write(line: str) -> None:
            self.append(SimEvent(t=t, category=category, message=line, entity_ids=entity_ids))

        return _write

    def latest(self, count: int = 50) -> list[SimEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
