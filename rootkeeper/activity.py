"""In-memory record of what the user has done during a session."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from datetime import datetime
from typing import TextIO


class ActivityLog:
    """Keeps timestamped entries describing user actions, in order."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock if clock is not None else datetime.now
        self._entries: list[str] = []

    def record(self, event: str) -> str:
        """Store an entry for ``event`` and return it."""
        entry = f"User has {event} @ {self._clock().ctime()}"
        self._entries.append(entry)
        return entry

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def display(self, stream: TextIO | None = None) -> None:
        """Write every entry, one per line."""
        out = stream if stream is not None else sys.stdout
        for entry in self._entries:
            out.write(entry + "\n")