"""Submission history with up/down navigation."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

MAX_HISTORY = 50


class HistoryLog:
    """Previously submitted texts, most recent first.

    ``index`` 0 means the user is editing live text; 1 is the most recent
    entry, and larger values walk further back in time.
    """

    def __init__(self, max_size: int = MAX_HISTORY) -> None:
        self.max_size = max_size
        self._entries: list[str] = []
        self.index: int = 0

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def is_browsing(self) -> bool:
        return self.index > 0

    def __len__(self) -> int:
        return len(self._entries)

    def submit(self, text: str) -> bool:
        """Record *text*. Empty text and repeats of the latest entry are ignored."""
        if not text or (self._entries and self._entries[0] == text):
            return False
        self._entries.insert(0, text)
        del self._entries[self.max_size :]
        self.index = 0
        logger.debug("history: %d entries", len(self._entries))
        return True

    def older(self) -> str | None:
        """Step back in time. Returns the entry, or None past the oldest."""
        if self.index >= len(self._entries):
            return None
        self.index += 1
        return self._entries[self.index - 1]

    def newer(self) -> str | None:
        """Step forward in time.

        Returns the entry, ``""`` when arriving back at live edit, or None if
        already there.
        """
        if self.index <= 0:
            return None
        self.index -= 1
        if self.index == 0:
            return ""
        return self._entries[self.index - 1]

    def reset(self) -> None:
        self.index = 0

    def clear(self) -> None:
        self._entries.clear()
        self.index = 0
