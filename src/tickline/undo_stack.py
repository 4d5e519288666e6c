"""Bounded LIFO stack for undo/redo snapshots."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

S = TypeVar("S")


class UndoStack(Generic[S]):
    """Stores immutable snapshots, newest last.

    When ``max_size`` is reached the oldest snapshot is dropped. Snapshots
    must be immutable values; they are stored and returned as-is.
    """

    def __init__(self, max_size: int | None = None) -> None:
        self._stack: deque[S] = deque(maxlen=max_size)

    def push(self, state: S) -> None:
        """Push a snapshot onto the stack."""
        self._stack.append(state)

    def pop(self) -> S | None:
        """Pop and return the most recent snapshot, or None if empty."""
        return self._stack.pop() if self._stack else None

    def peek(self) -> S | None:
        """Return the most recent snapshot without removing it."""
        return self._stack[-1] if self._stack else None

    def replace_top(self, state: S) -> None:
        """Swap the most recent snapshot for *state* (push if empty)."""
        if self._stack:
            self._stack[-1] = state
        else:
            self._stack.append(state)

    def clear(self) -> None:
        """Remove all snapshots."""
        self._stack.clear()

    @property
    def length(self) -> int:
        return len(self._stack)

    @property
    def max_size(self) -> int | None:
        return self._stack.maxlen

    def __iter__(self):
        return iter(self._stack)
