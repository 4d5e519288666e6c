"""Word-grained undo/redo for the edit buffer.

Typing is grouped into one undo step per completed word instead of one
per keystroke. A typing session starts with the first keystroke after any
other kind of edit; the state before that keystroke is captured. Every
time the character before the cursor becomes a word boundary after a
non-empty word, the current state is captured and a fresh session begins.
Every other kind of edit (paste, cut, selection delete, ``set_text``)
is its own undo step.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Literal

from tickline.undo_stack import UndoStack
from tickline.utf8 import decode, prev_char_length
from tickline.utils import is_word_boundary, trailing_word

if TYPE_CHECKING:
    from tickline.buffer import EditBuffer

logger = logging.getLogger(__name__)

# "type": keystroke edits that coalesce by word (characters, backspace)
# "edit": standalone edits, one undo step each
# "browse": history loads; consecutive loads collapse into one step
EditKind = Literal["type", "edit", "browse"]


@dataclass(frozen=True)
class UndoSnapshot:
    data: bytes
    cursor_position: int
    timestamp: float = 0.0


class UndoEngine:
    """Undo and redo stacks plus the typing-session state."""

    def __init__(
        self,
        max_size: int | None = 100,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._undo: UndoStack[UndoSnapshot] = UndoStack(max_size)
        self._redo: UndoStack[UndoSnapshot] = UndoStack(max_size)
        self._clock = clock

        self.is_typing: bool = False
        self.current_word: str = ""
        self.last_edit_time: float | None = None
        self._last_kind: EditKind | None = None

    @property
    def undo_depth(self) -> int:
        return self._undo.length

    @property
    def redo_depth(self) -> int:
        return self._redo.length

    @property
    def can_undo(self) -> bool:
        return self._undo.length >= 2

    @property
    def can_redo(self) -> bool:
        return self._redo.length > 0

    def snapshot(self, buffer: EditBuffer) -> UndoSnapshot:
        return UndoSnapshot(buffer.data, buffer.cursor_position, self._clock())

    def _push(self, snapshot: UndoSnapshot) -> None:
        self._undo.push(snapshot)

    def _push_if_new(self, snapshot: UndoSnapshot) -> None:
        top = self._undo.peek()
        if top is None or top.data != snapshot.data:
            self._undo.push(snapshot)

    def _end_session(self) -> None:
        self.is_typing = False
        self.current_word = ""

    # -- edit hook ---------------------------------------------------------

    def observe_edit(self, buffer: EditBuffer, before: UndoSnapshot, *, kind: EditKind = "type") -> None:
        """Record a text change that has just been applied to *buffer*.

        *before* is the buffer state right before the change.
        """
        self._redo.clear()
        self.last_edit_time = self._clock()
        before = dataclasses.replace(before, timestamp=self.last_edit_time)
        last_kind, self._last_kind = self._last_kind, kind

        if kind == "browse":
            self._end_session()
            top = self._undo.peek()
            if last_kind == "browse" and top is not None and top.data == before.data:
                self._undo.replace_top(self.snapshot(buffer))
            else:
                self._push_if_new(before)
                self._push(self.snapshot(buffer))
            return

        if kind == "edit":
            self._end_session()
            self._push_if_new(before)
            self._push(self.snapshot(buffer))
            return

        data = buffer.data
        cursor = buffer.cursor_position
        word = trailing_word(decode(data[:cursor]))

        if not self.is_typing:
            self.is_typing = True
            self.current_word = word
            self._push_if_new(before)
            return

        width = prev_char_length(data, cursor)
        prev_char = decode(data[cursor - width : cursor]) if width else None
        if is_word_boundary(prev_char):
            if self.current_word:
                self._push_if_new(self.snapshot(buffer))
                self.current_word = ""
        else:
            self.current_word = word

    # -- undo / redo -------------------------------------------------------

    def undo(self, buffer: EditBuffer) -> bool:
        """Step back one snapshot. Returns False when there is nothing to undo.

        The buffer's current state, unfinished word included, goes onto the
        redo stack; the buffer returns to the snapshot below the top.
        """
        if not self.can_undo:
            return False

        self._redo.push(self.snapshot(buffer))
        self._undo.pop()
        previous = self._undo.peek()
        self._end_session()
        self._last_kind = None
        logger.debug("undo: %d left, %d redoable", self._undo.length, self._redo.length)
        buffer.restore(previous.data, previous.cursor_position)
        return True

    def redo(self, buffer: EditBuffer) -> bool:
        """Re-apply the most recently undone snapshot."""
        target = self._redo.pop()
        if target is None:
            return False

        self._end_session()
        self._last_kind = None
        logger.debug("redo: %d left", self._redo.length)
        buffer.restore(target.data, target.cursor_position)
        self._push(self.snapshot(buffer))
        return True

    def clear(self) -> None:
        """Forget all history."""
        self._undo.clear()
        self._redo.clear()
        self._end_session()
        self._last_kind = None
        self.last_edit_time = None
