"""Single-line edit buffer: text, cursor and selection.

Text is held as UTF-8 bytes and every offset (cursor, selection, limits)
is measured in bytes. The buffer enforces its invariants on every
operation::

    floor <= cursor_position <= len(data) <= max_length

where ``floor`` is ``min_cursor_position``, lowered to ``len(data)`` when
the text is shorter than it. Operations that cannot be applied leave the
buffer untouched and return ``False``; nothing here raises.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from tickline.undo import EditKind, UndoSnapshot
from tickline.utf8 import decode, next_boundary, next_char, prev_boundary, prev_char_length, truncate
from tickline.utils import is_punctuation_char, is_whitespace_char

logger = logging.getLogger(__name__)


class EditObserver(Protocol):
    def observe_edit(self, buffer: EditBuffer, before: UndoSnapshot, *, kind: EditKind = "type") -> None: ...


class EditBuffer:
    """Owns the text, cursor and selection of one input field."""

    def __init__(
        self,
        *,
        max_length: int = 1024,
        min_cursor_position: int = 0,
        byte_delete: bool = False,
        on_change: Callable[[str], None] | None = None,
        observer: EditObserver | None = None,
    ) -> None:
        self.max_length = max_length
        self.min_cursor_position = min_cursor_position
        self.byte_delete = byte_delete
        self.on_change = on_change
        self.observer = observer

        self._data: bytes = b""
        self._cursor: int = 0
        # (anchor, active end); either may be the smaller offset
        self._selection: tuple[int, int] | None = None

    # -- accessors ---------------------------------------------------------

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def text(self) -> str:
        return decode(self._data)

    @property
    def cursor_position(self) -> int:
        return self._cursor

    @property
    def cursor_index(self) -> int:
        """Number of characters before the cursor."""
        return len(decode(self._data[: self._cursor]))

    @property
    def floor(self) -> int:
        return min(self.min_cursor_position, len(self._data))

    @property
    def selection(self) -> tuple[int, int] | None:
        """Normalized ``(start, end)`` of the selection, clamped to the text."""
        if self._selection is None:
            return None
        a, b = self._selection
        end = min(max(a, b), len(self._data))
        start = min(max(min(a, b), self.floor), end)
        return start, end

    @property
    def has_selection(self) -> bool:
        span = self.selection
        return span is not None and span[0] < span[1]

    def selected_text(self) -> str:
        span = self.selection
        if span is None:
            return ""
        return decode(self._data[span[0] : span[1]])

    def __len__(self) -> int:
        return len(self._data)

    def snapshot(self) -> UndoSnapshot:
        return UndoSnapshot(self._data, self._cursor)

    # -- mutation core -----------------------------------------------------

    def _apply(self, data: bytes, cursor: int, kind: EditKind) -> bool:
        before = self.snapshot()
        self._data = data
        self._cursor = cursor
        self._selection = None
        if data == before.data:
            return False
        if self.observer is not None:
            self.observer.observe_edit(self, before, kind=kind)
        if self.on_change:
            self.on_change(self.text)
        return True

    def set_text(self, text: str, *, kind: EditKind = "edit") -> bool:
        """Replace the whole text; cursor moves to the end."""
        data = truncate(text.encode("utf-8"), self.max_length)
        return self._apply(data, len(data), kind)

    def restore(self, data: bytes, cursor: int) -> None:
        """Load a saved state without recording it. Always notifies."""
        self._data = truncate(data, self.max_length)
        self._cursor = max(self.floor, min(cursor, len(self._data)))
        self._selection = None
        if self.on_change:
            self.on_change(self.text)

    def insert(self, text: str, *, kind: EditKind = "type") -> bool:
        """Insert *text* at the cursor, replacing the selection if any.

        The insert is all-or-nothing: if the result would exceed
        ``max_length`` nothing changes, the selection included.
        """
        payload = text.encode("utf-8")
        if not payload:
            return False
        span = self.selection
        if span is None:
            start = end = self._cursor
        else:
            start, end = span
            if start < end:
                kind = "edit"
        data = self._data[:start] + payload + self._data[end:]
        if len(data) > self.max_length:
            logger.debug("insert rejected: %d bytes exceeds max_length %d", len(data), self.max_length)
            return False
        return self._apply(data, start + len(payload), kind)

    def delete_selection(self) -> bool:
        """Delete the selected span. No-op without a non-empty selection."""
        span = self.selection
        if span is None or span[0] >= span[1]:
            return False
        start, end = span
        return self._apply(self._data[:start] + self._data[end:], start, "edit")

    def delete_backward(self) -> bool:
        """Backspace: delete the selection, else one character left of the cursor.

        With ``byte_delete`` set, exactly one byte is removed, which can
        split a multi-byte character.
        """
        if self.has_selection:
            return self.delete_selection()
        self._selection = None
        floor = self.floor
        if self._cursor <= floor:
            return False
        width = 1 if self.byte_delete else max(prev_char_length(self._data, self._cursor), 1)
        start = max(floor, self._cursor - width)
        return self._apply(self._data[:start] + self._data[self._cursor :], start, "type")

    # -- cursor and selection ----------------------------------------------

    def _clamp(self, pos: int) -> int:
        return max(self.floor, min(pos, len(self._data)))

    def _place_cursor(self, pos: int, extend_selection: bool) -> None:
        if extend_selection:
            anchor = self._selection[0] if self._selection is not None else self._cursor
            self._cursor = pos
            self._selection = (anchor, pos)
        else:
            self._cursor = pos
            self._selection = None

    def move_cursor(self, delta: int, extend_selection: bool = False) -> None:
        """Move the cursor by *delta* characters, clamped to the editable range."""
        pos = self._cursor
        step = next_boundary if delta > 0 else prev_boundary
        for _ in range(abs(delta)):
            moved = step(self._data, pos)
            if moved == pos:
                break
            pos = moved
        self._place_cursor(self._clamp(pos), extend_selection)

    def move_to(self, pos: int, extend_selection: bool = False) -> None:
        self._place_cursor(self._clamp(pos), extend_selection)

    def _char_before(self, pos: int) -> tuple[str, int]:
        width = prev_char_length(self._data, pos)
        return decode(self._data[pos - width : pos]), width

    def _word_left(self) -> int:
        pos = self._cursor
        floor = self.floor

        # Skip whitespace before the cursor
        while pos > floor:
            char, width = self._char_before(pos)
            if not is_whitespace_char(char):
                break
            pos -= width

        if pos > floor:
            char, _ = self._char_before(pos)
            if is_punctuation_char(char):
                while pos > floor:
                    char, width = self._char_before(pos)
                    if not is_punctuation_char(char):
                        break
                    pos -= width
            else:
                while pos > floor:
                    char, width = self._char_before(pos)
                    if is_whitespace_char(char) or is_punctuation_char(char):
                        break
                    pos -= width
        return max(pos, floor)

    def _word_right(self) -> int:
        pos = self._cursor
        data = self._data

        # Skip whitespace after the cursor
        while pos < len(data) and is_whitespace_char(decode(next_char(data, pos))):
            pos = next_boundary(data, pos)

        if pos < len(data):
            if is_punctuation_char(decode(next_char(data, pos))):
                while pos < len(data) and is_punctuation_char(decode(next_char(data, pos))):
                    pos = next_boundary(data, pos)
            else:
                while pos < len(data):
                    char = decode(next_char(data, pos))
                    if is_whitespace_char(char) or is_punctuation_char(char):
                        break
                    pos = next_boundary(data, pos)
        return pos

    def move_word(self, direction: int, extend_selection: bool = False) -> None:
        """Jump to the previous (direction < 0) or next word boundary."""
        pos = self._word_left() if direction < 0 else self._word_right()
        self._place_cursor(self._clamp(pos), extend_selection)

    def select(self, start: int, end: int) -> None:
        """Select from *start* (anchor) to *end*; the cursor goes to *end*."""
        start = self._clamp(start)
        end = self._clamp(end)
        self._selection = (start, end)
        self._cursor = end

    def select_all(self) -> None:
        floor = self.floor
        self._selection = (len(self._data), floor)
        self._cursor = floor

    def clear_selection(self) -> None:
        self._selection = None
