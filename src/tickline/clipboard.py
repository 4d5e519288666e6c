"""Widget-local clipboard for cut/copy/paste."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tickline.buffer import EditBuffer


class Clipboard:
    """Holds one clipboard string.

    Content is private to the owning widget; the host operating system's
    clipboard is never touched.
    """

    def __init__(self) -> None:
        self._content: str = ""

    @property
    def content(self) -> str:
        return self._content

    def set(self, text: str) -> None:
        self._content = text

    def clear(self) -> None:
        self._content = ""

    def __bool__(self) -> bool:
        return bool(self._content)

    def copy(self, buffer: EditBuffer) -> bool:
        """Copy the selected span. No-op without a selection."""
        if not buffer.has_selection:
            return False
        self._content = buffer.selected_text()
        return True

    def cut(self, buffer: EditBuffer) -> bool:
        """Copy the selected span, then delete it from *buffer*."""
        if not self.copy(buffer):
            return False
        return buffer.delete_selection()

    def paste(self, buffer: EditBuffer) -> bool:
        """Insert the content at the cursor, replacing any selection.

        Subject to the buffer's length limit: an oversized paste is
        rejected whole.
        """
        if not self._content:
            return False
        return buffer.insert(self._content, kind="edit")
