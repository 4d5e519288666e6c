"""Configuration for a line input."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable

from tickline.history import MAX_HISTORY
from tickline.keybindings import LineKeybindings
from tickline.keymap import US_QWERTY, Keymap


class ConfigError(ValueError):
    """Raised for an invalid ``LineInputConfig``."""


@dataclass
class LineInputConfig:
    """Options recognized when creating a ``LineInput``."""

    max_length: int = 1024
    min_cursor_position: int = 0
    protected_prefix: str | None = None
    history_limit: int = MAX_HISTORY
    undo_limit: int = 100
    # Backspace removes one byte instead of one character
    byte_delete: bool = False

    on_change: Callable[[str], None] | None = None
    on_enter: Callable[[str], None] | None = None
    on_escape: Callable[[], None] | None = None

    keymap: Keymap = field(default_factory=lambda: dict(US_QWERTY))
    keybindings: LineKeybindings = field(default_factory=LineKeybindings)
    clock: Callable[[], float] = time.monotonic

    def validate(self) -> None:
        if self.max_length < 0:
            raise ConfigError(f"max_length must be >= 0, got {self.max_length}")
        if not 0 <= self.min_cursor_position <= self.max_length:
            raise ConfigError(
                f"min_cursor_position must be within [0, {self.max_length}], "
                f"got {self.min_cursor_position}"
            )
        if self.history_limit < 1:
            raise ConfigError(f"history_limit must be >= 1, got {self.history_limit}")
        if self.undo_limit < 2:
            raise ConfigError(f"undo_limit must be >= 2, got {self.undo_limit}")
        if self.protected_prefix is not None and len(self.protected_prefix.encode("utf-8")) > self.max_length:
            raise ConfigError("protected_prefix is longer than max_length")
