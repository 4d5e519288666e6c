"""LineInput - tick-driven single-line text input.

The host calls ``update()`` once per frame with a ``KeyState`` sample.
Within a tick at most one top-level action runs, chosen by priority:

1. caps lock press toggles caps lock (never ends the tick)
2. with ctrl held: undo, redo, select all, cut, copy, paste, word jumps
3. without ctrl: left/right arrows (auto-repeating)
4. enter submits
5. escape cancels
6. up/down browse the submission history
7. character keys type (auto-repeating)
8. backspace deletes (auto-repeating)

``update()`` returns True when the tick was consumed by the field, so the
host can keep those keys away from the rest of the application.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable

from tickline.buffer import EditBuffer
from tickline.clipboard import Clipboard
from tickline.config import LineInputConfig
from tickline.history import HistoryLog
from tickline.keybindings import SHORTCUT_ORDER, WORD_JUMPS, LineAction
from tickline.keymap import resolve_character
from tickline.keys import Key, KeyId, KeyState
from tickline.repeat import (
    ARROW_REPEAT,
    BACKSPACE_REPEAT,
    CHARACTER_REPEAT,
    WORD_JUMP_DEBOUNCE,
    Debounce,
    KeyRepeater,
)
from tickline.undo import UndoEngine

logger = logging.getLogger(__name__)


class LineInput:
    """Single-line text field driven by polled key state."""

    def __init__(self, config: LineInputConfig | None = None, **options: Any) -> None:
        if config is None:
            config = LineInputConfig(**options)
        elif options:
            config = dataclasses.replace(config, **options)
        config.validate()
        self.config = config

        self.on_change: Callable[[str], None] | None = config.on_change
        self.on_enter: Callable[[str], None] | None = config.on_enter
        self.on_escape: Callable[[], None] | None = config.on_escape

        self._clock = config.clock
        self.undo_engine = UndoEngine(max_size=config.undo_limit, clock=config.clock)
        self.buffer = EditBuffer(
            max_length=config.max_length,
            min_cursor_position=config.min_cursor_position,
            byte_delete=config.byte_delete,
            on_change=self._handle_change,
            observer=self.undo_engine,
        )
        self.clipboard = Clipboard()
        self.history = HistoryLog(max_size=config.history_limit)

        self.keymap = config.keymap
        # Each field owns its bindings
        self.keybindings = config.keybindings.copy()

        self.caps_lock: bool = False

        # Key tracking
        self._last_held: frozenset[KeyId] = frozenset()
        self._suppressed: frozenset[KeyId] = frozenset()
        self._key_repeat = KeyRepeater()
        self._char_repeat = KeyRepeater()
        self._word_jump = Debounce(WORD_JUMP_DEBOUNCE)

    def _handle_change(self, text: str) -> None:
        if self.on_change:
            self.on_change(text)

    # -- accessors ---------------------------------------------------------

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def data(self) -> bytes:
        return self.buffer.data

    @property
    def cursor_position(self) -> int:
        return self.buffer.cursor_position

    @property
    def cursor_index(self) -> int:
        return self.buffer.cursor_index

    @property
    def selection(self) -> tuple[int, int] | None:
        return self.buffer.selection

    def get_text(self) -> str:
        return self.buffer.text

    def set_text(self, text: str) -> None:
        self.history.reset()
        self.buffer.set_text(text)

    # -- editing -----------------------------------------------------------

    def insert(self, text: str) -> bool:
        return self.buffer.insert(text)

    def delete_backward(self) -> bool:
        return self.buffer.delete_backward()

    def move_cursor(self, delta: int, extend_selection: bool = False) -> None:
        self.buffer.move_cursor(delta, extend_selection)

    def move_word(self, direction: int, extend_selection: bool = False) -> None:
        self.buffer.move_word(direction, extend_selection)

    def select(self, start: int, end: int) -> None:
        self.buffer.select(start, end)

    def select_all(self) -> None:
        self.buffer.select_all()

    def clear_selection(self) -> None:
        self.buffer.clear_selection()

    def cut(self) -> bool:
        return self.clipboard.cut(self.buffer)

    def copy(self) -> bool:
        return self.clipboard.copy(self.buffer)

    def paste(self) -> bool:
        return self.clipboard.paste(self.buffer)

    def undo(self) -> bool:
        return self.undo_engine.undo(self.buffer)

    def redo(self) -> bool:
        return self.undo_engine.redo(self.buffer)

    # -- submit / cancel / history -----------------------------------------

    def submit(self) -> None:
        """Record the text in history (if non-empty) and call ``on_enter``.

        The history index only returns to live edit when the text was
        actually recorded; an ignored repeat keeps the browsing position.
        """
        text = self.buffer.text
        if text:
            self.history.submit(text)
        logger.debug("submit: %d bytes", len(self.buffer))
        if self.on_enter:
            self.on_enter(text)

    def cancel(self) -> None:
        if self.on_escape:
            self.on_escape()

    def _load_history(self, entry: str) -> None:
        prefix = self.config.protected_prefix
        if prefix and not entry.startswith(prefix):
            entry = prefix + entry
        self.buffer.set_text(entry, kind="browse")

    def history_older(self) -> bool:
        entry = self.history.older()
        if entry is None:
            return False
        self._load_history(entry)
        return True

    def history_newer(self) -> bool:
        """Step toward live edit. Arriving there restores just the prefix."""
        entry = self.history.newer()
        if entry is None:
            return False
        self._load_history(entry)
        return True

    # -- per-tick dispatch -------------------------------------------------

    def reset_keys(self, current: KeyState | None = None) -> None:
        """Forget all key history.

        Keys held in *current* are ignored until released, so the key that
        opened the field does not also type into it.
        """
        held = current.held if current is not None else frozenset()
        self._last_held = held
        self._suppressed = held
        self._key_repeat.reset()
        self._char_repeat.reset()
        self._word_jump.reset()

    def update(self, keys: KeyState, now: float | None = None) -> bool:
        """Process one tick of key state. Returns True if the input was consumed."""
        if now is None:
            now = self._clock()

        self._suppressed &= keys.held
        held = keys.held - self._suppressed
        pressed = held - self._last_held
        self._last_held = held
        self._key_repeat.release_missing(held)
        self._char_repeat.release_missing(held)

        if Key.capslock in pressed:
            self.caps_lock = not self.caps_lock

        if keys.ctrl:
            # Character keys held with ctrl stay silent until released
            self._suppressed |= frozenset(k for k in held if k in self.keymap)
            if self._dispatch_shortcut(pressed, keys.shift, now):
                return True
        else:
            for key, delta in ((Key.left, -1), (Key.right, 1)):
                if key in held:
                    if self._key_repeat.poll(key, True, now, ARROW_REPEAT):
                        self.buffer.move_cursor(delta, extend_selection=keys.shift)
                    return True

        if Key.enter in pressed:
            self.submit()
            return True

        if Key.escape in pressed:
            self.cancel()
            return True

        if Key.up in pressed:
            self.history_older()
            return True
        if Key.down in pressed:
            self.history_newer()
            return True

        if not keys.ctrl:
            active = self._char_repeat.choose_active((k for k in held if k in self.keymap), pressed)
            if active is not None:
                if self._char_repeat.poll(active, True, now, CHARACTER_REPEAT):
                    char = resolve_character(self.keymap[active], shift=keys.shift, caps_lock=self.caps_lock)
                    self.buffer.insert(char)
                return True

        if Key.backspace in held:
            if self._key_repeat.poll(Key.backspace, True, now, BACKSPACE_REPEAT):
                self.buffer.delete_backward()
            return True

        return False

    def _dispatch_shortcut(self, pressed: frozenset[KeyId], shift: bool, now: float) -> bool:
        action = self.keybindings.first_match(pressed, SHORTCUT_ORDER)
        if action is not None:
            self._run_shortcut(action)
            return True

        action = self.keybindings.first_match(pressed, WORD_JUMPS)
        if action is not None:
            if self._word_jump.fire(now):
                self.buffer.move_word(WORD_JUMPS[action], extend_selection=shift)
            return True
        return False

    def _run_shortcut(self, action: LineAction) -> None:
        if action == "undo":
            self.undo()
        elif action == "redo":
            self.redo()
        elif action == "selectAll":
            self.select_all()
        elif action == "cut":
            self.cut()
        elif action == "copy":
            self.copy()
        elif action == "paste":
            self.paste()
