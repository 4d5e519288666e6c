"""Ctrl shortcuts of a line input, bound per field.

Each ``LineInputConfig`` builds its own ``LineKeybindings`` so rebinding
one field never changes another.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from typing import Literal

from tickline.keys import Key, KeyId

LineAction = Literal[
    "undo",
    "redo",
    "selectAll",
    "cut",
    "copy",
    "paste",
    "cursorWordLeft",
    "cursorWordRight",
]

Binding = KeyId | Iterable[KeyId]

# Keys are matched while ctrl is held.
DEFAULT_LINE_KEYBINDINGS: Mapping[LineAction, KeyId] = {
    "undo": "z",
    "redo": "y",
    "selectAll": "a",
    "cut": "x",
    "copy": "c",
    "paste": "v",
    "cursorWordLeft": Key.left,
    "cursorWordRight": Key.right,
}

# Checked in this order; the first match handles the tick.
SHORTCUT_ORDER: tuple[LineAction, ...] = ("undo", "redo", "selectAll", "cut", "copy", "paste")

WORD_JUMPS: Mapping[LineAction, int] = {"cursorWordLeft": -1, "cursorWordRight": 1}


def _as_keys(binding: Binding) -> tuple[KeyId, ...]:
    if isinstance(binding, str):
        return (binding,)
    return tuple(binding)


class LineKeybindings:
    """Action to key table for one field, defaults overlaid with overrides."""

    def __init__(self, overrides: Mapping[LineAction, Binding] | None = None) -> None:
        self._keys: dict[LineAction, tuple[KeyId, ...]] = {
            action: _as_keys(binding) for action, binding in DEFAULT_LINE_KEYBINDINGS.items()
        }
        if overrides:
            self.update(overrides)

    def update(self, overrides: Mapping[LineAction, Binding]) -> None:
        """Rebind the given actions. An empty binding disables the action."""
        for action, binding in overrides.items():
            self._keys[action] = _as_keys(binding)

    def keys_for(self, action: LineAction) -> tuple[KeyId, ...]:
        return self._keys.get(action, ())

    def matches(self, pressed: Collection[KeyId], action: LineAction) -> bool:
        """True when a key bound to *action* was pressed this tick."""
        return any(key in pressed for key in self.keys_for(action))

    def first_match(self, pressed: Collection[KeyId], actions: Iterable[LineAction]) -> LineAction | None:
        for action in actions:
            if self.matches(pressed, action):
                return action
        return None

    def copy(self) -> LineKeybindings:
        clone = LineKeybindings()
        clone._keys = dict(self._keys)
        return clone

    def __repr__(self) -> str:
        return f"LineKeybindings({self._keys!r})"
