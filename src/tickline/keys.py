"""Key identifiers and per-tick key-state samples.

A host translates its platform key codes into the string identifiers
below and hands the widget one ``KeyState`` per tick: the set of keys
currently held plus the shift and ctrl modifier states. Press edges are
derived by the widget from consecutive samples.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------

KeyId = str

# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key constants."""

    # Editing and control keys
    escape = "escape"
    enter = "enter"
    backspace = "backspace"
    capslock = "capslock"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    # Modifiers (optional: hosts may report them through KeyState flags instead)
    left_shift = "lshift"
    right_shift = "rshift"
    left_ctrl = "lctrl"
    right_ctrl = "rctrl"

    # Character keys without a single-character name
    space = "space"
    minus = "minus"
    equal = "equal"
    left_bracket = "lbracket"
    right_bracket = "rbracket"
    backslash = "backslash"
    semicolon = "semicolon"
    apostrophe = "apostrophe"
    comma = "comma"
    period = "period"
    slash = "slash"
    backquote = "backquote"


SHIFT_KEYS: frozenset[KeyId] = frozenset({Key.left_shift, Key.right_shift})
CTRL_KEYS: frozenset[KeyId] = frozenset({Key.left_ctrl, Key.right_ctrl})


@dataclass(frozen=True)
class KeyState:
    """One tick's sample of the keyboard."""

    held: frozenset[KeyId] = field(default_factory=frozenset)
    shift: bool = False
    ctrl: bool = False

    @classmethod
    def of(cls, *keys: KeyId, shift: bool = False, ctrl: bool = False) -> KeyState:
        """Build a sample from held key identifiers.

        Shift/ctrl are also set when a left or right modifier key is among
        *keys*.
        """
        held = frozenset(keys)
        return cls(
            held=held,
            shift=shift or bool(held & SHIFT_KEYS),
            ctrl=ctrl or bool(held & CTRL_KEYS),
        )

    @classmethod
    def from_iterable(cls, keys: Iterable[KeyId], *, shift: bool = False, ctrl: bool = False) -> KeyState:
        return cls.of(*keys, shift=shift, ctrl=ctrl)

    def is_down(self, key: KeyId) -> bool:
        return key in self.held


NO_KEYS = KeyState()
