"""Key-to-character tables.

A keymap maps a key identifier to its ``(unshifted, shifted)`` characters.
Layouts are host configuration; ``US_QWERTY`` is provided as a default.
"""

from __future__ import annotations

import string

from tickline.keys import Key, KeyId

Keymap = dict[KeyId, tuple[str, str]]

_DIGITS_SHIFTED = ")!@#$%^&*("

US_QWERTY: Keymap = {
    # Numbers
    **{d: (d, _DIGITS_SHIFTED[int(d)]) for d in string.digits},
    # Letters
    **{c: (c, c.upper()) for c in string.ascii_lowercase},
    # Special characters
    Key.space: (" ", " "),
    Key.minus: ("-", "_"),
    Key.equal: ("=", "+"),
    Key.left_bracket: ("[", "{"),
    Key.right_bracket: ("]", "}"),
    Key.backslash: ("\\", "|"),
    Key.semicolon: (";", ":"),
    Key.apostrophe: ("'", '"'),
    Key.comma: (",", "<"),
    Key.period: (".", ">"),
    Key.slash: ("/", "?"),
    Key.backquote: ("`", "~"),
}


def resolve_character(entry: tuple[str, str], *, shift: bool, caps_lock: bool) -> str:
    """Pick the character a key produces under the current modifiers.

    Alphabetic keys are upper case iff caps lock XOR shift. Other keys give
    their shifted symbol iff shift is held; caps lock does not affect them.
    """
    normal, shifted = entry
    if normal.isalpha():
        return shifted if caps_lock != shift else normal
    return shifted if shift else normal
