"""tickline: tick-driven single-line text editing engine."""

# Edit buffer
from tickline.buffer import EditBuffer, EditObserver

# Clipboard
from tickline.clipboard import Clipboard

# Configuration
from tickline.config import ConfigError, LineInputConfig

# Submission history
from tickline.history import MAX_HISTORY, HistoryLog

# Keybindings
from tickline.keybindings import (
    DEFAULT_LINE_KEYBINDINGS,
    SHORTCUT_ORDER,
    WORD_JUMPS,
    LineAction,
    LineKeybindings,
)

# Key tables and samples
from tickline.keymap import US_QWERTY, Keymap, resolve_character
from tickline.keys import NO_KEYS, Key, KeyId, KeyState

# The widget
from tickline.line_input import LineInput

# Terminal rendering
from tickline.render import render_line

# Key repeat
from tickline.repeat import (
    ARROW_REPEAT,
    BACKSPACE_REPEAT,
    CHARACTER_REPEAT,
    WORD_JUMP_DEBOUNCE,
    Debounce,
    KeyRepeater,
    RepeatProfile,
)

# Undo
from tickline.undo import UndoEngine, UndoSnapshot
from tickline.undo_stack import UndoStack

__all__ = [
    # Edit buffer
    "EditBuffer",
    "EditObserver",
    # Clipboard
    "Clipboard",
    # Configuration
    "ConfigError",
    "LineInputConfig",
    # History
    "HistoryLog",
    "MAX_HISTORY",
    # Keybindings
    "DEFAULT_LINE_KEYBINDINGS",
    "LineAction",
    "LineKeybindings",
    "SHORTCUT_ORDER",
    "WORD_JUMPS",
    # Keys
    "Key",
    "KeyId",
    "KeyState",
    "Keymap",
    "NO_KEYS",
    "US_QWERTY",
    "resolve_character",
    # Widget
    "LineInput",
    "render_line",
    # Key repeat
    "ARROW_REPEAT",
    "BACKSPACE_REPEAT",
    "CHARACTER_REPEAT",
    "WORD_JUMP_DEBOUNCE",
    "Debounce",
    "KeyRepeater",
    "RepeatProfile",
    # Undo
    "UndoEngine",
    "UndoSnapshot",
    "UndoStack",
]
