"""Text utilities: character classification and terminal width measurement."""

from __future__ import annotations

import re
import unicodedata

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Character classification
# ---------------------------------------------------------------------------

# ASCII punctuation, underscore included
_PUNCTUATION_REGEX = re.compile(r"[(){}\[\]<>.,;:'\"!?\+\-=*/\\|&%\^$#@~`_]")

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*[mGKHJ]")


def is_whitespace_char(char: str) -> bool:
    """Return ``True`` if *char* is a whitespace character."""
    return char in (" ", "\t", "\n", "\r", "\f", "\v")


def is_punctuation_char(char: str) -> bool:
    """Return ``True`` if *char* is a punctuation character."""
    if not char:
        return False
    if _PUNCTUATION_REGEX.match(char):
        return True
    return unicodedata.category(char[0]).startswith("P")


def is_control_char(char: str) -> bool:
    return bool(char) and unicodedata.category(char[0]) == "Cc"


def is_word_boundary(char: str | None) -> bool:
    """Return ``True`` if *char* ends a word for undo grouping.

    Whitespace, punctuation, control characters and "no character" all
    count as boundaries.
    """
    if not char:
        return True
    return is_whitespace_char(char) or is_punctuation_char(char) or is_control_char(char)


def trailing_word(text: str) -> str:
    """Return the run of non-whitespace characters at the end of *text*."""
    end = len(text)
    start = end
    while start > 0 and not text[start - 1].isspace():
        start -= 1
    return text[start:end]


# ---------------------------------------------------------------------------
# Width measurement
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster."""
    if not g:
        return 0
    cp = ord(g[0])
    if cp < 0x20 or (0x7F <= cp <= 0x9F):
        return 0
    # ZWJ sequences and emoji presentation selectors render double width
    if len(g) > 1 and ("\u200d" in g or "\ufe0f" in g):
        return 2
    return max(_wcwidth.wcwidth(g[0]), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*, ignoring SGR codes."""
    if not text:
        return 0
    stripped = _ANSI_RE.sub("", text)
    if not stripped:
        return 0
    if stripped.isascii() and stripped.isprintable():
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    width = sum(grapheme_width(g) for g in grapheme.graphemes(stripped))
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[stripped] = width
    return width
