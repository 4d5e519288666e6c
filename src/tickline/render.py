"""Terminal rendering of a line input: one line with horizontal scrolling.

The visible window is measured in terminal columns over grapheme clusters,
so wide characters (CJK, emoji) scroll and pad correctly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import grapheme

from tickline.utf8 import decode
from tickline.utils import grapheme_width, visible_width

if TYPE_CHECKING:
    from tickline.line_input import LineInput

CURSOR_ON = "\x1b[7m"
CURSOR_OFF = "\x1b[27m"
SELECT_ON = "\x1b[4m"
SELECT_OFF = "\x1b[24m"


def _clusters(text: str) -> tuple[list[str], list[int]]:
    """Grapheme clusters of *text* and the character index each starts at."""
    clusters = list(grapheme.graphemes(text))
    starts: list[int] = []
    index = 0
    for cluster in clusters:
        starts.append(index)
        index += len(cluster)
    return clusters, starts


def _cursor_cluster(starts: list[int], clusters: list[str], cursor: int) -> int:
    """Index of the cluster holding character index *cursor*; len(clusters) at the end."""
    for i, start in enumerate(starts):
        if cursor < start + len(clusters[i]):
            return i
    return len(clusters)


def _window(widths: list[int], cursor: int, available: int) -> tuple[int, int, int]:
    """First and past-the-last visible cluster plus the columns they use.

    The cursor cell is always included. Up to half the width goes to text
    left of the cursor, then text to the right, then any leftover to the left.
    """
    count = len(widths)
    cursor_width = widths[cursor] if cursor < count else 1
    used = cursor_width
    start = cursor
    end = min(cursor + 1, count)

    half = available // 2
    while start > 0 and used - cursor_width + widths[start - 1] <= half and used + widths[start - 1] <= available:
        start -= 1
        used += widths[start]
    while end < count and used + widths[end] <= available:
        used += widths[end]
        end += 1
    while start > 0 and used + widths[start - 1] <= available:
        start -= 1
        used += widths[start]
    return start, end, used


def selection_indices(field: LineInput) -> tuple[int, int] | None:
    """The selection as character indices into ``field.text``."""
    span = field.selection
    if span is None or span[0] >= span[1]:
        return None
    data = field.data
    start = len(decode(data[: span[0]]))
    return start, start + len(decode(data[span[0] : span[1]]))


def render_line(field: LineInput, width: int, prompt: str = "> ") -> str:
    """Render *field* as a single line exactly *width* columns wide."""
    available = width - visible_width(prompt)
    if available <= 0:
        return prompt

    clusters, starts = _clusters(field.text)
    widths = [grapheme_width(c) for c in clusters]
    cursor = _cursor_cluster(starts, clusters, field.cursor_index)
    if cursor < len(clusters) and widths[cursor] > available:
        # The character under the cursor does not fit; show a blank cursor cell
        return prompt + CURSOR_ON + " " * available + CURSOR_OFF
    start, end, used = _window(widths, cursor, available)
    selected = selection_indices(field)

    parts: list[str] = []
    for i in range(start, end):
        cluster = clusters[i]
        if i == cursor:
            parts.append(f"{CURSOR_ON}{cluster}{CURSOR_OFF}")
        elif selected is not None and selected[0] <= starts[i] < selected[1]:
            parts.append(f"{SELECT_ON}{cluster}{SELECT_OFF}")
        else:
            parts.append(cluster)
    if cursor == len(clusters):
        parts.append(f"{CURSOR_ON} {CURSOR_OFF}")

    padding = " " * max(0, available - used)
    return prompt + "".join(parts) + padding
