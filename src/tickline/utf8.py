"""UTF-8 character boundary helpers.

The edit buffer stores its text as UTF-8 bytes and measures every offset in
bytes. These helpers find the character boundaries around an offset from the
lead-byte class alone, so cursor and deletion never split a multi-byte
character. They never raise: an out-of-range offset yields "no character" and
a malformed sequence is treated as one byte.
"""

from __future__ import annotations


def char_length(lead: int) -> int:
    """Return the encoded length implied by a lead byte (1-4)."""
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def is_continuation(byte: int) -> bool:
    return 0x80 <= byte < 0xC0


def next_char(data: bytes, pos: int) -> bytes | None:
    """Return the bytes of the character starting at *pos*, or None."""
    if pos < 0 or pos >= len(data):
        return None
    return data[pos : pos + char_length(data[pos])]


def prev_char_length(data: bytes, pos: int) -> int:
    """Return the byte length of the character ending right before *pos*.

    Scans at most 4 bytes backward for a lead byte. Returns 0 when there is
    no character before *pos* and 1 for a malformed sequence.
    """
    if pos <= 0 or pos > len(data):
        return 0
    if not is_continuation(data[pos - 1]):
        return 1
    for length in (2, 3, 4):
        if pos - length < 0:
            break
        byte = data[pos - length]
        if is_continuation(byte):
            continue
        return length if char_length(byte) == length else 1
    return 1


def next_boundary(data: bytes, pos: int) -> int:
    """Offset of the boundary after the character at *pos*."""
    char = next_char(data, pos)
    if char is None:
        return max(0, min(pos, len(data)))
    return pos + len(char)


def prev_boundary(data: bytes, pos: int) -> int:
    """Offset of the boundary before the character ending at *pos*."""
    pos = max(0, min(pos, len(data)))
    return pos - prev_char_length(data, pos)


def truncate(data: bytes, limit: int) -> bytes:
    """Cut *data* to at most *limit* bytes without splitting a character."""
    if len(data) <= limit:
        return data
    end = max(0, limit)
    # Back off while the first dropped byte would leave a partial character.
    while 0 < end < len(data) and is_continuation(data[end]):
        end -= 1
    return data[:end]


def decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")
