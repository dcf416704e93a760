"""Byte-level helpers for UTF-8 text as it is laid out on the terminal."""

from __future__ import annotations

_LEAD_PATTERNS = (
    (0x80, 0x00, 1),
    (0xE0, 0xC0, 2),
    (0xF0, 0xE0, 3),
    (0xF8, 0xF0, 4),
    (0xFC, 0xF8, 5),
    (0xFE, 0xFC, 6),
)


def u8mb(byte: int) -> int:
    """Return how many bytes the UTF-8 sequence starting with ``byte`` spans.

    Bytes that cannot start a sequence count as a single byte.
    """
    value = byte & 0xFF
    for mask, pattern, length in _LEAD_PATTERNS:
        if value & mask == pattern:
            return length
    return 1


def utf8strlen(text: str | bytes) -> int:
    """Return the screen width of ``text``.

    Single-byte characters take one column, every multi-byte character
    takes two. Counting stops at the first NUL, as it would in a C string.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    data = data.split(b"\0", 1)[0]
    width = 0
    pos = 0
    while pos < len(data):
        size = u8mb(data[pos])
        width += 1 if size == 1 else 2
        pos += size
    return width