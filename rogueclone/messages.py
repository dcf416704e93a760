"""Loading of the numbered message catalog the game prints from."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable

CATALOG_SIZE = 507
MAX_MESSAGE_BYTES = 80 * 4 - 1
_LOWEST = 1
_HIGHEST = 499

_LEADING_NUMBER = re.compile(r"\s*([+-]?\d+)")


class MessageFormatError(ValueError):
    """A numbered line of the message file has no quoted text."""


@dataclass
class MessageCatalog:
    """Messages indexed by number; unset entries read as empty strings."""

    entries: dict[int, str] = field(default_factory=dict)

    def get(self, number: int) -> str:
        """Return message ``number``, or an empty string if it was never set."""
        if not 0 <= number < CATALOG_SIZE:
            raise IndexError(f"message number {number} out of range")
        return self.entries.get(number, "")


def _leading_int(line: str) -> int:
    match = _LEADING_NUMBER.match(line)
    return int(match.group(1)) if match else 0


def _truncate_bytes(text: str, limit: int) -> str:
    encoded = text.encode("utf-8")
    if len(encoded) <= limit:
        return text
    return encoded[:limit].decode("utf-8", errors="ignore")


def parse_messages(lines: Iterable[str]) -> MessageCatalog:
    """Build a catalog from lines of the form ``NUMBER "text"``.

    Lines whose leading number is not between 1 and 499 are ignored.
    A line with a valid number but without a pair of quotes raises
    :class:`MessageFormatError`.
    """
    catalog = MessageCatalog()
    for lineno, line in enumerate(lines, start=1):
        number = _leading_int(line)
        if not _LOWEST <= number <= _HIGHEST:
            continue
        start = line.find('"')
        if start < 0:
            raise MessageFormatError(f"line {lineno}: missing opening quote")
        end = line.find('"', start + 1)
        if end < 0:
            raise MessageFormatError(f"line {lineno}: missing closing quote")
        catalog.entries[number] = _truncate_bytes(
            line[start + 1:end], MAX_MESSAGE_BYTES
        )
    return catalog


def read_mesg(path: str | PathLike[str]) -> MessageCatalog:
    """Read the message file at ``path``.

    Raises :class:`OSError` if it cannot be opened and
    :class:`MessageFormatError` if it is malformed.
    """
    with open(path, encoding="utf-8") as handle:
        try:
            return parse_messages(handle)
        except MessageFormatError as exc:
            raise MessageFormatError(f"Illegal format '{path}': {exc}") from exc