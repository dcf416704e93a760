"""Message line, status line and line-editing logic of the game screen."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Callable, Iterable

from .textutil import utf8strlen

CANCEL = "\033"
BACKSPACE = "\b"
MAX_TITLE_LENGTH = 30
ROGUE_COLUMNS = 80
SCREEN_FILE = "rogue.screen"

MAX_GOLD = 999999
MAX_HP = 999
MAX_STRENGTH = 99

_LABELS = {
    "level": (0, "Level: ", 7),
    "gold": (10, "Gold: ", 16),
    "hp": (23, "Hp: ", 27),
    "strength": (36, "Str: ", 41),
    "armor": (48, "Arm: ", 53),
    "exp": (56, "Exp: ", 61),
}
_HUNGER_COL = 73


def _char(ch: str | int) -> str:
    return chr(ch) if isinstance(ch, int) else ch


def r_index(text: str, ch: str | int, last: bool) -> int:
    """Return the first (or last) position of ``ch`` in ``text``, or -1."""
    target = _char(ch)
    return text.rfind(target) if last else text.find(target)


def is_digit(ch: str | int) -> bool:
    """True for the ASCII digits 0 to 9."""
    c = _char(ch)
    return len(c) == 1 and "0" <= c <= "9"


def pad_count(text: str, width: int) -> int:
    """Return how many blanks follow ``text`` to fill ``width`` columns."""
    return max(0, width - utf8strlen(text))


@dataclass
class Stats:
    """The values shown on the bottom status line."""

    level: int = 1
    gold: int = 0
    hp_current: int = 12
    hp_max: int = 12
    str_current: int = 16
    str_max: int = 16
    add_strength: int = 0
    armor_class: int = 0
    exp: int = 1
    exp_points: int = 0
    hunger: str = ""


def format_stats(stats: Stats) -> str:
    """Lay out the status line with every field at its fixed column.

    Gold, hit points and strength are clamped to their maxima first.
    """
    gold = min(stats.gold, MAX_GOLD)
    hp_current, hp_max = stats.hp_current, stats.hp_max
    if hp_max > MAX_HP:
        hp_current -= hp_max - MAX_HP
        hp_max = MAX_HP
    str_current, str_max = stats.str_current, stats.str_max
    if str_max > MAX_STRENGTH:
        str_current -= str_max - MAX_STRENGTH
        str_max = MAX_STRENGTH
    values = {
        "level": str(stats.level),
        "gold": str(gold),
        "hp": f"{hp_current}({hp_max})",
        "strength": f"{str_current + stats.add_strength}({str_max})",
        "armor": str(stats.armor_class),
        "exp": f"{stats.exp}/{stats.exp_points}",
    }
    line = [" "] * ROGUE_COLUMNS

    def place(col: int, text: str) -> None:
        end = col + len(text)
        if end > len(line):
            line.extend(" " * (end - len(line)))
        line[col:end] = list(text)

    for key, (label_col, label, value_col) in _LABELS.items():
        place(label_col, label)
        place(value_col, values[key])
    place(_HUNGER_COL, stats.hunger)
    return "".join(line).rstrip(" ")


@dataclass(frozen=True)
class InputResult:
    """Outcome of editing a line: the text, empty if nothing was entered."""

    text: str
    cancelled: bool = False

    @property
    def accepted(self) -> bool:
        """True when the user confirmed a non-empty line."""
        return not self.cancelled and bool(self.text)


def edit_line(keys: Iterable[str | int], insert: str, add_blank: bool) -> InputResult:
    """Apply keystrokes to a line that starts as ``insert``.

    Printable ASCII is appended (leading blanks are dropped), backspace
    removes the last character, and return, newline or escape finish the
    line. Running out of keys finishes it as return would.
    """
    buf = list(insert)
    last = ""
    for key in keys:
        ch = _char(key)
        last = ch
        if ch in ("\r", "\n", CANCEL):
            break
        if " " <= ch <= "~" and len(buf) < MAX_TITLE_LENGTH - 2:
            if ch != " " or buf:
                buf.append(ch)
        if ch == BACKSPACE and buf:
            buf.pop()
    text = "".join(buf)
    text = text + " " if add_blank else text.rstrip(" ")
    cancelled = last == CANCEL
    if cancelled or not text or (add_blank and text == " "):
        return InputResult("", cancelled)
    return InputResult(text)


def _ignore(_: str) -> None:
    return None


@dataclass
class MessageLine:
    """The top message line, which holds one message until acknowledged.

    When a new message arrives while the previous one is still shown,
    ``acknowledge`` is called with the old line followed by the more prompt.
    """

    acknowledge: Callable[[str], None] = _ignore
    more_prompt: str = "--More--"
    interactive: bool = True
    text: str = ""
    col: int = 0
    cleared: bool = field(default=True)

    def show(self, msg: str) -> bool:
        """Display ``msg``; return False if the game is not interactive."""
        if not self.interactive:
            return False
        if not self.cleared:
            self.acknowledge(self.text + self.more_prompt)
            self.clear()
        self.text = msg
        self.col = utf8strlen(msg)
        self.cleared = False
        return True

    def clear(self) -> bool:
        """Erase the line; return False if it was already clear."""
        if self.cleared:
            return False
        self.cleared = True
        return True


def save_screen(lines: Iterable[str], path: str | PathLike[str] = SCREEN_FILE) -> None:
    """Write screen rows to ``path`` without trailing blanks.

    A row made only of blanks keeps its first blank.
    """
    with open(path, "w", encoding="utf-8") as handle:
        for row in lines:
            stripped = row.rstrip(" ")
            if not stripped and row:
                stripped = row[0]
            handle.write(stripped + "\n")