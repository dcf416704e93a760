"""Command-line and ROGUEOPT environment option handling."""

from __future__ import annotations

import getopt
import os
import string
import sys
from dataclasses import dataclass, replace
from typing import Mapping, Sequence

from .textutil import utf8strlen

MAX_VALUE_LENGTH = 30
USAGE = "usage: rogue message_file [options...] [save_file]"

_ENV_SUFFIXES = "S123456789"
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class UsageError(Exception):
    """The command line does not match the expected usage."""

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


@dataclass
class GameOptions:
    """Settings that the ROGUEOPT variables can change."""

    ask_quit: bool = True
    jump: bool = False
    pass_go: bool = True
    show_skull: bool = True
    use_color: bool = True
    fruit: str = "slime-mold "
    save_file: str | None = None
    nick_name: str = ""
    game_dir: str = ""
    color_str: str = "cbmyg"


@dataclass(frozen=True)
class CommandLine:
    """What the command line asked for."""

    message_file: str
    restore_file: str | None = None
    score_only: bool = False
    do_restore: bool = False


@dataclass(frozen=True)
class _Option:
    name: str
    field: str
    is_flag: bool
    add_blank: bool = False
    no_colon: bool = False


_OPTIONS = (
    _Option("askquit", "ask_quit", True),
    _Option("jump", "jump", True),
    _Option("passgo", "pass_go", True),
    _Option("tombstone", "show_skull", True),
    _Option("color", "use_color", True),
    _Option("fruit", "fruit", False, add_blank=True),
    _Option("file", "save_file", False),
    _Option("name", "nick_name", False, no_colon=True),
    _Option("directory", "game_dir", False),
    _Option("map", "color_str", False),
)


def collect_option_text(environ: Mapping[str, str] | None = None) -> str:
    """Join ROGUEOPTS and ROGUEOPT1..ROGUEOPT9, each preceded by a comma."""
    env = os.environ if environ is None else environ
    return "".join(
        "," + env[f"ROGUEOPT{suffix}"]
        for suffix in _ENV_SUFFIXES
        if f"ROGUEOPT{suffix}" in env
    )


def _truncate_bytes(text: str, limit: int) -> str:
    encoded = text.encode("utf-8")
    if len(encoded) <= limit:
        return text
    return encoded[:limit].decode("utf-8", errors="ignore")


def env_get_value(value: str, add_blank: bool, no_colon: bool) -> str:
    """Extract an option value, ending at the next comma.

    The value is limited to 30 bytes; with ``no_colon`` colons become
    semicolons, and with ``add_blank`` a trailing space is appended.
    """
    text = value.split(",", 1)[0]
    text = _truncate_bytes(text, MAX_VALUE_LENGTH)
    if no_colon:
        text = text.replace(":", ";")
    return text + " " if add_blank else text


def _matches(option_name: str, given: str) -> bool:
    width = utf8strlen(given)
    return option_name.encode("utf-8")[:width] == given.encode("utf-8")[:width]


def parse_options(text: str, options: GameOptions | None = None) -> GameOptions:
    """Apply comma-separated option text to ``options`` and return the result.

    Names may be abbreviated and are case-insensitive; a ``no`` or ``NO``
    prefix turns a flag off; string options take ``=value`` or ``:value``.
    The given options object is left unchanged.
    """
    base = GameOptions() if options is None else options
    changes: dict[str, object] = {}
    for piece in text.split(","):
        piece = piece.lstrip(" ")
        if not piece:
            continue
        negated = piece.startswith(("no", "NO"))
        if negated:
            piece = piece[2:]
        cut = min((i for i in (piece.find("="), piece.find(":")) if i >= 0),
                  default=-1)
        name = (piece if cut < 0 else piece[:cut]).translate(_LOWER)
        for option in _OPTIONS:
            if not _matches(option.name, name):
                continue
            if option.is_flag:
                changes[option.field] = not negated
            elif cut >= 0:
                changes[option.field] = env_get_value(
                    piece[cut + 1:], option.add_blank, option.no_colon
                )
    return replace(base, **changes)


def parse_args(argv: Sequence[str] | None = None) -> CommandLine:
    """Parse ``message_file [-s] [-r] [save_file]`` (program name excluded)."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        flags, positional = getopt.gnu_getopt(args, "sr")
    except getopt.GetoptError as exc:
        raise UsageError() from exc
    if not 1 <= len(positional) <= 2:
        raise UsageError()
    given = {flag for flag, _ in flags}
    return CommandLine(
        message_file=positional[0],
        restore_file=positional[1] if len(positional) == 2 else None,
        score_only="-s" in given,
        do_restore="-r" in given,
    )