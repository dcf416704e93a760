"""Operating-system services: time stamps, files, user names and seeds."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from os import PathLike
from typing import Mapping

DEFAULT_FIGHTER = "A FIGHTER"
_YEAR_BASE = 1900


@dataclass(frozen=True, order=True)
class RogueTime:
    """A local time stamp; ``year`` counts years since 1900."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @classmethod
    def _from_struct(cls, t: time.struct_time) -> "RogueTime":
        return cls(
            t.tm_year - _YEAR_BASE, t.tm_mon, t.tm_mday, t.tm_hour, t.tm_min, t.tm_sec
        )

    @classmethod
    def now(cls) -> "RogueTime":
        """Return the current local time."""
        return cls._from_struct(time.localtime())

    @classmethod
    def of_file(cls, path: str | PathLike[str]) -> "RogueTime":
        """Return the local time at which ``path`` was last modified."""
        return cls._from_struct(time.localtime(os.stat(path).st_mtime))


def login_name(environ: Mapping[str, str] | None = None) -> str:
    """Return the player's name: FIGHTER, the login name, USER, or a default."""
    env = os.environ if environ is None else environ
    name = env.get("FIGHTER")
    if name is not None:
        return name
    try:
        name = os.getlogin()
    except OSError:
        name = None
    if name:
        return name
    name = env.get("USER")
    if name is not None:
        return name
    return DEFAULT_FIGHTER


def home_directory(environ: Mapping[str, str] | None = None) -> str:
    """Return HOME, or the current directory when it is not set."""
    env = os.environ if environ is None else environ
    home = env.get("HOME")
    return home if home is not None else os.getcwd()


def file_id(path: str | PathLike[str]) -> int:
    """Return the inode number of ``path``, or -1 if it cannot be read."""
    try:
        return os.stat(path).st_ino
    except OSError:
        return -1


def link_count(path: str | PathLike[str]) -> int:
    """Return the number of hard links to ``path``."""
    return os.stat(path).st_nlink


def delete_file(path: str | PathLike[str]) -> bool:
    """Delete ``path``; return True on success."""
    try:
        os.unlink(path)
    except OSError:
        return False
    return True


def seed() -> int:
    """Return a seed for the random number generator from the clock."""
    return int(time.time())