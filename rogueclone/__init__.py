"""Combat, item, message, option and screen-text rules for a Rogue-style game."""

__version__ = "6.0.0"

__all__ = [
    "combat",
    "interface",
    "items",
    "machdep",
    "messages",
    "options",
    "textutil",
]