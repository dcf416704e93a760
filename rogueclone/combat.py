"""Damage dice, hit chances and movement directions used in fights."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

ROGUE_LINES = 24
ROGUE_COLUMNS = 80
MIN_ROW = 1

_STRENGTH_LIMITS = (14, 17, 18, 20, 21, 30)
_STRENGTH_BONUS = (1, 3, 4, 5, 6, 7)
_TOP_STRENGTH_BONUS = 8


@dataclass
class Dice:
    """A source of random numbers for the game."""

    seed: int | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def get_rand(self, low: int, high: int) -> int:
        """Return a random integer between ``low`` and ``high`` inclusive."""
        if high < low:
            low, high = high, low
        return self._rng.randint(low, high)

    def rand_percent(self, percent: int) -> bool:
        """Return True with a chance of ``percent`` in a hundred."""
        return self.get_rand(1, 100) <= percent

    def coin_toss(self) -> bool:
        """Return True or False with equal chance."""
        return self.get_rand(0, 1) == 1


def get_number(text: str) -> int:
    """Return the value of the decimal digits at the start of ``text``."""
    total = 0
    for ch in text:
        if not "0" <= ch <= "9":
            break
        total = total * 10 + (ord(ch) - ord("0"))
    return total


def get_damage(spec: str, dice: Dice | None = None, randomize: bool = True) -> int:
    """Roll a damage specification such as ``"3d3/2d5"``.

    Without ``randomize`` every die counts its highest face. A part
    without a ``d`` raises :class:`ValueError`.
    """
    if randomize and dice is None:
        raise ValueError("a Dice is needed to roll damage")
    total = 0
    if not spec:
        return 0
    for part in spec.split("/"):
        if "d" not in part:
            raise ValueError(f"malformed damage specification {spec!r}")
        count = get_number(part)
        faces = get_number(part[part.index("d") + 1:])
        for _ in range(count):
            total += dice.get_rand(1, faces) if randomize else faces
    return total


def weapon_damage(
    damage: str | None, hit_enchant: int, d_enchant: int, dice: Dice
) -> int:
    """Roll a weapon's damage with its enchantments added to its dice.

    Returns -1 when there is no weapon.
    """
    if damage is None:
        return -1
    if "d" not in damage:
        raise ValueError(f"malformed damage specification {damage!r}")
    count = get_number(damage) + hit_enchant
    faces = get_number(damage[damage.index("d") + 1:]) + d_enchant
    return get_damage(f"{count}d{faces}", dice, True)


def to_hit(damage: str | None, hit_enchant: int) -> int:
    """Return the to-hit value of a weapon, or 1 when there is none."""
    if damage is None:
        return 1
    return get_number(damage) + hit_enchant


def damage_for_strength(strength: int) -> int:
    """Return the damage bonus that a given strength brings."""
    if strength <= 6:
        return strength - 5
    for limit, bonus in zip(_STRENGTH_LIMITS, _STRENGTH_BONUS):
        if strength <= limit:
            return bonus
    return _TOP_STRENGTH_BONUS


def hit_chance(weapon_to_hit: int, exp: int, ring_exp: int, r_rings: int) -> int:
    """Return the rogue's percent chance to hit with a weapon."""
    chance = 40 + 3 * weapon_to_hit
    chance += (2 * exp + 2 * ring_exp) - r_rings
    return chance


def _trunc_half(value: int) -> int:
    return int(value / 2)


def weapon_damage_total(
    base_damage: int, strength: int, exp: int, ring_exp: int, r_rings: int
) -> int:
    """Add strength and experience bonuses to a rolled weapon damage."""
    damage = base_damage + damage_for_strength(strength)
    damage += _trunc_half(((exp + ring_exp) - r_rings) + 1)
    return damage


def get_dir_rc(
    direction: str | int,
    row: int,
    col: int,
    allow_off_screen: bool = False,
    lines: int = ROGUE_LINES,
    columns: int = ROGUE_COLUMNS,
    min_row: int = MIN_ROW,
) -> tuple[int, int]:
    """Return the position one step from ``(row, col)`` in ``direction``.

    Directions are the keys ``hjklyubn``. Unless ``allow_off_screen`` is
    set, a step that would leave the map leaves the position unchanged.
    """
    key = chr(direction) if isinstance(direction, int) else direction
    free = allow_off_screen
    can_left = free or col > 0
    can_right = free or col < columns - 1
    can_up = free or row > min_row
    can_down = free or row < lines - 2
    if key == "h":
        if can_left:
            col -= 1
    elif key == "j":
        if can_down:
            row += 1
    elif key == "k":
        if can_up:
            row -= 1
    elif key == "l":
        if can_right:
            col += 1
    elif key == "y":
        if free or (row > min_row and col > 0):
            row, col = row - 1, col - 1
    elif key == "u":
        if free or (row > min_row and col < columns - 1):
            row, col = row - 1, col + 1
    elif key == "n":
        if free or (row < lines - 2 and col < columns - 1):
            row, col = row + 1, col + 1
    elif key == "b":
        if free or (row < lines - 2 and col > 0):
            row, col = row + 1, col - 1
    return row, col