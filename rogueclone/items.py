"""Item identities, randomised appearances and inventory descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Mapping

from .combat import Dice
from .messages import MessageCatalog

SCROLS = 12
POTIONS = 14
WANDS = 10
RINGS = 11
WEAPONS = 8
ARMORS = 7
MAX_METAL = 14

RATION = 0
ADD_STRENGTH = 4
DEXTERITY = 6

BEING_WIELDED = 0o1
BEING_WORN = 0o2
ON_LEFT_HAND = 0o4
ON_RIGHT_HAND = 0o10

_MSG_AMULET = 27
_MSG_GOLD = 28
_MSG_RATIONS = 30
_MSG_ENTITLED = 33
_MSG_CALLED = 34
_MSG_WIELDED = 35
_MSG_WORN = 36
_MSG_LEFT_HAND = 37
_RIGHT_HAND_TEXT = "(on right hand)"

_WAND_MATERIALS = range(410, 440)
_GEMS = range(440, 454)
_SYLLABLES = range(454, 494)

_VOWELS = "aeiou"
_FULL_DIGITS = "０１２３４５６７８９"
_FULL_PLUS = "＋"
_FULL_MINUS = "−"


class IdStatus(IntEnum):
    """How much the player knows about a kind of item."""

    UNIDENTIFIED = 0
    IDENTIFIED = 1
    CALLED = 2


class ItemKind(IntFlag):
    """The broad class of an item; values can be combined into masks."""

    ARMOR = 0o1
    WEAPON = 0o2
    SCROL = 0o4
    POTION = 0o10
    GOLD = 0o20
    FOOD = 0o40
    WAND = 0o100
    RING = 0o200
    AMULET = 0o400


@dataclass
class IdEntry:
    """What one kind of item looks like and what it really is."""

    title: str = ""
    real: str = ""
    status: IdStatus = IdStatus.UNIDENTIFIED


@dataclass
class Item:
    """An object the rogue can carry.

    ``name`` is the generic name of the item ("scroll ", "mace", ...);
    ``klass`` holds a ring's bonus or a wand's charges; ``armor_class``
    is the protection an armor gives; ``in_use`` holds the BEING_* and
    ON_*_HAND bits.
    """

    kind: ItemKind
    which_kind: int = 0
    quantity: int = 1
    name: str = ""
    identified: bool = False
    hit_enchant: int = 0
    d_enchant: int = 0
    klass: int = 0
    armor_class: int = 0
    in_use: int = 0
    is_protected: bool = False


def znum(n: int, plus: bool = False) -> str:
    """Write ``n`` in full-width digits, with a full-width plus if asked."""
    text = _FULL_PLUS if plus and n >= 0 else ""
    for ch in str(n):
        text += _FULL_MINUS if ch == "-" else _FULL_DIGITS[int(ch)]
    return text


def _entries(count: int) -> list[IdEntry]:
    return [IdEntry() for _ in range(count)]


def _signed(n: int, plus_on_zero: bool = True) -> str:
    if n > 0 or (plus_on_zero and n == 0):
        return f"+{n}"
    return str(n)


def _printf(fmt: str, *args: object) -> str:
    try:
        return fmt % args
    except (TypeError, ValueError):
        return fmt


@dataclass
class Catalog:
    """The identification tables of one game and how items are described.

    Material, gem and syllable lists left empty are taken from the
    message catalog.
    """

    dice: Dice = field(default_factory=Dice)
    messages: MessageCatalog | Mapping[int, str] = field(default_factory=dict)
    potion_colors: list[str] = field(default_factory=list)
    wand_materials: list[str] = field(default_factory=list)
    gems: list[str] = field(default_factory=list)
    syllables: list[str] = field(default_factory=list)
    scrolls: list[IdEntry] = field(default_factory=lambda: _entries(SCROLS))
    potions: list[IdEntry] = field(default_factory=lambda: _entries(POTIONS))
    wands: list[IdEntry] = field(default_factory=lambda: _entries(WANDS))
    rings: list[IdEntry] = field(default_factory=lambda: _entries(RINGS))
    weapons: list[IdEntry] = field(default_factory=lambda: _entries(WEAPONS))
    armors: list[IdEntry] = field(default_factory=lambda: _entries(ARMORS))
    is_wood: list[bool] = field(init=False)

    def __post_init__(self) -> None:
        if not self.wand_materials:
            self.wand_materials = [self._msg(n) for n in _WAND_MATERIALS]
        if not self.gems:
            self.gems = [self._msg(n) for n in _GEMS]
        if not self.syllables:
            self.syllables = [self._msg(n) for n in _SYLLABLES]
        self.is_wood = [False] * len(self.wands)

    def _msg(self, number: int) -> str:
        if isinstance(self.messages, MessageCatalog):
            return self.messages.get(number)
        return self.messages.get(number, "")

    def _table(self, kind: ItemKind) -> list[IdEntry]:
        tables = {
            ItemKind.SCROL: self.scrolls,
            ItemKind.POTION: self.potions,
            ItemKind.WAND: self.wands,
            ItemKind.RING: self.rings,
            ItemKind.WEAPON: self.weapons,
            ItemKind.ARMOR: self.armors,
        }
        try:
            return tables[kind]
        except KeyError:
            raise ValueError(f"{kind!r} has no identification table") from None

    def mix_colors(self) -> None:
        """Give every potion kind a colour, shuffled at random."""
        count = len(self.potions)
        if len(self.potion_colors) < count:
            raise ValueError("not enough potion colours")
        titles = list(self.potion_colors[:count])
        for i in range(count):
            j = self.dice.get_rand(i, count - 1)
            titles[i], titles[j] = titles[j], titles[i]
        for entry, title in zip(self.potions, titles):
            entry.title = title

    def make_scroll_titles(self) -> None:
        """Give every scroll kind a quoted title of two to five syllables."""
        if len(self.syllables) < 2:
            raise ValueError("not enough syllables")
        top = len(self.syllables) - 1
        for entry in self.scrolls:
            count = self.dice.get_rand(2, 5)
            title = "'" + "".join(
                self.syllables[self.dice.get_rand(1, top)] for _ in range(count)
            )
            entry.title = title[:-1] + "' "

    def assign_materials(self) -> None:
        """Pick a distinct material for each wand and a distinct gem for each ring."""
        if len(self.wand_materials) < len(self.wands):
            raise ValueError("not enough wand materials")
        if len(self.gems) < len(self.rings):
            raise ValueError("not enough gems")
        used: set[int] = set()
        self.is_wood = []
        for entry in self.wands:
            while True:
                j = self.dice.get_rand(0, len(self.wand_materials) - 1)
                if j not in used:
                    break
            used.add(j)
            entry.title = self.wand_materials[j]
            self.is_wood.append(j > MAX_METAL)
        used.clear()
        for entry in self.rings:
            while True:
                j = self.dice.get_rand(0, len(self.gems) - 1)
                if j not in used:
                    break
            used.add(j)
            entry.title = self.gems[j]

    def describe(self, item: Item, capitalized: bool = False, wizard: bool = False) -> str:
        """Return the inventory description of ``item``."""
        article = "A " if capitalized else "a "
        if item.kind == ItemKind.AMULET:
            desc = self._msg(_MSG_AMULET)
            if not capitalized and desc:
                desc = "t" + desc[1:]
            return desc
        name = item.name
        if item.kind == ItemKind.GOLD:
            return _printf(self._msg(_MSG_GOLD), item.quantity)

        desc = ""
        if item.kind != ItemKind.ARMOR:
            desc = article if item.quantity == 1 else f"{item.quantity} "
        if item.kind == ItemKind.FOOD:
            if item.which_kind == RATION:
                if item.quantity > 1:
                    desc = _printf(self._msg(_MSG_RATIONS), item.quantity)
                else:
                    desc = "Some " if capitalized else "some "
            else:
                desc = article
            desc += name
        else:
            desc = self._describe_known(item, desc, wizard)
        return self._finish(item, desc, article)

    def _describe_known(self, item: Item, desc: str, wizard: bool) -> str:
        table = self._table(item.kind)
        entry = table[item.which_kind]
        kind = item.kind
        if wizard:
            mode = IdStatus.IDENTIFIED
        elif kind & (ItemKind.WEAPON | ItemKind.ARMOR | ItemKind.WAND | ItemKind.RING):
            mode = None
        else:
            mode = None if entry.status == IdStatus.UNIDENTIFIED else entry.status

        if mode is None:
            if kind == ItemKind.SCROL:
                return desc + name_of(item) + self._msg(_MSG_ENTITLED) + entry.title
            if kind == ItemKind.POTION:
                return desc + entry.title + name_of(item)
            if kind in (ItemKind.WAND, ItemKind.RING):
                if item.identified or entry.status == IdStatus.IDENTIFIED:
                    mode = IdStatus.IDENTIFIED
                elif entry.status == IdStatus.CALLED:
                    mode = IdStatus.CALLED
                else:
                    return desc + entry.title + name_of(item)
            elif kind == ItemKind.ARMOR:
                if not item.identified:
                    return entry.title
                mode = IdStatus.IDENTIFIED
            elif kind == ItemKind.WEAPON:
                if not item.identified:
                    return desc + name_of(item)
                mode = IdStatus.IDENTIFIED
            else:
                return desc

        if mode == IdStatus.CALLED:
            if kind in (ItemKind.SCROL, ItemKind.POTION, ItemKind.WAND, ItemKind.RING):
                desc += name_of(item) + self._msg(_MSG_CALLED) + entry.title
            return desc

        if kind in (ItemKind.SCROL, ItemKind.POTION):
            desc += name_of(item) + entry.real
        elif kind == ItemKind.RING:
            if (wizard or item.identified) and item.which_kind in (
                DEXTERITY,
                ADD_STRENGTH,
            ):
                desc += f"{_signed(item.klass, plus_on_zero=False)} "
            desc += name_of(item) + entry.real
        elif kind == ItemKind.WAND:
            desc += name_of(item) + entry.real
            if wizard or item.identified:
                desc += f"[{item.klass}]"
        elif kind == ItemKind.ARMOR:
            desc = f"{_signed(item.d_enchant)} {entry.title}[{item.armor_class}] "
        elif kind == ItemKind.WEAPON:
            desc += (
                f"{_signed(item.hit_enchant)}, {_signed(item.d_enchant)} "
                + name_of(item)
            )
        return desc

    def _finish(self, item: Item, desc: str, article: str) -> str:
        if desc.startswith(article) and len(desc) > 2 and desc[2] in _VOWELS:
            desc = desc[:1] + "n" + desc[1:]
        flags = item.in_use
        if flags & BEING_WIELDED:
            suffix = self._msg(_MSG_WIELDED)
        elif flags & BEING_WORN:
            suffix = self._msg(_MSG_WORN)
        elif flags & ON_LEFT_HAND:
            suffix = self._msg(_MSG_LEFT_HAND)
        elif flags & ON_RIGHT_HAND:
            suffix = _RIGHT_HAND_TEXT
        else:
            suffix = ""
        return desc + suffix


def name_of(item: Item) -> str:
    """Return the generic name the item carries."""
    return item.name