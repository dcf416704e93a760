# rogueclone

Rules and data for a classic Rogue-style dungeon game, as a plain Python
library with no third-party dependencies. It covers combat dice and hit
chances, item identification and inventory descriptions, the numbered message
catalogue, option and command-line parsing, the message and status lines, and
a few operating-system services.

## Modules

| Module | Contents |
| --- | --- |
| `rogueclone.textutil` | `u8mb`, `utf8strlen`: the screen width of text where every multibyte character takes two columns |
| `rogueclone.messages` | `MessageCatalog`, `MessageFormatError`, `parse_messages`, `read_mesg` |
| `rogueclone.options` | `GameOptions`, `CommandLine`, `UsageError`, `parse_args`, `parse_options`, `collect_option_text`, `env_get_value` |
| `rogueclone.interface` | `MessageLine`, `Stats`, `format_stats`, `edit_line`, `InputResult`, `r_index`, `is_digit`, `pad_count`, `save_screen` |
| `rogueclone.combat` | `Dice`, `get_number`, `get_damage`, `weapon_damage`, `to_hit`, `damage_for_strength`, `hit_chance`, `weapon_damage_total`, `get_dir_rc` |
| `rogueclone.machdep` | `RogueTime`, `login_name`, `home_directory`, `file_id`, `link_count`, `delete_file`, `seed` |
| `rogueclone.items` | `Catalog`, `Item`, `ItemKind`, `IdEntry`, `IdStatus`, `znum` |

## Dice and combat

Every random choice goes through a `Dice` object, so results can be
reproduced from a seed:

```python
from rogueclone.combat import Dice, get_number, get_damage, get_dir_rc

dice = Dice(seed=42)
get_number("2d3")                          # 2
get_damage("3d3/2d5", dice, False)         # 19: every die at its highest face
roll = get_damage("3d3/2d5", dice, True)   # a random roll in 5..19
get_dir_rc("l", 5, 10)                     # (5, 11)
get_dir_rc("h", 5, 0)                      # (5, 0): would leave the map
```

`damage_for_strength`, `hit_chance` and `weapon_damage_total` turn strength,
experience and ring bonuses into the numbers used in a fight.

## Items

`Catalog` holds the identification tables for scrolls, potions, wands, rings,
weapons and armour. `mix_colors`, `make_scroll_titles` and `assign_materials`
give each kind a random appearance, and `describe` writes an item's inventory
line according to what the player knows about it. `znum` writes numbers in
full-width digits:

```python
from rogueclone.items import znum

znum(3, True)    # "＋３"
znum(-5)         # "−５"
```

## Messages

In-game text comes from a numbered message file. Each line starts with the
message number (1 to 499) and holds the text between double quotes.
`read_mesg(path)` loads such a file into a `MessageCatalog`; a numbered line
without a pair of quotes raises `MessageFormatError`. `MessageCatalog.get`
returns an empty string for numbers that were never set.

## Options

Game options come from the `ROGUEOPTS` and `ROGUEOPT1` to `ROGUEOPT9`
environment variables as a comma-separated list:

```python
from rogueclone.options import parse_options, parse_args

opts = parse_options("name=Hero,nojump")
opts.nick_name    # "Hero"
opts.jump         # False

parse_args(["-r", "messages.txt", "game.save"])
```

`collect_option_text` joins the environment variables, and `parse_args` raises
`UsageError` when the arguments do not match
`message_file [-s] [-r] [save_file]`.

## Screen text

`format_stats` lays out the bottom status line at fixed columns, `MessageLine`
keeps the top message line and asks for acknowledgement before replacing an
unread message, `edit_line` applies keystrokes to an input line, and
`save_screen` writes screen rows to a file without trailing blanks.

## What it does not do

The package has no dungeon level generation, no monsters and no colour
handling, and it ships no command to start a game. It does not draw to a
terminal or read the keyboard: a front end supplies the keystrokes and shows
the text these functions return.