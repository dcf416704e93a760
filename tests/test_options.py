import pytest

from rogueclone.options import (
    MAX_VALUE_LENGTH,
    CommandLine,
    GameOptions,
    UsageError,
    collect_option_text,
    env_get_value,
    parse_args,
    parse_options,
)


def test_collect_option_text_order_and_filter():
    env = {"ROGUEOPT2": "c", "ROGUEOPTS": "a", "ROGUEOPT1": "b", "PATH": "x"}
    assert collect_option_text(env) == ",a,b,c"


def test_collect_option_text_empty():
    assert collect_option_text({}) == ""


def test_empty_text_keeps_defaults():
    assert parse_options("", GameOptions()) == GameOptions()


def test_flag_negation():
    opts = parse_options("nojump,noaskquit", GameOptions(jump=True))
    assert opts.jump is False
    assert opts.ask_quit is False


def test_flag_set():
    opts = parse_options("jump", GameOptions(jump=False))
    assert opts.jump is True


def test_abbreviated_and_uppercase_names():
    opts = parse_options("NOPASS, TOMB", GameOptions(show_skull=False))
    assert opts.pass_go is False
    assert opts.show_skull is True


def test_string_options():
    opts = parse_options("name=Bob,map=rgbyc,file=save.dat,directory=/tmp/g",
                         GameOptions())
    assert opts.nick_name == "Bob"
    assert opts.color_str == "rgbyc"
    assert opts.save_file == "save.dat"
    assert opts.game_dir == "/tmp/g"


def test_colon_separator_accepted():
    opts = parse_options("name:Alice", GameOptions())
    assert opts.nick_name == "Alice"


def test_fruit_gets_trailing_blank():
    opts = parse_options("fruit=mango", GameOptions())
    assert opts.fruit == "mango "


def test_name_colons_replaced():
    opts = parse_options("name=a:b", GameOptions())
    assert opts.nick_name == "a;b"


def test_string_option_without_value_unchanged():
    base = GameOptions(nick_name="keep")
    assert parse_options("name", base).nick_name == "keep"


def test_input_options_not_mutated():
    base = GameOptions()
    parse_options("nocolor,name=Zed", base)
    assert base == GameOptions()


def test_unknown_option_ignored():
    assert parse_options("frobnicate,", GameOptions()) == GameOptions()


def test_env_get_value_stops_at_comma():
    assert env_get_value("abc,def", False, False) == "abc"


def test_env_get_value_limits_length():
    assert len(env_get_value("x" * 40, False, False)) == MAX_VALUE_LENGTH


def test_env_get_value_limit_keeps_whole_characters():
    value = env_get_value("あ" * 20, False, False)
    assert len(value.encode("utf-8")) <= MAX_VALUE_LENGTH
    assert set(value) == {"あ"}


def test_parse_args_minimal():
    assert parse_args(["msgs"]) == CommandLine(message_file="msgs")


def test_parse_args_with_save_and_flags():
    cmd = parse_args(["-s", "msgs", "game.save"])
    assert cmd.score_only is True
    assert cmd.do_restore is False
    assert cmd.message_file == "msgs"
    assert cmd.restore_file == "game.save"


def test_parse_args_options_after_positional():
    cmd = parse_args(["msgs", "-rs"])
    assert cmd.do_restore is True
    assert cmd.score_only is True


@pytest.mark.parametrize("argv", [[], ["a", "b", "c"], ["-x", "msgs"], ["--long", "m"]])
def test_parse_args_usage_errors(argv):
    with pytest.raises(UsageError):
        parse_args(argv)