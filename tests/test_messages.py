import pytest

from rogueclone.messages import (
    CATALOG_SIZE,
    MAX_MESSAGE_BYTES,
    MessageCatalog,
    MessageFormatError,
    parse_messages,
    read_mesg,
)


def test_parses_numbered_lines():
    catalog = parse_messages(['1 "hello"\n', '12 "the bat hits"\n'])
    assert catalog.get(1) == "hello"
    assert catalog.get(12) == "the bat hits"


def test_unset_entries_are_empty():
    catalog = parse_messages(['3 "x"\n'])
    assert catalog.get(4) == ""


def test_out_of_range_numbers_ignored():
    catalog = parse_messages(['0 "zero"\n', '500 "big"\n', '-3 "neg"\n', '499 "last"\n'])
    assert catalog.get(0) == ""
    assert catalog.get(500) == ""
    assert catalog.get(499) == "last"


def test_lines_without_number_ignored():
    catalog = parse_messages(["# comment\n", "\n", 'text "quoted"\n'])
    assert catalog.entries == {}


def test_leading_whitespace_before_number():
    catalog = parse_messages(['   7 "spaced"\n'])
    assert catalog.get(7) == "spaced"


def test_later_line_overrides_earlier():
    catalog = parse_messages(['5 "first"\n', '5 "second"\n'])
    assert catalog.get(5) == "second"


def test_missing_opening_quote():
    with pytest.raises(MessageFormatError):
        parse_messages(["10 no quotes\n"])


def test_missing_closing_quote():
    with pytest.raises(MessageFormatError):
        parse_messages(['10 "unterminated\n'])


def test_empty_text_allowed():
    catalog = parse_messages(['8 ""\n'])
    assert catalog.get(8) == ""
    assert 8 in catalog.entries


def test_long_message_truncated():
    catalog = parse_messages([f'2 "{"a" * 500}"\n'])
    assert len(catalog.get(2).encode("utf-8")) == MAX_MESSAGE_BYTES


def test_truncation_keeps_whole_characters():
    catalog = parse_messages([f'2 "{"あ" * 200}"\n'])
    text = catalog.get(2)
    assert len(text.encode("utf-8")) <= MAX_MESSAGE_BYTES
    assert set(text) == {"あ"}


def test_get_out_of_catalog_range():
    with pytest.raises(IndexError):
        MessageCatalog().get(CATALOG_SIZE)
    with pytest.raises(IndexError):
        MessageCatalog().get(-1)


def test_read_mesg_from_file(tmp_path):
    path = tmp_path / "mesg"
    path.write_text('10 "ようこそ %s"\n11 "--More--"\n', encoding="utf-8")
    catalog = read_mesg(path)
    assert catalog.get(10) == "ようこそ %s"
    assert catalog.get(11) == "--More--"


def test_read_mesg_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_mesg(tmp_path / "absent")


def test_read_mesg_bad_format_names_file(tmp_path):
    path = tmp_path / "broken"
    path.write_text("20 oops\n", encoding="utf-8")
    with pytest.raises(MessageFormatError, match="broken"):
        read_mesg(path)