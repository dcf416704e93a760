import pytest

from rogueclone.textutil import u8mb, utf8strlen


@pytest.mark.parametrize("ch", ["a", "~", "é", "ж", "中", "あ", "😀"])
def test_u8mb_matches_encoded_length(ch):
    encoded = ch.encode("utf-8")
    assert u8mb(encoded[0]) == len(encoded)


def test_u8mb_continuation_byte_counts_as_one():
    assert u8mb(0x80) == u8mb(ord("A"))
    assert u8mb(0xBF) == u8mb(ord("A"))


def test_u8mb_invalid_lead_counts_as_one():
    assert u8mb(0xFE) == u8mb(0xFF) == u8mb(ord("z"))


def test_u8mb_only_low_byte_matters():
    assert u8mb(0x1E3) == u8mb(0xE3)


def test_ascii_width_is_length():
    text = "Hello, rogue"
    assert utf8strlen(text) == len(text)


def test_multibyte_chars_take_two_columns():
    text = "日本語"
    assert utf8strlen(text) == 2 * len(text)


def test_two_byte_chars_take_two_columns():
    text = "ééé"
    assert utf8strlen(text) == 2 * len(text)


def test_width_is_additive():
    left, right = "abc", "ダンジョン"
    assert utf8strlen(left + right) == utf8strlen(left) + utf8strlen(right)


def test_bytes_and_str_agree():
    text = "金塊 gold"
    assert utf8strlen(text.encode("utf-8")) == utf8strlen(text)


def test_stops_at_nul():
    assert utf8strlen("ab\0cdef") == utf8strlen("ab")


def test_empty_is_zero():
    assert utf8strlen("") == 0