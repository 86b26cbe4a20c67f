import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


def test_letters_are_alpha():
    assert all(is_alpha(ch) for ch in string.ascii_letters)


def test_non_letters_are_not_alpha():
    others = string.digits + string.punctuation + string.whitespace
    assert not any(is_alpha(ch) for ch in others)


def test_digits():
    assert all(is_digit(ch) for ch in string.digits)
    assert not any(is_digit(ch) for ch in string.ascii_letters + string.punctuation)


def test_alnum_is_alpha_or_digit_for_every_byte():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_alpha_by_code_matches_by_char():
    for code in range(128):
        assert is_alpha(code) == is_alpha(chr(code))


def test_ascii_range_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert all(is_ascii(chr(code)) for code in range(128))


def test_printable_characters():
    printable = " " + string.ascii_letters + string.digits + string.punctuation
    assert all(is_print(ch) for ch in printable)


def test_non_printable_characters():
    assert not is_print("\n")
    assert not is_print("\t")
    assert not is_print(127)
    assert not is_print(31)


def test_to_lower_on_uppercase_alphabet():
    assert "".join(to_lower(ch) for ch in string.ascii_uppercase) == string.ascii_lowercase


def test_to_upper_on_lowercase_alphabet():
    assert "".join(to_upper(ch) for ch in string.ascii_lowercase) == string.ascii_uppercase


def test_conversion_keeps_int_type():
    assert to_lower(ord("A")) == ord("a")
    assert to_upper(ord("z")) == ord("Z")


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " "))
def test_non_letters_unchanged(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_case_round_trip():
    for ch in string.ascii_uppercase:
        assert to_upper(to_lower(ch)) == ch
    for ch in string.ascii_lowercase:
        assert to_lower(to_upper(ch)) == ch


def test_non_ascii_letters_are_left_alone():
    assert to_upper("é") == "é"
    assert not is_alpha("é")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_empty_string_rejected():
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)