import string

import pytest

from pipex.libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(ch):
    assert is_alpha(ch) is True
    assert is_alnum(ch) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alnum(ch) is True
    assert is_alpha(ch) is False


@pytest.mark.parametrize("ch", list(" !@[`{~\t\n"))
def test_punctuation_is_neither_alpha_nor_digit(ch):
    assert is_alpha(ch) is False
    assert is_digit(ch) is False
    assert is_alnum(ch) is False


def test_integer_codes_accepted():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("7")) is True
    assert is_alpha(ord("7")) is False


def test_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@pytest.mark.parametrize(
    "lower, upper", list(zip(string.ascii_lowercase, string.ascii_uppercase))
)
def test_case_conversion(lower, upper):
    assert to_upper(lower) == upper
    assert to_lower(upper) == lower
    assert to_upper(upper) == upper
    assert to_lower(lower) == lower


def test_case_conversion_on_codes_returns_codes():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


@pytest.mark.parametrize("ch", list("0 9!{é"))
def test_non_letters_unchanged(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)