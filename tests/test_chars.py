import string

import pytest

from printfkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


@pytest.mark.parametrize("code", CODES)
def test_is_alpha_matches_ascii_letters(code):
    expected = 0 <= code < 128 and chr(code) in string.ascii_letters
    assert is_alpha(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_is_digit_matches_ascii_digits(code):
    expected = 0 <= code < 128 and chr(code) in string.digits
    assert is_digit(code) is expected


@pytest.mark.parametrize("code", CODES)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_printable_set_matches_string_module():
    printable = {chr(c) for c in range(128) if is_print(c)}
    expected = set(string.printable) - set(string.whitespace) | {" "}
    assert printable == expected


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_to_upper_letters(letter):
    assert to_upper(letter) == letter.upper()
    assert to_lower(to_upper(letter)) == letter


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_to_lower_letters_with_codes(letter):
    assert to_lower(ord(letter)) == ord(letter.lower())
    assert to_upper(to_lower(ord(letter))) == ord(letter)


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_non_letters(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_case_conversion_ignores_non_ascii():
    assert to_upper("é") == "é"
    assert to_lower(200) == 200


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        to_upper(1.5)