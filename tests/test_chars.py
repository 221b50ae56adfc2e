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

ASCII = range(128)


@pytest.mark.parametrize("code", ASCII)
def test_classifiers_agree_with_str_methods(code):
    ch = chr(code)
    assert is_alpha(code) == ch.isalpha()
    assert is_digit(code) == ch.isdigit()
    assert is_alnum(code) == ch.isalnum()
    assert is_print(code) == ch.isprintable()


@pytest.mark.parametrize("code", range(256))
def test_is_ascii_agrees_with_str_isascii(code):
    assert is_ascii(code) == chr(code).isascii()


def test_is_ascii_rejects_negative():
    assert not is_ascii(-1)


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_alnum("é")


def test_string_and_code_give_same_answer():
    for code in ASCII:
        assert is_alpha(chr(code)) == is_alpha(code)
        assert is_print(chr(code)) == is_print(code)


@pytest.mark.parametrize("code", ASCII)
def test_case_conversion_matches_str_methods(code):
    ch = chr(code)
    assert to_upper(code) == ord(ch.upper())
    assert to_lower(code) == ord(ch.lower())


def test_case_conversion_keeps_type_of_input():
    assert to_upper("q") == "q".upper()
    assert to_lower("Q") == "Q".lower()
    assert to_upper(ord("q")) == ord("Q")


def test_case_round_trip_for_letters():
    for ch in "abcdefghijklmnopqrstuvwxyz":
        assert to_lower(to_upper(ch)) == ch
        assert to_upper(to_lower(ch.upper())) == ch.upper()


def test_non_letters_unchanged():
    for code in range(-5, 300):
        if not (0 <= code < 128 and chr(code).isalpha()):
            assert to_upper(code) == code
            assert to_lower(code) == code


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        to_upper("ab")
    with pytest.raises(ValueError):
        is_alpha("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_lower(None)