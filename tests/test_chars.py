import pytest

from pushswap.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list("azAZ"))
def test_is_alpha_letters(c):
    assert is_alpha(c) is True
    assert is_alpha(ord(c)) is True


@pytest.mark.parametrize("c", list("09@[`{ \n"))
def test_is_alpha_rejects_non_letters(c):
    assert is_alpha(c) is False


def test_is_digit_matches_decimal_characters():
    for code in range(128):
        assert is_digit(code) == (chr(code) in "0123456789")


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print("\n") is False
    assert is_print(127) is False


def test_case_conversion_round_trip():
    for ch in "abcdefghijklmnopqrstuvwxyz":
        upper = to_upper(ch)
        assert upper == ch.upper()
        assert to_lower(upper) == ch


def test_case_conversion_keeps_type_for_codes():
    assert to_upper(ord("d")) == ord("D")
    assert to_lower(90) == ord("z")


def test_case_conversion_leaves_others_unchanged():
    for ch in "0123456789 !@[]{}":
        assert to_upper(ch) == ch
        assert to_lower(ch) == ch


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)


def test_atoi_skips_whitespace_and_stops_at_space():
    assert atoi("\t\n -1234 5") == -1234


def test_atoi_plus_sign_and_trailing_text():
    assert atoi("+42abc") == 42


def test_atoi_no_digits_gives_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_double_sign_gives_zero():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


@pytest.mark.parametrize("n", [0, 7, -7, 1234567, -1234567, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")