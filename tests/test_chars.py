import string

import pytest

from rtscene.chars import (
    atoi,
    atol,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)

ASCII_ALL = [chr(i) for i in range(128)]


def test_is_alpha_matches_ascii_letters():
    for c in ASCII_ALL:
        assert is_alpha(c) == (c in string.ascii_letters)


def test_is_digit_matches_digits():
    for c in ASCII_ALL:
        assert is_digit(c) == (c in string.digits)


def test_is_alnum_is_union_of_alpha_and_digit():
    for c in ASCII_ALL:
        assert is_alnum(c) == (is_alpha(c) or is_digit(c))


def test_is_print_matches_range():
    for i in range(128):
        assert is_print(i) == (32 <= i <= 126)


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-200) is False


def test_int_and_str_agree():
    for i in range(128):
        assert is_alpha(i) == is_alpha(chr(i))
        assert is_digit(i) == is_digit(chr(i))


def test_case_mapping_matches_str_methods():
    for c in string.ascii_letters + string.digits + string.punctuation:
        assert to_upper(c) == c.upper()
        assert to_lower(c) == c.lower()


def test_case_mapping_int_roundtrip():
    for c in string.ascii_lowercase:
        assert to_lower(to_upper(ord(c))) == ord(c)
        assert to_upper(ord(c)) == ord(c.upper())


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("n", [0, 7, -7, 42, -42, 2147483647, -2147483648])
def test_itoa_atoi_roundtrip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+17xyz") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("-") == 0


def test_atoi_single_sign_only():
    assert atoi("--5") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


def test_atol_holds_values_beyond_32_bits():
    assert atol("  -9000000000") == -9000000000
    assert atol(str(2**40)) == 2**40