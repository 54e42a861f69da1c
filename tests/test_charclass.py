import string

import pytest

from drillkit.charclass import abs_value, is_alpha, is_digit, is_lower, is_upper


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_upper_letters(ch):
    assert is_upper(ch) is True
    assert is_lower(ch) is False
    assert is_alpha(ch) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_lower_letters(ch):
    assert is_lower(ch) is True
    assert is_upper(ch) is False
    assert is_alpha(ch) is True


@pytest.mark.parametrize("ch", string.digits)
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alpha(ch) is False


@pytest.mark.parametrize("ch", "@[`{/: \n\xe9")
def test_boundaries_are_not_letters_or_digits(ch):
    assert not is_alpha(ch)
    assert not is_digit(ch)


def test_integer_codes_accepted():
    assert is_upper(ord("A")) is True
    assert is_lower(ord("z")) is True
    assert is_digit(ord("5")) is True
    assert is_alpha(ord("!")) is False


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_upper("AB")


@pytest.mark.parametrize("n", [-98, -1, 0, 1, 402])
def test_abs_value_non_negative_and_same_magnitude(n):
    result = abs_value(n)
    assert result >= 0
    assert result in (n, -n)