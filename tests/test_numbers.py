import pytest

from ftkit.numbers import atoi, itoa


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi("  \t\n-123abc") == -123


def test_atoi_accepts_all_c_blank_characters():
    assert atoi("\v\f\r 88") == 88


def test_atoi_plus_sign():
    assert atoi("+7") == 7


def test_atoi_double_sign_gives_zero():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_empty_and_no_digits():
    assert atoi("") == 0
    assert atoi("   abc") == 0


def test_atoi_int_min():
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648


def test_atoi_space_between_sign_and_digits():
    assert atoi("- 5") == 0


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 42, 2147483647, -2147483648, 1000000])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)


def test_itoa_rejects_bool():
    with pytest.raises(TypeError):
        itoa(True)


def test_itoa_rejects_str():
    with pytest.raises(TypeError):
        itoa("5")