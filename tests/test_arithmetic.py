import math

import pytest

from algokit.arithmetic import (
    common_factor,
    count_squares,
    factorial,
    fibonacci,
    fibonacci_series,
    is_palindrome_number,
    is_power_of_four,
    kth_symbol,
    mod_pow,
    swap_bits,
)


@pytest.mark.parametrize("base, exponent", [(2, 10), (3, 200), (123456789, 98765), (7, 0)])
def test_mod_pow_matches_builtin_with_default_modulus(base, exponent):
    assert mod_pow(base, exponent) == pow(base, exponent, 10_000_007)


def test_mod_pow_custom_modulus():
    assert mod_pow(5, 117, 19) == pow(5, 117, 19)


def test_mod_pow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        mod_pow(2, -1)


def test_mod_pow_rejects_bad_modulus():
    with pytest.raises(ValueError):
        mod_pow(2, 3, 0)


@pytest.mark.parametrize("n", [0, 1, 5, 12, 20])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 30))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-3)


def test_fibonacci_series_agrees_with_fibonacci():
    series = fibonacci_series(15)
    assert len(series) == 15
    assert series == [fibonacci(i) for i in range(15)]


@pytest.mark.parametrize("a, b", [(12, 18), (45, 30), (49, 21), (100, 75)])
def test_common_factor_is_smallest_shared_factor(a, b):
    factor = common_factor(a, b)
    assert a % factor == 0 and b % factor == 0
    assert factor > 1
    assert all(a % d or b % d for d in range(2, factor))


def test_common_factor_of_coprime_numbers_is_one():
    assert common_factor(9, 16) == 1


def test_common_factor_of_equal_numbers_is_one():
    assert common_factor(12, 12) == 1


@pytest.mark.parametrize("half", ["1", "12", "907", "4321"])
def test_mirrored_digits_are_palindromes(half):
    assert is_palindrome_number(int(half + half[::-1]))
    assert is_palindrome_number(int(half + half[-2::-1]))


def test_non_palindromes():
    assert not is_palindrome_number(123)
    assert not is_palindrome_number(-121)


def test_powers_of_four():
    assert all(is_power_of_four(4**k) for k in range(12))
    assert is_power_of_four(64)


def test_non_powers_of_four():
    assert not any(is_power_of_four(2 * 4**k) for k in range(12))
    assert not is_power_of_four(0)
    assert not is_power_of_four(-4)
    assert not is_power_of_four(12)


@pytest.mark.parametrize("n", [1, 3, 10, 1000])
def test_count_squares_up_to_square(n):
    assert count_squares(1, n * n) == n


@pytest.mark.parametrize("k", [1, 5, 30])
def test_count_squares_between_squares_is_zero(k):
    assert count_squares(k * k + 1, (k + 1) ** 2 - 1) == 0
    assert count_squares(k * k, k * k) == 1


def test_count_squares_negative_raises():
    with pytest.raises(ValueError):
        count_squares(-1, 4)


def test_swap_bits_source_example():
    assert swap_bits(28, 0, 3, 2) == 7


@pytest.mark.parametrize("x, p1, p2, n", [(28, 0, 3, 2), (0xABCD, 1, 9, 4), (0xFFFF0000, 0, 16, 8)])
def test_swap_bits_twice_restores(x, p1, p2, n):
    assert swap_bits(swap_bits(x, p1, p2, n), p1, p2, n) == x


def test_swap_bits_preserves_bit_count():
    x = 0b1100_0011_0101
    assert bin(swap_bits(x, 0, 6, 3)).count("1") == bin(x).count("1")


def test_kth_symbol_first_row():
    assert kth_symbol(1, 1) == 0


@pytest.mark.parametrize("n", range(1, 8))
def test_kth_symbol_rows_are_prefixes_and_complements(n):
    row = [kth_symbol(n, k) for k in range(1, 2 ** (n - 1) + 1)]
    following = [kth_symbol(n + 1, k) for k in range(1, 2**n + 1)]
    assert following[: len(row)] == row
    assert following[len(row):] == [1 - bit for bit in row]


@pytest.mark.parametrize("n, k", [(0, 1), (3, 0), (3, 5)])
def test_kth_symbol_out_of_range(n, k):
    with pytest.raises(ValueError):
        kth_symbol(n, k)