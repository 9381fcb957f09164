"""Integer arithmetic: modular powers, factorials, Fibonacci numbers and digit tricks."""

from __future__ import annotations

import math

__all__ = [
    "DEFAULT_MODULUS",
    "mod_pow",
    "factorial",
    "fibonacci",
    "fibonacci_series",
    "common_factor",
    "is_palindrome_number",
    "is_power_of_four",
    "count_squares",
    "swap_bits",
    "kth_symbol",
]

DEFAULT_MODULUS = 10_000_007
_WORD_MASK = 0xFFFFFFFF


def mod_pow(base: int, exponent: int, modulus: int = DEFAULT_MODULUS) -> int:
    """Compute ``base ** exponent % modulus`` by repeated squaring."""
    if modulus < 1:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result % modulus


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return math.prod(range(2, n + 1))


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, counting F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("Fibonacci index must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting from F(0)."""
    if count < 0:
        raise ValueError("count must not be negative")
    series = []
    current, following = 0, 1
    for _ in range(count):
        series.append(current)
        current, following = following, current + following
    return series


def common_factor(a: int, b: int) -> int:
    """Smallest factor above 1 shared by two different numbers, or 1 if none.

    When ``a`` equals ``b`` the result is 1.
    """
    if a == b:
        return 1
    return next(
        (
            candidate
            for candidate in range(2, min(a, b) + 1)
            if a % candidate == 0 and b % candidate == 0
        ),
        1,
    )


def is_palindrome_number(n: int) -> bool:
    """Whether the decimal digits of ``n`` read the same both ways.

    Negative numbers are never palindromes.
    """
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


def is_power_of_four(n: int) -> bool:
    """Whether ``n`` is 4 raised to a non-negative integer power."""
    if n <= 0:
        return False
    while n != 1:
        if n % 4:
            return False
        n //= 4
    return True


def count_squares(low: int, high: int) -> int:
    """Number of perfect squares in the closed range ``low .. high``."""
    if low < 0 or high < 0:
        raise ValueError("bounds must not be negative")
    root_low = math.isqrt(low)
    count = math.isqrt(high) - root_low
    if root_low * root_low == low:
        count += 1
    return max(count, 0)


def swap_bits(x: int, p1: int, p2: int, n: int) -> int:
    """Swap the ``n`` bits of a 32-bit word at ``p1`` with the ``n`` bits at ``p2``."""
    if min(x, p1, p2, n) < 0:
        raise ValueError("arguments must not be negative")
    mask = (1 << n) - 1
    first = (x >> p1) & mask
    second = (x >> p2) & mask
    difference = first ^ second
    difference = ((difference << p1) | (difference << p2)) & _WORD_MASK
    return (x ^ difference) & _WORD_MASK


def kth_symbol(n: int, k: int) -> int:
    """Symbol ``k`` (from 1) of row ``n`` (from 1) of the grammar 0 -> 01, 1 -> 10."""
    if n < 1:
        raise ValueError("row must be at least 1")
    if not 1 <= k <= 1 << (n - 1):
        raise ValueError(f"position {k} is outside row {n}")
    flipped = 0
    while n > 1:
        half = 1 << (n - 2)
        if k > half:
            k -= half
            flipped ^= 1
        n -= 1
    return flipped