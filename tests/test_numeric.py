"""Tests for arithmetic helpers and descriptive statistics."""

from __future__ import annotations

import math
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from utilstoolkit.numeric import (
    average,
    clamp,
    distance_2d,
    factorial,
    gcd,
    get_primes_up_to,
    is_prime,
    lcm,
    map_range,
    median,
    mode,
    number_range,
    random_between,
    round_half_up,
    round_to,
    total,
)


class TestDivisibility:
    """gcd and lcm."""

    def test_gcd(self):
        assert gcd(12, 8) == 4
        assert gcd(17, 13) == 1
        assert gcd(0, 5) == 5
        assert gcd(5, 0) == 5
        assert gcd(48, 18) == 6
        assert gcd(144, 12) == 12

    def test_gcd_negative(self):
        assert gcd(-12, 8) == 4
        assert gcd(12, -8) == 4
        assert gcd(-12, -8) == 4

    def test_gcd_zero_zero(self):
        assert gcd(0, 0) == 0

    def test_lcm(self):
        assert lcm(4, 6) == 12
        assert lcm(-4, 6) == 12
        assert lcm(7, 3) == 21
        assert lcm(0, 5) == 0

    @given(st.integers(-1000, 1000), st.integers(-1000, 1000))
    def test_gcd_matches_stdlib(self, a, b):
        assert gcd(a, b) == math.gcd(a, b)


class TestFactorial:
    """factorial raises on negatives and truncates floats."""

    def test_values(self):
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(5) == 120
        assert factorial(10) == 3628800

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="negative"):
            factorial(-1)
        with pytest.raises(ValueError):
            factorial(-5)

    def test_float_truncated(self):
        assert factorial(3.5) == 6
        assert factorial(5.7) == 120

    def test_large_input_does_not_recurse(self):
        assert factorial(2000) == math.factorial(2000)


class TestPrimes:
    """is_prime and get_primes_up_to."""

    def test_is_prime(self):
        primes = [n for n in range(-5, 50) if is_prime(n)]
        assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]

    def test_sieve(self):
        assert get_primes_up_to(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
        assert get_primes_up_to(2) == [2]
        assert get_primes_up_to(1) == []
        assert get_primes_up_to(-4) == []

    def test_sieve_returns_plain_ints(self):
        assert all(type(p) is int for p in get_primes_up_to(20))

    def test_sieve_agrees_with_is_prime(self):
        assert get_primes_up_to(500) == [n for n in range(501) if is_prime(n)]


class TestRounding:
    """clamp, round_half_up, round_to, map_range."""

    def test_clamp(self):
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(126.5) == 127
        assert round_half_up(-2.5) == -2
        assert round_half_up(2.4) == 2

    def test_round_to(self):
        assert round_to(3.14159) == 3.14
        assert round_to(3.14159, 3) == 3.142
        assert round_to(2.5, 0) == 3

    def test_map_range(self):
        assert map_range(5, 0, 10, 0, 100) == 50
        assert map_range(0, -1, 1, 0, 10) == 5
        assert map_range(15, 10, 20, 100, 0) == 50

    def test_map_range_degenerate(self):
        assert map_range(5, 3, 3, 0, 1) is None

    def test_distance(self):
        assert distance_2d(0, 0, 3, 4) == 5
        assert distance_2d(1, 1, 1, 1) == 0


class TestRanges:
    """number_range and random_between."""

    def test_number_range(self):
        assert number_range(0, 5) == [0, 1, 2, 3, 4]
        assert number_range(0, 10, 3) == [0, 3, 6, 9]
        assert number_range(0, 1, 0.25) == [0, 0.25, 0.5, 0.75]
        assert number_range(5, 0) == []

    def test_number_range_bad_step(self):
        assert number_range(0, 5, 0) == []
        assert number_range(0, 5, -1) == []

    def test_random_integers_in_range(self):
        rng = random.Random(42)
        for _ in range(100):
            value = random_between(5, 10, rng=rng)
            assert 5 <= value <= 10
            assert isinstance(value, int)

    def test_random_floats_in_range(self):
        rng = random.Random(7)
        for _ in range(100):
            value = random_between(5, 10, is_integer=False, rng=rng)
            assert 5 <= value <= 10

    def test_random_swapped_bounds(self):
        rng = random.Random(0)
        for _ in range(100):
            assert 5 <= random_between(10, 5, rng=rng) <= 10

    def test_random_without_rng(self):
        assert 0 <= random_between(0, 3) <= 3


class TestStats:
    """average, median, mode and total."""

    def test_average(self):
        assert average([1, 2, 3, 4]) == 2.5
        assert math.isnan(average([]))

    def test_median(self):
        assert median([3, 1, 2]) == 2
        assert median([4, 1, 3, 2]) == 2.5
        assert math.isnan(median([]))

    def test_mode(self):
        assert mode([1, 2, 2, 3, 3]) == [2, 3]
        assert mode([3, 3, 1]) == [3]
        assert mode([5]) == [5]
        assert mode([]) == []

    def test_mode_all_unique(self):
        assert mode([3, 1, 2]) == [1, 2, 3]

    def test_total(self):
        assert total([1, 2, 3]) == 6
        assert total([0.5, 0.25]) == 0.75
        assert total([]) == 0

    def test_accepts_tuples(self):
        assert average((2, 4)) == 3
        assert total((1, 1)) == 2
