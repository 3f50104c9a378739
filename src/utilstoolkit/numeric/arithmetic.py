"""
Arithmetic helpers - requires numpy (sieve only).

Pure functions for divisibility, primes, rounding and range mapping.
"""

__all__ = [
    "gcd",
    "lcm",
    "random_between",
    "factorial",
    "is_prime",
    "get_primes_up_to",
    "clamp",
    "round_half_up",
    "round_to",
    "number_range",
    "map_range",
    "distance_2d",
]

import math
import random
from typing import List, Optional, Union

import numpy as np
from loguru import logger

Number = Union[int, float]


def gcd(a: Number, b: Number) -> Number:
    """
    Greatest common divisor using Euclid's algorithm on absolute values.

    Example:
        >>> gcd(48, 18)
        6
        >>> gcd(-12, 8)
        4
        >>> gcd(0, 0)
        0
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: Number, b: Number) -> Number:
    """
    Least common multiple, always non-negative.

    Returns 0 when either argument is 0.

    Example:
        >>> lcm(4, 6)
        12
    """
    divisor = gcd(a, b)
    if divisor == 0:
        return 0
    return abs(a * b) // divisor


def random_between(
    min_val: Number,
    max_val: Number,
    is_integer: bool = True,
    rng: Optional[random.Random] = None,
) -> Number:
    """
    Random number in the span between min_val and max_val.

    Args:
        min_val: Lower bound (may be larger than max_val)
        max_val: Upper bound
        is_integer: Floor the result to an integer
        rng: Optional random generator, for reproducible draws

    Returns:
        A number inside the span of the two bounds
    """
    source = rng if rng is not None else random
    value = source.random() * (max_val - min_val) + min_val
    return math.floor(value) if is_integer else value


def factorial(num: Number) -> int:
    """
    Factorial of num, truncating fractional input to an integer.

    Unlike the rest of the library this raises instead of returning a
    sentinel, since there is no neutral value to return.

    Raises:
        ValueError: If num is negative

    Example:
        >>> factorial(5)
        120
        >>> factorial(5.7)
        120
    """
    if num < 0:
        raise ValueError("Factorial not defined for negative numbers")
    result = 1
    for i in range(2, int(num) + 1):
        result *= i
    return result


def is_prime(num: Number) -> bool:
    """Check primality with 6k +/- 1 trial division."""
    if num <= 1:
        return False
    if num <= 3:
        return True
    if num % 2 == 0 or num % 3 == 0:
        return False
    i = 5
    while i * i <= num:
        if num % i == 0 or num % (i + 2) == 0:
            return False
        i += 6
    return True


def get_primes_up_to(limit: int) -> List[int]:
    """
    All primes <= limit, via a Sieve of Eratosthenes.

    Example:
        >>> get_primes_up_to(20)
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    if limit < 2:
        return []
    sieve = np.ones(limit + 1, dtype=bool)
    sieve[:2] = False
    for i in range(2, math.isqrt(limit) + 1):
        if sieve[i]:
            sieve[i * i :: i] = False
    return np.flatnonzero(sieve).tolist()


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value into [min_val, max_val]."""
    return min(max(value, min_val), max_val)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties toward positive infinity.

    Differs from round(), which sends ties to the even neighbour.

    Example:
        >>> round_half_up(126.5)
        127
        >>> round_half_up(-0.5)
        0
    """
    return math.floor(value + 0.5)


def round_to(num: float, decimals: int = 2) -> float:
    """
    Round to a number of decimal places, ties rounding up.

    Example:
        >>> round_to(3.14159)
        3.14
    """
    factor = 10**decimals
    return round_half_up(num * factor) / factor


def number_range(start: Number, end: Number, step: Number = 1) -> List[Number]:
    """
    Half-open range [start, end) with a positive step, floats allowed.

    Returns an empty list for a non-positive step.
    """
    if step <= 0:
        logger.debug(f"number_range: non-positive step {step!r}")
        return []
    result = []
    value = start
    while value < end:
        result.append(value)
        value += step
    return result


def map_range(
    value: Number,
    in_min: Number,
    in_max: Number,
    out_min: Number,
    out_max: Number,
) -> Optional[float]:
    """
    Linearly map value from [in_min, in_max] onto [out_min, out_max].

    Returns None when the input range is empty (in_min == in_max).

    Example:
        >>> map_range(5, 0, 10, 0, 100)
        50.0
    """
    if in_max == in_min:
        logger.debug(f"map_range: degenerate input range [{in_min}, {in_max}]")
        return None
    return (value - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def distance_2d(x1: Number, y1: Number, x2: Number, y2: Number) -> float:
    """Euclidean distance between two points in the plane."""
    return math.hypot(x2 - x1, y2 - y1)
