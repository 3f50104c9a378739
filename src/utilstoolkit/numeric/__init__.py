"""
Numeric utilities subpackage - requires numpy.

Arithmetic, primes, rounding, and descriptive statistics.
"""

from utilstoolkit.numeric.arithmetic import (
    gcd,
    lcm,
    random_between,
    factorial,
    is_prime,
    get_primes_up_to,
    clamp,
    round_half_up,
    round_to,
    number_range,
    map_range,
    distance_2d,
)

from utilstoolkit.numeric.stats import (
    average,
    median,
    mode,
    total,
)

__all__ = [
    # arithmetic
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
    # stats
    "average",
    "median",
    "mode",
    "total",
]
