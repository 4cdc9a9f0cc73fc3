"""Integer helpers for the power-of-two partitioning of alternatives."""
from __future__ import annotations

import math

from .exceptions import IndexOutOfRangeError, InvalidCountError


def ceil_log2(x: int) -> int:
    if x < 1:
        raise InvalidCountError(f"count must be positive, got {x}")
    return (x - 1).bit_length()


def is_power_of_two(x: int) -> bool:
    return x > 0 and x & (x - 1) == 0


def power_of_two_ceiling(x: int) -> int:
    """Smallest power of two that is at least x.

    Uses exact integer bit arithmetic, so the result is correct for
    arbitrarily large x. Powers of two are returned unchanged.

    Raises
    - InvalidCountError: If x < 1.
    """
    if x < 1:
        raise InvalidCountError(f"count must be positive, got {x}")
    return 1 << (x - 1).bit_length()


def power_of_two_ceiling_float(x: int) -> int:
    """Floating-point rounding: 2 ** ceil(log2(x)) evaluated on a double.

    Loses precision once x needs more than 53 mantissa bits and raises
    OverflowError beyond the double range. Only used to cross-check
    power_of_two_ceiling.
    """
    if x < 1:
        raise InvalidCountError(f"count must be positive, got {x}")
    return int(2.0 ** math.ceil(math.log2(float(x))))


def diverges_from_float(x: int) -> bool:
    """True if the floating-point rounding disagrees with the exact one for x."""
    try:
        approx = power_of_two_ceiling_float(x)
    except OverflowError:
        return True
    return approx != power_of_two_ceiling(x)


def first_half(cap: int, n: int) -> bool:
    """Whether n falls in the lower half [0, cap/2) of a power-of-two capacity."""
    if cap < 2 or not is_power_of_two(cap):
        raise InvalidCountError(f"capacity must be a power of two >= 2, got {cap}")
    if n < 0 or n >= cap:
        raise IndexOutOfRangeError(f"index out of range: {n} not in [0, {cap})")
    return n < cap // 2
