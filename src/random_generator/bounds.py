"""
Bounds guard: validates untrusted sizes and ranges before any randomness is drawn.

Checks return the normalized input on success or a `GenerationError` on
rejection. Nothing is raised.
"""

import math
from numbers import Number
from typing import Any

from random_generator.errors import ErrorCode, GenerationError


def as_integer(value: Any) -> int | None:
    """Return `value` as an int when it is integral, otherwise None.

    Integral floats such as `4.0` are accepted, booleans are not.
    """
    if isinstance(value, bool) or not isinstance(value, Number):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def check_byte_size(size: Any, max_byte_size: int) -> int | GenerationError:
    """Validate a requested byte count against `max_byte_size` (inclusive)."""
    value = as_integer(size)
    if value is None or value <= 0:
        return GenerationError(
            ErrorCode.INVALID_SIZE,
            f"Invalid size: {size}. Size must be a positive integer.",
        )
    if value > max_byte_size:
        return GenerationError(
            ErrorCode.SIZE_EXCEEDED,
            f"Requested size {size} exceeds maximum allowed size of {max_byte_size} bytes",
        )
    return value


def check_int_range(min_value: Any, max_value: Any) -> tuple[int, int] | GenerationError:
    """Validate an inclusive integer range. Equal bounds are rejected."""
    low, high = as_integer(min_value), as_integer(max_value)
    if low is None or high is None:
        return GenerationError(ErrorCode.NON_INTEGER_BOUND, "Min and max must be integers")
    if low >= high:
        return GenerationError(ErrorCode.INVERTED_RANGE, "Min must be less than max")
    return low, high
