"""Time points in nanoseconds: unit conversions, clocks and fixed-width text."""

from __future__ import annotations

import time
from numbers import Real

__all__ = [
    "s_to_ns",
    "ms_to_ns",
    "us_to_ns",
    "ns_to_s",
    "ns_to_ms",
    "ns_to_us",
    "system_time_now",
    "steady_time_now",
    "nanoseconds_string",
    "seconds_string",
]

_NS_PER_S = 1000 * 1000 * 1000
_NS_PER_MS = 1000 * 1000
_NS_PER_US = 1000

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

DEFAULT_STRING_SIZE = 32


def s_to_ns(seconds: Real) -> Real:
    """Convert seconds to nanoseconds."""
    return seconds * _NS_PER_S


def ms_to_ns(milliseconds: Real) -> Real:
    """Convert milliseconds to nanoseconds."""
    return milliseconds * _NS_PER_MS


def us_to_ns(microseconds: Real) -> Real:
    """Convert microseconds to nanoseconds."""
    return microseconds * _NS_PER_US


def _divide(value: Real, divisor: int) -> Real:
    # Integer division truncates toward zero, as fixed-width integers do.
    if isinstance(value, int):
        quotient = abs(value) // divisor
        return -quotient if value < 0 else quotient
    return value / divisor


def ns_to_s(nanoseconds: Real) -> Real:
    """Convert nanoseconds to seconds."""
    return _divide(nanoseconds, _NS_PER_S)


def ns_to_ms(nanoseconds: Real) -> Real:
    """Convert nanoseconds to milliseconds."""
    return _divide(nanoseconds, _NS_PER_MS)


def ns_to_us(nanoseconds: Real) -> Real:
    """Convert nanoseconds to microseconds."""
    return _divide(nanoseconds, _NS_PER_US)


def system_time_now() -> int:
    """Return the system clock time in nanoseconds since the Unix epoch."""
    return time.time_ns()


def steady_time_now() -> int:
    """Return the monotonic clock time in nanoseconds."""
    return time.monotonic_ns()


def _check(time_point: int, size: int) -> None:
    if not isinstance(time_point, int) or isinstance(time_point, bool):
        raise TypeError("time_point must be an integer")
    if not _INT64_MIN <= time_point <= _INT64_MAX:
        raise OverflowError("time_point does not fit in a signed 64-bit integer")
    if size < 1:
        raise ValueError("size must be at least 1")


def _fit(text: str, size: int) -> str:
    # The size counts a terminating character, so at most size - 1 remain.
    return text[: size - 1]


def nanoseconds_string(time_point: int, size: int = DEFAULT_STRING_SIZE) -> str:
    """Format a time point as 19 zero-padded digits of nanoseconds.

    Negative values carry a leading ``-``.  The result is cut to ``size - 1``
    characters.
    """
    _check(time_point, size)
    sign = "-" if time_point < 0 else ""
    return _fit(f"{sign}{abs(time_point):019d}", size)


def seconds_string(time_point: int, size: int = DEFAULT_STRING_SIZE) -> str:
    """Format a time point as seconds: 10 integer digits, a point, 9 fraction digits.

    Negative values carry a leading ``-``.  The result is cut to ``size - 1``
    characters.
    """
    _check(time_point, size)
    sign = "-" if time_point < 0 else ""
    seconds, nanoseconds = divmod(abs(time_point), _NS_PER_S)
    return _fit(f"{sign}{seconds:010d}.{nanoseconds:09d}", size)