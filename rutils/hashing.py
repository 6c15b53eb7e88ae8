"""Hash and comparison functions for string keys."""

from __future__ import annotations

from typing import Union

__all__ = ["string_hash", "string_cmp"]

_MASK = (1 << 64) - 1
_DJB2_SEED = 5381

StringKey = Union[str, bytes]


def _as_bytes(key: StringKey) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    raise TypeError("key must be str or bytes")


def string_hash(key: StringKey) -> int:
    """Return the djb2 hash of a string key as an unsigned 64-bit value.

    Bytes above 127 are taken as signed characters, matching a signed
    ``char`` platform.
    """
    value = _DJB2_SEED
    for byte in _as_bytes(key):
        char = byte - 256 if byte > 127 else byte
        value = (value * 33 + char) & _MASK
    return value


def string_cmp(first: StringKey, second: StringKey) -> int:
    """Compare two string keys bytewise: negative, zero or positive."""
    left = _as_bytes(first)
    right = _as_bytes(second)
    return (left > right) - (left < right)