"""String helpers: splitting on a delimiter and bounded duplication."""

from __future__ import annotations

from typing import Optional

__all__ = ["split", "split_last", "strdup", "strndup"]


def _check_delimiter(delimiter: str) -> None:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")


def split(text: Optional[str], delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping empty tokens.

    ``None`` and the empty string both give an empty list.
    """
    _check_delimiter(delimiter)
    if not text:
        return []
    return [token for token in text.split(delimiter) if token]


def split_last(text: Optional[str], delimiter: str) -> list[str]:
    """Split ``text`` in two at the last occurrence of ``delimiter``.

    Delimiters at either end of the string are ignored, as are runs of
    delimiters around the split point.  A string without an inner delimiter
    gives a single token; ``None`` or an empty string give an empty list.
    """
    _check_delimiter(delimiter)
    if not text:
        return []
    stripped = text.strip(delimiter)
    if not stripped:
        return []
    head, found, tail = stripped.rpartition(delimiter)
    if not found:
        return [stripped]
    head = head.rstrip(delimiter)
    if not head:
        return [tail]
    return [head, tail]


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    return "".join(text)


def strndup(text: str, length: int) -> str:
    """Return a copy of at most the first ``length`` characters of ``text``."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    if length < 0:
        raise ValueError("length cannot be negative")
    return text[:length]