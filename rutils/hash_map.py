"""A separate-chaining hash map driven by caller-supplied hash and compare functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from rutils.hashing import string_cmp, string_hash

__all__ = ["HashMapError", "NoMoreEntriesError", "HashMap"]

LOAD_FACTOR = 0.75

KeyHasher = Callable[[Any], int]
KeyComparer = Callable[[Any, Any], int]


class HashMapError(Exception):
    """Base class for hash map errors."""


class NoMoreEntriesError(HashMapError):
    """Raised when iteration has passed the last entry of the map."""


@dataclass(slots=True)
class _Entry:
    hashed_key: int
    key: Any
    value: Any


@dataclass(slots=True)
class _Location:
    map_index: int
    bucket_index: int
    entry: _Entry


class HashMap:
    """A hash map that grows by doubling once it reaches its load factor.

    Keys are hashed with ``key_hash`` and compared with ``key_cmp``, which
    returns zero for equal keys.  The number of buckets never shrinks.
    """

    def __init__(
        self,
        initial_capacity: int,
        key_hash: KeyHasher = string_hash,
        key_cmp: KeyComparer = string_cmp,
    ) -> None:
        if not callable(key_hash):
            raise TypeError("key_hash must be callable")
        if not callable(key_cmp):
            raise TypeError("key_cmp must be callable")
        if initial_capacity < 1:
            raise ValueError("initial_capacity cannot be less than 1")
        self._key_hash = key_hash
        self._key_cmp = key_cmp
        self._buckets: list[list[_Entry]] = [[] for _ in range(initial_capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        """The number of buckets in the map."""
        return len(self._buckets)

    def __len__(self) -> int:
        return self._size

    def _find(self, key: Any) -> tuple[int, int, Optional[_Location]]:
        key_hash = self._key_hash(key)
        map_index = key_hash % len(self._buckets)
        for bucket_index, entry in enumerate(self._buckets[map_index]):
            if entry.hashed_key == key_hash and self._key_cmp(entry.key, key) == 0:
                return key_hash, map_index, _Location(map_index, bucket_index, entry)
        return key_hash, map_index, None

    def _grow_if_needed(self) -> None:
        if self._size < LOAD_FACTOR * len(self._buckets):
            return
        new_capacity = 2 * len(self._buckets)
        new_buckets: list[list[_Entry]] = [[] for _ in range(new_capacity)]
        for bucket in self._buckets:
            for entry in bucket:
                new_buckets[entry.hashed_key % new_capacity].append(entry)
        self._buckets = new_buckets

    def set(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        if key is None:
            raise ValueError("key cannot be None")
        if value is None:
            raise ValueError("value cannot be None")
        key_hash, map_index, found = self._find(key)
        if found is not None:
            found.entry.value = value
        else:
            self._buckets[map_index].append(_Entry(key_hash, key, value))
            self._size += 1
        self._grow_if_needed()

    def unset(self, key: Any) -> None:
        """Remove ``key`` from the map; a missing key is ignored."""
        if key is None:
            raise ValueError("key cannot be None")
        _, _, found = self._find(key)
        if found is None:
            return
        del self._buckets[found.map_index][found.bucket_index]
        self._size -= 1

    def __contains__(self, key: Any) -> bool:
        if key is None:
            return False
        return self._find(key)[2] is not None

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``; raise KeyError if absent."""
        if key is None:
            raise ValueError("key cannot be None")
        _, _, found = self._find(key)
        if found is None:
            raise KeyError(key)
        return found.entry.value

    def next_key_and_data(self, previous_key: Any = None) -> tuple[Any, Any]:
        """Return the key and value following ``previous_key``.

        With ``None`` the first entry is returned.  Raises KeyError if
        ``previous_key`` is not in the map and NoMoreEntriesError after the
        last entry.
        """
        map_index = 0
        bucket_index = 0
        if previous_key is not None:
            _, _, found = self._find(previous_key)
            if found is None:
                raise KeyError(previous_key)
            map_index = found.map_index
            bucket_index = found.bucket_index + 1
        for bucket in self._buckets[map_index:]:
            if bucket_index < len(bucket):
                entry = bucket[bucket_index]
                return entry.key, entry.value
            bucket_index = 0
        raise NoMoreEntriesError("no more entries in the hash map")

    def _entries(self) -> Iterator[_Entry]:
        for bucket in self._buckets:
            yield from bucket

    def __iter__(self) -> Iterator[Any]:
        return (entry.key for entry in self._entries())

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield every key and value pair in bucket order."""
        return ((entry.key, entry.value) for entry in self._entries())