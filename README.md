# rutils

A handful of small utilities with no dependencies outside the standard library.

- `rutils.hash_map`: `HashMap`, a hash map with separate chaining. You can
  supply your own hash and comparison functions. It grows by doubling its
  bucket count once the load factor of 0.75 is reached.
- `rutils.hashing`: `string_hash`, the djb2 hash as an unsigned 64-bit value,
  and `string_cmp`, a bytewise three-way comparison. Both accept `str` or
  `bytes` keys. `HashMap` uses them by default.
- `rutils.strings`: `split` and `split_last`, which split on a single-character
  delimiter and drop empty tokens. Also `strdup` and `strndup`.
- `rutils.timepoint`: the clocks, the unit conversions and the fixed-width
  string formatting.
  - `system_time_now` and `steady_time_now` read the clocks in nanoseconds.
  - `s_to_ns`, `ms_to_ns`, `us_to_ns`, `ns_to_s`, `ns_to_ms` and `ns_to_us` convert units. Integer division truncates toward zero.
  - `nanoseconds_string` and `seconds_string` format a time point at a fixed width.

## Installation

```
pip install .
```

## Hash map

```python
from rutils.hash_map import HashMap, NoMoreEntriesError

table = HashMap(4)                  # string_hash / string_cmp by default
table.set("alpha", 1)
table.set("beta", 2)
table.set("alpha", 10)              # replaces the existing value

assert "alpha" in table
assert table.get("alpha") == 10
assert len(table) == 2
print(table.capacity)               # number of buckets; never shrinks

for key, value in table.items():    # bucket order
    print(key, value)

key, value = table.next_key_and_data()        # first entry
key, value = table.next_key_and_data(key)     # the one after it

table.unset("alpha")                # a missing key is ignored
```

The hash map has these behaviours to be aware of:

- `HashMap(initial_capacity, key_hash, key_cmp)` raises `ValueError` if the capacity is below 1.
- `set`, `get` and `unset` raise `ValueError` for a `None` key. `set` also raises `ValueError` for a `None` value.
- `get` raises `KeyError` for a missing key.
- `next_key_and_data` raises `KeyError` if `previous_key` is not in the map. It raises `NoMoreEntriesError` after the last entry. That error is a subclass of `HashMapError`.
- The map is not safe to modify while you iterate over it.

## Strings

```python
from rutils.strings import split, split_last, strndup

split("/my//hello/world/", "/")        # ['my', 'hello', 'world']
split_last("/my/hello//world/", "/")   # ['my/hello', 'world']
split_last("hello_world", "/")         # ['hello_world']
split(None, "/")                       # []
strndup("key1andsome", 4)              # 'key1'
```

## Time points

```python
from rutils.timepoint import steady_time_now, nanoseconds_string, seconds_string

nanoseconds_string(-5)                 # '-0000000000000000005'
seconds_string(1_500_000_000)          # '0000000001.500000000'
nanoseconds_string(123, 5)             # '0000' (cut to size - 1 characters)

now = steady_time_now()
print(seconds_string(now))
```

Both formatters work on signed 64-bit values, and `size` defaults to 32. They raise `OverflowError` for a value out of that range and `ValueError` if `size` is below 1.

## Running the tests

```
pip install .[test]
pytest
```