import pytest

from rutils.hashing import string_cmp, string_hash


def test_empty_string_hash_is_seed():
    assert string_hash("") == 5381


def test_hash_is_deterministic_and_matches_bytes():
    assert string_hash("key1") == string_hash("key1")
    assert string_hash("key1") == string_hash(b"key1")


def test_distinct_keys_hash_differently():
    hashes = {string_hash(f"key{i}") for i in range(100)}
    assert len(hashes) == 100


@pytest.mark.parametrize("key", ["x" * 1000, "key with spaces", "héllo wörld", b"\xff\x80"])
def test_hash_fits_in_64_bits(key):
    value = string_hash(key)
    assert 0 <= value < 2**64


def test_hash_rejects_other_types():
    with pytest.raises(TypeError):
        string_hash(42)


def test_cmp_equal():
    assert string_cmp("key1", "key1") == 0
    assert string_cmp("", "") == 0


@pytest.mark.parametrize("first, second", [("abc", "abd"), ("key", "key1"), ("", "a")])
def test_cmp_ordering_is_antisymmetric(first, second):
    assert string_cmp(first, second) < 0
    assert string_cmp(second, first) > 0


def test_cmp_is_bytewise_unsigned():
    assert string_cmp(b"\x7f", b"\x80") < 0


def test_cmp_mixed_str_and_bytes():
    assert string_cmp("key1", b"key1") == 0