import pytest

from rutils.strings import split, split_last, strdup, strndup


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        (None, []),
        ("hello_world", ["hello_world"]),
        ("hello/world", ["hello", "world"]),
        ("/hello/world", ["hello", "world"]),
        ("hello/world/", ["hello", "world"]),
        ("hello//world", ["hello", "world"]),
        ("/hello//world", ["hello", "world"]),
        ("my/hello/world", ["my", "hello", "world"]),
        ("/my/hello/world", ["my", "hello", "world"]),
        ("/my/hello/world/", ["my", "hello", "world"]),
        ("/my//hello//world/", ["my", "hello", "world"]),
    ],
)
def test_split(text, expected):
    tokens = split(text, "/")
    assert tokens == expected
    assert all(len(token) > 0 for token in tokens)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        (None, []),
        ("hello_world", ["hello_world"]),
        ("hello/world", ["hello", "world"]),
        ("/hello/world", ["hello", "world"]),
        ("hello/world/", ["hello", "world"]),
        ("hello//world/", ["hello", "world"]),
        ("/hello//world", ["hello", "world"]),
        ("my/hello//world", ["my/hello", "world"]),
        ("/my/hello//world/", ["my/hello", "world"]),
    ],
)
def test_split_last(text, expected):
    tokens = split_last(text, "/")
    assert tokens == expected
    assert all(len(token) > 0 for token in tokens)


def test_split_only_delimiters_is_empty():
    assert split("///", "/") == []
    assert split_last("///", "/") == []


@pytest.mark.parametrize("delimiter", ["", "//"])
def test_split_rejects_bad_delimiter(delimiter):
    with pytest.raises(ValueError):
        split("a/b", delimiter)
    with pytest.raises(ValueError):
        split_last("a/b", delimiter)


def test_strdup_copies_text():
    assert strdup("hello world") == "hello world"
    assert strdup("") == ""


def test_strdup_rejects_none():
    with pytest.raises(TypeError):
        strdup(None)


def test_strndup_truncates():
    assert strndup("hello", 3) == "hel"
    assert strndup("hello", 0) == ""
    assert strndup("hello", 10) == "hello"


def test_strndup_errors():
    with pytest.raises(ValueError):
        strndup("hello", -1)
    with pytest.raises(TypeError):
        strndup(None, 2)