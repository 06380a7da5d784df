import pytest

from pipex.cstrings import (
    bounded_concat,
    bounded_copy,
    c_length,
    duplicate,
    iterate_indexed,
    map_indexed,
)


def test_c_length_stops_at_nul():
    assert c_length(b"abc\0def") == len(b"abc")
    assert c_length("hello") == len("hello")
    assert c_length(bytearray(5)) == 0


def test_bounded_copy_fits():
    dst = bytearray(10)
    result = bounded_copy(dst, b"hello", 10)
    assert result == len(b"hello")
    assert dst[:6] == b"hello\0"


def test_bounded_copy_truncates():
    dst = bytearray(b"xxxxxxxx")
    result = bounded_copy(dst, b"hello", 3)
    assert result == len(b"hello")
    assert dst[:3] == b"he\0"
    assert dst[3:] == b"xxxxx"


def test_bounded_copy_size_zero_leaves_buffer():
    dst = bytearray(b"keep")
    assert bounded_copy(dst, "abc", 0) == len("abc")
    assert dst == bytearray(b"keep")


def test_bounded_copy_rejects_size_past_buffer():
    with pytest.raises(ValueError):
        bounded_copy(bytearray(2), b"abc", 5)


def test_bounded_concat_appends():
    dst = bytearray(b"ab\0" + bytes(7))
    result = bounded_concat(dst, b"cd", 10)
    assert result == len(b"abcd")
    assert dst[:5] == b"abcd\0"
    assert c_length(dst) == len(b"abcd")


def test_bounded_concat_truncates_but_reports_full_length():
    dst = bytearray(b"ab\0" + bytes(7))
    result = bounded_concat(dst, b"cdef", 4)
    assert result == len(b"abcdef")
    assert dst[:4] == b"abc\0"


def test_bounded_concat_size_below_existing_length():
    dst = bytearray(b"abcdef\0\0")
    result = bounded_concat(dst, b"xy", 1)
    assert result == 1 + len(b"xy")
    assert dst == bytearray(b"abcdef\0\0")


def test_bounded_concat_without_destination():
    assert bounded_concat(None, b"source", 0) == len(b"source")
    with pytest.raises(TypeError):
        bounded_concat(None, b"source", 3)


def test_duplicate_bytes_and_str():
    original = bytearray(b"abc\0x")
    copy = duplicate(original)
    assert copy == b"abc"
    original[0] = ord("z")
    assert copy == b"abc"
    assert duplicate("hi") == "hi"


def test_map_indexed_uses_function_and_index():
    assert map_indexed("abc", lambda i, c: c.upper()) == "ABC"
    assert map_indexed("aaa", lambda i, c: chr(ord(c) + i)) == "abc"
    with pytest.raises(TypeError):
        map_indexed("abc", None)


def test_map_indexed_stops_at_nul():
    assert map_indexed("ab\0cd", lambda i, c: c) == "ab"


def test_iterate_indexed_replaces_in_place():
    chars = list("abc")
    iterate_indexed(chars, lambda i, c: c.upper())
    assert chars == list("ABC")


def test_iterate_indexed_stops_at_nul_and_keeps_none():
    buf = bytearray(b"ab\0cd")
    seen = []

    def record(i, value):
        seen.append(i)
        return None

    iterate_indexed(buf, record)
    assert seen == [0, 1]
    assert buf == bytearray(b"ab\0cd")