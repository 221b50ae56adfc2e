import pytest

from ftkit.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    realloc,
)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("z"), 5)
    assert result is buf
    assert buf[:5] == b"z" * 5
    assert buf[5:] == b" world"


def test_memset_value_wraps_modulo_256():
    a = memset(bytearray(4), 256 + 7, 4)
    b = memset(bytearray(4), 7, 4)
    assert a == b


def test_memset_rejects_overlong_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_memcpy_copies_prefix():
    dest = bytearray(b"xxxxx")
    result = memcpy(dest, b"abcdef", 3)
    assert result is dest
    assert dest[:3] == b"abc"
    assert dest[3:] == b"xx"


def test_memcpy_zero_bytes_leaves_dest():
    dest = bytearray(b"keep")
    memcpy(dest, b"", 0)
    assert dest == b"keep"


def test_memcpy_requires_buffers():
    with pytest.raises(TypeError):
        memcpy(None, None, 2)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == 2


def test_memchr_respects_limit_and_absence():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_value_wraps():
    data = bytes([1, 2, 3])
    assert memchr(data, 256 + 3, 3) == 2


def test_memcmp_equal_and_empty():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_difference_of_first_mismatch():
    assert memcmp(b"abc", b"abd", 3) == -1
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_bytes_are_unsigned():
    assert memcmp(bytes([200]), bytes([1]), 1) > 0


def test_calloc_is_zero_filled():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert buf == bytearray(12)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_realloc_zero_size_releases():
    assert realloc(bytearray(b"abc"), 0) is None


def test_realloc_from_nothing():
    buf = realloc(None, 5)
    assert buf == bytearray(5)


def test_realloc_grow_keeps_contents():
    old = bytearray(b"abc")
    new = realloc(old, 6)
    assert new is not old
    assert new[:3] == b"abc"
    assert len(new) == 6


def test_realloc_shrink_truncates():
    old = bytearray(b"abcdef")
    new = realloc(old, 2)
    assert new == b"ab"