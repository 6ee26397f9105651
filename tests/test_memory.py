import pytest

from printfkit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_rejects_overlong():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_memset_fills_and_truncates_value():
    buf = bytearray(b"hello world")
    result = memset(buf, 0x141, 5)
    assert result is buf
    assert set(buf[:5]) == {0x41}
    assert buf[5:] == b" world"


def test_calloc_zeroed():
    buf = calloc(4, 8)
    assert len(buf) == 32
    assert not any(buf)


@pytest.mark.parametrize("count, size", [(0, 5), (5, 0), (0, 0)])
def test_calloc_empty(count, size):
    assert calloc(count, size) == bytearray()


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX // 2 + 1, 2)


def test_memchr_finds_first():
    data = b"abcabc"
    index = memchr(data, ord("c"), len(data))
    assert index == data.index(b"c")


def test_memchr_respects_length_and_byte_reduction():
    data = b"abcabc"
    assert memchr(data, ord("c"), 2) is None
    assert memchr(data, ord("b") + 256, 6) == data.index(b"b")


def test_memcmp_sign_and_equality():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_uses_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) == 0xFF - 0x01


def test_memcpy_copies_prefix():
    dest = bytearray(b"xxxxxx")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == b"abcxxx"


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_memmove_overlap_backward():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)