import pytest

from datakit.ringbuffer import RingBuffer, RingBufferError


def test_read_write():
    buffer = RingBuffer(100)
    data = bytes(100)

    assert buffer.empty
    assert not buffer.full
    assert buffer.available_data == 0
    assert buffer.available_space == 100

    assert buffer.write(data) == 100
    assert buffer.available_space == 0
    assert buffer.available_data == 100
    assert buffer.full
    assert not buffer.empty
    buffer.clear()

    assert buffer.write(b"hello\0") == 6
    assert buffer.available_data == 6
    assert buffer.available_space == 100 - 6

    assert buffer.write(b"Zed\0") == 4
    assert not buffer.empty
    assert not buffer.full

    assert buffer.read(6) == b"hello\0"
    assert not buffer.empty
    assert not buffer.full

    assert buffer.read(4) == b"Zed\0"
    assert buffer.empty

    assert buffer.write(b"Hello Again") == 11
    assert not buffer.empty

    assert buffer.gets(2) == b"He"
    assert buffer.get_all() == b"llo Again"


def test_write_too_much_raises():
    buffer = RingBuffer(4)
    with pytest.raises(RingBufferError):
        buffer.write(b"12345")
    assert buffer.empty


def test_read_too_much_raises():
    buffer = RingBuffer(10)
    buffer.write(b"abc")
    with pytest.raises(RingBufferError):
        buffer.read(4)
    assert buffer.available_data == 3


def test_gets_zero_raises():
    buffer = RingBuffer(10)
    buffer.write(b"abc")
    with pytest.raises(RingBufferError):
        buffer.gets(0)


def test_get_all_on_empty_raises():
    buffer = RingBuffer(10)
    with pytest.raises(RingBufferError):
        buffer.get_all()


def test_write_after_draining_resets_positions():
    buffer = RingBuffer(5)
    buffer.write(b"abcde")
    assert buffer.read(5) == b"abcde"
    assert (buffer.start, buffer.end) == (0, 0)
    assert buffer.write(b"xyz") == 3
    assert buffer.read(3) == b"xyz"