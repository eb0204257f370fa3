"""A fixed-size byte buffer read from the start and written at the end."""

from __future__ import annotations


class RingBufferError(Exception):
    """Raised when a RingBuffer read or write cannot be satisfied."""


class RingBuffer:
    """Byte buffer able to hold ``length`` bytes of unread data."""

    def __init__(self, length: int) -> None:
        if length < 0:
            raise RingBufferError(f"length can't be negative: {length}")
        self.length = length + 1
        self.start = 0
        self.end = 0
        self._buffer = bytearray(self.length)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(length={self.length - 1}, "
            f"start={self.start}, end={self.end})"
        )

    @property
    def available_data(self) -> int:
        """Number of bytes waiting to be read."""
        return self.end % self.length - self.start

    @property
    def available_space(self) -> int:
        """Number of bytes that can still be written."""
        return self.length - self.end - 1

    @property
    def full(self) -> bool:
        return self.available_space == 0

    @property
    def empty(self) -> bool:
        return self.available_data == 0

    def _commit_read(self, amount: int) -> None:
        self.start = (self.start + amount) % self.length

    def _commit_write(self, amount: int) -> None:
        self.end = (self.end + amount) % self.length

    def write(self, data: bytes) -> int:
        """Append ``data`` and return the number of bytes written."""
        if self.available_data == 0:
            self.start = self.end = 0
        size = len(data)
        if size > self.available_space:
            raise RingBufferError(
                f"not enough space: {size} requested, "
                f"{self.available_space} available"
            )
        self._buffer[self.end:self.end + size] = data
        self._commit_write(size)
        return size

    def _take(self, amount: int) -> bytes:
        if amount > self.available_data:
            raise RingBufferError(
                f"not enough in the buffer: has {self.available_data}, "
                f"needs {amount}"
            )
        chunk = bytes(self._buffer[self.start:self.start + amount])
        self._commit_read(amount)
        return chunk

    def read(self, amount: int) -> bytes:
        """Remove and return ``amount`` bytes."""
        chunk = self._take(amount)
        if self.end == self.start:
            self.start = self.end = 0
        return chunk

    def gets(self, amount: int) -> bytes:
        """Remove and return ``amount`` bytes; ``amount`` must be positive."""
        if amount <= 0:
            raise RingBufferError(f"need more than 0 for gets, got {amount}")
        return self._take(amount)

    def get_all(self) -> bytes:
        """Remove and return all unread bytes."""
        return self.gets(self.available_data)

    def clear(self) -> None:
        """Discard all unread bytes."""
        self._commit_read(self.available_data)