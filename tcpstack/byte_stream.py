"""A bounded, in-memory byte stream with a writing and a reading side."""

from __future__ import annotations

from collections import deque


class ByteStream:
    """A flow-controlled byte stream: writes are limited by the free capacity."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._buffer: deque[bytes] = deque()
        self._error = False
        self._closed = False
        self._pushed = 0
        self._popped = 0
        self._buffered = 0
        self._front_offset = 0

    # Writing side

    def push(self, data: bytes) -> None:
        """Push as much of ``data`` as the available capacity allows."""
        if self._closed or self._error:
            return
        accepted = min(self.available_capacity(), len(data))
        if accepted == 0:
            return
        self._buffer.append(bytes(data[:accepted]))
        self._pushed += accepted
        self._buffered += accepted

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._closed = True

    def set_error(self) -> None:
        """Mark the stream as having suffered an error."""
        self._error = True

    def has_error(self) -> bool:
        return self._error

    def is_closed(self) -> bool:
        return self._closed

    def available_capacity(self) -> int:
        return self.capacity - self._buffered

    def bytes_pushed(self) -> int:
        return self._pushed

    # Reading side

    def peek(self) -> bytes:
        """Return the next buffered bytes without removing them (possibly not all of them)."""
        if not self._buffer:
            return b""
        return self._buffer[0][self._front_offset:]

    def pop(self, length: int) -> None:
        """Remove ``length`` bytes; does nothing if fewer are buffered."""
        if length < 0:
            raise ValueError("length must not be negative")
        if length > self._buffered:
            return
        self._popped += length
        self._buffered -= length
        while length > 0:
            left = len(self._buffer[0]) - self._front_offset
            if left <= length:
                self._buffer.popleft()
                self._front_offset = 0
                length -= left
            else:
                self._front_offset += length
                break

    def is_finished(self) -> bool:
        """True once the stream is closed and everything has been popped."""
        return self._closed and self._buffered == 0

    def bytes_buffered(self) -> int:
        return self._buffered

    def bytes_popped(self) -> int:
        return self._popped


def read(stream: ByteStream, length: int) -> bytes:
    """Peek and pop up to ``length`` bytes from ``stream``."""
    parts: list[bytes] = []
    collected = 0
    while stream.bytes_buffered() and collected < length:
        view = stream.peek()
        if not view:
            raise RuntimeError("peek() returned no bytes while bytes are buffered")
        view = view[: length - collected]
        parts.append(view)
        collected += len(view)
        stream.pop(len(view))
    return b"".join(parts)