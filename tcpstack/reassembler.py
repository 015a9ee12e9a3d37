"""Reassembles indexed, possibly overlapping substrings into a byte stream."""

from __future__ import annotations

import heapq

from tcpstack.byte_stream import ByteStream


class Reassembler:
    """Writes substrings into a ByteStream in order, holding early ones until gaps fill."""

    def __init__(self, output: ByteStream) -> None:
        self._output = output
        self._storage: list[tuple[int, bytes]] = []
        self._expected_begin = 0
        self._last_index: int | None = None

    @property
    def stream(self) -> ByteStream:
        """The stream the reassembled bytes are written to."""
        return self._output

    def insert(self, first_index: int, data: bytes, is_last_substring: bool) -> None:
        """Insert ``data`` that starts at stream index ``first_index``."""
        available = self._output.available_capacity()
        window_end = self._expected_begin + available

        if first_index + len(data) < self._expected_begin or window_end < first_index:
            return

        if is_last_substring:
            self._last_index = first_index + len(data)

        heapq.heappush(self._storage, (first_index, bytes(data[: window_end - first_index])))

        if self._storage[0][0] <= self._expected_begin:
            self._flush()

    def _flush(self) -> None:
        while self._storage:
            first_index, data = self._storage[0]
            if first_index > self._expected_begin:
                break
            heapq.heappop(self._storage)

            end = first_index + len(data)
            if self._expected_begin > end:
                continue

            self._output.push(data[self._expected_begin - first_index:])
            self._expected_begin = end

            if self._last_index is not None and end >= self._last_index:
                self._output.close()

    def bytes_pending(self) -> int:
        """Number of distinct bytes held back, waiting for earlier bytes."""
        total = 0
        prev_index = 0
        for first_index, data in sorted(self._storage):
            if prev_index == 0:
                prev_index = first_index
            end = first_index + len(data)
            if end < prev_index:
                continue
            offset = 0 if first_index > prev_index else prev_index - first_index
            if first_index < self._expected_begin:
                offset = self._expected_begin - first_index
            total += len(data) - offset
            prev_index = end
        return total