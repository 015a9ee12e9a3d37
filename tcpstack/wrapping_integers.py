"""32-bit sequence numbers that start at an arbitrary zero point and wrap around."""

from __future__ import annotations

_INTERVAL = 1 << 32
_HALF_INTERVAL = _INTERVAL // 2
_MASK32 = _INTERVAL - 1
_MASK64 = (1 << 64) - 1


class Wrap32:
    """An unsigned 32-bit integer that wraps back to zero after 2**32 - 1."""

    __slots__ = ("_raw",)

    def __init__(self, raw_value: int) -> None:
        self._raw = raw_value & _MASK32

    @property
    def raw_value(self) -> int:
        """The underlying 32-bit value."""
        return self._raw

    @staticmethod
    def wrap(n: int, zero_point: Wrap32) -> Wrap32:
        """Wrap the absolute sequence number ``n`` relative to ``zero_point``."""
        return zero_point + (n & _MASK32)

    def unwrap(self, zero_point: Wrap32, checkpoint: int) -> int:
        """Return the absolute sequence number closest to ``checkpoint`` that wraps to this value."""
        abs_seqno = (self._raw - zero_point._raw) & _MASK32
        if abs_seqno > checkpoint:
            return abs_seqno

        bias = checkpoint - abs_seqno
        abs_seqno += bias // _INTERVAL * _INTERVAL
        past_half = (bias // _HALF_INTERVAL) % 2 == 1
        if past_half and abs_seqno + _INTERVAL <= _MASK64:
            abs_seqno += _INTERVAL
        return abs_seqno

    def __add__(self, n: int) -> Wrap32:
        if not isinstance(n, int):
            return NotImplemented
        return Wrap32(self._raw + n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wrap32):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Wrap32({self._raw})"

    def __str__(self) -> str:
        return str(self._raw)