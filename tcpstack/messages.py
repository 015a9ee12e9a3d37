"""Messages exchanged between a TCP sender and the peer's TCP receiver."""

from __future__ import annotations

from dataclasses import dataclass, field

from tcpstack.wrapping_integers import Wrap32


@dataclass
class TCPSenderMessage:
    """A segment sent by a TCP sender: a sequence number, flags and a payload."""

    seqno: Wrap32 = field(default_factory=lambda: Wrap32(0))
    syn: bool = False
    payload: bytes = b""
    fin: bool = False
    rst: bool = False

    def sequence_length(self) -> int:
        """How many sequence numbers the segment occupies (SYN and FIN count as one each)."""
        return int(self.syn) + len(self.payload) + int(self.fin)


@dataclass
class TCPReceiverMessage:
    """What a TCP receiver reports back: acknowledgement, window size and reset flag."""

    ackno: Wrap32 | None = None
    window_size: int = 0
    rst: bool = False