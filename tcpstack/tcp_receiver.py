"""The receiving side of a TCP connection."""

from __future__ import annotations

from tcpstack.byte_stream import ByteStream
from tcpstack.messages import TCPReceiverMessage, TCPSenderMessage
from tcpstack.reassembler import Reassembler
from tcpstack.wrapping_integers import Wrap32

_MAX_WINDOW = 0xFFFF


class TCPReceiver:
    """Feeds incoming segments into a Reassembler and reports acknowledgements."""

    def __init__(self, reassembler: Reassembler) -> None:
        self._reassembler = reassembler
        self._zero_point: Wrap32 | None = None

    @property
    def reassembler(self) -> Reassembler:
        return self._reassembler

    @property
    def stream(self) -> ByteStream:
        """The byte stream the received data is written to."""
        return self._reassembler.stream

    def receive(self, message: TCPSenderMessage) -> None:
        """Process a segment from the peer's sender."""
        stream = self.stream
        if stream.is_closed():
            return

        if message.rst:
            stream.set_error()
            return

        if self._zero_point is None:
            if not message.syn:
                return
            self._zero_point = message.seqno

        # Data that carries no SYN starts one sequence number after the zero point.
        base = self._zero_point if message.syn else self._zero_point + 1
        first_index = message.seqno.unwrap(base, stream.bytes_pushed())
        self._reassembler.insert(first_index, message.payload, message.fin)

    def send(self) -> TCPReceiverMessage:
        """Build the message to return to the peer's sender."""
        stream = self.stream
        ackno = None
        if self._zero_point is not None:
            absolute = stream.bytes_pushed() + 1 + int(stream.is_closed())
            ackno = Wrap32.wrap(absolute, self._zero_point)
        window = min(stream.available_capacity(), _MAX_WINDOW)
        return TCPReceiverMessage(ackno=ackno, window_size=window, rst=stream.has_error())