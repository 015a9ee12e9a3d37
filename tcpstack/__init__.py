"""Wrapping sequence numbers, byte streams, reassembly and a TCP receiver."""

__version__ = "0.1.0"
__all__ = ["byte_stream", "messages", "reassembler", "tcp_receiver", "wrapping_integers"]