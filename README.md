# tcpstack

This package holds the receiving half of a TCP implementation. Each piece is a plain Python object that you drive by hand, which makes the package useful for tests, teaching and simulations. It does no socket I/O. You feed it messages, and it tells you what it would acknowledge.

## Components

- `tcpstack.wrapping_integers.Wrap32` is a 32-bit sequence number that wraps around after `2**32 - 1`.
  - `Wrap32.wrap(n, zero_point)` turns an absolute index into a wrapped sequence number.
  - `seqno.unwrap(zero_point, checkpoint)` recovers the absolute index closest to `checkpoint`.
  - `raw_value` gives the underlying 32-bit integer.
  - Adding an `int` yields a new `Wrap32`.
  - Two `Wrap32` values compare equal when their raw values match.
- `tcpstack.byte_stream.ByteStream` is a bounded in-memory byte pipe.
  - Writing side: `push`, `close`, `is_closed`, `available_capacity` and `bytes_pushed`.
  - Reading side: `peek`, `pop`, `is_finished`, `bytes_buffered` and `bytes_popped`.
  - Error flag: `set_error` and `has_error`.
  - `push` accepts only as many bytes as the free capacity allows. It does nothing once the stream is closed or has an error.
  - `pop` does nothing if asked for more bytes than are buffered.
- `tcpstack.byte_stream.read(stream, length)` peeks and pops up to `length` bytes and returns them as `bytes`.
- `tcpstack.reassembler.Reassembler` accepts substrings that may be indexed out of order or overlap.
  - It writes them in order into a `ByteStream`.
  - It drops bytes that lie beyond the stream's free capacity.
  - It closes the stream once the last substring has been written.
  - `bytes_pending()` counts the bytes still held back.
- `tcpstack.messages` holds two dataclasses:
  - `TCPSenderMessage` has `seqno`, `syn`, `payload`, `fin` and `rst`, plus `sequence_length()`.
  - `TCPReceiverMessage` has `ackno`, `window_size` and `rst`.
- `tcpstack.tcp_receiver.TCPReceiver` places incoming segments at the right stream index.
  - `send()` reports the acknowledgement number, the window size (capped at 65535) and the reset flag.
  - A segment with `rst` set marks the stream as errored.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from tcpstack.byte_stream import ByteStream, read
from tcpstack.reassembler import Reassembler
from tcpstack.wrapping_integers import Wrap32

stream = ByteStream(64)
reassembler = Reassembler(stream)
reassembler.insert(3, b"def", True)    # held back: bytes 0..2 are still missing
reassembler.insert(0, b"abc", False)   # fills the gap; both parts are written
print(read(stream, 64))                # b"abcdef"
print(stream.is_finished())            # True

isn = Wrap32(2**32 - 2)
seqno = Wrap32.wrap(5, isn)
print(seqno.raw_value)                 # 3
print(seqno.unwrap(isn, 0))            # 5
```

Receiving a segment:

```python
from tcpstack.byte_stream import ByteStream
from tcpstack.messages import TCPSenderMessage
from tcpstack.reassembler import Reassembler
from tcpstack.tcp_receiver import TCPReceiver
from tcpstack.wrapping_integers import Wrap32

stream = ByteStream(100)
receiver = TCPReceiver(Reassembler(stream))
receiver.receive(TCPSenderMessage(seqno=Wrap32(1000), syn=True, payload=b"hi"))
reply = receiver.send()
print(reply.ackno, reply.window_size)  # 1003 98
```

## What it does not do

- There is no sending side. Nothing here reads an outbound stream into segments, fills the peer's window or retransmits on a timer.
- There are no sockets, network interfaces or routing.
- There is no command-line tool.