# h2frames

Building blocks for an HTTP/2 client, using only the standard library:

- `h2frames.protocol`: the `FrameType`, `SettingsType`, `PushState` and
  `ConnectionProtocolState` enumerations, the `Flags` constants with the
  flag masks each frame type allows, `INITIAL_WINDOW_SIZE` (65535) and the
  `Settings` dataclass holding the protocol defaults.
- `h2frames.errors`: the `ErrorCode` enumeration with `message()` and
  `failed()`, `error_message(code)` (which also describes unknown codes as
  `"Unknown HTTP2 error <n>"`), and the `Http2Error` exception.
- `h2frames.frame`: `FrameHeader` and `SettingsItem` with `pack()` /
  `unpack()`, `FrameAnalyzer` for reading and checking frames, and typed
  frame classes (`DataFrame`, `HeadersFrame`, `PriorityFrame`,
  `ResetFrame`, `SettingsFrame`, `PushPromiseFrame`, `PingFrame`,
  `GoawayFrame`, `WindowUpdateFrame`, `ContinuationFrame`).
- `h2frames.frame_builder`: functions that build the wire bytes of
  outgoing frames.
- `h2frames.window`: `FlowWindow`, a receive window that produces a
  `WINDOW_UPDATE` frame once enough of it has been used.
- `h2frames.connection`: `Connection`, an asyncio TLS stream that offers
  `h2` through ALPN.

## Installation

```
pip install .
```

## Parsing and checking frames

```python
from h2frames import frame_builder
from h2frames.frame import FrameAnalyzer
from h2frames.protocol import FrameType

raw = frame_builder.ping(b"12345678")
analyzer = FrameAnalyzer.from_buffer(raw)
analyzer.check(16384)            # raises Http2Error when the frame is invalid
if analyzer.is_complete():
    frame = analyzer.get_frame(FrameType.PING)
    print(frame.opaque_data)
```

- `FrameAnalyzer.from_buffer` needs at least `FrameAnalyzer.min_size()`
  bytes (the 9-byte frame header) and raises `ValueError` otherwise.
- `size()` gives the full length of the frame from its header, even before
  all of it has arrived; `raw_bytes()` holds only the bytes present, at
  most `size()` of them; `is_complete()` tells whether all are there.
- `get_frame(frame_type)` returns the matching frame class and raises
  `ValueError` when the type differs or the frame is incomplete.
- `check(max_frame_size)` rejects unknown frame types, payloads larger
  than `max_frame_size`, disallowed flags, wrong stream ids, SETTINGS
  payloads that are not a multiple of six bytes, PING payloads over 64
  bytes and empty HEADERS/CONTINUATION payloads that carry END_HEADERS.
  PUSH_PROMISE frames are always rejected with `INTERNAL_ERROR`.

Frame classes expose `payload()`, `type`, `flags` and `stream_id`, plus:
`DataFrame.data()` and `HeadersFrame.header_block()` (padding and priority
fields removed), `ContinuationFrame.header_block()`,
`SettingsFrame.items()`, `ResetFrame.code`, `PriorityFrame.priority` and
`weight`, `GoawayFrame.last_stream_id`, `error` and `additional()`,
`WindowUpdateFrame.window_size`.

## Building frames

```python
from h2frames import frame_builder
from h2frames.errors import ErrorCode
from h2frames.frame import SettingsItem
from h2frames.protocol import Flags, SettingsType

frame_builder.settings([SettingsItem(SettingsType.MAX_FRAME_SIZE, 16384)])
frame_builder.settings_ack()
frame_builder.update_window(1000, 1)
frame_builder.reset(ErrorCode.CANCEL, 3)
frame_builder.goaway(ErrorCode.IS_OK, 1)
frame_builder.ping(b"abc")       # opaque data cut or zero-filled to 8 bytes

buffer, view = frame_builder.data(1, Flags.END_STREAM, 5)
view[:] = b"hello"               # fills the payload region of buffer
```

`headers()` returns the frame header plus zeroed padding-length and
priority fields when `PADDED` or `PRIORITY` is set; `continuation()`
returns only the header. In both the header block is appended by the
caller, and `payload_size` is the length written into the header.

## Errors

```python
from h2frames.errors import ErrorCode, Http2Error

try:
    analyzer.check(16384)
except Http2Error as exc:
    print(exc.code, exc.message, exc.category)   # category is "HTTP2"
```

## Flow control

```python
from h2frames.window import FlowWindow

window = FlowWindow(65535, 16383)
window.dec(20000)
update = window.update(0)        # WINDOW_UPDATE frame bytes, or None
window.current()                 # 65535 again after the update
```

## Connecting

```python
import asyncio
from h2frames.connection import Connection

async def main():
    conn = Connection()
    await conn.connect("example.com", "443")
    await conn.write([b"PRI * HTTP/2.0\r\n\r\nSM\r\n\r\n"])
    data = await conn.read(4096)   # EOFError if the peer closed
    await conn.disconnect()

asyncio.run(main())
```

`Connection` does not verify the server's certificate or host name: the
TLS context has verification turned off, and `verify_certificate` records
the peer certificate in `peer_certificate` and accepts it. Override
`verify_certificate` in a subclass to enforce a policy; returning `False`
makes `connect` close the socket and raise `ssl.SSLCertVerificationError`.
`read` and `write` raise `ConnectionError` before `connect` has succeeded.

## What is not included

This package stops at frames, windows and the transport. It has no HPACK
header compression, no stream or session management, no request or
response types and no command-line tool: a complete client has to decode
header blocks, track streams and drive the connection itself.

## Running the tests

```
pip install ".[test]"
pytest
```