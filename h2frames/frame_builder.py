"""Builders for the wire form of outgoing HTTP/2 frames."""

import struct
from collections.abc import Iterable

from h2frames.frame import HEADER_SIZE, FrameHeader, SettingsItem
from h2frames.protocol import Flags, FrameType

DEFAULT_LAST_STREAM_ID = 3372220416
"""Last stream id written into a GOAWAY frame when none is given."""

PING_DATA_SIZE = 8
"""Size of the opaque data carried by a PING frame."""

_U32 = struct.Struct(">I")
_GOAWAY = struct.Struct(">II")


def _header(length: int, frame_type: FrameType, flags: int = 0, stream_id: int = 0) -> bytes:
    return FrameHeader(length, frame_type, flags, stream_id).pack()


def goaway(
    err: int,
    last_stream_id: int = DEFAULT_LAST_STREAM_ID,
    additional: bytes = b"",
) -> bytes:
    """A GOAWAY frame with an error code and optional debug data."""
    payload = _GOAWAY.pack(last_stream_id, int(err)) + bytes(additional)
    return _header(len(payload), FrameType.GOAWAY) + payload


def ping(additional: bytes = b"") -> bytes:
    """A PING frame; the opaque data is cut or zero-filled to eight bytes."""
    payload = bytes(additional)[:PING_DATA_SIZE].ljust(PING_DATA_SIZE, b"\0")
    return _header(len(payload), FrameType.PING) + payload


def reset(err: int, stream_id: int = 0) -> bytes:
    """An RST_STREAM frame for the given stream."""
    payload = _U32.pack(int(err))
    return _header(len(payload), FrameType.RST_STREAM, 0, stream_id) + payload


def update_window(size: int, stream_id: int = 0) -> bytes:
    """A WINDOW_UPDATE frame; stream 0 addresses the whole connection."""
    payload = _U32.pack(size)
    return _header(len(payload), FrameType.WINDOW_UPDATE, 0, stream_id) + payload


def settings(fields: Iterable[SettingsItem]) -> bytes:
    """A SETTINGS frame carrying the given parameters."""
    payload = b"".join(item.pack() for item in fields)
    return _header(len(payload), FrameType.SETTINGS) + payload


def settings_ack() -> bytes:
    """An empty SETTINGS frame with the ACK flag."""
    return _header(0, FrameType.SETTINGS, Flags.ACK)


def headers(stream_id: int, flags: int, payload_size: int) -> bytes:
    """The start of a HEADERS frame: the header and any padding or priority fields.

    The header block itself follows separately; payload_size is its full length.
    """
    extra = (1 if flags & Flags.PADDED else 0) + (5 if flags & Flags.PRIORITY else 0)
    return _header(payload_size, FrameType.HEADERS, flags, stream_id) + bytes(extra)


def continuation(stream_id: int, flags: int, payload_size: int) -> bytes:
    """The header of a CONTINUATION frame whose block follows separately."""
    return _header(payload_size, FrameType.CONTINUATION, flags, stream_id)


def data(stream_id: int, flags: int, payload_size: int) -> tuple[bytearray, memoryview]:
    """A DATA frame buffer and a writable view of the region for its payload."""
    prefix = 1 if flags & Flags.PADDED else 0
    buffer = bytearray(_header(payload_size, FrameType.DATA, flags, stream_id))
    buffer.extend(bytes(prefix + payload_size))
    start = HEADER_SIZE + prefix
    return buffer, memoryview(buffer)[start : start + payload_size]