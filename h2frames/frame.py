"""Parsing and validation of HTTP/2 frames."""

import struct
from dataclasses import dataclass

from h2frames.errors import ErrorCode, Http2Error
from h2frames.protocol import Flags, FrameType, SettingsType

HEADER_SIZE = 9
SETTINGS_ITEM_SIZE = 6
MAX_PAYLOAD_LENGTH = 0xFFFFFF
RESERVED_BIT = 0x80000000

_ITEM = struct.Struct(">HI")
_TAIL = struct.Struct(">BBI")
_U32 = struct.Struct(">I")


def _u32(payload: bytes, offset: int) -> int:
    if len(payload) < offset + 4:
        raise Http2Error(ErrorCode.FRAME_SIZE_ERROR, "Frame payload is too short")
    return _U32.unpack_from(payload, offset)[0]


def _strip_padding(payload: bytes) -> bytes:
    if not payload:
        raise Http2Error(ErrorCode.PROTOCOL_ERROR, "Missing padding length")
    pad = payload[0]
    if pad > len(payload) - 1:
        raise Http2Error(ErrorCode.PROTOCOL_ERROR, "Padding exceeds payload")
    return payload[1 : len(payload) - pad]


@dataclass(frozen=True)
class SettingsItem:
    """One parameter of a SETTINGS frame."""

    type: int
    value: int

    def pack(self) -> bytes:
        return _ITEM.pack(self.type, self.value)

    @classmethod
    def unpack(cls, data: bytes) -> "SettingsItem":
        if len(data) < SETTINGS_ITEM_SIZE:
            raise ValueError("not enough data for a settings item")
        ident, value = _ITEM.unpack_from(data)
        try:
            ident = SettingsType(ident)
        except ValueError:
            pass
        return cls(ident, value)


@dataclass(frozen=True)
class FrameHeader:
    """The fixed nine-byte header that starts every frame."""

    length: int
    type: int
    flags: int = 0
    stream_id: int = 0

    @property
    def payload_size(self) -> int:
        return self.length

    def pack(self) -> bytes:
        if not 0 <= self.length <= MAX_PAYLOAD_LENGTH:
            raise ValueError(f"payload length {self.length} does not fit in 24 bits")
        return self.length.to_bytes(3, "big") + _TAIL.pack(self.type, self.flags, self.stream_id)

    @classmethod
    def unpack(cls, data: bytes) -> "FrameHeader":
        if len(data) < HEADER_SIZE:
            raise ValueError("not enough data for a frame header")
        length = int.from_bytes(data[:3], "big")
        ftype, flags, stream_id = _TAIL.unpack_from(data, 3)
        try:
            ftype = FrameType(ftype)
        except ValueError:
            pass
        return cls(length, ftype, flags, stream_id)


@dataclass(frozen=True)
class Frame:
    """A complete frame: its header and the raw bytes it was read from."""

    header: FrameHeader
    raw: bytes

    @property
    def type(self) -> int:
        return self.header.type

    @property
    def flags(self) -> int:
        return self.header.flags

    @property
    def stream_id(self) -> int:
        return self.header.stream_id

    def payload(self) -> bytes:
        return self.raw[HEADER_SIZE : HEADER_SIZE + self.header.length]


class DataFrame(Frame):
    def data(self) -> bytes:
        """Application data with any padding removed."""
        payload = self.payload()
        if self.flags & Flags.PADDED:
            payload = _strip_padding(payload)
        return payload


class HeadersFrame(Frame):
    def header_block(self) -> bytes:
        """The header block fragment, without padding and priority fields."""
        payload = self.payload()
        if self.flags & Flags.PADDED:
            payload = _strip_padding(payload)
        if self.flags & Flags.PRIORITY:
            if len(payload) < 5:
                raise Http2Error(ErrorCode.FRAME_SIZE_ERROR, "Missing priority fields")
            payload = payload[5:]
        return payload


class PriorityFrame(Frame):
    @property
    def priority(self) -> int:
        return _u32(self.payload(), 0)

    @property
    def weight(self) -> int:
        payload = self.payload()
        if len(payload) < 5:
            raise Http2Error(ErrorCode.FRAME_SIZE_ERROR, "Frame payload is too short")
        return payload[4]


class ResetFrame(Frame):
    @property
    def code(self) -> int:
        value = _u32(self.payload(), 0)
        try:
            return ErrorCode(value)
        except ValueError:
            return value


class SettingsFrame(Frame):
    def items(self) -> list[SettingsItem]:
        payload = self.payload()
        count = len(payload) // SETTINGS_ITEM_SIZE
        return [
            SettingsItem.unpack(payload[i * SETTINGS_ITEM_SIZE : (i + 1) * SETTINGS_ITEM_SIZE])
            for i in range(count)
        ]


class PushPromiseFrame(Frame):
    pass


class PingFrame(Frame):
    @property
    def opaque_data(self) -> bytes:
        return self.payload()[:8]


class GoawayFrame(Frame):
    @property
    def last_stream_id(self) -> int:
        return _u32(self.payload(), 0)

    @property
    def error(self) -> int:
        value = _u32(self.payload(), 4)
        try:
            return ErrorCode(value)
        except ValueError:
            return value

    def additional(self) -> bytes:
        """Opaque debug data that follows the fixed GOAWAY fields."""
        return self.payload()[8:]


class WindowUpdateFrame(Frame):
    @property
    def window_size(self) -> int:
        return _u32(self.payload(), 0)


class ContinuationFrame(Frame):
    def header_block(self) -> bytes:
        return self.payload()


_FRAME_CLASSES = {
    FrameType.DATA: DataFrame,
    FrameType.HEADERS: HeadersFrame,
    FrameType.PRIORITY: PriorityFrame,
    FrameType.RST_STREAM: ResetFrame,
    FrameType.SETTINGS: SettingsFrame,
    FrameType.PUSH_PROMISE: PushPromiseFrame,
    FrameType.PING: PingFrame,
    FrameType.GOAWAY: GoawayFrame,
    FrameType.WINDOW_UPDATE: WindowUpdateFrame,
    FrameType.CONTINUATION: ContinuationFrame,
}


def _protocol_error(text: str) -> Http2Error:
    return Http2Error(ErrorCode.PROTOCOL_ERROR, text)


def _frame_size_error(text: str) -> Http2Error:
    return Http2Error(ErrorCode.FRAME_SIZE_ERROR, text)


class FrameAnalyzer:
    """A view of one frame at the start of a byte buffer, complete or not."""

    __slots__ = ("_buffer", "_header")

    def __init__(self, buffer: bytes) -> None:
        self._header = FrameHeader.unpack(buffer)
        self._buffer = bytes(buffer[: HEADER_SIZE + self._header.length])

    @classmethod
    def from_buffer(cls, buffer: bytes) -> "FrameAnalyzer":
        """Analyse the frame that starts the buffer; needs at least min_size() bytes."""
        if len(buffer) < cls.min_size():
            raise ValueError("not enough data for a valid frame")
        return cls(buffer)

    @staticmethod
    def min_size() -> int:
        return HEADER_SIZE

    def is_complete(self) -> bool:
        return self.size() <= len(self._buffer)

    def frame_header(self) -> FrameHeader:
        return self._header

    def size(self) -> int:
        """Size of the whole frame, known even when it is incomplete."""
        return HEADER_SIZE + self._header.length

    def raw_bytes(self) -> bytes:
        """The frame's bytes that are present, at most size() of them."""
        return self._buffer

    def payload(self) -> bytes:
        return self._buffer[HEADER_SIZE:]

    def get_frame(self, frame_type: FrameType) -> Frame:
        """Return the complete frame as the class of the given type."""
        if self._header.type != frame_type:
            raise ValueError("Can't cast to frame type")
        if not self.is_complete():
            raise ValueError("frame is not complete")
        return _FRAME_CLASSES[FrameType(frame_type)](self._header, self._buffer)

    def check(self, max_frame_size: int) -> None:
        """Raise Http2Error when the frame header is not valid."""
        header = self._header
        if header.type > FrameType.CONTINUATION:
            raise _protocol_error("Unknown frame type")
        if header.payload_size > max_frame_size:
            raise _frame_size_error("Overflow payload size")
        self._CHECKS[FrameType(header.type)](header)

    @staticmethod
    def _check_flags(header: FrameHeader, mask: int) -> None:
        if header.flags & ~mask:
            raise _protocol_error("Invalid flag")

    @staticmethod
    def _check_stream_bound(header: FrameHeader) -> None:
        if header.stream_id & RESERVED_BIT or header.stream_id == 0:
            raise _protocol_error("Invalid stream ID")

    @staticmethod
    def _check_connection_bound(header: FrameHeader) -> None:
        if header.stream_id != 0:
            raise _protocol_error("Invalid stream id")

    @staticmethod
    def _check_data_frame(header: FrameHeader) -> None:
        FrameAnalyzer._check_flags(header, Flags.DATA_ALLOWED_FLAGS_MASK)
        FrameAnalyzer._check_stream_bound(header)

    @staticmethod
    def _check_header_block(header: FrameHeader, mask: int) -> None:
        FrameAnalyzer._check_flags(header, mask)
        FrameAnalyzer._check_stream_bound(header)
        if header.payload_size == 0 and header.flags & Flags.END_HEADERS:
            raise _frame_size_error("Unexpected empty frame payload")

    @staticmethod
    def _check_headers_frame(header: FrameHeader) -> None:
        FrameAnalyzer._check_header_block(header, Flags.HEADERS_ALLOWED_FLAGS_MASK)

    @staticmethod
    def _check_continuation_frame(header: FrameHeader) -> None:
        FrameAnalyzer._check_header_block(header, Flags.CONTINUATION_ALLOWED_FLAGS_MASK)

    @staticmethod
    def _check_nothing(header: FrameHeader) -> None:
        return None

    @staticmethod
    def _check_settings_frame(header: FrameHeader) -> None:
        FrameAnalyzer._check_flags(header, Flags.SETTINGS_ALLOWED_FLAGS_MASK)
        FrameAnalyzer._check_connection_bound(header)
        if header.payload_size % SETTINGS_ITEM_SIZE != 0:
            raise _frame_size_error("Invalid settings size")

    @staticmethod
    def _check_push_frame(header: FrameHeader) -> None:
        raise Http2Error(ErrorCode.INTERNAL_ERROR, "PUSH is not supported")

    @staticmethod
    def _check_ping_frame(header: FrameHeader) -> None:
        FrameAnalyzer._check_flags(header, Flags.PING_ALLOWED_FLAGS_MASK)
        FrameAnalyzer._check_connection_bound(header)
        if header.payload_size > 64:
            raise _frame_size_error("Invalid payload size")

    @staticmethod
    def _check_window_update_frame(header: FrameHeader) -> None:
        if header.flags != 0:
            raise _protocol_error("Invalid flag")
        if header.stream_id & RESERVED_BIT:
            raise _protocol_error("Invalid stream ID")

    _CHECKS = {
        FrameType.DATA: _check_data_frame.__func__,
        FrameType.HEADERS: _check_headers_frame.__func__,
        FrameType.PRIORITY: _check_nothing.__func__,
        FrameType.RST_STREAM: _check_nothing.__func__,
        FrameType.SETTINGS: _check_settings_frame.__func__,
        FrameType.PUSH_PROMISE: _check_push_frame.__func__,
        FrameType.PING: _check_ping_frame.__func__,
        FrameType.GOAWAY: _check_nothing.__func__,
        FrameType.WINDOW_UPDATE: _check_window_update_frame.__func__,
        FrameType.CONTINUATION: _check_continuation_frame.__func__,
    }