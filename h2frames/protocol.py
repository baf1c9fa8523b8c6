"""Protocol constants, enumerations and default settings for HTTP/2."""

from dataclasses import dataclass
from enum import IntEnum

INITIAL_WINDOW_SIZE = 65535
"""Initial flow-control window size of a connection and of every stream."""

MAX_UINT32 = 0xFFFFFFFF


class FrameType(IntEnum):
    """Frame type codes."""

    DATA = 0x0
    HEADERS = 0x1
    PRIORITY = 0x2
    RST_STREAM = 0x3
    SETTINGS = 0x4
    PUSH_PROMISE = 0x5
    PING = 0x6
    GOAWAY = 0x7
    WINDOW_UPDATE = 0x8
    CONTINUATION = 0x9


class SettingsType(IntEnum):
    """Identifiers of SETTINGS parameters."""

    HEADER_TABLE_SIZE = 1
    ENABLE_PUSH = 2
    MAX_CONCURRENT_STREAMS = 3
    INITIAL_WINDOW_SIZE = 4
    MAX_FRAME_SIZE = 5
    MAX_HEADER_LIST_SIZE = 6
    ENABLE_CONNECT_PROTOCOL = 8


class PushState(IntEnum):
    """Values of the ENABLE_PUSH setting."""

    DISABLED = 0
    ENABLED = 1


class ConnectionProtocolState(IntEnum):
    """Values of the ENABLE_CONNECT_PROTOCOL setting."""

    DISABLED = 0
    ENABLED = 1


@dataclass
class Settings:
    """A full set of HTTP/2 connection settings with protocol defaults."""

    header_table_size: int = 4096
    enable_push: PushState = PushState.DISABLED
    max_concurrent_streams: int = 100
    initial_window_size: int = INITIAL_WINDOW_SIZE
    max_frame_size: int = 16384
    max_header_list_size: int = MAX_UINT32
    connection_protocol: ConnectionProtocolState = ConnectionProtocolState.DISABLED


class Flags:
    """Frame flag bits and the masks of flags each frame type allows."""

    END_STREAM = 0x1
    ACK = 0x1
    END_HEADERS = 0x4
    PADDED = 0x8
    PRIORITY = 0x20

    DATA_ALLOWED_FLAGS_MASK = END_STREAM | PADDED
    HEADERS_ALLOWED_FLAGS_MASK = END_STREAM | END_HEADERS | PADDED | PRIORITY
    PING_ALLOWED_FLAGS_MASK = ACK
    SETTINGS_ALLOWED_FLAGS_MASK = ACK
    PUSH_PROMISE_ALLOWED_FLAGS_MASK = END_HEADERS | PADDED
    CONTINUATION_ALLOWED_FLAGS_MASK = END_HEADERS