from h2frames import frame_builder
from h2frames.errors import ErrorCode
from h2frames.frame import HEADER_SIZE, SETTINGS_ITEM_SIZE, FrameAnalyzer, FrameHeader, SettingsItem
from h2frames.protocol import Flags, FrameType, SettingsType

MAX_FRAME = 16384


def _parse(buffer, frame_type):
    analyzer = FrameAnalyzer.from_buffer(bytes(buffer))
    analyzer.check(MAX_FRAME)
    return analyzer.get_frame(frame_type)


def test_goaway_round_trip():
    frame = _parse(frame_builder.goaway(ErrorCode.PROTOCOL_ERROR, 1, b"debug"), FrameType.GOAWAY)
    assert frame.last_stream_id == 1
    assert frame.error == ErrorCode.PROTOCOL_ERROR
    assert frame.additional() == b"debug"
    assert frame.stream_id == 0


def test_goaway_default_last_stream_id():
    frame = _parse(frame_builder.goaway(ErrorCode.IS_OK), FrameType.GOAWAY)
    assert frame.last_stream_id == frame_builder.DEFAULT_LAST_STREAM_ID
    assert frame.additional() == b""


def test_ping_keeps_eight_bytes():
    frame = _parse(frame_builder.ping(b"abcdefgh"), FrameType.PING)
    assert frame.opaque_data == b"abcdefgh"
    assert frame.flags == 0
    assert frame.stream_id == 0


def test_ping_short_data_is_zero_filled():
    frame = _parse(frame_builder.ping(b"ab"), FrameType.PING)
    assert len(frame.opaque_data) == frame_builder.PING_DATA_SIZE
    assert frame.opaque_data.startswith(b"ab")
    assert frame.opaque_data[2:] == bytes(frame_builder.PING_DATA_SIZE - 2)


def test_ping_long_data_is_truncated():
    payload = b"0123456789abcdef"
    frame = _parse(frame_builder.ping(payload), FrameType.PING)
    assert frame.opaque_data == payload[: frame_builder.PING_DATA_SIZE]


def test_ping_default_is_empty_payload():
    frame = _parse(frame_builder.ping(), FrameType.PING)
    assert frame.opaque_data == bytes(frame_builder.PING_DATA_SIZE)


def test_reset_round_trip():
    frame = _parse(frame_builder.reset(ErrorCode.CANCEL, 7), FrameType.RST_STREAM)
    assert frame.code == ErrorCode.CANCEL
    assert frame.stream_id == 7


def test_update_window_round_trip():
    frame = _parse(frame_builder.update_window(65535, 3), FrameType.WINDOW_UPDATE)
    assert frame.window_size == 65535
    assert frame.stream_id == 3
    assert frame.flags == 0


def test_settings_round_trip():
    items = [
        SettingsItem(SettingsType.MAX_CONCURRENT_STREAMS, 100),
        SettingsItem(SettingsType.INITIAL_WINDOW_SIZE, 65535),
    ]
    frame = _parse(frame_builder.settings(items), FrameType.SETTINGS)
    assert frame.items() == items
    assert len(frame.payload()) == SETTINGS_ITEM_SIZE * len(items)


def test_settings_empty():
    buffer = frame_builder.settings([])
    assert len(buffer) == HEADER_SIZE
    assert _parse(buffer, FrameType.SETTINGS).items() == []


def test_settings_ack_wire_bytes():
    assert frame_builder.settings_ack() == bytes.fromhex("000000040100000000")


def test_headers_length_field_and_extras():
    plain = frame_builder.headers(1, Flags.END_HEADERS, 10)
    assert len(plain) == HEADER_SIZE
    assert FrameHeader.unpack(plain) == FrameHeader(10, FrameType.HEADERS, Flags.END_HEADERS, 1)

    padded = frame_builder.headers(1, Flags.PADDED, 10)
    priority = frame_builder.headers(1, Flags.PRIORITY, 10)
    both = frame_builder.headers(1, Flags.PADDED | Flags.PRIORITY, 10)
    assert len(padded) == HEADER_SIZE + 1
    assert (len(padded) - HEADER_SIZE) + (len(priority) - HEADER_SIZE) == len(both) - HEADER_SIZE


def test_continuation_header():
    buffer = frame_builder.continuation(5, Flags.END_HEADERS, 42)
    assert len(buffer) == HEADER_SIZE
    assert FrameHeader.unpack(buffer) == FrameHeader(42, FrameType.CONTINUATION, Flags.END_HEADERS, 5)


def test_data_view_writes_into_buffer():
    buffer, view = frame_builder.data(3, Flags.END_STREAM, 5)
    assert len(view) == 5
    assert len(buffer) == HEADER_SIZE + 5
    view[:] = b"hello"
    frame = _parse(buffer, FrameType.DATA)
    assert frame.data() == b"hello"
    assert frame.stream_id == 3
    assert frame.flags == Flags.END_STREAM


def test_data_padded_leaves_pad_length_byte():
    buffer, view = frame_builder.data(1, Flags.PADDED, 4)
    view[:] = b"abcd"
    assert len(buffer) == HEADER_SIZE + 1 + 4
    assert buffer[HEADER_SIZE] == 0
    assert bytes(buffer[HEADER_SIZE + 1 :]) == b"abcd"