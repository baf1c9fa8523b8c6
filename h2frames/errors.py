"""HTTP/2 error codes and the exception that carries them."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes used in RST_STREAM and GOAWAY frames."""

    IS_OK = 0x0
    PROTOCOL_ERROR = 0x1
    INTERNAL_ERROR = 0x2
    FLOW_CONTROL_ERROR = 0x3
    SETTINGS_TIMEOUT = 0x4
    STREAM_CLOSED = 0x5
    FRAME_SIZE_ERROR = 0x6
    REFUSED_STREAM = 0x7
    CANCEL = 0x8
    COMPRESSION_ERROR = 0x9
    CONNECT_ERROR = 0xA
    ENHANCE_YOUR_CALM = 0xB
    INADEQUATE_SECURITY = 0xC
    HTTP_1_1_REQUIRED = 0xD

    def message(self) -> str:
        """Human readable description of the code."""
        return _MESSAGES[self]

    def failed(self) -> bool:
        """True for every code except IS_OK."""
        return self is not ErrorCode.IS_OK


_MESSAGES = {
    ErrorCode.IS_OK: "No error",
    ErrorCode.PROTOCOL_ERROR: "Protocol error",
    ErrorCode.INTERNAL_ERROR: "Internal error",
    ErrorCode.FLOW_CONTROL_ERROR: "Flow control error",
    ErrorCode.SETTINGS_TIMEOUT: "Settings timeout",
    ErrorCode.STREAM_CLOSED: "Stream closed",
    ErrorCode.FRAME_SIZE_ERROR: "Frame size error",
    ErrorCode.REFUSED_STREAM: "Refused stream",
    ErrorCode.CANCEL: "Canceled",
    ErrorCode.COMPRESSION_ERROR: "Compression error",
    ErrorCode.CONNECT_ERROR: "Connect error",
    ErrorCode.ENHANCE_YOUR_CALM: "Enhace your calm",
    ErrorCode.INADEQUATE_SECURITY: "Inadequate security",
    ErrorCode.HTTP_1_1_REQUIRED: "HTTP1.1 required",
}

ERROR_CATEGORY = "HTTP2"


def error_message(code: int) -> str:
    """Describe an error code, including codes this package does not know."""
    try:
        return ErrorCode(code).message()
    except ValueError:
        return f"Unknown HTTP2 error {int(code)}"


class Http2Error(Exception):
    """A connection-level or stream-level HTTP/2 failure."""

    def __init__(self, code: int, message: str | None = None) -> None:
        try:
            self.code: int = ErrorCode(code)
        except ValueError:
            self.code = int(code)
        self.message = message if message is not None else error_message(code)
        super().__init__(self.message)

    @property
    def category(self) -> str:
        return ERROR_CATEGORY

    def __repr__(self) -> str:
        return f"Http2Error({self.code!r}, {self.message!r})"