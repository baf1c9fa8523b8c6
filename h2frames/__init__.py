"""HTTP/2 frame parsing and building, flow-control windows and a TLS connection negotiating h2."""

__version__ = "0.1.0"
__all__ = ["connection", "errors", "frame", "frame_builder", "protocol", "window"]