"""A TLS connection that negotiates HTTP/2 through ALPN."""

import asyncio
import ssl
from collections.abc import Iterable

ALPN_PROTOCOL = "h2"


class Connection:
    """An asyncio TLS stream to an HTTP/2 server."""

    def __init__(self) -> None:
        self._context: ssl.SSLContext | None = None
        self._host: str | None = None
        self._reader: asyncio.StreamReader | None = None
        self._writer: asyncio.StreamWriter | None = None
        self._endpoint = None
        self.peer_certificate: bytes | None = None

    def connected_point(self):
        """The peer address once a connection has been established, else None."""
        return self._endpoint

    def prepare_ssl(self, host: str) -> ssl.SSLContext:
        """Build the TLS context for a connection to host, offering only h2."""
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        context.set_default_verify_paths()
        # Certificates are judged by verify_certificate after the handshake.
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        context.set_alpn_protocols([ALPN_PROTOCOL])
        self._context = context
        self._host = host
        return context

    def verify_certificate(self, preverified: bool, cert: bytes | None) -> bool:
        """Record the peer certificate (DER) and accept it."""
        self.peer_certificate = cert
        return True

    async def connect(self, host: str, service: str) -> None:
        """Resolve host and service, connect and complete the TLS handshake."""
        context = self.prepare_ssl(host)
        reader, writer = await asyncio.open_connection(
            host, service, ssl=context, server_hostname=host or None
        )
        ssl_object = writer.get_extra_info("ssl_object")
        cert = ssl_object.getpeercert(binary_form=True) if ssl_object is not None else None
        if not self.verify_certificate(False, cert):
            writer.close()
            try:
                await writer.wait_closed()
            except OSError:
                pass
            raise ssl.SSLCertVerificationError("peer certificate rejected")
        self._reader = reader
        self._writer = writer
        self._endpoint = writer.get_extra_info("peername")

    def _streams(self) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
        if self._reader is None or self._writer is None:
            raise ConnectionError("Connection is not established")
        return self._reader, self._writer

    async def read(self, max_bytes: int) -> bytes:
        """Read between one and max_bytes bytes; EOFError when the peer closed."""
        reader, _ = self._streams()
        chunk = await reader.read(max_bytes)
        if not chunk:
            raise EOFError("connection closed by peer")
        return chunk

    async def write(self, buffers: Iterable[bytes]) -> int:
        """Write all buffers in order and return the number of bytes written."""
        _, writer = self._streams()
        chunks = [bytes(buffer) for buffer in buffers]
        writer.writelines(chunks)
        await writer.drain()
        return sum(len(chunk) for chunk in chunks)

    async def disconnect(self) -> None:
        """Close the connection; errors during shutdown are ignored."""
        writer = self._writer
        self._reader = None
        self._writer = None
        if writer is None:
            return
        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass