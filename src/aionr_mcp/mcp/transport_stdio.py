"""Content-Length framed stdio transport for MCP."""

import asyncio
import logging
import sys
from typing import BinaryIO

logger = logging.getLogger(__name__)

CONTENT_LENGTH = "content-length"


class StdioTransport:
    """Reads and writes ``Content-Length`` framed messages.

    A frame is a block of ``Key: Value`` header lines, a blank line, and
    then exactly ``Content-Length`` bytes of body::

        Content-Length: 46\\r\\n
        \\r\\n
        {"jsonrpc":"2.0","method":"initialize","id":1}
    """

    def __init__(self, reader: asyncio.StreamReader, writer: BinaryIO):
        self._reader = reader
        self._writer = writer

    async def read(self) -> bytes | None:
        """
        Read the next message body.

        Frames whose headers carry no usable ``Content-Length`` are skipped
        and reading carries on with the next frame.

        Returns:
            The raw body bytes, or None once the input is exhausted.
        """
        while True:
            headers = await self._read_headers()
            if headers is None:
                return None
            content_length, discarded = headers
            if content_length <= 0:
                logger.warning("Skipping frame without a Content-Length header")
                continue

            try:
                body = await self._reader.readexactly(content_length)
            except asyncio.IncompleteReadError as e:
                logger.warning(
                    f"Input ended inside a frame body "
                    f"({len(e.partial)} of {content_length} bytes)"
                )
                return None

            if discarded:
                logger.warning(f"Skipping {content_length}-byte frame with malformed headers")
                continue
            return body

    async def _read_headers(self) -> tuple[int, bool] | None:
        """Consume one header section; None means end of input.

        Returns the declared length and whether the section held a line
        over the reader's limit, in which case the frame is skipped.
        """
        content_length = 0
        discarded = False
        while True:
            try:
                line = await self._reader.readline()
            except ValueError as e:
                # readline already dropped the oversized chunk
                logger.warning(f"Discarding oversized header line: {e}")
                discarded = True
                continue
            if not line:
                return None

            header = line.decode("latin-1").strip()
            if not header:
                return content_length, discarded

            key, sep, value = header.partition(":")
            if not sep or key.strip().lower() != CONTENT_LENGTH:
                continue
            try:
                content_length = int(value.strip())
            except ValueError:
                logger.warning(f"Ignoring invalid Content-Length value: {value.strip()!r}")

    def write(self, body: bytes) -> None:
        """Write one complete frame and flush it."""
        header = f"Content-Length: {len(body)}\r\n\r\n".encode("ascii")
        self._writer.write(header + body)
        self._writer.flush()


async def open_stdio_transport() -> StdioTransport:
    """Attach a transport to this process's stdin and stdout."""
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    protocol = asyncio.StreamReaderProtocol(reader)
    await loop.connect_read_pipe(lambda: protocol, sys.stdin)
    return StdioTransport(reader, sys.stdout.buffer)
