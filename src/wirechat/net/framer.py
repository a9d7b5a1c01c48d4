"""Response framing over a newline-delimited TCP stream.

Replies carry no length prefix. A reply is complete when a chunk ends in the
terminator byte, or, once more than one chunk is involved, when the stream
stays idle for ``idle_timeout`` seconds.
"""

from __future__ import annotations

import select
import socket
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger

from wirechat.errors import ConnectionClosed, ReceiveError, SendError

TERMINATOR = b"\n"
DEFAULT_CHUNK_SIZE = 4095
IDLE_TIMEOUT_SECONDS = 1.0

ReadinessPoll = Callable[[socket.socket, float], bool]


class FramerState(Enum):
    """Read phases of one exchange."""

    AWAITING_FIRST_CHUNK = "awaiting_first_chunk"
    IDLE_POLLING = "idle_polling"


def select_readable(connection: socket.socket, timeout: float) -> bool:
    """Wait up to ``timeout`` seconds for ``connection`` to become readable."""
    try:
        readable, _, _ = select.select([connection], [], [], timeout)
    except (OSError, ValueError) as exc:
        raise ReceiveError(f"Failed to poll connection: {exc}") from exc
    return bool(readable)


@dataclass(frozen=True)
class Framer:
    """Send one line and collect exactly one reply."""

    chunk_size: int = DEFAULT_CHUNK_SIZE
    idle_timeout: float = IDLE_TIMEOUT_SECONDS
    poll: ReadinessPoll = field(default=select_readable, repr=False)

    def exchange(self, connection: socket.socket, line: str | bytes) -> bytes:
        self.send_line(connection, line)
        return self.receive(connection)

    def send_line(self, connection: socket.socket, line: str | bytes) -> None:
        data = (line.encode("utf-8") if isinstance(line, str) else line) + TERMINATOR
        try:
            sent = connection.send(data)
        except OSError as exc:
            raise SendError(f"Failed to send message: {exc}") from exc
        if sent != len(data):
            raise SendError(f"Short write: sent {sent} of {len(data)} bytes")
        logger.debug("framer.sent bytes={}", sent)

    def receive(self, connection: socket.socket) -> bytes:
        buffer = bytearray()
        state = FramerState.AWAITING_FIRST_CHUNK
        try:
            while True:
                if state is FramerState.IDLE_POLLING and not self.poll(connection, self.idle_timeout):
                    logger.debug("framer.complete reason=idle bytes={}", len(buffer))
                    break

                try:
                    chunk = connection.recv(self.chunk_size)
                except BlockingIOError:
                    # Readiness was reported but nothing could be read yet.
                    continue
                except OSError as exc:
                    raise ReceiveError(f"Failed to receive response: {exc}") from exc

                if not chunk:
                    if not buffer:
                        raise ConnectionClosed("Connection closed by server")
                    logger.debug("framer.complete reason=eof bytes={}", len(buffer))
                    break

                buffer.extend(chunk)
                logger.debug("framer.chunk state={} bytes={}", state.value, len(chunk))
                if chunk.endswith(TERMINATOR):
                    logger.debug("framer.complete reason=terminator bytes={}", len(buffer))
                    break

                if state is FramerState.AWAITING_FIRST_CHUNK:
                    connection.setblocking(False)
                    state = FramerState.IDLE_POLLING
        finally:
            if state is FramerState.IDLE_POLLING:
                connection.setblocking(True)
        return bytes(buffer)


def exchange(connection: socket.socket, line: str | bytes, *, framer: Framer | None = None) -> bytes:
    """Send ``line`` and return the complete reply payload."""
    return (framer or Framer()).exchange(connection, line)
