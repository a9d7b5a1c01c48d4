"""Interactive session loop for wirechat."""

from __future__ import annotations

import contextlib
import signal
import socket
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from types import FrameType
from typing import Any

from loguru import logger

from wirechat.config import Settings
from wirechat.errors import ConnectionClosed, SessionCancelled, TransportError
from wirechat.logging_utils import set_current_peer
from wirechat.net.connector import connect
from wirechat.net.framer import Framer
from wirechat.protocol.dispatch import ResponseKind, render_response

from .commands import detect_local_command
from .render import Renderer

Connector = Callable[..., socket.socket]

GOODBYE_MESSAGE = "Terminating connection..."
SIGNAL_MESSAGE = "Received termination signal. Exiting client..."
CANCEL_SIGNALS = (signal.SIGINT, signal.SIGTERM)


@dataclass
class Session:
    """Connection, settings and stop flag for one client run.

    Use as a context manager; the connection is opened on enter and always
    released on exit.
    """

    settings: Settings
    renderer: Renderer
    connector: Connector = connect
    connection: socket.socket | None = None
    stop_event: threading.Event = field(default_factory=threading.Event)

    @property
    def peer(self) -> str:
        return f"{self.settings.host}:{self.settings.port}"

    @property
    def framer(self) -> Framer:
        return Framer(chunk_size=self.settings.chunk_size, idle_timeout=self.settings.idle_timeout)

    def __enter__(self) -> Session:
        self.connection = self.connector(
            self.settings.host,
            self.settings.port,
            timeout=self.settings.connect_timeout,
        )
        set_current_peer(self.peer)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _ = (exc_type, exc, tb)
        self.close()

    def close(self) -> None:
        if self.connection is None:
            return
        self.connection.close()
        self.connection = None
        logger.info("session.closed peer={}", self.peer)

    def request_stop(self) -> None:
        self.stop_event.set()

    def exchange(self, line: str) -> bytes:
        if self.connection is None:
            raise ConnectionClosed("Not connected")
        return self.framer.exchange(self.connection, line)


@contextlib.contextmanager
def signal_cancellation(session: Session) -> Iterator[None]:
    """Turn SIGINT and SIGTERM into ``SessionCancelled`` while the block runs."""

    def _handler(signum: int, _frame: FrameType | None) -> None:
        logger.info("session.signal signum={}", signum)
        session.request_stop()
        raise SessionCancelled(signal.Signals(signum).name)

    previous: dict[int, Any] = {}
    for signum in CANCEL_SIGNALS:
        previous[signum] = signal.signal(signum, _handler)
    try:
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def run_session(session: Session) -> None:
    """Read input, exchange it with the server and render replies until stopped."""

    renderer = session.renderer
    try:
        renderer.welcome(session.settings.host, session.settings.port)
        while not session.stop_event.is_set():
            user_input = renderer.get_user_input()
            if not handle_input(session, user_input):
                break
    except SessionCancelled:
        renderer.info(SIGNAL_MESSAGE)
    except (KeyboardInterrupt, EOFError):
        renderer.info(GOODBYE_MESSAGE)
    session.request_stop()


def handle_input(session: Session, user_input: str) -> bool:
    """Process one input line. Returns ``False`` when the session should end."""

    if not user_input.strip():
        return True

    command = detect_local_command(user_input)
    if command is not None:
        if command.name == "exit":
            session.renderer.info(GOODBYE_MESSAGE)
            return False
        session.renderer.help()
        return True

    size = len(user_input.encode("utf-8"))
    if size > session.settings.max_input_size:
        session.renderer.error(f"Message too long ({size} bytes, limit {session.settings.max_input_size})")
        return True

    try:
        send_once(session, user_input)
    except TransportError as exc:
        logger.warning("session.transport_error type={} error={}", type(exc).__name__, exc)
        session.renderer.error(str(exc))
        return False
    return True


def send_once(session: Session, message: str) -> ResponseKind:
    """Run one exchange and render its reply."""
    payload = session.exchange(message)
    return render_response(payload, session.renderer)
