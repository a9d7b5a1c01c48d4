from __future__ import annotations

import io
from collections.abc import Iterable

import pytest
from rich.console import Console

from wirechat.cli.render import Renderer


class ScriptedConnection:
    """Socket stand-in that replays scripted ``recv`` results.

    Each script item is either bytes to return or an exception to raise.
    ``poll`` reports readiness while script items remain.
    """

    def __init__(self, script: Iterable[bytes | BaseException] = (), *, short_write: int | None = None) -> None:
        self.script = list(script)
        self.short_write = short_write
        self.sent: list[bytes] = []
        self.recv_sizes: list[int] = []
        self.blocking_calls: list[bool] = []
        self.blocking = True
        self.closed = False
        self.polls = 0

    def send(self, data: bytes) -> int:
        self.sent.append(data)
        if self.short_write is not None:
            return self.short_write
        return len(data)

    def recv(self, size: int) -> bytes:
        self.recv_sizes.append(size)
        if not self.script:
            raise AssertionError("recv called with nothing scripted")
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def setblocking(self, flag: bool) -> None:
        self.blocking_calls.append(flag)
        self.blocking = flag

    def close(self) -> None:
        self.closed = True

    def poll(self, _connection: object, timeout: float) -> bool:
        assert timeout > 0
        self.polls += 1
        return bool(self.script)


class ScriptedRenderer(Renderer):
    """Renderer writing to memory and reading input from a list."""

    def __init__(self, inputs: Iterable[str | BaseException] = ()) -> None:
        self.buffer = io.StringIO()
        super().__init__(console=Console(file=self.buffer, width=120, color_system=None))
        self.inputs = list(inputs)

    def get_user_input(self) -> str:
        if not self.inputs:
            raise EOFError
        item = self.inputs.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def scripted_connection() -> type[ScriptedConnection]:
    return ScriptedConnection


@pytest.fixture
def scripted_renderer() -> type[ScriptedRenderer]:
    return ScriptedRenderer
