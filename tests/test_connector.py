import socket

import pytest

from wirechat.errors import ConnectError, ResolveError
from wirechat.net import connector as connector_module
from wirechat.net.connector import connect, resolve_address


def test_resolve_address_keeps_dotted_quad(monkeypatch) -> None:
    def _fail(*_args, **_kwargs):
        raise AssertionError("resolver must not be used for numeric hosts")

    monkeypatch.setattr(connector_module.socket, "getaddrinfo", _fail)
    assert resolve_address("127.0.0.1", 3000) == ("127.0.0.1", 3000)


def test_resolve_address_uses_resolver_for_names(monkeypatch) -> None:
    captured: dict[str, object] = {}

    def _fake_getaddrinfo(host, port, family, kind):
        captured.update(host=host, port=port, family=family, kind=kind)
        return [(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("10.1.2.3", port))]

    monkeypatch.setattr(connector_module.socket, "getaddrinfo", _fake_getaddrinfo)

    assert resolve_address("chat.example", 4000) == ("10.1.2.3", 4000)
    assert captured["family"] == socket.AF_INET
    assert captured["kind"] == socket.SOCK_STREAM


def test_resolve_failure_raises_resolve_error(monkeypatch) -> None:
    def _fake_getaddrinfo(*_args, **_kwargs):
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    monkeypatch.setattr(connector_module.socket, "getaddrinfo", _fake_getaddrinfo)

    with pytest.raises(ResolveError, match="no-such-host"):
        connect("no-such-host", 3000)


def test_connect_returns_blocking_socket() -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind(("127.0.0.1", 0))
        listener.listen(1)
        port = listener.getsockname()[1]

        sock = connect("127.0.0.1", port, timeout=2.0)
        try:
            assert sock.getblocking() is True
            assert sock.gettimeout() is None
            peer, _ = listener.accept()
            peer.close()
        finally:
            sock.close()


def test_connect_refused_raises_connect_error() -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]

    with pytest.raises(ConnectError):
        connect("127.0.0.1", port, timeout=2.0)
