"""TCP connection setup."""

from __future__ import annotations

import socket

from loguru import logger

from wirechat.errors import ConnectError, ResolveError


def resolve_address(host: str, port: int) -> tuple[str, int]:
    """Resolve ``host`` to an IPv4 socket address.

    Dotted-quad input is used as-is; anything else goes through the resolver.
    """

    try:
        socket.inet_aton(host)
    except OSError:
        pass
    else:
        return host, port

    try:
        infos = socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as exc:
        raise ResolveError(f"Failed to resolve hostname: {host}") from exc
    if not infos:
        raise ResolveError(f"Failed to resolve hostname: {host}")
    address = infos[0][4]
    logger.debug("connector.resolved host={} address={}", host, address[0])
    return address[0], address[1]


def connect(host: str, port: int, *, timeout: float | None = None) -> socket.socket:
    """Open a blocking TCP stream to ``host:port``."""

    address = resolve_address(host, port)
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.settimeout(timeout)
        sock.connect(address)
    except OSError as exc:
        sock.close()
        raise ConnectError(f"Failed to connect to {host}:{port}: {exc}") from exc
    # The framer relies on plain blocking mode, not a socket timeout.
    sock.settimeout(None)
    logger.info("connector.connected peer={}:{}", address[0], address[1])
    return sock
