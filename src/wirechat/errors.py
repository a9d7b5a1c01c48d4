"""Application-level exception types for wirechat."""

from __future__ import annotations


class WirechatError(Exception):
    """Base exception for wirechat."""


class ConfigurationError(WirechatError):
    """Raised when settings or command-line arguments are unusable."""


class SessionCancelled(WirechatError):
    """Raised into the input read when a termination signal arrives."""


class TransportError(WirechatError):
    """Base exception for connection and exchange failures.

    Every transport error is terminal for the session.
    """


class ResolveError(TransportError):
    """Raised when the server hostname cannot be resolved."""


class ConnectError(TransportError):
    """Raised when the TCP handshake fails."""


class SendError(TransportError):
    """Raised when an outbound line is not written in full."""


class ConnectionClosed(TransportError):
    """Raised when the peer closes before any byte of a reply arrives."""


class ReceiveError(TransportError):
    """Raised on a read failure that is not a would-block condition."""
