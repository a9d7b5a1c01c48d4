"""Socket-level pieces: connection setup and response framing."""

from .connector import connect, resolve_address
from .framer import Framer, FramerState, exchange

__all__ = ["Framer", "FramerState", "connect", "exchange", "resolve_address"]
