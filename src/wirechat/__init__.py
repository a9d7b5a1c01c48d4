"""wirechat - line-oriented TCP chat client."""

from .net import Framer, connect, exchange
from .protocol import classify, extract, render_response

__version__ = "0.1.0"

__all__ = ["Framer", "classify", "connect", "exchange", "extract", "render_response"]
