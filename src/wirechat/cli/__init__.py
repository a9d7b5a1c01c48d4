"""Interactive command-line client."""

from .app import app
from .render import Renderer
from .session import Session, run_session

__all__ = ["Renderer", "Session", "app", "run_session"]
