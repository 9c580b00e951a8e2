"""Editing session state machine."""

from .session import EditorSession, SessionResult
from .viewport import Viewport

__all__ = ["EditorSession", "SessionResult", "Viewport"]
