"""Built-in key bindings."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from linepad.navigation import Direction

from .models import Action, KeyInput

DEFAULT_BINDINGS: Mapping[str, Action] = MappingProxyType(
    {
        "up": Action.MOVE_UP,
        "down": Action.MOVE_DOWN,
        "left": Action.MOVE_LEFT,
        "right": Action.MOVE_RIGHT,
        "ctrl+s": Action.SAVE,
        "ctrl+q": Action.QUIT,
    }
)

MOVE_DIRECTIONS: Mapping[Action, Direction] = MappingProxyType(
    {
        Action.MOVE_UP: Direction.UP,
        Action.MOVE_DOWN: Direction.DOWN,
        Action.MOVE_LEFT: Direction.LEFT,
        Action.MOVE_RIGHT: Direction.RIGHT,
    }
)


def resolve_action(
    key: KeyInput, bindings: Mapping[str, Action] = DEFAULT_BINDINGS
) -> Optional[Action]:
    """Return the bound action, or ``None`` when the key is an edit."""

    return bindings.get(key.token)


__all__ = ["DEFAULT_BINDINGS", "MOVE_DIRECTIONS", "resolve_action"]
