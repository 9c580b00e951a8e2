"""Key normalization and default bindings."""

from .models import Action, KeyInput, key_to_token
from .defaults import DEFAULT_BINDINGS, MOVE_DIRECTIONS, resolve_action

__all__ = [
    "Action",
    "KeyInput",
    "key_to_token",
    "DEFAULT_BINDINGS",
    "MOVE_DIRECTIONS",
    "resolve_action",
]
