"""Normalized key events and the logical actions they resolve to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyInput:
    """Single key press handed over by the terminal collaborator.

    ``key`` names the key (``"enter"``, ``"left"``, ``"a"``); ``text`` holds the
    printable character the key produced, if any.
    """

    key: str
    text: Optional[str] = None
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        return key_to_token(self)

    @property
    def character(self) -> Optional[str]:
        """The printable character carried by this key, if it is one."""

        if self.modifiers and self.modifiers != ("shift",):
            return None
        if self.text is None or len(self.text) != 1:
            return None
        if self.text.isprintable() or self.text == "\t":
            return self.text
        return None


class Action(str, Enum):
    MOVE_UP = "cursor.up"
    MOVE_DOWN = "cursor.down"
    MOVE_LEFT = "cursor.left"
    MOVE_RIGHT = "cursor.right"
    SAVE = "session.save"
    QUIT = "session.quit"


def key_to_token(key: KeyInput) -> str:
    name = key.key.lower()
    if key.modifiers:
        modifier = "+".join(key.modifiers)
        return f"{modifier}+{name}"
    return name


__all__ = ["Action", "KeyInput", "key_to_token"]
