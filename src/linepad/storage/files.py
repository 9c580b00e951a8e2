"""Whole-file load and save for a single buffer."""

from __future__ import annotations

import os
from typing import Optional, Union

from linepad.buffer import TextBuffer
from linepad.runtime import telemetry

PathLike = Union[str, "os.PathLike[str]"]

ENCODING = "utf-8"


class SaveError(RuntimeError):
    """Raised when the buffer cannot be written back to its file."""

    def __init__(self, message: str, *, path: PathLike) -> None:
        super().__init__(message)
        self.path = os.fspath(path)


def read_file_as_string(path: PathLike) -> Optional[str]:
    """Return the file's contents, or ``None`` when it cannot be read."""

    try:
        with open(path, "r", encoding=ENCODING, newline="") as handle:
            contents = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        telemetry.record_event(
            "storage.read_failed",
            level="debug",
            data={"path": os.fspath(path), "reason": str(exc)},
        )
        return None
    telemetry.record_event(
        "storage.read",
        level="debug",
        data={"path": os.fspath(path), "chars": len(contents)},
    )
    return contents


def load_buffer(path: PathLike) -> TextBuffer:
    """Build the initial buffer: file contents, or empty for a new file."""

    contents = read_file_as_string(path)
    if contents is None:
        return TextBuffer()
    return TextBuffer.load(contents)


def save_to_file(path: PathLike, buffer: TextBuffer) -> int:
    """Truncate ``path`` and write the serialized buffer; return chars written."""

    payload = buffer.serialize()
    with telemetry.span(
        "storage::save",
        component="storage",
        metadata={"path": os.fspath(path)},
    ):
        try:
            with open(path, "w", encoding=ENCODING, newline="") as handle:
                written = handle.write(payload)
        except OSError as exc:
            raise SaveError(
                f"Couldn't open file for writing: {exc}", path=path
            ) from exc
    buffer.mark_saved()
    telemetry.record_event(
        "storage.saved", data={"path": os.fspath(path), "chars": written}
    )
    return written


__all__ = [
    "ENCODING",
    "PathLike",
    "SaveError",
    "load_buffer",
    "read_file_as_string",
    "save_to_file",
]
