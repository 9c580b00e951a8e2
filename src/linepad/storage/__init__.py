"""File persistence for buffers."""

from .files import (
    ENCODING,
    PathLike,
    SaveError,
    load_buffer,
    read_file_as_string,
    save_to_file,
)

__all__ = [
    "ENCODING",
    "PathLike",
    "SaveError",
    "load_buffer",
    "read_file_as_string",
    "save_to_file",
]
