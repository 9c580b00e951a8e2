"""Single-file terminal text editor built around an incremental-redraw core."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "keymaps",
    "navigation",
    "runtime",
    "session",
    "storage",
    "syntax",
]

__version__ = "0.1.0"
