"""Command-line entry point: ``linepad FILE``."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from linepad.runtime import telemetry

USAGE_MESSAGE = "Please provide a filename to read or create."


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="linepad", description="Edit a single text file in the terminal."
    )
    parser.add_argument("filename", nargs="?", help="File to read or create")
    parser.add_argument(
        "--log-file",
        default=os.environ.get(f"{telemetry.ENV_PREFIX}LOG_FILE"),
        help="Write telemetry to this file (default: $LINEPAD_LOG_FILE)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Named telemetry preset",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if not args.filename:
        print(USAGE_MESSAGE)
        return 1

    if args.log_preset or args.log_file:
        telemetry.configure(preset=args.log_preset, log_file=args.log_file)

    # imported late so the usage path works without a terminal
    from linepad.adapters.textual.app import LinepadApp
    from linepad.session import EditorSession

    session = EditorSession.open(args.filename)
    app = LinepadApp(session)
    app.run()
    return app.return_code or 0
