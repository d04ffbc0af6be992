"""Command-line entry point: ``python -m vim_lite`` / ``vim-lite``."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from vim_lite.runtime import telemetry

UI_CHOICES = ("terminal", "textual")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="vim-lite", description="Minimal modal text editor."
    )
    parser.add_argument(
        "--ui",
        choices=UI_CHOICES,
        default=os.environ.get(f"{telemetry.ENV_PREFIX}UI", "terminal"),
        help="Host to run the editor in (default: terminal)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write telemetry to this file (overrides VIM_LITE_LOG_FILE)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Use a named telemetry preset",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset or args.log_file:
        telemetry.configure(preset=args.log_preset, log_file=args.log_file)

    if args.ui == "textual":
        from vim_lite.adapters.textual.app import run_textual_app

        run_textual_app()
    else:
        from vim_lite.adapters.terminal import run_terminal_session

        run_terminal_session()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry
    raise SystemExit(main())
