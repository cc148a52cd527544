"""Command line entry point for the hacking assistant."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Optional

from .solver import run_terminal
from .storage import DEFAULT_PATH


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hackassist",
        description="Narrow down the password in the terminal hacking minigame.",
    )
    parser.add_argument(
        "--file",
        default=DEFAULT_PATH,
        help=f"file in which entered words are saved (default: {DEFAULT_PATH})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive assistant; return 0 when a single answer was found."""
    args = _parser().parse_args(argv)
    try:
        answer = run_terminal(path=args.file)
    except (EOFError, KeyboardInterrupt):
        print("input ended before an answer was found", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0 if answer is not None else 1


if __name__ == "__main__":
    sys.exit(main())