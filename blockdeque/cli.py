"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

GREETING = "Hello, World!"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="blockdeque",
        description="Print a greeting and exit.",
    )


def _greet(stream: TextIO) -> None:
    stream.write(GREETING + "\n")
    stream.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line, print the greeting and return the exit status."""
    parser = _build_parser()
    parser.parse_args(list(argv) if argv is not None else None)
    _greet(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())