"""Local time formatting."""

from __future__ import annotations

import argparse
import sys
import time


def local_time_string(timestamp: float | None = None) -> str:
    """Return the local time in ctime form, ending with a newline."""
    return time.ctime(timestamp) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Print the current local time."""
    argparse.ArgumentParser(
        prog="sockdemo-time", description="Print the local time."
    ).parse_args(argv)
    print(f"time:{local_time_string()}", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())