"""Command-line entry point for the interactive test environment."""

from __future__ import annotations

import argparse
import sys

from fenwicklab.generate import DEFAULT_DIRECTORY
from fenwicklab.ui import Console

BANNER = (
    "\n======================================\n"
    "  Fenwick Tree Testing Environment\n"
    "======================================\n"
)


def main(argv=None):
    """Start the interactive console; returns the exit status."""
    parser = argparse.ArgumentParser(
        prog="fenwicklab",
        description="Generate, run, verify and benchmark Fenwick tree test cases.",
    )
    parser.add_argument(
        "--directory",
        default=DEFAULT_DIRECTORY,
        help="directory holding the test case files",
    )
    args = parser.parse_args(argv)

    sys.stdout.write(BANNER)
    Console(sys.stdin, sys.stdout, args.directory).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())