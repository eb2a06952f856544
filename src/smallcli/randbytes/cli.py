#!/usr/bin/env python3
"""Random byte printer CLI."""

import argparse
import secrets
import sys

DEFAULT_COUNT = 8


def format_bytes(data: bytes, hex_output: bool = False) -> str:
    """Format bytes as a bracketed decimal list, or space-separated hex."""
    if hex_output:
        return " ".join(f"{b:02x}" for b in data)
    return "[" + " ".join(str(b) for b in data) + "]"


def main() -> int:
    """Print the program arguments and a few random bytes."""
    parser = argparse.ArgumentParser(
        prog="random-bytes",
        description="Print bytes read from the OS random source",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-n",
        type=int,
        default=DEFAULT_COUNT,
        metavar="N",
        help=f"Number of bytes to read (default: {DEFAULT_COUNT})",
    )
    parser.add_argument("-hex", "--hex", action="store_true", help="Print bytes as hex")
    parser.add_argument("args", nargs="*", help="Extra arguments, echoed back")
    args = parser.parse_args()

    if args.n < 1:
        print(f"Error: -n must be at least 1, got {args.n}", file=sys.stderr)
        return 1

    try:
        buf = secrets.token_bytes(args.n)
    except OSError as exc:
        print(f"Error reading random: {exc}", file=sys.stderr)
        return 1

    print(f"Args: [{' '.join(sys.argv)}]")
    print(f"Random bytes ({len(buf)}): {format_bytes(buf, args.hex)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
