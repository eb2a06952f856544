#!/usr/bin/env python3
"""File concatenation CLI."""

import argparse
import shutil
import sys
from pathlib import Path
from typing import BinaryIO


class CatError(Exception):
    """A single file could not be copied to the output."""


def cat_file(path: str | Path, out: BinaryIO) -> None:
    """Copy the bytes of one file to out.

    Raises:
        CatError: If the file cannot be opened or read.
    """
    try:
        f = open(path, "rb")
    except OSError as exc:
        raise CatError(f"Error opening {path}: {exc}") from exc

    with f:
        try:
            shutil.copyfileobj(f, out)
        except OSError as exc:
            raise CatError(f"Error reading {path}: {exc}") from exc


def main() -> int:
    """Print the named files to standard output, in order."""
    parser = argparse.ArgumentParser(
        prog="cat-files",
        description="Concatenate files to standard output",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Files to print")
    args = parser.parse_args()

    if not args.files:
        print(f"Usage: {parser.prog} <file1> [file2 ...]", file=sys.stderr)
        return 1

    sys.stdout.flush()
    out = sys.stdout.buffer
    for filename in args.files:
        try:
            cat_file(filename, out)
        except CatError as exc:
            out.flush()
            print(exc, file=sys.stderr)
    out.flush()

    # Per-file failures are reported but do not change the exit code
    return 0


if __name__ == "__main__":
    sys.exit(main())
