"""Print bytes from the operating system's random source."""

from .cli import format_bytes, main

__all__ = ["format_bytes", "main"]
