"""Concatenate files to standard output."""

from .cli import cat_file, main

__all__ = ["cat_file", "main"]
