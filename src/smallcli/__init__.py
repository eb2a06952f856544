"""Small command-line tools: grayscale converter, file concatenation, random bytes."""

__version__ = "0.1.0"
