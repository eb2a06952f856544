"""Image-to-grayscale converter."""

from .cli import main
from .codec import SUPPORTED_EXTENSIONS, DecodedImage, decode, encode
from .config import ConverterConfig
from .convert import LUMA_WEIGHTS, to_grayscale
from .errors import (
    DecodeError,
    EncodeError,
    GrayscaleError,
    ImageIOError,
    UnsupportedFormatError,
    ValidationError,
)

__all__ = [
    "ConverterConfig",
    "DecodedImage",
    "decode",
    "encode",
    "to_grayscale",
    "main",
    "LUMA_WEIGHTS",
    "SUPPORTED_EXTENSIONS",
    "GrayscaleError",
    "ValidationError",
    "ImageIOError",
    "DecodeError",
    "EncodeError",
    "UnsupportedFormatError",
]
