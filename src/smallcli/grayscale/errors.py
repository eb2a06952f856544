"""Exceptions raised by the grayscale converter."""


class GrayscaleError(Exception):
    """Base class for all converter failures."""


class ValidationError(GrayscaleError):
    """Invalid options (empty paths, quality out of range, bad preset)."""


class ImageIOError(GrayscaleError):
    """Input could not be opened or output could not be created."""


class DecodeError(GrayscaleError):
    """Input bytes are not a recognized or decodable image."""


class EncodeError(GrayscaleError):
    """Encoder failed to produce output bytes."""


class UnsupportedFormatError(GrayscaleError):
    """Output path has an extension no encoder handles."""
