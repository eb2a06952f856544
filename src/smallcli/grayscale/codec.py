"""Reading and writing JPEG/PNG images with OpenCV."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import cv2
import numpy as np

from .errors import DecodeError, EncodeError, ImageIOError, UnsupportedFormatError

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SIGNATURE = b"\xff\xd8\xff"

JPEG_EXTENSIONS = (".jpg", ".jpeg")
PNG_EXTENSIONS = (".png",)
SUPPORTED_EXTENSIONS = JPEG_EXTENSIONS + PNG_EXTENSIONS


@dataclass
class DecodedImage:
    """Pixels decoded from a file, plus the container format they came from."""

    pixels: np.ndarray
    format: str

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def color_model(self) -> str:
        return color_model_name(self.pixels)


def color_model_name(pixels: np.ndarray) -> str:
    """Name the color model of a decoded pixel array.

    OpenCV returns channels in BGR(A) order, but the names follow the usual
    RGB convention: ``Gray``, ``RGB`` and ``RGBA`` for 8-bit data, and
    ``Gray16``, ``RGB48`` and ``RGBA64`` for 16-bit data.
    """
    channels = 1 if pixels.ndim == 2 else pixels.shape[2]
    wide = pixels.dtype == np.uint16
    if channels == 1:
        return "Gray16" if wide else "Gray"
    if channels == 3:
        return "RGB48" if wide else "RGB"
    if channels == 4:
        return "RGBA64" if wide else "RGBA"
    return f"{channels}-channel {pixels.dtype}"


def sniff_format(header: bytes) -> str | None:
    """Return the format tag for a file header, or None if unrecognized."""
    if header.startswith(PNG_SIGNATURE):
        return "png"
    if header.startswith(JPEG_SIGNATURE):
        return "jpeg"
    return None


def decode(path: str | Path) -> DecodedImage:
    """Read and decode an image file.

    The format is detected from the file contents, not its extension.

    Raises:
        ImageIOError: If the file cannot be opened or read.
        DecodeError: If the contents are not a decodable JPEG or PNG.
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise ImageIOError(f"Error opening input file {path}: {exc}") from exc

    image_format = sniff_format(data[: len(PNG_SIGNATURE)])
    if image_format is None:
        raise DecodeError(f"Error decoding image {path}: unknown image format")

    try:
        pixels = cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
    except cv2.error as exc:
        raise DecodeError(f"Error decoding image {path}: {exc}") from exc
    if pixels is None or pixels.size == 0:
        raise DecodeError(f"Error decoding image {path}: corrupt or truncated {image_format} data")

    logger.debug("Decoded %s: %s %s", path, image_format, pixels.shape)
    return DecodedImage(pixels=pixels, format=image_format)


def encoder_params(ext: str, quality: int) -> list[int]:
    """Return OpenCV encoder parameters for an output extension.

    Raises:
        UnsupportedFormatError: If the extension is not JPEG or PNG.
    """
    ext = ext.lower()
    if ext in JPEG_EXTENSIONS:
        return [cv2.IMWRITE_JPEG_QUALITY, quality]
    if ext in PNG_EXTENSIONS:
        return []
    raise UnsupportedFormatError(
        f"Unsupported output format: {ext or '(no extension)'}. "
        f"Use {', '.join(SUPPORTED_EXTENSIONS[:-1])}, or {SUPPORTED_EXTENSIONS[-1]}"
    )


def encode(pixels: np.ndarray, output_path: str | Path, quality: int) -> None:
    """Encode pixels and write them to output_path.

    The encoder is chosen by the output file extension. Encoding happens in
    memory first, so no file is created unless encoding succeeded.

    Raises:
        UnsupportedFormatError: If the extension is not .jpg, .jpeg or .png.
        EncodeError: If the encoder fails.
        ImageIOError: If the output file cannot be created or written.
    """
    ext = Path(output_path).suffix.lower()
    params = encoder_params(ext, quality)

    try:
        ok, buffer = cv2.imencode(ext, pixels, params)
    except cv2.error as exc:
        raise EncodeError(f"Error encoding output image {output_path}: {exc}") from exc
    if not ok:
        raise EncodeError(f"Error encoding output image {output_path}: encoder returned no data")

    try:
        with open(output_path, "wb") as f:
            f.write(buffer.tobytes())
    except OSError as exc:
        raise ImageIOError(f"Error creating output file {output_path}: {exc}") from exc

    logger.debug("Wrote %d bytes to %s", buffer.size, output_path)
