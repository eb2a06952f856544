"""Per-pixel grayscale conversion."""

import logging

import cv2
import numpy as np

logger = logging.getLogger(__name__)

# ITU-R BT.601 luma weights (R, G, B), as used by cv2.COLOR_BGR2GRAY
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def _max_value(pixels: np.ndarray) -> float:
    return 65535.0 if pixels.dtype == np.uint16 else 255.0


def to_grayscale(pixels: np.ndarray) -> np.ndarray:
    """Convert decoded pixels to a single-channel 8-bit grayscale image.

    Color pixels are mapped with BT.601 luma. Color is premultiplied by alpha
    first, so fully transparent pixels come out black. 16-bit input is scaled
    down to 8 bits.

    Args:
        pixels: Array from the decoder, shape (H, W) or (H, W, C) with
            C in {3, 4}, BGR(A) channel order, uint8 or uint16.

    Returns:
        uint8 array of shape (H, W).
    """
    scale = 255.0 / _max_value(pixels)

    if pixels.ndim == 2 or pixels.shape[2] == 1:
        luma = pixels.reshape(pixels.shape[:2]).astype(np.float32)
    elif pixels.shape[2] in (3, 4):
        color = pixels[:, :, :3].astype(np.float32)
        if pixels.shape[2] == 4:
            alpha = pixels[:, :, 3].astype(np.float32) / _max_value(pixels)
            color *= alpha[:, :, np.newaxis]
        luma = cv2.cvtColor(color, cv2.COLOR_BGR2GRAY)
    else:
        raise ValueError(f"Unsupported channel count: {pixels.shape[2]}")

    gray = np.clip(np.rint(luma * scale), 0, 255).astype(np.uint8)
    logger.debug("Converted %s %s to grayscale", pixels.shape, pixels.dtype)
    return gray
