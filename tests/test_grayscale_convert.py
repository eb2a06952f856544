"""Tests for smallcli.grayscale.convert module."""

import numpy as np
import pytest

from smallcli.grayscale.convert import LUMA_WEIGHTS, to_grayscale


def _pixel(bgr: tuple[int, ...], dtype: type = np.uint8) -> np.ndarray:
    """Build a 1x1 image from a single BGR(A) pixel."""
    return np.array([[bgr]], dtype=dtype)


class TestLuma:
    """Tests for the luma weights applied to color pixels."""

    def test_weights_sum_to_one(self) -> None:
        """BT.601 weights should sum to 1."""
        assert sum(LUMA_WEIGHTS) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        ("bgr", "expected"),
        [
            ((0, 0, 255), 76),  # red
            ((0, 255, 0), 150),  # green
            ((255, 0, 0), 29),  # blue
            ((255, 255, 255), 255),
            ((0, 0, 0), 0),
        ],
    )
    def test_primary_colors(self, bgr: tuple[int, int, int], expected: int) -> None:
        """Primaries should map to their rounded BT.601 luma."""
        gray = to_grayscale(_pixel(bgr))
        assert gray[0, 0] == expected

    def test_matches_weighted_sum(self) -> None:
        """Every pixel should equal the weighted channel sum, within rounding."""
        rng = np.random.default_rng(0)
        img = rng.integers(0, 256, size=(20, 30, 3), dtype=np.uint8)

        gray = to_grayscale(img)

        r_w, g_w, b_w = LUMA_WEIGHTS
        expected = r_w * img[:, :, 2] + g_w * img[:, :, 1] + b_w * img[:, :, 0]
        assert np.abs(gray.astype(np.float64) - expected).max() <= 0.5 + 1e-3


class TestShape:
    """Tests for output shape and dtype."""

    def test_color_output_is_single_channel(self) -> None:
        """Output should be 2-D uint8 with the input's height and width."""
        img = np.zeros((48, 64, 3), dtype=np.uint8)
        gray = to_grayscale(img)

        assert gray.shape == (48, 64)
        assert gray.dtype == np.uint8

    def test_gray_input_passes_through(self) -> None:
        """8-bit gray input should be returned unchanged."""
        img = np.arange(256, dtype=np.uint8).reshape(16, 16)
        gray = to_grayscale(img)

        np.testing.assert_array_equal(gray, img)

    def test_single_channel_3d_input(self) -> None:
        """(H, W, 1) input should be flattened to (H, W)."""
        img = np.full((4, 5, 1), 42, dtype=np.uint8)
        gray = to_grayscale(img)

        assert gray.shape == (4, 5)
        assert (gray == 42).all()

    def test_rejects_two_channel_input(self) -> None:
        """Channel counts other than 1, 3 or 4 are not images we decode."""
        with pytest.raises(ValueError, match="channel count"):
            to_grayscale(np.zeros((2, 2, 2), dtype=np.uint8))


class TestAlpha:
    """Tests for images with an alpha channel."""

    def test_opaque_matches_color(self) -> None:
        """Fully opaque pixels should convert like plain color pixels."""
        assert to_grayscale(_pixel((0, 0, 255, 255)))[0, 0] == 76

    def test_transparent_is_black(self) -> None:
        """Fully transparent pixels should become black."""
        assert to_grayscale(_pixel((255, 255, 255, 0)))[0, 0] == 0

    def test_half_alpha_scales_luma(self) -> None:
        """Partial alpha should scale the luma proportionally."""
        assert to_grayscale(_pixel((255, 255, 255, 128)))[0, 0] == 128


class TestSixteenBit:
    """Tests for 16-bit input."""

    def test_white_scales_to_255(self) -> None:
        """16-bit white should map to 8-bit white."""
        gray = to_grayscale(_pixel((65535, 65535, 65535), dtype=np.uint16))
        assert gray.dtype == np.uint8
        assert gray[0, 0] == 255

    def test_gray16_scales_down(self) -> None:
        """16-bit gray values should be divided by 257."""
        img = np.array([[257 * 100, 65535, 0]], dtype=np.uint16)
        gray = to_grayscale(img)

        assert gray.tolist() == [[100, 255, 0]]
