"""Tests for the magic-wand flood fill."""

from __future__ import annotations

import numpy as np
import pytest

from pixelsplit.engine import DecodeError, OutOfBounds, flood_fill
from tests.conftest import BLACK, WHITE, solid_image


def _row(*colors) -> np.ndarray:
    img = np.full((1, len(colors), 4), 255, dtype=np.uint8)
    for i, c in enumerate(colors):
        img[0, i, :3] = c
    return img


class TestFloodFill:
    def test_uniform_image_fully_cleared(self):
        img = solid_image(10, 10, (90, 120, 150))
        assert flood_fill(img, 10, 10, 5, 5, 0) == 100
        assert np.all(img[..., 3] == 0)
        # colors untouched, only alpha
        assert np.all(img[..., :3] == (90, 120, 150))

    def test_second_fill_is_noop(self):
        img = solid_image(10, 10)
        flood_fill(img, 10, 10, 5, 5, 0)
        snapshot = img.copy()
        assert flood_fill(img, 10, 10, 5, 5, 0) == 0
        assert np.array_equal(img, snapshot)

    def test_stops_at_color_boundary(self):
        img = solid_image(10, 10, (200, 0, 0))
        img[:, 5:, :3] = (0, 0, 200)
        assert flood_fill(img, 10, 10, 1, 1, 10) == 50
        assert np.all(img[:, :5, 3] == 0)
        assert np.all(img[:, 5:, 3] == 255)

    def test_tolerance_is_per_channel(self):
        img = _row(BLACK, (10, 10, 10), BLACK)
        assert flood_fill(img, 3, 1, 0, 0, 10) == 3

    def test_one_channel_over_tolerance_blocks(self):
        img = _row(BLACK, (11, 0, 0), BLACK)
        assert flood_fill(img, 3, 1, 0, 0, 10) == 1
        assert list(img[0, :, 3]) == [0, 255, 255]

    def test_diagonals_not_connected(self):
        img = solid_image(2, 2, WHITE)
        img[0, 0, :3] = BLACK
        img[1, 1, :3] = BLACK
        assert flood_fill(img, 2, 2, 0, 0, 0) == 1
        assert img[1, 1, 3] == 255

    def test_transparent_pixels_block_growth(self):
        img = solid_image(5, 1, WHITE)
        img[0, 2, 3] = 0
        assert flood_fill(img, 5, 1, 0, 0, 0) == 2
        assert list(img[0, :, 3]) == [0, 0, 0, 255, 255]

    def test_seed_on_transparent_pixel(self):
        img = solid_image(4, 4, WHITE, alpha=0)
        assert flood_fill(img, 4, 4, 2, 2, 255) == 0

    def test_large_region_does_not_recurse(self):
        img = solid_image(400, 300)
        assert flood_fill(img, 400, 300, 0, 0, 0) == 120_000

    def test_edits_bytearray_in_place(self):
        buf = bytearray(solid_image(3, 3).tobytes())
        flood_fill(buf, 3, 3, 0, 0, 0)
        assert all(buf[i] == 0 for i in range(3, len(buf), 4))


class TestFloodFillErrors:
    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 0), (0, 10)])
    def test_seed_out_of_bounds(self, x, y):
        with pytest.raises(OutOfBounds):
            flood_fill(solid_image(10, 10), 10, 10, x, y, 0)

    def test_wrong_length(self):
        with pytest.raises(DecodeError):
            flood_fill(np.zeros(7, dtype=np.uint8), 2, 2, 0, 0, 0)

    def test_read_only_buffer(self):
        with pytest.raises(DecodeError):
            flood_fill(bytes(16), 2, 2, 0, 0, 0)

    def test_tolerance_range(self):
        with pytest.raises(ValueError):
            flood_fill(solid_image(2, 2), 2, 2, 0, 0, 256)
