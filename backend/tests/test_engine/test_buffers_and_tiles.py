"""Tests for buffer coercion and grid cutting."""

from __future__ import annotations

import numpy as np
import pytest

from pixelsplit.engine import DecodeError, OutOfBounds, ShapeMismatch, split_grid
from pixelsplit.engine.buffers import as_mask, as_rgba


class TestAsRgba:
    def test_flat_array_is_viewed(self):
        flat = np.zeros(2 * 3 * 4, dtype=np.uint8)
        rgba = as_rgba(flat, 3, 2, writable=True)
        assert rgba.shape == (2, 3, 4)
        rgba[1, 2, 0] = 7
        assert flat[(1 * 3 + 2) * 4] == 7

    def test_memoryview(self):
        buf = bytearray(16)
        assert as_rgba(memoryview(buf), 2, 2).shape == (2, 2, 4)

    @pytest.mark.parametrize(
        "pixels,width,height",
        [
            (np.zeros(15, dtype=np.uint8), 2, 2),
            (np.zeros(16, dtype=np.float32), 2, 2),
            ([0] * 16, 2, 2),
            (np.zeros(16, dtype=np.uint8), -2, -2),
        ],
    )
    def test_rejected(self, pixels, width, height):
        with pytest.raises(DecodeError):
            as_rgba(pixels, width, height)

    def test_non_contiguous_not_writable(self):
        img = np.zeros((4, 4, 4), dtype=np.uint8)[:, ::2]
        assert as_rgba(img, 2, 4).shape == (4, 2, 4)
        with pytest.raises(DecodeError):
            as_rgba(img, 2, 4, writable=True)


class TestAsMask:
    def test_flattens(self):
        assert as_mask(np.zeros((2, 3)), 3, 2).shape == (6,)

    def test_mismatch(self):
        with pytest.raises(ShapeMismatch):
            as_mask([0.0] * 5, 3, 2)


class TestSplitGrid:
    def _image(self) -> np.ndarray:
        img = np.zeros((4, 6, 4), dtype=np.uint8)
        img[..., 0] = np.arange(6)[None, :]
        img[..., 1] = np.arange(4)[:, None]
        img[..., 3] = 255
        return img

    def test_two_by_two(self):
        tiles = split_grid(self._image(), 6, 4, [2], [3])
        assert [(t.row, t.col, t.x, t.y, t.width, t.height) for t in tiles] == [
            (0, 0, 0, 0, 3, 2),
            (0, 1, 3, 0, 3, 2),
            (1, 0, 0, 2, 3, 2),
            (1, 1, 3, 2, 3, 2),
        ]
        assert tiles[3].pixels[0, 0, 0] == 3
        assert tiles[3].pixels[0, 0, 1] == 2

    def test_unsorted_and_degenerate_splits(self):
        tiles = split_grid(self._image(), 6, 4, [0, 4], [5, 1, 1])
        # zero-height rows and zero-width columns are skipped
        assert [(t.x, t.width) for t in tiles] == [(0, 1), (1, 4), (5, 1)]
        assert all(t.height == 4 for t in tiles)

    def test_no_splits_returns_whole_image(self):
        tiles = split_grid(self._image(), 6, 4, [], [])
        assert len(tiles) == 1
        assert np.array_equal(tiles[0].pixels, self._image())

    def test_tiles_are_copies(self):
        img = self._image()
        tiles = split_grid(img, 6, 4, [], [])
        tiles[0].pixels[0, 0, 0] = 99
        assert img[0, 0, 0] == 0

    def test_split_outside_image(self):
        with pytest.raises(OutOfBounds):
            split_grid(self._image(), 6, 4, [5], [])
