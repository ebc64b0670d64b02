"""Tests for largest-connected-component mask cleanup."""

from __future__ import annotations

import numpy as np
import pytest

from pixelsplit.engine import ShapeMismatch, largest_component
from pixelsplit.engine.masks import label_components


def _mask(width: int, height: int, fill: float = -1.0) -> np.ndarray:
    return np.full((height, width), fill, dtype=np.float32)


class TestLabelComponents:
    def test_four_connectivity(self):
        labels, sizes = label_components(np.array([[1, 0], [0, 1]], dtype=bool))
        assert labels.tolist() == [[0, -1], [-1, 1]]
        assert sizes.tolist() == [1, 1]

    def test_raster_order_ids(self):
        fg = np.zeros((4, 4), dtype=bool)
        fg[3, 0] = True
        fg[0, 3] = True
        labels, _ = label_components(fg)
        assert labels[0, 3] == 0
        assert labels[3, 0] == 1


class TestLargestComponent:
    def test_isolated_pixel_removed(self):
        mask = _mask(20, 20)
        mask[2:7, 2:7] = 3.0
        mask[15, 15] = 2.0

        out = largest_component(mask.ravel(), 20, 20).reshape(20, 20)
        assert np.all(out[2:7, 2:7] == 3.0)
        assert out[15, 15] == 0.0
        assert np.count_nonzero(out > 0) == 25

    def test_keeps_original_values(self):
        mask = _mask(6, 1)
        mask[0, 1:4] = [0.5, 4.0, 1.25]
        out = largest_component(mask, 6, 1)
        assert out.tolist() == [[0.0, 0.5, 4.0, 1.25, 0.0, 0.0]]

    def test_tie_keeps_first_in_scan_order(self):
        mask = _mask(8, 5)
        mask[0:2, 5:7] = 1.0  # first pixel at (0, 5)
        mask[3:5, 0:2] = 9.0  # first pixel at (3, 0)
        out = largest_component(mask, 8, 5)
        assert np.all(out[0:2, 5:7] == 1.0)
        assert np.all(out[3:5, 0:2] == 0.0)

    def test_no_foreground(self):
        out = largest_component(_mask(4, 3), 4, 3)
        assert out.shape == (3, 4)
        assert np.all(out == 0.0)

    def test_input_untouched(self):
        mask = _mask(5, 5)
        mask[0, 0] = 1.0
        mask[4, 4] = 1.0
        before = mask.copy()
        largest_component(mask, 5, 5)
        assert np.array_equal(mask, before)

    def test_accepts_plain_list(self):
        out = largest_component([1.0, -1.0, 1.0, 1.0], 2, 2)
        assert out.dtype == np.float32
        assert out.tolist() == [1.0, 0.0, 1.0, 1.0]

    @pytest.mark.parametrize("size", [0, 99, 101])
    def test_shape_mismatch(self, size):
        with pytest.raises(ShapeMismatch):
            largest_component(np.ones(size, dtype=np.float32), 10, 10)
