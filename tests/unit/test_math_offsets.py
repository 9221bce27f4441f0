"""
Unit tests for the compiled offset kernels.
"""

import numpy as np

from ndcore.utils.math import (
    row_major_strides,
    flat_offset,
    unflat_offset,
    strided_dot,
    strided_offsets,
)


def _arr(*values):
    return np.array(values, dtype=np.int64)


class TestRowMajorStrides:
    """Tests for row_major_strides."""

    def test_three_axes(self):
        np.testing.assert_array_equal(row_major_strides(_arr(2, 3, 4)), [12, 4, 1])

    def test_matches_numpy_contiguous_layout(self):
        shape = (5, 8, 6)
        expected = np.array(np.empty(shape, dtype=np.int32).strides) // 4
        np.testing.assert_array_equal(row_major_strides(_arr(*shape)), expected)


class TestFlatUnflat:
    """Tests for flat_offset / unflat_offset."""

    def test_flat_offset(self):
        assert flat_offset(_arr(3, 5), _arr(10, 8)) == 29

    def test_unflat_offset(self):
        np.testing.assert_array_equal(unflat_offset(_arr(10, 8), 29), [3, 5])

    def test_agrees_with_numpy(self):
        shape = (3, 4, 5)
        for offset in (0, 17, 59):
            expected = np.unravel_index(offset, shape)
            np.testing.assert_array_equal(unflat_offset(_arr(*shape), offset), expected)
            assert flat_offset(_arr(*expected), _arr(*shape)) == offset


class TestStrided:
    """Tests for strided_dot / strided_offsets."""

    def test_dot(self):
        assert strided_dot(_arr(2, 1), _arr(96, 6)) == 198

    def test_offsets_row_major_order(self):
        np.testing.assert_array_equal(
            strided_offsets(_arr(2, 2), _arr(6, 2), 1), [1, 3, 7, 9]
        )

    def test_offsets_match_numpy_view(self):
        base = np.arange(5 * 8 * 6)
        window = base.reshape(5, 8, 6)[0:5:2, 3:6, 3]
        offsets = strided_offsets(_arr(3, 3), _arr(96, 6), 21)
        np.testing.assert_array_equal(base[offsets], window.ravel())

    def test_offsets_empty_window(self):
        assert strided_offsets(_arr(3, 0), _arr(1, 1), 0).size == 0
