"""
Unit tests for the element type enumeration.
"""

import numpy as np
import pytest

from ndcore import DType
from ndcore.core.enums import NATIVE_TYPES


class TestDType:
    """Tests for DType and its native mapping."""

    def test_closed_set(self):
        assert [str(d) for d in DType] == [
            "bool8",
            "int8",
            "int16",
            "int32",
            "int64",
            "uint8",
            "uint16",
            "uint32",
            "uint64",
            "float32",
            "float64",
        ]
        assert set(NATIVE_TYPES) == set(DType)

    @pytest.mark.parametrize(
        "dtype, itemsize",
        [
            (DType.BOOL8, 1),
            (DType.INT8, 1),
            (DType.UINT16, 2),
            (DType.INT32, 4),
            (DType.UINT64, 8),
            (DType.FLOAT32, 4),
            (DType.FLOAT64, 8),
        ],
    )
    def test_itemsize(self, dtype, itemsize):
        assert dtype.itemsize == itemsize

    def test_native_types(self):
        assert DType.BOOL8.native is np.bool_
        assert DType.INT16.native is np.int16
        assert DType.FLOAT32.native is np.float32

    def test_parse(self):
        assert DType.parse(DType.INT8) is DType.INT8
        assert DType.parse("uint32") is DType.UINT32
        assert DType.parse("FLOAT64") is DType.FLOAT64
        assert DType.parse(np.int64) is DType.INT64
        assert DType.parse(np.dtype("float32")) is DType.FLOAT32
        assert DType.parse(bool) is DType.BOOL8

    def test_parse_unsupported(self):
        with pytest.raises(ValueError):
            DType.parse("complex128")
        with pytest.raises(ValueError):
            DType.parse("not-a-type")
