"""Element type enumeration and its native scalar mapping."""

from enum import IntEnum
from typing import Union

import numpy as np


class DType(IntEnum):
    """Element types supported by arrays and views."""

    BOOL8 = 0  # bool
    INT8 = 1  # signed integers
    INT16 = 2
    INT32 = 3
    INT64 = 4
    UINT8 = 5  # unsigned integers
    UINT16 = 6
    UINT32 = 7
    UINT64 = 8
    FLOAT32 = 9  # IEEE-754 single
    FLOAT64 = 10  # IEEE-754 double

    @property
    def native(self) -> type:
        """Numpy scalar type backing this element type."""
        return NATIVE_TYPES[self]

    @property
    def itemsize(self) -> int:
        """Size of one element in bytes."""
        return np.dtype(self.native).itemsize

    @classmethod
    def parse(cls, value: Union["DType", str, np.dtype, type]) -> "DType":
        """
        Resolve a DType from a member, a name or a numpy dtype.

        Parameters
        ----------
        value : DType, str, np.dtype or type
            ``DType.INT32``, ``"int32"``, ``np.int32`` or ``np.dtype("int32")``

        Returns
        -------
        DType
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        try:
            native = np.dtype(value)
        except TypeError:
            raise ValueError(f"Unsupported element type: {value!r}") from None
        for dtype, candidate in NATIVE_TYPES.items():
            if np.dtype(candidate) == native:
                return dtype
        raise ValueError(f"Unsupported element type: {value!r}")

    def __str__(self) -> str:
        return self.name.lower()


NATIVE_TYPES = {
    DType.BOOL8: np.bool_,
    DType.INT8: np.int8,
    DType.INT16: np.int16,
    DType.INT32: np.int32,
    DType.INT64: np.int64,
    DType.UINT8: np.uint8,
    DType.UINT16: np.uint16,
    DType.UINT32: np.uint32,
    DType.UINT64: np.uint64,
    DType.FLOAT32: np.float32,
    DType.FLOAT64: np.float64,
}

if np.dtype(np.float32).itemsize * 8 != 32 or np.dtype(np.float64).itemsize * 8 != 64:
    raise ImportError("float32 and float64 must be exactly 32 and 64 bits wide")
