"""Array and view types, element types and errors."""

from ndcore.core.enums import DType, NATIVE_TYPES
from ndcore.core.errors import (
    NDCoreError,
    RankMismatchError,
    IndexOutOfBoundsError,
    SliceOutOfBoundsError,
    InvalidStrideError,
    CapacityExceededError,
    InvalidDimensionError,
)
from ndcore.core.view import View
from ndcore.core.array import (
    Array,
    bool8,
    int8,
    int16,
    int32,
    int64,
    uint8,
    uint16,
    uint32,
    uint64,
    float32,
    float64,
)

__all__ = [
    "DType",
    "NATIVE_TYPES",
    "NDCoreError",
    "RankMismatchError",
    "IndexOutOfBoundsError",
    "SliceOutOfBoundsError",
    "InvalidStrideError",
    "CapacityExceededError",
    "InvalidDimensionError",
    "View",
    "Array",
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
