"""
ndcore - strided n-dimensional array engine

Buffer-owning arrays, aliasing views and the shape/stride arithmetic behind them.
"""

__version__ = "0.1.0"

from ndcore.core import (
    Array,
    View,
    DType,
    NDCoreError,
    RankMismatchError,
    IndexOutOfBoundsError,
    SliceOutOfBoundsError,
    InvalidStrideError,
    CapacityExceededError,
    InvalidDimensionError,
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
from ndcore.dimension import Shape, Index, Slice, Strides, MAX_NDIMS
from ndcore.utils.config import Config

__all__ = [
    "Array",
    "View",
    "DType",
    "Shape",
    "Index",
    "Slice",
    "Strides",
    "MAX_NDIMS",
    "Config",
    "NDCoreError",
    "RankMismatchError",
    "IndexOutOfBoundsError",
    "SliceOutOfBoundsError",
    "InvalidStrideError",
    "CapacityExceededError",
    "InvalidDimensionError",
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
