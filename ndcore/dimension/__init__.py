"""Shape, index and stride arithmetic."""

from ndcore.dimension.base import Dimension, MAX_NDIMS
from ndcore.dimension.shape import Shape
from ndcore.dimension.index import Index
from ndcore.dimension.slice import Slice, Strides, resolve_slices

__all__ = [
    "Dimension",
    "MAX_NDIMS",
    "Shape",
    "Index",
    "Slice",
    "Strides",
    "resolve_slices",
]
