"""
Non-owning strided window into an array's buffer.

A view stores a reference to the source buffer, the offset of its first
element, its own shape and the strides that map its coordinates onto the
buffer. Reads and writes go straight to the shared buffer, so every view and
the source array observe each other's writes.
"""

from typing import Tuple, Union

import numpy as np

from ndcore.core.enums import DType
from ndcore.core.errors import IndexOutOfBoundsError
from ndcore.dimension import Index, Shape, Slice, Strides
from ndcore.utils.math import strided_offsets


class View:
    """
    Strided window into an ``Array`` buffer.

    Views are created by slicing an array (``array[Slice(0, 4, 2), 1]``) and
    cannot be constructed directly.
    """

    def __init__(self, *args, **kwargs):
        raise TypeError("View objects are created by slicing an Array")

    @classmethod
    def _create(
        cls,
        buffer: np.ndarray,
        dtype: DType,
        shape: Shape,
        offset: int,
        strides: Strides,
    ) -> "View":
        view = object.__new__(cls)
        view._buffer = buffer
        view._dtype = dtype
        view._offset = offset
        view._layout = shape.copy()
        view._strides = strides
        view._shape = shape
        return view

    def _offset_of(self, key: Union[int, Tuple[int, ...]]) -> int:
        keys = key if isinstance(key, tuple) else (key,)
        if any(isinstance(k, (Slice, slice)) for k in keys):
            raise TypeError("Views cannot be sliced; slice the source Array instead")
        if isinstance(key, tuple):
            index = Index.checked(key, self._shape).transform(self._shape, self._layout)
        else:
            index = Index.from_flat(self._shape, key)
        return self._offset + index.dot(self._strides)

    def _buffer_offsets(self) -> np.ndarray:
        return strided_offsets(self._shape._active(), self._strides._active(), self._offset)

    def __getitem__(self, key):
        return self._buffer[self._offset_of(key)]

    def __setitem__(self, key, value) -> None:
        self._buffer[self._offset_of(key)] = value

    def at(self, i: int):
        """Bounds-checked flat read."""
        if not 0 <= i < self.size:
            raise IndexOutOfBoundsError(
                f"Flat index {i} out of bounds for view of size {self.size}"
            )
        return self[i]

    def fill(self, value) -> None:
        """Set every element of the window to ``value``."""
        self._buffer[self._buffer_offsets()] = value

    def copy(self):
        """Materialize the window into a new contiguous ``Array``."""
        from ndcore.core.array import Array

        return Array._wrap(self._buffer[self._buffer_offsets()], self._shape.copy(), self._dtype)

    @property
    def ndims(self) -> int:
        """Number of axes of the view."""
        return self._shape.ndims

    @property
    def shape(self) -> Shape:
        """Shape of the view."""
        return self._shape

    @property
    def size(self) -> int:
        """Number of elements in the view."""
        return self._shape.size

    @property
    def dtype(self) -> DType:
        """Element type of the view."""
        return self._dtype

    @property
    def offset(self) -> int:
        """Buffer offset of the first element."""
        return self._offset

    @property
    def strides(self) -> Strides:
        """Buffer strides, one per axis."""
        return self._strides

    def __repr__(self) -> str:
        return (
            f"View(shape={self._shape}, dtype={self._dtype}, "
            f"offset={self._offset}, strides={self._strides.tolist()})"
        )
