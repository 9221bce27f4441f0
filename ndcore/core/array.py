"""
Buffer-owning n-dimensional array.

The array keeps its elements in one contiguous, row-major numpy buffer and
resolves every multi-dimensional access through ``Index``. Slicing returns a
``View`` that shares the buffer.
"""

import functools
from typing import Iterable, Optional, Union

import numpy as np

from ndcore.core.enums import DType
from ndcore.core.view import View
from ndcore.dimension import Index, Shape, Slice, resolve_slices
from ndcore.dimension.slice import is_slice_arg
from ndcore.utils.config import Config
from ndcore.utils.logging import get_logger


logger = get_logger("array")

ShapeLike = Union[Shape, Iterable[int], int]


def _as_shape(shape: ShapeLike) -> Shape:
    if isinstance(shape, Shape):
        return shape.copy()
    if isinstance(shape, (int, np.integer)):
        return Shape(shape)
    return Shape(*shape)


class Array:
    """
    Contiguous n-dimensional array that owns its buffer.

    Parameters
    ----------
    shape : Shape or iterable of int
        Extents of the array, at least one axis
    fill : scalar, optional
        Initial value of every element; zero when omitted
    dtype : DType or str, optional
        Element type; defaults to ``Config "array.default_dtype"``

    Examples
    --------
    >>> a = Array(Shape(2, 2), dtype=DType.INT32)
    >>> a[0, 1] = 1
    >>> a[3] = 3
    >>> a[1], a[1, 1]
    (1, 3)
    >>> v = Array(Shape(5, 8, 6), fill=1)[Slice(0, 5, 2), Slice(3, 6), 3]
    >>> v.shape
    Shape(3, 3)
    """

    def __init__(
        self,
        shape: ShapeLike,
        fill=None,
        dtype: Optional[Union[DType, str]] = None,
    ):
        if dtype is None:
            dtype = Config.get("array.default_dtype", "float64")
        self._dtype = DType.parse(dtype)
        self._shape = _as_shape(shape)

        if fill is None:
            self._data = np.zeros(self._shape.size, dtype=self._dtype.native)
        else:
            self._data = np.full(self._shape.size, fill, dtype=self._dtype.native)

    @classmethod
    def _wrap(cls, data: np.ndarray, shape: Shape, dtype: DType) -> "Array":
        """Adopt an existing flat buffer without copying it."""
        array = cls.__new__(cls)
        array._data = data
        array._shape = shape
        array._dtype = dtype
        return array

    def __getitem__(self, key):
        if isinstance(key, tuple) and not any(is_slice_arg(k) for k in key):
            return self._data[Index.checked(key, self._shape).flat(self._shape)]
        if is_slice_arg(key) or isinstance(key, tuple):
            return self.slice(*(key if isinstance(key, tuple) else (key,)))
        # Flat buffer access
        return self._data[key]

    def __setitem__(self, key, value) -> None:
        if isinstance(key, tuple) and not any(is_slice_arg(k) for k in key):
            self._data[Index.checked(key, self._shape).flat(self._shape)] = value
        elif is_slice_arg(key) or isinstance(key, tuple):
            self.slice(*(key if isinstance(key, tuple) else (key,))).fill(value)
        else:
            self._data[key] = value

    def slice(self, *args: Union[Slice, slice, int]) -> View:
        """
        Return a view over part of the array.

        Parameters
        ----------
        *args : Slice, slice or int
            One argument per leading axis. A slice keeps its axis; an
            integer pins the axis and removes it from the view. Missing
            trailing axes are kept whole.

        Returns
        -------
        View
            Window sharing this array's buffer

        Raises
        ------
        RankMismatchError
            If more arguments than axes are given
        SliceOutOfBoundsError
            If an argument falls outside its axis
        """
        offset, shape, strides = resolve_slices(self._shape, args)
        logger.debug(
            "Sliced %s array %s -> view %s at offset %d, strides %s",
            self._dtype, self._shape, shape, offset, strides.tolist(),
        )
        return View._create(self._data, self._dtype, shape, offset, strides)

    @property
    def ndims(self) -> int:
        """Number of axes."""
        return self._shape.ndims

    @property
    def shape(self) -> Shape:
        """Shape of the array."""
        return self._shape

    @property
    def size(self) -> int:
        """Total number of elements."""
        return self._shape.size

    @property
    def dtype(self) -> DType:
        """Element type."""
        return self._dtype

    def astype(self, dtype: Union[DType, str]) -> "Array":
        """
        Return an element-wise cast copy.

        Values are converted with numpy's unsafe casting, so truncation and
        overflow follow the target type.
        """
        dtype = DType.parse(dtype)
        logger.debug("Casting %s array %s to %s", self._dtype, self._shape, dtype)
        return Array._wrap(
            self._data.astype(dtype.native, casting="unsafe"), self._shape.copy(), dtype
        )

    def copy(self) -> "Array":
        """Return a deep copy with its own buffer."""
        return Array._wrap(self._data.copy(), self._shape.copy(), self._dtype)

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Array":
        return self.copy()

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the elements as a numpy array of the same shape."""
        return self._data.reshape(tuple(self._shape)).copy()

    def fill(self, value) -> None:
        """Set every element to ``value``."""
        self._data.fill(value)

    def reshape(self, *extents) -> None:
        """
        Replace the shape in place; the buffer is left untouched.

        The new shape must describe as many elements as the buffer holds.
        This is not enforced: a mismatch only logs a warning.
        """
        if len(extents) == 1 and isinstance(extents[0], Shape):
            shape = extents[0].copy()
        else:
            shape = Shape(*extents)

        if shape.size != self._data.size and Config.get("reshape.warn_on_size_mismatch", True):
            logger.warning(
                "Reshaping buffer of %d elements to %s (%d elements)",
                self._data.size, shape, shape.size,
            )
        self._shape = shape

    def flatten(self) -> None:
        """Reshape to a single axis."""
        self.reshape(self._shape.size)

    def squeeze(self) -> None:
        """Remove unit axes from the shape."""
        self._shape.squeeze()

    def swap(self, other: "Array") -> None:
        """Exchange buffer and shape with another array of the same dtype."""
        if other._dtype != self._dtype:
            raise TypeError(f"Cannot swap {self._dtype} array with {other._dtype} array")
        self._data, other._data = other._data, self._data
        self._shape, other._shape = other._shape, self._shape

    def __eq__(self, other) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        if self._dtype != other._dtype:
            return False
        n = self._shape.size
        return self._shape == other._shape and bool(
            np.array_equal(self._data[:n], other._data[:n])
        )

    __hash__ = None

    def __repr__(self) -> str:
        limit = Config.get("display.max_elements", 16)
        values = ", ".join(str(v) for v in self._data[:limit].tolist())
        if self._data.size > limit:
            values += ", ..."
        return f"Array(shape={self._shape}, dtype={self._dtype}, data=[{values}])"


bool8 = functools.partial(Array, dtype=DType.BOOL8)
int8 = functools.partial(Array, dtype=DType.INT8)
int16 = functools.partial(Array, dtype=DType.INT16)
int32 = functools.partial(Array, dtype=DType.INT32)
int64 = functools.partial(Array, dtype=DType.INT64)
uint8 = functools.partial(Array, dtype=DType.UINT8)
uint16 = functools.partial(Array, dtype=DType.UINT16)
uint32 = functools.partial(Array, dtype=DType.UINT32)
uint64 = functools.partial(Array, dtype=DType.UINT64)
float32 = functools.partial(Array, dtype=DType.FLOAT32)
float64 = functools.partial(Array, dtype=DType.FLOAT64)
