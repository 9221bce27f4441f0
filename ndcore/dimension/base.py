"""
Fixed-capacity buffer of per-axis values.

Shapes, indices and strides all store one non-negative integer per axis and
share this storage; the subclasses only differ in how the values are read.
"""

from collections.abc import Iterable
from typing import Iterator, List

import numpy as np

from ndcore.core.errors import CapacityExceededError, InvalidDimensionError


MAX_NDIMS = 10


def _check_value(value) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise InvalidDimensionError(f"Dimension values must be integers, got {value!r}")
    if value < 0:
        raise InvalidDimensionError(f"Dimension values must be non-negative, got {value}")
    return int(value)


class Dimension:
    """
    Ordered sequence of at most ``MAX_NDIMS`` non-negative integers.

    Values live in a fixed ``int64`` numpy buffer of ``MAX_NDIMS`` slots plus
    a length counter, so growing or shrinking the rank never reallocates.

    Parameters
    ----------
    *values : int
        Per-axis values. A single iterable of integers is unpacked.

    Raises
    ------
    CapacityExceededError
        If more than ``MAX_NDIMS`` values are given
    InvalidDimensionError
        If a value is negative or not an integer
    """

    def __init__(self, *values):
        if len(values) == 1 and isinstance(values[0], Iterable):
            values = tuple(values[0])
        if len(values) > MAX_NDIMS:
            raise CapacityExceededError(
                f"{type(self).__name__} supports at most {MAX_NDIMS} axes, got {len(values)}"
            )

        self._data = np.zeros(MAX_NDIMS, dtype=np.int64)
        self._ndims = 0
        for value in values:
            self._data[self._ndims] = _check_value(value)
            self._ndims += 1

    @classmethod
    def _from_array(cls, values: np.ndarray) -> "Dimension":
        """Build from a kernel result without re-running the constructor checks."""
        dim = cls.__new__(cls)
        dim._data = np.zeros(MAX_NDIMS, dtype=np.int64)
        dim._ndims = len(values)
        dim._data[: dim._ndims] = values
        return dim

    def _active(self) -> np.ndarray:
        """Live view over the used slots."""
        return self._data[: self._ndims]

    @property
    def ndims(self) -> int:
        """Number of axes."""
        return self._ndims

    def append(self, value: int) -> None:
        """Append one axis value."""
        if self._ndims >= MAX_NDIMS:
            raise CapacityExceededError(
                f"{type(self).__name__} is full ({MAX_NDIMS} axes)"
            )
        self._data[self._ndims] = _check_value(value)
        self._ndims += 1

    def __getitem__(self, axis: int) -> int:
        # Only the storage capacity bounds the axis
        return int(self._data[axis])

    def __setitem__(self, axis: int, value: int) -> None:
        self._data[axis] = _check_value(value)

    def __len__(self) -> int:
        return self._ndims

    def __iter__(self) -> Iterator[int]:
        return iter(self.tolist())

    def tolist(self) -> List[int]:
        """Active values as Python ints."""
        return [int(v) for v in self._active()]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._ndims == other._ndims
            and bool(np.array_equal(self._active(), other._active()))
        )

    __hash__ = None

    def swap(self, other: "Dimension") -> None:
        """Exchange storage and rank with another buffer."""
        self._data, other._data = other._data, self._data
        self._ndims, other._ndims = other._ndims, self._ndims

    def copy(self) -> "Dimension":
        """Return an independent copy."""
        return type(self)._from_array(self._active())

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Dimension":
        return self.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(v) for v in self)})"
