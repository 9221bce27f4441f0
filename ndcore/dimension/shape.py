"""Shape: per-axis extents of an array or view."""

import numpy as np

from ndcore.core.errors import IndexOutOfBoundsError, InvalidDimensionError
from ndcore.dimension.base import Dimension


class Shape(Dimension):
    """
    Extents of an array, one value per axis.

    Parameters
    ----------
    *extents : int
        Per-axis extents, at least one. A zero extent is allowed and gives
        an empty shape (``size == 0``).

    Examples
    --------
    >>> s = Shape(3, 10, 1)
    >>> s.ndims, s.size
    (3, 30)
    >>> str(s)
    '( 3 10 1 )'
    """

    def __init__(self, *extents):
        super().__init__(*extents)
        if self._ndims == 0:
            raise InvalidDimensionError("Shape must have at least one axis")

    def at(self, axis: int) -> int:
        """Bounds-checked extent of ``axis``."""
        if not 0 <= axis < self._ndims:
            raise IndexOutOfBoundsError(
                f"Axis {axis} out of bounds for shape with {self._ndims} axes"
            )
        return self[axis]

    @property
    def size(self) -> int:
        """Total number of elements (product of extents)."""
        return int(np.prod(self._active(), dtype=np.int64))

    def squeeze(self) -> None:
        """
        Remove every unit axis in place, keeping the order of the others.

        A shape made only of unit axes keeps a single ``(1,)`` axis.
        """
        kept = self._active()[self._active() != 1]
        if kept.size == 0:
            kept = np.ones(1, dtype=np.int64)
        self._data[: kept.size] = kept
        self._ndims = int(kept.size)

    def __str__(self) -> str:
        return "(" + "".join(f" {v}" for v in self) + " )"
