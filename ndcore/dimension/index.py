"""Index: per-axis coordinates and their conversion to buffer offsets."""

from typing import Sequence

import numpy as np

from ndcore.core.errors import IndexOutOfBoundsError, RankMismatchError
from ndcore.dimension.base import Dimension
from ndcore.dimension.shape import Shape
from ndcore.utils.math import flat_offset, strided_dot, unflat_offset


class Index(Dimension):
    """
    Multi-dimensional coordinate into an array or a view.

    An index only has meaning relative to a shape or stride vector of the
    same rank; all conversions check the rank and raise on mismatch.

    Examples
    --------
    >>> Index(3, 5).flat(Shape(10, 8))
    29
    >>> Index.from_flat(Shape(10, 8), 29)
    Index(3, 5)
    """

    @classmethod
    def from_flat(cls, shape: Shape, offset: int) -> "Index":
        """
        Build the coordinate of flat ``offset`` inside ``shape``.

        Parameters
        ----------
        shape : Shape
            Contiguous row-major shape
        offset : int
            Flat offset, ``0 <= offset < shape.size``

        Returns
        -------
        Index

        Raises
        ------
        IndexOutOfBoundsError
            If the offset does not address an element of ``shape``
        """
        if not 0 <= offset < shape.size:
            raise IndexOutOfBoundsError(
                f"Flat offset {offset} out of bounds for shape {shape}"
            )
        return cls._from_array(unflat_offset(shape._active(), offset))

    @classmethod
    def checked(cls, coords: Sequence[int], shape: Shape) -> "Index":
        """
        Build the index of ``coords`` and validate it against ``shape``.

        Negative coordinates are reported as out of bounds rather than as
        invalid dimension values.
        """
        if len(coords) != shape.ndims:
            raise RankMismatchError(
                f"Got {len(coords)} indices for shape {shape} with {shape.ndims} axes"
            )
        for axis, coord in enumerate(coords):
            if isinstance(coord, (int, np.integer)) and coord < 0:
                raise IndexOutOfBoundsError(
                    f"Index {coord} out of bounds for axis {axis} with extent {shape[axis]}"
                )
        index = cls(*coords)
        index.validate(shape)
        return index

    def validate(self, shape: Shape) -> None:
        """
        Check that this index addresses an element of ``shape``.

        Raises
        ------
        RankMismatchError
            If the ranks differ
        IndexOutOfBoundsError
            If any coordinate is not smaller than its extent
        """
        if self._ndims != shape.ndims:
            raise RankMismatchError(
                f"Index with {self._ndims} axes is incompatible with shape {shape}"
            )
        for axis, (coord, extent) in enumerate(zip(self, shape)):
            if coord >= extent:
                raise IndexOutOfBoundsError(
                    f"Index {coord} out of bounds for axis {axis} with extent {extent}"
                )

    def flat(self, shape: Shape) -> int:
        """Flat row-major offset of this index inside ``shape``."""
        self.validate(shape)
        return int(flat_offset(self._active(), shape._active()))

    def dot(self, strides: Dimension) -> int:
        """Dot product with a stride vector of the same rank."""
        if self._ndims != strides.ndims:
            raise RankMismatchError(
                f"Index with {self._ndims} axes is incompatible with "
                f"{strides.ndims} strides"
            )
        return int(strided_dot(self._active(), strides._active()))

    def transform(self, src: Shape, dst: Shape) -> "Index":
        """
        Re-express this index, given against ``src``, in ``dst``.

        The result addresses the same flat offset. Returns ``self`` when the
        shapes are equal.

        Raises
        ------
        RankMismatchError
            If ``src`` and ``dst`` have different ranks
        IndexOutOfBoundsError
            If the index is outside ``src`` or its offset outside ``dst``
        """
        if src == dst:
            return self
        if src.ndims != dst.ndims:
            raise RankMismatchError(
                f"Cannot transform an index from shape {src} to shape {dst}"
            )
        return Index.from_flat(dst, self.flat(src))
