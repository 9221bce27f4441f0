"""
Slice descriptors and the stride geometry of sliced views.

A slicing operation is a sequence of per-axis arguments, each either a
``Slice`` (keeps the axis) or a bare integer (pins the axis to one
coordinate and removes it from the result).
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

from ndcore.core.errors import (
    InvalidStrideError,
    RankMismatchError,
    SliceOutOfBoundsError,
)
from ndcore.dimension.base import Dimension
from ndcore.dimension.shape import Shape
from ndcore.utils.math import row_major_strides


class Strides(Dimension):
    """Per-axis buffer strides, in elements."""

    @classmethod
    def for_shape(cls, shape: Shape) -> "Strides":
        """
        Row-major strides of a contiguous shape.

        Examples
        --------
        >>> Strides.for_shape(Shape(5, 8, 6))
        Strides(48, 6, 1)
        """
        return cls._from_array(row_major_strides(shape._active()))


@dataclass(frozen=True)
class Slice:
    """
    One-axis slice ``[begin, end)`` taking every ``stride``-th element.

    ``end == 0`` means "up to the end of the axis" and is resolved against
    the axis extent when the slice is applied.

    Raises
    ------
    SliceOutOfBoundsError
        If ``begin`` is negative, or ``end`` is given and ``begin >= end``
    InvalidStrideError
        If ``stride`` is not positive
    """

    begin: int = 0
    end: int = 0
    stride: int = 1

    def __post_init__(self):
        if self.begin < 0 or self.end < 0:
            raise SliceOutOfBoundsError(
                f"Slice bounds must be non-negative, got ({self.begin}, {self.end})"
            )
        if self.end and self.begin >= self.end:
            raise SliceOutOfBoundsError(
                f"Slice end must be at least one more than begin, got ({self.begin}, {self.end})"
            )
        if self.stride <= 0:
            raise InvalidStrideError(f"Slice stride must be positive, got {self.stride}")

    @classmethod
    def from_builtin(cls, s: slice) -> "Slice":
        """
        Convert a Python ``slice``; ``None`` fields take the defaults.

        Raises
        ------
        SliceOutOfBoundsError
            If ``stop`` is an explicit 0, which selects no elements
        """
        if s.stop == 0:
            raise SliceOutOfBoundsError(f"Slice {s} selects no elements")
        return cls(
            0 if s.start is None else s.start,
            0 if s.stop is None else s.stop,
            1 if s.step is None else s.step,
        )

    def resolve(self, extent: int) -> Tuple[int, int]:
        """
        Validate against an axis extent.

        Returns
        -------
        tuple
            (begin, end) with the sentinel end replaced by ``extent``
        """
        end = self.end or extent
        if self.begin >= extent or end > extent:
            raise SliceOutOfBoundsError(
                f"Slice ({self.begin}, {self.end}, {self.stride}) out of bounds "
                f"for axis with extent {extent}"
            )
        return self.begin, end


SliceArg = Union[Slice, slice, int]


def is_slice_arg(arg) -> bool:
    return isinstance(arg, (Slice, slice))


def resolve_slices(shape: Shape, args: Sequence[SliceArg]) -> Tuple[int, Shape, Strides]:
    """
    Compute the geometry of a view produced by slicing a contiguous shape.

    Axes without an argument are kept whole. A bare integer pins its axis
    and the axis is dropped from the result.

    Parameters
    ----------
    shape : Shape
        Shape of the contiguous source buffer
    args : sequence of Slice, slice or int
        Per-axis arguments, at most ``shape.ndims``

    Returns
    -------
    tuple
        (offset, shape, strides) of the view inside the source buffer

    Raises
    ------
    RankMismatchError
        If there are more arguments than axes
    SliceOutOfBoundsError
        If a slice or pinned coordinate falls outside its axis

    Examples
    --------
    >>> resolve_slices(Shape(5, 8, 6), (Slice(0, 5, 2), Slice(3, 6), 3))
    (21, Shape(3, 3), Strides(96, 6))
    """
    if len(args) > shape.ndims:
        raise RankMismatchError(
            f"Got {len(args)} slice arguments for shape {shape} with {shape.ndims} axes"
        )

    base_strides = row_major_strides(shape._active())
    offset = 0
    extents = []
    strides = []

    for axis in range(shape.ndims):
        extent = shape[axis]
        stride = int(base_strides[axis])
        if axis >= len(args):
            extents.append(extent)
            strides.append(stride)
            continue

        arg = args[axis]
        if isinstance(arg, slice):
            arg = Slice.from_builtin(arg)

        if isinstance(arg, Slice):
            begin, end = arg.resolve(extent)
            offset += begin * stride
            extents.append(-(-(end - begin) // arg.stride))  # ceil
            strides.append(stride * arg.stride)
        elif isinstance(arg, (int, np.integer)) and not isinstance(arg, bool):
            if not 0 <= arg < extent:
                raise SliceOutOfBoundsError(
                    f"Index {arg} out of bounds for axis {axis} with extent {extent}"
                )
            offset += int(arg) * stride
        else:
            raise TypeError(f"Slice arguments must be Slice, slice or int, got {arg!r}")

    if not extents:
        raise RankMismatchError(
            f"Slicing pins every axis of shape {shape}; index the element instead"
        )
    return offset, Shape(*extents), Strides(*strides)
