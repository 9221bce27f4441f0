"""
Offset arithmetic for row-major, strided buffers.

Includes:
- Row-major stride derivation
- Coordinate <-> flat offset conversion
- Strided offset resolution (dot product and full window enumeration)

All kernels take and return ``int64`` numpy arrays so they can be compiled in
nopython mode. Validation happens in the callers.
"""

import numpy as np
import numba


@numba.jit(nopython=True, cache=True)
def row_major_strides(shape: np.ndarray) -> np.ndarray:
    """
    Compute row-major (last axis fastest) strides for a shape.

    Parameters
    ----------
    shape : np.ndarray
        Per-axis extents (int64)

    Returns
    -------
    np.ndarray
        Per-axis strides (int64)

    Examples
    --------
    >>> row_major_strides(np.array([2, 3, 4]))
    array([12,  4,  1])
    """
    ndims = shape.shape[0]
    strides = np.empty(ndims, dtype=np.int64)
    stride = 1
    for i in range(ndims - 1, -1, -1):
        strides[i] = stride
        stride *= shape[i]
    return strides


@numba.jit(nopython=True, cache=True)
def flat_offset(coords: np.ndarray, shape: np.ndarray) -> int:
    """
    Convert a coordinate into its flat offset inside a contiguous shape.

    offset = sum_i coords[i] * prod_{j>i} shape[j]

    Parameters
    ----------
    coords : np.ndarray
        Per-axis coordinates (int64), same length as ``shape``
    shape : np.ndarray
        Per-axis extents (int64)

    Returns
    -------
    int
        Flat offset

    Examples
    --------
    >>> flat_offset(np.array([3, 5]), np.array([10, 8]))
    29
    """
    stride = 1
    flat = 0
    for i in range(shape.shape[0] - 1, -1, -1):
        flat += stride * coords[i]
        stride *= shape[i]
    return flat


@numba.jit(nopython=True, cache=True)
def unflat_offset(shape: np.ndarray, offset: int) -> np.ndarray:
    """
    Convert a flat offset into a coordinate inside a contiguous shape.

    Inverse of ``flat_offset``. The offset must be smaller than the
    product of the extents.

    Parameters
    ----------
    shape : np.ndarray
        Per-axis extents (int64)
    offset : int
        Flat offset

    Returns
    -------
    np.ndarray
        Per-axis coordinates (int64)

    Examples
    --------
    >>> unflat_offset(np.array([10, 8]), 29)
    array([3, 5])
    """
    ndims = shape.shape[0]
    coords = np.empty(ndims, dtype=np.int64)
    stride = 1
    for i in range(ndims - 1, -1, -1):
        coords[i] = (offset % (stride * shape[i])) // stride
        stride *= shape[i]
    return coords


@numba.jit(nopython=True, cache=True)
def strided_dot(coords: np.ndarray, strides: np.ndarray) -> int:
    """
    Dot product of a coordinate with a stride vector.

    Parameters
    ----------
    coords : np.ndarray
        Per-axis coordinates (int64)
    strides : np.ndarray
        Per-axis strides (int64), same length as ``coords``

    Returns
    -------
    int
        Offset relative to the start of the strided window
    """
    total = 0
    for i in range(coords.shape[0]):
        total += coords[i] * strides[i]
    return total


@numba.jit(nopython=True, cache=True)
def strided_offsets(shape: np.ndarray, strides: np.ndarray, base: int) -> np.ndarray:
    """
    Enumerate the buffer offsets of every element of a strided window.

    Elements are visited in row-major order of ``shape``, so the i-th
    returned offset belongs to the element with flat index i.

    Parameters
    ----------
    shape : np.ndarray
        Logical extents of the window (int64)
    strides : np.ndarray
        Buffer strides of the window (int64)
    base : int
        Buffer offset of the window's first element

    Returns
    -------
    np.ndarray
        Buffer offsets (int64), length ``prod(shape)``

    Examples
    --------
    >>> strided_offsets(np.array([2, 2]), np.array([6, 2]), 1)
    array([1, 3, 7, 9])
    """
    ndims = shape.shape[0]
    size = 1
    for i in range(ndims):
        size *= shape[i]

    offsets = np.empty(size, dtype=np.int64)
    coords = np.zeros(ndims, dtype=np.int64)

    for k in range(size):
        offset = base
        for i in range(ndims):
            offset += coords[i] * strides[i]
        offsets[k] = offset

        # Advance the coordinate, last axis fastest
        axis = ndims - 1
        while axis >= 0:
            coords[axis] += 1
            if coords[axis] < shape[axis]:
                break
            coords[axis] = 0
            axis -= 1

    return offsets
