"""Utility functions and helpers."""

from ndcore.utils.config import Config
from ndcore.utils.logging import setup_logger, get_logger
from ndcore.utils.math import (
    row_major_strides,
    flat_offset,
    unflat_offset,
    strided_dot,
    strided_offsets,
)

__all__ = [
    "Config",
    "setup_logger",
    "get_logger",
    "row_major_strides",
    "flat_offset",
    "unflat_offset",
    "strided_dot",
    "strided_offsets",
]
